"""Pacote do relay de webhooks FleetDM -> ntfy.

Este pacote contém:
- constants: variáveis de ambiente e tabelas de classificação
- models: objetos de valor do payload de entrada e da notificação
- utils: helpers de texto e de endereço
- detection: parsing do nome da query e classificação (prioridade/tags)
- formatters: formatação das colunas e montagem da notificação
- services: integração com serviços externos (ntfy)
- controller: criação do Flask app e endpoints
"""

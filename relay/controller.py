import json
import logging

from flask import Flask, request

from .constants import SERVICE_NAME, WEBHOOK_PATH, load_config
from .formatters import format_notification
from .models import PayloadError, WebhookPayload
from .services import DeliveryError, send_ntfy_notification

logger = logging.getLogger(__name__)


def create_app(config=None):
    app = Flask(__name__)
    if config is None:
        config = load_config()
    app.config['RELAY'] = config

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': SERVICE_NAME}, 200

    # Apenas POST; sem OPTIONS automático do Flask
    @app.route(WEBHOOK_PATH, methods=['POST'], provide_automatic_options=False)
    def webhook():
        try:
            data = json.loads(request.get_data())
        except ValueError as exc:
            logger.error(f"Erro ao interpretar JSON do webhook: {exc}")
            return 'Invalid JSON payload', 400

        # Corpo "null" equivale a um payload vazio
        if data is None:
            data = {}

        try:
            payload = WebhookPayload.from_dict(data)
        except PayloadError as exc:
            logger.error(f"Payload inválido: {exc}")
            return 'Invalid JSON payload', 400

        logger.debug(f"Webhook recebido: timestamp={payload.timestamp} details={len(payload.details)}")

        notification = format_notification(payload, config.ntfy_topic)
        if notification is None:
            logger.info("Nenhum detail no payload do webhook")
            return '', 200

        try:
            send_ntfy_notification(
                notification,
                config.ntfy_url,
                timeout=config.timeout_seconds,
                verify=config.verify_tls,
            )
        except DeliveryError as exc:
            logger.error(f"Erro ao enviar para o ntfy: {exc}")
            return 'Failed to send notification', 500

        logger.info(f"Notificação enviada: {notification.title}")
        return 'OK', 200

    return app

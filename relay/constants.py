import os
from dataclasses import dataclass

# Valores padrão (sobrescritos por LISTEN_ADDR, NTFY_URL, NTFY_TOPIC...)
DEFAULT_LISTEN_ADDR = ":8080"
DEFAULT_NTFY_URL = "https://ntfy.sh"
DEFAULT_NTFY_TOPIC = "fleet-alerts"
DEFAULT_TIMEOUT_SECONDS = 10

# Configurações globais de ambiente
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

SERVICE_NAME = "fleet-ntfy-relay"
WEBHOOK_PATH = "/webhook"

# Prioridades do ntfy (1-5)
PRIORITY_DEFAULT = 3
PRIORITY_HIGH = 4
PRIORITY_URGENT = 5

# Ordem importa: a primeira substring encontrada vence
PRIORITY_RULES = [
    ("c2", PRIORITY_URGENT),
    ("execution", PRIORITY_URGENT),
    ("credential", PRIORITY_HIGH),
    ("persistence", PRIORITY_HIGH),
    ("privilege", PRIORITY_HIGH),
    ("defense", PRIORITY_HIGH),
    ("exfil", PRIORITY_URGENT),
    ("lateral", PRIORITY_HIGH),
]

# Não tem as mesmas entradas de PRIORITY_RULES (sem defense/lateral, com network)
TAG_RULES = [
    ("c2", ["warning", "satellite"]),
    ("execution", ["warning", "zap"]),
    ("persistence", ["warning", "anchor"]),
    ("credential", ["warning", "key"]),
    ("privilege", ["warning", "crown"]),
    ("exfil", ["rotating_light", "outbox_tray"]),
    ("network", ["globe_with_meridians"]),
]
BASE_TAG = "computer"
DEFAULT_TAGS = ["mag"]

DEFAULT_CATEGORY = "alert"

# Campos de colunas exibidos primeiro, nesta ordem
PRIORITY_FIELDS = [
    "path", "name", "cmdline", "command", "cmd",
    "parent_path", "parent_cmd",
    "user", "uid", "gid",
    "local_address", "local_port", "remote_address", "remote_port",
    "sha256", "state",
]
IDENTIFIER_FIELDS = ["path", "name", "filename", "cmdline", "command"]
NOISY_FIELDS = {"exception_key", "numerics"}
EMPTY_VALUES = {"", "0"}

# Seções da mensagem, na ordem de exibição
ACTION_SECTIONS = [
    ("removed", "−"),
    ("added", "+"),
]


@dataclass
class RelayConfig:
    listen_addr: str = DEFAULT_LISTEN_ADDR
    ntfy_url: str = DEFAULT_NTFY_URL
    ntfy_topic: str = DEFAULT_NTFY_TOPIC
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    verify_tls: bool = True


def load_config(environ=None) -> RelayConfig:
    """Lê a configuração do ambiente. Variável definida (mesmo vazia) sobrescreve o default."""
    env = os.environ if environ is None else environ
    return RelayConfig(
        listen_addr=env.get("LISTEN_ADDR", DEFAULT_LISTEN_ADDR),
        ntfy_url=env.get("NTFY_URL", DEFAULT_NTFY_URL),
        ntfy_topic=env.get("NTFY_TOPIC", DEFAULT_NTFY_TOPIC),
        timeout_seconds=int(env.get("NTFY_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))),
        verify_tls=env.get("NTFY_VERIFY_TLS", "true").lower() == "true",
    )

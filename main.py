import logging

from relay.constants import DEBUG_MODE, load_config
from relay.controller import create_app
from relay.utils import parse_listen_addr

logging.basicConfig(
    level=logging.DEBUG if DEBUG_MODE else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("relay")

config = load_config()
app = create_app(config)

if __name__ == '__main__':
    host, port = parse_listen_addr(config.listen_addr)
    logger.info("Iniciando fleet-ntfy-relay")
    logger.info(f"  Listen address: {config.listen_addr}")
    logger.info(f"  ntfy URL: {config.ntfy_url}")
    logger.info(f"  ntfy topic: {config.ntfy_topic}")
    app.run(host=host, port=port, debug=DEBUG_MODE, use_reloader=False)

import logging
from typing import Optional

import requests
import urllib3

from .constants import DEFAULT_TIMEOUT_SECONDS
from .models import Notification

logger = logging.getLogger(__name__)


class DeliveryError(Exception):
    """Falha ao entregar a notificação ao ntfy (rede, serialização ou resposta >= 400)."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def send_ntfy_notification(notification: Notification, url: str,
                           timeout: float = DEFAULT_TIMEOUT_SECONDS, verify: bool = True) -> requests.Response:
    """
    Publica a notificação no ntfy com um único POST JSON. Não faz retry.
    Qualquer falha vira DeliveryError.
    """
    # Suprime avisos de HTTPS inseguro quando a verificação TLS está desativada
    if not verify:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    try:
        payload = notification.to_dict()
    except (TypeError, ValueError) as exc:
        raise DeliveryError(f"failed to marshal notification: {exc}") from exc

    try:
        resp = requests.post(url, json=payload, timeout=timeout, verify=verify)
    except requests.exceptions.InvalidJSONError as exc:
        raise DeliveryError(f"failed to marshal notification: {exc}") from exc
    except requests.RequestException as exc:
        raise DeliveryError(f"failed to send to ntfy: {exc}") from exc

    logger.debug(f"ntfy response: {resp.status_code}")

    if resp.status_code >= 400:
        raise DeliveryError(
            f"ntfy returned error {resp.status_code}: {resp.text}",
            status_code=resp.status_code,
            body=resp.text,
        )

    return resp

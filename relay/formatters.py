import logging
from typing import Dict, Optional

from .constants import ACTION_SECTIONS, IDENTIFIER_FIELDS, NOISY_FIELDS, PRIORITY_FIELDS
from .detection import classify, parse_query_name
from .models import Notification, WebhookPayload
from .utils import is_noise, pick_first_nonempty

logger = logging.getLogger(__name__)


def format_columns(columns: Dict[str, str]) -> str:
    """
    Formata as colunas em linhas "  chave: valor".
    Campos prioritários saem primeiro; o resto em ordem alfabética.
    Valores vazios ou "0" são omitidos.
    """
    if not columns:
        return ""

    lines = []
    seen = set()

    for key in PRIORITY_FIELDS:
        value = columns.get(key)
        if not is_noise(value):
            lines.append(f"  {key}: {value}\n")
            seen.add(key)

    for key in sorted(columns):
        if key in seen:
            continue
        value = columns[key]
        if is_noise(value):
            continue
        if key in NOISY_FIELDS:
            continue
        lines.append(f"  {key}: {value}\n")

    return "".join(lines)


def get_identifier(columns):
    return pick_first_nonempty(columns, IDENTIFIER_FIELDS)


def group_details_by_action(details):
    grouped = {}
    for d in details:
        grouped.setdefault(d.action, []).append(d)
    return grouped


def format_notification(payload: WebhookPayload, topic: str) -> Optional[Notification]:
    if not payload.details:
        return None

    # Cabeçalho vem do primeiro detail (todos deveriam ser da mesma query)
    first = payload.details[0]
    hostname = first.decorations.hostname or first.host_identifier

    category, query_name = parse_query_name(first.name)
    title = f"{query_name} - {hostname}"

    parts = [
        f"Host: {hostname}\n",
        f"Detection: {category}\n",
        f"Time: {first.calendar_time}\n",
        "\n",
    ]

    grouped = group_details_by_action(payload.details)

    for action, symbol in ACTION_SECTIONS:
        details = grouped.get(action)
        if not details:
            continue
        parts.append(f"[{symbol} {action}]\n")
        for detail in details:
            identifier = get_identifier(detail.columns)
            if identifier:
                parts.append(f"• {identifier}\n")
            parts.append(format_columns(detail.columns))
            parts.append("\n")

    rendered = {action for action, _ in ACTION_SECTIONS}
    for action, details in grouped.items():
        if action not in rendered:
            logger.debug(f"Ignorando {len(details)} detail(s) com action '{action}' (sem seção na mensagem)")

    priority, tags = classify(category)
    return Notification(
        topic=topic,
        title=title,
        message="".join(parts).strip(),
        priority=priority,
        tags=tags,
    )

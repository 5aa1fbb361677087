from typing import Tuple

from .constants import EMPTY_VALUES


def is_noise(value):
    return value is None or value in EMPTY_VALUES


def pick_first_nonempty(columns, fields):
    for f in fields:
        value = columns.get(f)
        if value:
            return value
    return ""


def parse_listen_addr(addr: str) -> Tuple[str, int]:
    """
    Converte um endereço no formato "host:porta" (ou ":porta") em (host, porta).
    Sem host, escuta em todas as interfaces.
    """
    host, sep, port = (addr or "").strip().rpartition(":")
    if not sep:
        raise ValueError(f"endereço de escuta inválido: {addr!r}")
    host = host.strip("[]") or "0.0.0.0"
    try:
        return host, int(port)
    except ValueError:
        raise ValueError(f"porta inválida em {addr!r}") from None

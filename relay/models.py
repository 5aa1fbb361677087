from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


class PayloadError(ValueError):
    """Payload de entrada malformado (tipo inesperado em algum campo)."""


def _get(data: Dict[str, Any], key: str, expected: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    # bool é subclasse de int no Python
    if expected is int and isinstance(value, bool):
        raise PayloadError(f"campo '{key}' deveria ser int, recebido bool")
    if not isinstance(value, expected):
        raise PayloadError(f"campo '{key}' deveria ser {expected.__name__}, recebido {type(value).__name__}")
    return value


def _require_object(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise PayloadError(f"{what} deveria ser um objeto JSON")
    return data


@dataclass
class Decorations:
    host_uuid: str = ""
    hostname: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Decorations":
        if data is None:
            return cls()
        data = _require_object(data, "decorations")
        return cls(
            host_uuid=_get(data, "host_uuid", str, ""),
            hostname=_get(data, "hostname", str, ""),
        )


@dataclass
class Detail:
    action: str = ""
    calendar_time: str = ""
    columns: Dict[str, str] = field(default_factory=dict)
    counter: int = 0
    decorations: Decorations = field(default_factory=Decorations)
    epoch: int = 0
    host_identifier: str = ""
    name: str = ""
    numerics: bool = False
    query_id: int = 0
    unix_time: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "Detail":
        data = _require_object(data, "detail")
        columns = _get(data, "columns", dict, {})
        for key, value in columns.items():
            if not isinstance(value, str):
                raise PayloadError(f"coluna '{key}' deveria ser string, recebido {type(value).__name__}")
        return cls(
            action=_get(data, "action", str, ""),
            calendar_time=_get(data, "calendarTime", str, ""),
            columns=dict(columns),
            counter=_get(data, "counter", int, 0),
            decorations=Decorations.from_dict(data.get("decorations")),
            epoch=_get(data, "epoch", int, 0),
            host_identifier=_get(data, "hostIdentifier", str, ""),
            name=_get(data, "name", str, ""),
            numerics=_get(data, "numerics", bool, False),
            query_id=_get(data, "query_id", int, 0),
            unix_time=_get(data, "unixTime", int, 0),
        )


@dataclass
class WebhookPayload:
    timestamp: str = ""
    details: List[Detail] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "WebhookPayload":
        """
        Decodifica o corpo JSON enviado pelo FleetDM.
        Campos ausentes ou null ficam com o valor zero do tipo; tipos errados geram PayloadError.
        """
        data = _require_object(data, "payload")
        details = _get(data, "details", list, [])
        return cls(
            timestamp=_get(data, "timestamp", str, ""),
            details=[Detail.from_dict(d) for d in details],
        )


@dataclass
class Notification:
    topic: str
    title: str
    message: str
    priority: int
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Notification":
        return cls(
            topic=data["topic"],
            title=data["title"],
            message=data["message"],
            priority=int(data["priority"]),
            tags=list(data.get("tags") or []),
        )

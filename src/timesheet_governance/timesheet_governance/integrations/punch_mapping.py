"""Normalization of raw punch-provider payloads.

The provider answers with loosely shaped JSON (field names differ between
endpoints and API versions). Everything is mapped here, once, into strict
ProviderPunch values; nothing past this module sees a raw dict.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import to_local
from ..core.enums import PunchType
from ..core.exceptions import ValidationError
from ..worklog.model import Punch

EMPLOYEE_ID_KEYS = ("employee_id", "employeeId", "funcionario_id", "codigo_funcionario", "id")
TIMESTAMP_KEYS = ("timestamp", "date", "punch_time", "data_hora", "dataHora")
TYPE_KEYS = ("type", "tipo")
PUNCH_LIST_KEYS = ("punches", "data", "items", "marcacoes")
EXIT_MARKERS = ("EXIT", "SAIDA", "SAÍDA")


@dataclass(frozen=True)
class ProviderPunch:
    provider_employee_id: str
    timestamp: datetime
    type: PunchType
    source_payload: str

    def to_punch(self, tz: Optional[ZoneInfo] = None) -> Punch:
        ts = to_local(self.timestamp, tz) if tz else self.timestamp
        return Punch(timestamp=ts, type=self.type)


def _first(payload: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        value = payload.get(key)
        if value not in (None, ""):
            return value
    return None


def extract_items(payload: Any, keys: Iterable[str] = PUNCH_LIST_KEYS) -> list[dict]:
    """Return the record list from a bare list or from a wrapper object."""
    if isinstance(payload, list):
        return list(payload)
    if isinstance(payload, Mapping):
        for key in keys:
            items = payload.get(key)
            if isinstance(items, list):
                return list(items)
    return []


def parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"Data/hora de marcação inválida: {value!r}")


def parse_punch_type(value: Any) -> PunchType:
    # Anything that is not recognisably an exit counts as an entry.
    if value is None:
        return PunchType.ENTRY
    upper = str(value).upper()
    if any(marker in upper for marker in EXIT_MARKERS):
        return PunchType.EXIT
    return PunchType.ENTRY


def normalize_punch(payload: Mapping[str, Any]) -> ProviderPunch:
    if not isinstance(payload, Mapping):
        raise ValidationError("Marcação em formato inválido")

    employee_id = _first(payload, EMPLOYEE_ID_KEYS)
    if employee_id is None:
        raise ValidationError("Marcação sem identificador de colaborador")

    raw_ts = _first(payload, TIMESTAMP_KEYS)
    if raw_ts is None:
        raise ValidationError("Marcação sem data/hora")

    return ProviderPunch(
        provider_employee_id=str(employee_id),
        timestamp=parse_timestamp(raw_ts),
        type=parse_punch_type(_first(payload, TYPE_KEYS)),
        source_payload=json.dumps(dict(payload), default=str, ensure_ascii=False),
    )

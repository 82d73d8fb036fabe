from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import to_local
from ..core.enums import PunchType
from ..worklog.model import Punch


@dataclass(frozen=True)
class PunchEvent:
    """Marcação persistida, com o payload bruto do provedor para auditoria."""

    punch_id: int
    employee_id: int
    timestamp: datetime
    type: PunchType
    source_payload: Optional[str] = None

    def to_punch(self, tz: Optional[ZoneInfo] = None) -> Punch:
        ts = to_local(self.timestamp, tz) if tz else self.timestamp
        return Punch(timestamp=ts, type=self.type)


@dataclass(frozen=True)
class NewPunchEvent:
    """Marcação a gravar; timestamp já em horário local (naive)."""

    employee_id: int
    timestamp: datetime
    type: PunchType
    source_payload: Optional[str] = None


@dataclass(frozen=True)
class PunchImportResult:
    received: int
    saved: int
    duplicates: int
    unknown_employees: int
    invalid: int

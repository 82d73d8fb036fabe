from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import JustificationCategory, OccurrenceStatus, OccurrenceType


@dataclass(frozen=True)
class Occurrence:
    """Desvio diário aguardando ciência do colaborador e decisão do gestor."""

    occurrence_id: int
    employee_id: int
    work_date: date
    type: OccurrenceType
    minutes: int
    status: OccurrenceStatus
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Justification:
    justification_id: int
    occurrence_id: int
    employee_id: int
    work_date: date
    text: str
    category: Optional[JustificationCategory] = None
    notify_hr: bool = False
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class OccurrenceStats:
    work_date: date
    total: int
    open: int
    ack: int
    resolved: int
    by_type: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolveOutcome:
    occurrence: Occurrence
    message: str


@dataclass(frozen=True)
class JustificationReceipt:
    """What the notification layer needs to forward a justification to the manager."""

    justification: Justification
    occurrence: Occurrence
    manager_chat_user_id: Optional[str]

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import OccurrenceType, PunchType, WorklogStatus


@dataclass(frozen=True)
class Punch:
    """Uma marcação de ponto (entrada ou saída), já no fuso local."""

    timestamp: datetime
    type: PunchType


@dataclass(frozen=True)
class LunchPolicy:
    start_hour: int
    start_minute: int
    duration_minutes: int


@dataclass(frozen=True)
class WorkdayConfig:
    """Jornada contratual contra a qual as marcações são comparadas.

    expected_work_minutes is trusted as given; it is not cross-checked against
    the start/end hours or the lunch duration.
    """

    expected_start_hour: int
    expected_start_minute: int
    expected_end_hour: int
    expected_end_minute: int
    expected_work_minutes: int
    tolerance_minutes: int
    lunch_policy: Optional[LunchPolicy] = None


DEFAULT_WORKDAY_CONFIG = WorkdayConfig(
    expected_start_hour=8,
    expected_start_minute=0,
    expected_end_hour=18,
    expected_end_minute=0,
    expected_work_minutes=480,
    tolerance_minutes=10,
    lunch_policy=LunchPolicy(start_hour=12, start_minute=0, duration_minutes=120),
)


@dataclass(frozen=True)
class OccurrenceDraft:
    type: OccurrenceType
    minutes: int


@dataclass(frozen=True)
class WorklogCalculation:
    """Resultado puro do cálculo de um dia de um colaborador."""

    worked_minutes: int
    late_minutes: int
    extra_minutes: int
    under_minutes: int
    is_incomplete: bool
    occurrences: tuple[OccurrenceDraft, ...] = ()


@dataclass(frozen=True)
class DailyWorklog:
    """Registro persistido do worklog diário."""

    worklog_id: int
    employee_id: int
    work_date: date
    worked_minutes: int
    late_minutes: int
    extra_minutes: int
    under_minutes: int
    status: WorklogStatus

"""Daily worklog calculation.

Pure functions only: no I/O, no logging, no shared state. Every punch sequence,
however malformed, maps to a result; broken days are reported as INCOMPLETE
instead of raising.

Tolerance follows the "total grace" rule: a deviation inside the tolerance
window costs nothing, a deviation past it is charged in full (entry at 08:11
with start 08:00 and tolerance 10 is 11 minutes late, not 1).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.constants import LUNCH_DEDUCTION_THRESHOLD_MINUTES, MIN_PUNCHES_PER_DAY
from ..core.enums import OccurrenceType, PunchType
from .model import DEFAULT_WORKDAY_CONFIG, LunchPolicy, OccurrenceDraft, Punch, WorkdayConfig, WorklogCalculation


def time_to_minutes(hour: int, minute: int) -> int:
    """Minutes since midnight for a wall-clock hour/minute."""
    return hour * 60 + minute


def minutes_since_midnight(value: datetime) -> int:
    # Wall-clock fields of the instant as given; callers localize beforehand.
    return time_to_minutes(value.hour, value.minute)


def _wall_clock(value: datetime) -> datetime:
    # Naive and aware timestamps may be mixed; order them on the same wall-clock basis.
    return value.replace(tzinfo=None)


def _sorted(punches: Sequence[Punch]) -> list[Punch]:
    return sorted(punches, key=lambda p: _wall_clock(p.timestamp))


def compute_late_minutes(
    entry_time: datetime,
    tolerance_minutes: int = 10,
    expected_start_hour: int = 8,
    expected_start_minute: int = 0,
) -> int:
    entry = minutes_since_midnight(entry_time)
    expected_start = time_to_minutes(expected_start_hour, expected_start_minute)

    if entry <= expected_start:
        return 0
    if entry <= expected_start + tolerance_minutes:
        return 0
    return entry - expected_start


def compute_extra_minutes(worked_minutes: int, expected_work_minutes: int = 480, tolerance_minutes: int = 10) -> int:
    if worked_minutes <= expected_work_minutes:
        return 0
    if worked_minutes <= expected_work_minutes + tolerance_minutes:
        return 0
    return worked_minutes - expected_work_minutes


def compute_under_minutes(worked_minutes: int, expected_work_minutes: int = 480) -> int:
    """Shortfall has no tolerance: every missing minute counts."""
    return max(0, expected_work_minutes - worked_minutes)


def compute_worked_minutes(punches: Sequence[Punch], lunch_policy: Optional[LunchPolicy] = None) -> int:
    """Sum of (ENTRY, EXIT) intervals, minus lunch.

    Malformed neighbours are skipped one element at a time. Lunch is deducted
    whenever the total reaches the threshold, without checking whether the
    punches actually cover the lunch window.
    """
    if len(punches) < 2:
        return 0

    ordered = _sorted(punches)
    total = 0
    i = 0
    while i < len(ordered) - 1:
        current, nxt = ordered[i], ordered[i + 1]
        if current.type == PunchType.ENTRY and nxt.type == PunchType.EXIT:
            period = minutes_since_midnight(nxt.timestamp) - minutes_since_midnight(current.timestamp)
            if period > 0:
                total += period
            i += 2
        else:
            i += 1

    if lunch_policy and total >= LUNCH_DEDUCTION_THRESHOLD_MINUTES:
        total = max(0, total - lunch_policy.duration_minutes)

    return total


def is_punches_incomplete(punches: Sequence[Punch]) -> bool:
    if not punches:
        return True
    if len(punches) < MIN_PUNCHES_PER_DAY:
        return True
    if len(punches) % 2 != 0:
        return True

    ordered = _sorted(punches)
    for i in range(0, len(ordered), 2):
        if ordered[i].type != PunchType.ENTRY or ordered[i + 1].type != PunchType.EXIT:
            return True
    return False


def generate_occurrences(
    worked_minutes: int,
    late_minutes: int,
    extra_minutes: int,
    under_minutes: int,
    is_incomplete: bool,
) -> tuple[OccurrenceDraft, ...]:
    if is_incomplete:
        return (OccurrenceDraft(type=OccurrenceType.INCOMPLETE, minutes=0),)

    out: list[OccurrenceDraft] = []
    if late_minutes > 0:
        out.append(OccurrenceDraft(type=OccurrenceType.LATE, minutes=late_minutes))
    if extra_minutes > 0:
        out.append(OccurrenceDraft(type=OccurrenceType.OVER, minutes=extra_minutes))
    if under_minutes > 0:
        out.append(OccurrenceDraft(type=OccurrenceType.UNDER, minutes=under_minutes))
    return tuple(out)


def calculate_worklog(punches: Sequence[Punch], config: WorkdayConfig = DEFAULT_WORKDAY_CONFIG) -> WorklogCalculation:
    if is_punches_incomplete(punches):
        return WorklogCalculation(
            worked_minutes=0,
            late_minutes=0,
            extra_minutes=0,
            under_minutes=0,
            is_incomplete=True,
            occurrences=generate_occurrences(0, 0, 0, 0, True),
        )

    first_entry = next((p for p in _sorted(punches) if p.type == PunchType.ENTRY), None)
    worked = compute_worked_minutes(punches, config.lunch_policy)

    late = 0
    if first_entry is not None:
        late = compute_late_minutes(
            first_entry.timestamp,
            config.tolerance_minutes,
            config.expected_start_hour,
            config.expected_start_minute,
        )
    extra = compute_extra_minutes(worked, config.expected_work_minutes, config.tolerance_minutes)
    under = compute_under_minutes(worked, config.expected_work_minutes)

    return WorklogCalculation(
        worked_minutes=worked,
        late_minutes=late,
        extra_minutes=extra,
        under_minutes=under,
        is_incomplete=False,
        occurrences=generate_occurrences(worked, late, extra, under, False),
    )


def format_minutes(minutes: int) -> str:
    """Render minutes for display: 0min, 45min, 2h, 1h30."""
    if minutes == 0:
        return "0min"

    hours, mins = divmod(minutes, 60)
    if hours == 0:
        return f"{mins}min"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h{mins:02d}"


def format_time(value: datetime) -> str:
    return value.strftime("%H:%M")

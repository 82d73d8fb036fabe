from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DashboardKpis:
    work_date: date
    total_employees: int
    active_employees: int
    total_sectors: int
    today_occurrences: int
    open_occurrences: int
    resolved_today: int
    late_today: int
    over_today: int
    under_today: int
    incomplete_today: int


@dataclass(frozen=True)
class DailySummary:
    """Aggregate of the daily worklogs written by the daily close."""

    work_date: date
    total_worklogs: int
    processed_count: int
    error_count: int
    avg_worked_minutes: int
    total_late_minutes: int
    total_extra_minutes: int
    total_under_minutes: int


@dataclass(frozen=True)
class SectorStats:
    sector_id: int
    sector_name: str
    employee_count: int
    open_occurrences: int

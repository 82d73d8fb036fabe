from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Sequence

from ..core.enums import OccurrenceStatus, OccurrenceType, WorklogStatus
from ..employees.repository import EmployeeRepository
from ..occurrences.model import Occurrence
from ..occurrences.repository import OccurrenceRepository
from ..worklog.repository import WorklogRepository
from .model import DailySummary, DashboardKpis, SectorStats

RECENT_OCCURRENCES_LIMIT = 10


def _rounded_average(total: int, count: int) -> int:
    # Half rounds up, never to even.
    if count == 0:
        return 0
    return (2 * total + count) // (2 * count)


class DashboardService:
    """Read-only aggregates over employees, occurrences and daily worklogs."""

    def __init__(
        self,
        employees: EmployeeRepository,
        occurrences: OccurrenceRepository,
        worklogs: WorklogRepository,
    ):
        self._employees = employees
        self._occurrences = occurrences
        self._worklogs = worklogs

    def kpis(self, work_date: date) -> DashboardKpis:
        employees = self._employees.list_employees()
        by_status = self._occurrences.count_by_status(work_date=work_date)
        by_type = self._occurrences.count_by_type(work_date=work_date)
        open_all = self._occurrences.list_filtered(status=OccurrenceStatus.OPEN)

        return DashboardKpis(
            work_date=work_date,
            total_employees=len(employees),
            active_employees=sum(1 for e in employees if e.active),
            total_sectors=len(self._employees.list_sectors()),
            today_occurrences=sum(by_status.values()),
            open_occurrences=len(open_all),
            resolved_today=by_status.get(OccurrenceStatus.RESOLVED.value, 0),
            late_today=by_type.get(OccurrenceType.LATE.value, 0),
            over_today=by_type.get(OccurrenceType.OVER.value, 0),
            under_today=by_type.get(OccurrenceType.UNDER.value, 0),
            incomplete_today=by_type.get(OccurrenceType.INCOMPLETE.value, 0),
        )

    def daily_summary(self, work_date: date) -> DailySummary:
        worklogs = self._worklogs.list_for_date(work_date)
        total_worked = sum(w.worked_minutes for w in worklogs)

        return DailySummary(
            work_date=work_date,
            total_worklogs=len(worklogs),
            processed_count=sum(1 for w in worklogs if w.status == WorklogStatus.PROCESSED),
            error_count=sum(1 for w in worklogs if w.status == WorklogStatus.ERROR),
            avg_worked_minutes=_rounded_average(total_worked, len(worklogs)),
            total_late_minutes=sum(w.late_minutes for w in worklogs),
            total_extra_minutes=sum(w.extra_minutes for w in worklogs),
            total_under_minutes=sum(w.under_minutes for w in worklogs),
        )

    def sector_stats(self) -> list[SectorStats]:
        """Active headcount and OPEN occurrences of active employees, per sector."""
        active = self._employees.list_employees(active=True)
        sector_of = {e.employee_id: e.sector_id for e in active}
        headcount = Counter(e.sector_id for e in active)
        open_by_sector = Counter(
            sector_of[o.employee_id]
            for o in self._occurrences.list_filtered(status=OccurrenceStatus.OPEN)
            if o.employee_id in sector_of
        )

        return [
            SectorStats(
                sector_id=s.sector_id,
                sector_name=s.name,
                employee_count=headcount.get(s.sector_id, 0),
                open_occurrences=open_by_sector.get(s.sector_id, 0),
            )
            for s in self._employees.list_sectors()
        ]

    def recent_occurrences(self) -> Sequence[Occurrence]:
        items = self._occurrences.list_filtered(status=OccurrenceStatus.OPEN)
        newest_first = sorted(items, key=lambda o: (o.created_at is not None, o.created_at), reverse=True)
        return newest_first[:RECENT_OCCURRENCES_LIMIT]

from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import WorklogStatus
from .model import DailyWorklog, WorklogCalculation


class WorklogRepository(Protocol):
    def save_day(
        self,
        *,
        employee_id: int,
        work_date: date,
        worklog: WorklogCalculation,
        status: WorklogStatus,
    ) -> int:
        """Upsert the daily worklog and create one OPEN occurrence per draft.

        Must be atomic per employee-day. Returns the number of occurrences created.
        """

        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[DailyWorklog]:
        raise NotImplementedError

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import day_bounds
from ..core.constants import DEFAULT_TIMEZONE
from ..core.enums import WorklogStatus
from ..employees.repository import EmployeeRepository
from ..punches.repository import PunchRepository
from .calculator.base import WorklogCalculator
from .calculator.standard_calculator import StandardWorklogCalculator
from .model import DEFAULT_WORKDAY_CONFIG, WorkdayConfig, WorklogCalculation
from .repository import WorklogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyCloseResult:
    work_date: date
    processed: int
    errors: int


class WorklogService:
    """Loads a day's punches, runs the calculator and persists the outcome."""

    def __init__(
        self,
        punches: PunchRepository,
        worklogs: WorklogRepository,
        employees: EmployeeRepository,
        *,
        config: WorkdayConfig = DEFAULT_WORKDAY_CONFIG,
        tz: Optional[ZoneInfo] = None,
        calculator: Optional[WorklogCalculator] = None,
    ):
        self._punches = punches
        self._worklogs = worklogs
        self._employees = employees
        self._config = config
        self._tz = tz or ZoneInfo(DEFAULT_TIMEZONE)
        self._calculator = calculator or StandardWorklogCalculator()

    @property
    def config(self) -> WorkdayConfig:
        return self._config

    def process_day(self, employee_id: int, work_date: date) -> WorklogCalculation:
        start, end = day_bounds(work_date)
        events = self._punches.list_for_employee_between(employee_id, start, end)
        punches = [e.to_punch(self._tz) for e in events]

        worklog = self._calculator.calculate(punches, self._config)
        logger.info(
            "Worklog calculated employee=%s date=%s worked=%s late=%s extra=%s under=%s incomplete=%s",
            employee_id,
            work_date.isoformat(),
            worklog.worked_minutes,
            worklog.late_minutes,
            worklog.extra_minutes,
            worklog.under_minutes,
            worklog.is_incomplete,
        )
        return worklog

    def save_worklog(self, employee_id: int, work_date: date, worklog: WorklogCalculation) -> int:
        status = WorklogStatus.ERROR if worklog.is_incomplete else WorklogStatus.PROCESSED
        created = self._worklogs.save_day(
            employee_id=employee_id,
            work_date=work_date,
            worklog=worklog,
            status=status,
        )
        logger.info(
            "Worklog saved employee=%s date=%s status=%s occurrences=%s",
            employee_id,
            work_date.isoformat(),
            status.value,
            created,
        )
        return created

    def process_day_for_all_employees(self, work_date: date) -> DailyCloseResult:
        processed = 0
        errors = 0

        for employee in self._employees.list_active():
            try:
                worklog = self.process_day(employee.employee_id, work_date)
                self.save_worklog(employee.employee_id, work_date, worklog)
                processed += 1
            except Exception:
                # One broken employee must not stop the batch.
                logger.exception("Failed to process worklog employee=%s date=%s", employee.employee_id, work_date)
                errors += 1

        return DailyCloseResult(work_date=work_date, processed=processed, errors=errors)

from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import OccurrenceStatus, WorklogStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import DailyWorklog, WorklogCalculation
from .repository import WorklogRepository


class MySQLWorklogRepository(WorklogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save_day(
        self,
        *,
        employee_id: int,
        work_date: date,
        worklog: WorklogCalculation,
        status: WorklogStatus,
    ) -> int:
        # Single db_cursor block: worklog and its occurrences commit or roll back together.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO daily_worklogs(employee_id, work_date, worked_minutes, late_minutes,
                                           extra_minutes, under_minutes, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    worked_minutes=VALUES(worked_minutes),
                    late_minutes=VALUES(late_minutes),
                    extra_minutes=VALUES(extra_minutes),
                    under_minutes=VALUES(under_minutes),
                    status=VALUES(status)
                """,
                (
                    employee_id,
                    work_date,
                    worklog.worked_minutes,
                    worklog.late_minutes,
                    worklog.extra_minutes,
                    worklog.under_minutes,
                    status.value,
                ),
            )
            for occ in worklog.occurrences:
                cur.execute(
                    """
                    INSERT INTO occurrences(employee_id, work_date, occurrence_type, minutes, status)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (employee_id, work_date, occ.type.value, occ.minutes, OccurrenceStatus.OPEN.value),
                )
            return len(worklog.occurrences)

    def list_for_date(self, work_date: date) -> Sequence[DailyWorklog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT worklog_id, employee_id, work_date, worked_minutes, late_minutes,
                       extra_minutes, under_minutes, status
                FROM daily_worklogs
                WHERE work_date=%s
                ORDER BY employee_id
                """,
                (work_date,),
            )
            return [
                DailyWorklog(
                    worklog_id=int(r["worklog_id"]),
                    employee_id=int(r["employee_id"]),
                    work_date=r["work_date"],
                    worked_minutes=int(r["worked_minutes"]),
                    late_minutes=int(r["late_minutes"]),
                    extra_minutes=int(r["extra_minutes"]),
                    under_minutes=int(r["under_minutes"]),
                    status=WorklogStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]

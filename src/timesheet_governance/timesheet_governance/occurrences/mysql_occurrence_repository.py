from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import JustificationCategory, OccurrenceStatus, OccurrenceType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, where_clause
from .model import Justification, Occurrence
from .repository import OccurrenceRepository

_OCCURRENCE_COLUMNS = "occurrence_id, employee_id, work_date, occurrence_type, minutes, status, created_at"
_JUSTIFICATION_COLUMNS = "justification_id, occurrence_id, employee_id, work_date, text, category, notify_hr, created_at"


def _to_occurrence(r: dict) -> Occurrence:
    return Occurrence(
        occurrence_id=int(r["occurrence_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        type=OccurrenceType(r["occurrence_type"]),
        minutes=int(r["minutes"]),
        status=OccurrenceStatus(r["status"]),
        created_at=r.get("created_at"),
    )


def _to_justification(r: dict) -> Justification:
    return Justification(
        justification_id=int(r["justification_id"]),
        occurrence_id=int(r["occurrence_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        text=r["text"],
        category=JustificationCategory(r["category"]) if r.get("category") else None,
        notify_hr=bool(r.get("notify_hr")),
        created_at=r.get("created_at"),
    )


class MySQLOccurrenceRepository(OccurrenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_filtered(
        self,
        *,
        work_date: Optional[date] = None,
        status: Optional[OccurrenceStatus] = None,
        employee_id: Optional[int] = None,
        type: Optional[OccurrenceType] = None,
    ) -> Sequence[Occurrence]:
        where, params = where_clause(
            {
                "work_date": work_date,
                "status": status.value if status else None,
                "employee_id": employee_id,
                "occurrence_type": type.value if type else None,
            }
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_OCCURRENCE_COLUMNS}
                FROM occurrences
                {where}
                ORDER BY work_date DESC, created_at DESC
                """,
                params,
            )
            return [_to_occurrence(r) for r in fetchall(cur)]

    def get_by_id(self, occurrence_id: int) -> Optional[Occurrence]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_OCCURRENCE_COLUMNS} FROM occurrences WHERE occurrence_id=%s",
                (occurrence_id,),
            )
            r = fetchone(cur)
            return _to_occurrence(r) if r else None

    def update_status(self, *, occurrence_id: int, status: OccurrenceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE occurrences SET status=%s WHERE occurrence_id=%s",
                (status.value, occurrence_id),
            )
            return cur.rowcount > 0

    def count_by_status(self, *, work_date: date) -> dict[str, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT status, COUNT(*) AS n FROM occurrences WHERE work_date=%s GROUP BY status",
                (work_date,),
            )
            return {r["status"]: int(r["n"]) for r in fetchall(cur)}

    def count_by_type(self, *, work_date: date) -> dict[str, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT occurrence_type, COUNT(*) AS n FROM occurrences WHERE work_date=%s GROUP BY occurrence_type",
                (work_date,),
            )
            return {r["occurrence_type"]: int(r["n"]) for r in fetchall(cur)}

    def create_justification(
        self,
        *,
        occurrence_id: int,
        employee_id: int,
        work_date: date,
        text: str,
        category: Optional[JustificationCategory],
        notify_hr: bool,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO justifications(occurrence_id, employee_id, work_date, text, category, notify_hr)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    occurrence_id,
                    employee_id,
                    work_date,
                    text,
                    category.value if category else None,
                    1 if notify_hr else 0,
                ),
            )
            return int(cur.lastrowid)

    def get_justification(self, justification_id: int) -> Optional[Justification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_JUSTIFICATION_COLUMNS} FROM justifications WHERE justification_id=%s",
                (justification_id,),
            )
            r = fetchone(cur)
            return _to_justification(r) if r else None

    def list_justifications(
        self,
        *,
        occurrence_id: Optional[int] = None,
        employee_id: Optional[int] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[Justification]:
        where, params = where_clause(
            {"occurrence_id": occurrence_id, "employee_id": employee_id, "work_date": work_date}
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_JUSTIFICATION_COLUMNS}
                FROM justifications
                {where}
                ORDER BY created_at DESC
                """,
                params,
            )
            return [_to_justification(r) for r in fetchall(cur)]

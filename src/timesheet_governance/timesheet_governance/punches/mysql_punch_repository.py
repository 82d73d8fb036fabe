from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.enums import PunchType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import NewPunchEvent, PunchEvent
from .repository import PunchRepository


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee_between(self, employee_id: int, start: datetime, end: datetime) -> Sequence[PunchEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT punch_id, employee_id, punch_time, punch_type, source_payload_json
                FROM punch_events
                WHERE employee_id=%s AND punch_time BETWEEN %s AND %s
                ORDER BY punch_time ASC
                """,
                (employee_id, start, end),
            )
            return [
                PunchEvent(
                    punch_id=int(r["punch_id"]),
                    employee_id=int(r["employee_id"]),
                    timestamp=r["punch_time"],
                    type=PunchType(r["punch_type"]),
                    source_payload=r.get("source_payload_json"),
                )
                for r in fetchall(cur)
            ]

    def add_many(self, events: Sequence[NewPunchEvent]) -> int:
        inserted = 0
        with db_cursor(self._conn_factory) as (_, cur):
            for e in events:
                cur.execute(
                    """
                    INSERT IGNORE INTO punch_events(employee_id, punch_time, punch_type, source_payload_json)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (e.employee_id, e.timestamp, e.type.value, e.source_payload),
                )
                inserted += cur.rowcount
        return inserted

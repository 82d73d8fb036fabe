from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, where_clause
from .model import Employee, Sector
from .repository import EmployeeRepository

_EMPLOYEE_COLUMNS = "employee_id, name, provider_employee_id, chat_user_id, sector_id, active"
_SECTOR_COLUMNS = "sector_id, name, manager_chat_user_id"


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        name=r["name"],
        provider_employee_id=str(r["provider_employee_id"]),
        sector_id=int(r["sector_id"]),
        chat_user_id=r.get("chat_user_id"),
        active=bool(r.get("active", 1)),
    )


def _to_sector(r: dict) -> Sector:
    return Sector(
        sector_id=int(r["sector_id"]),
        name=r["name"],
        manager_chat_user_id=r["manager_chat_user_id"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_EMPLOYEE_COLUMNS}
                FROM employees
                WHERE active=1
                ORDER BY employee_id
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def list_employees(self, *, sector_id: Optional[int] = None, active: Optional[bool] = None) -> Sequence[Employee]:
        where, params = where_clause(
            {"sector_id": sector_id, "active": None if active is None else int(active)}
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_EMPLOYEE_COLUMNS}
                FROM employees
                {where}
                ORDER BY name
                """,
                params,
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_EMPLOYEE_COLUMNS}
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_by_provider_id(self, provider_employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE provider_employee_id=%s",
                (provider_employee_id,),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_sectors(self) -> Sequence[Sector]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SECTOR_COLUMNS} FROM sectors ORDER BY name")
            return [_to_sector(r) for r in fetchall(cur)]

    def get_sector(self, sector_id: int) -> Optional[Sector]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_SECTOR_COLUMNS} FROM sectors WHERE sector_id=%s",
                (sector_id,),
            )
            r = fetchone(cur)
            return _to_sector(r) if r else None

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.timesheet_governance.timesheet_governance.core.enums import OccurrenceStatus, OccurrenceType
from src.timesheet_governance.timesheet_governance.employees.model import Employee, Sector
from src.timesheet_governance.timesheet_governance.occurrences.model import Justification, Occurrence
from src.timesheet_governance.timesheet_governance.occurrences.service import OccurrenceService


class InMemoryOccurrences:
    def __init__(self, occurrences: list[Occurrence] | None = None):
        self._occ: dict[int, Occurrence] = {o.occurrence_id: o for o in occurrences or []}
        self._just: dict[int, Justification] = {}
        self._next_just = 1

    def list_filtered(self, *, work_date=None, status=None, employee_id=None, type=None):
        items = list(self._occ.values())
        if work_date is not None:
            items = [o for o in items if o.work_date == work_date]
        if status is not None:
            items = [o for o in items if o.status == status]
        if employee_id is not None:
            items = [o for o in items if o.employee_id == employee_id]
        if type is not None:
            items = [o for o in items if o.type == type]
        return items

    def get_by_id(self, occurrence_id: int) -> Optional[Occurrence]:
        return self._occ.get(occurrence_id)

    def update_status(self, *, occurrence_id: int, status: OccurrenceStatus) -> bool:
        # Mirrors MySQL: rowcount counts changed rows, not matched ones.
        occ = self._occ.get(occurrence_id)
        if not occ or occ.status == status:
            return False
        self._occ[occurrence_id] = replace(occ, status=status)
        return True

    def count_by_status(self, *, work_date: date) -> dict[str, int]:
        out: dict[str, int] = {}
        for o in self.list_filtered(work_date=work_date):
            out[o.status.value] = out.get(o.status.value, 0) + 1
        return out

    def count_by_type(self, *, work_date: date) -> dict[str, int]:
        out: dict[str, int] = {}
        for o in self.list_filtered(work_date=work_date):
            out[o.type.value] = out.get(o.type.value, 0) + 1
        return out

    def create_justification(self, *, occurrence_id, employee_id, work_date, text, category, notify_hr) -> int:
        jid = self._next_just
        self._next_just += 1
        self._just[jid] = Justification(
            justification_id=jid,
            occurrence_id=occurrence_id,
            employee_id=employee_id,
            work_date=work_date,
            text=text,
            category=category,
            notify_hr=notify_hr,
            created_at=datetime(2026, 2, 2, 19, 0),
        )
        return jid

    def get_justification(self, justification_id: int) -> Optional[Justification]:
        return self._just.get(justification_id)

    def list_justifications(self, *, occurrence_id=None, employee_id=None, work_date=None):
        items = list(self._just.values())
        if occurrence_id is not None:
            items = [j for j in items if j.occurrence_id == occurrence_id]
        if employee_id is not None:
            items = [j for j in items if j.employee_id == employee_id]
        if work_date is not None:
            items = [j for j in items if j.work_date == work_date]
        return items


class InMemoryEmployees:
    def __init__(self, employees: list[Employee] | None = None, sectors: list[Sector] | None = None):
        if employees is None:
            employees = [Employee(employee_id=7, name="Ana", provider_employee_id="1007", sector_id=3, chat_user_id="U7")]
        if sectors is None:
            sectors = [Sector(sector_id=3, name="Financeiro", manager_chat_user_id="UMGR")]
        self._employees = {e.employee_id: e for e in employees}
        self._sectors = {s.sector_id: s for s in sectors}

    def list_active(self):
        return [e for e in self._employees.values() if e.active]

    def list_employees(self, *, sector_id=None, active=None):
        items = sorted(self._employees.values(), key=lambda e: e.name)
        if sector_id is not None:
            items = [e for e in items if e.sector_id == sector_id]
        if active is not None:
            items = [e for e in items if e.active == active]
        return items

    def get_by_id(self, employee_id: int):
        return self._employees.get(employee_id)

    def get_by_provider_id(self, provider_employee_id: str):
        return next((e for e in self._employees.values() if e.provider_employee_id == provider_employee_id), None)

    def list_sectors(self):
        return sorted(self._sectors.values(), key=lambda s: s.name)

    def get_sector(self, sector_id: int):
        return self._sectors.get(sector_id)


def occurrence(
    occurrence_id: int,
    status=OccurrenceStatus.OPEN,
    type=OccurrenceType.LATE,
    minutes=15,
    work_date=date(2026, 2, 2),
    employee_id=7,
    created_at=datetime(2026, 2, 2, 18, 30),
):
    return Occurrence(
        occurrence_id=occurrence_id,
        employee_id=employee_id,
        work_date=work_date,
        type=type,
        minutes=minutes,
        status=status,
        created_at=created_at,
    )


@pytest.fixture
def make_occurrence():
    return occurrence


@pytest.fixture
def make_service():
    def _make(*occurrences):
        repo = InMemoryOccurrences(list(occurrences))
        return OccurrenceService(repo, InMemoryEmployees()), repo

    return _make


@pytest.fixture
def employee_repo():
    return InMemoryEmployees()


@pytest.fixture
def make_employee_repo():
    return InMemoryEmployees


@pytest.fixture
def make_occurrence_repo():
    def _make(*occurrences):
        return InMemoryOccurrences(list(occurrences))

    return _make

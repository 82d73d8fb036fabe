from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import NotFoundError
from ..occurrences.repository import OccurrenceRepository
from .model import Employee, EmployeeDetail, Sector, SectorDetail
from .repository import EmployeeRepository

RECENT_OCCURRENCES_LIMIT = 10


class EmployeeService:
    """Read side of employees and sectors."""

    def __init__(self, employees: EmployeeRepository, occurrences: OccurrenceRepository):
        self._employees = employees
        self._occurrences = occurrences

    def list_employees(self, *, sector_id: Optional[int] = None, active: Optional[bool] = None) -> Sequence[Employee]:
        return self._employees.list_employees(sector_id=sector_id, active=active)

    def get_employee(self, employee_id: int) -> EmployeeDetail:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Colaborador não encontrado")

        recent = self._occurrences.list_filtered(employee_id=employee.employee_id)
        return EmployeeDetail(
            employee=employee,
            sector=self._employees.get_sector(employee.sector_id),
            recent_occurrences=tuple(recent[:RECENT_OCCURRENCES_LIMIT]),
        )

    def list_sectors(self) -> Sequence[Sector]:
        return self._employees.list_sectors()

    def get_sector(self, sector_id: int) -> SectorDetail:
        sector = self._employees.get_sector(int(sector_id))
        if not sector:
            raise NotFoundError("Setor não encontrado")

        members = self._employees.list_employees(sector_id=sector.sector_id, active=True)
        return SectorDetail(sector=sector, employees=tuple(members))

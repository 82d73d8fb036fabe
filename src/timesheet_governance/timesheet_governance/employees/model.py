from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..occurrences.model import Occurrence


@dataclass(frozen=True)
class Sector:
    """Setor, com o gestor que recebe as justificativas."""

    sector_id: int
    name: str
    manager_chat_user_id: str


@dataclass(frozen=True)
class Employee:
    employee_id: int
    name: str
    provider_employee_id: str
    sector_id: int
    chat_user_id: Optional[str] = None
    active: bool = True


@dataclass(frozen=True)
class EmployeeDetail:
    employee: Employee
    sector: Optional[Sector]
    recent_occurrences: tuple[Occurrence, ...] = ()


@dataclass(frozen=True)
class SectorDetail:
    sector: Sector
    employees: tuple[Employee, ...] = ()

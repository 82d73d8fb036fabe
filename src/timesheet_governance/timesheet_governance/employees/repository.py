from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, Sector


class EmployeeRepository(Protocol):
    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_employees(self, *, sector_id: Optional[int] = None, active: Optional[bool] = None) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_provider_id(self, provider_employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_sectors(self) -> Sequence[Sector]:
        raise NotImplementedError

    def get_sector(self, sector_id: int) -> Optional[Sector]:
        raise NotImplementedError

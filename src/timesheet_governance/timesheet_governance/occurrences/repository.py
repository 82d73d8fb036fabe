from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import JustificationCategory, OccurrenceStatus, OccurrenceType
from .model import Justification, Occurrence


class OccurrenceRepository(Protocol):
    def list_filtered(
        self,
        *,
        work_date: Optional[date] = None,
        status: Optional[OccurrenceStatus] = None,
        employee_id: Optional[int] = None,
        type: Optional[OccurrenceType] = None,
    ) -> Sequence[Occurrence]:
        raise NotImplementedError

    def get_by_id(self, occurrence_id: int) -> Optional[Occurrence]:
        raise NotImplementedError

    def update_status(self, *, occurrence_id: int, status: OccurrenceStatus) -> bool:
        raise NotImplementedError

    def count_by_status(self, *, work_date: date) -> dict[str, int]:
        raise NotImplementedError

    def count_by_type(self, *, work_date: date) -> dict[str, int]:
        raise NotImplementedError

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
        raise NotImplementedError

    def get_justification(self, justification_id: int) -> Optional[Justification]:
        raise NotImplementedError

    def list_justifications(
        self,
        *,
        occurrence_id: Optional[int] = None,
        employee_id: Optional[int] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[Justification]:
        raise NotImplementedError

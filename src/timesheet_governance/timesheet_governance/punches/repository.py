from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import NewPunchEvent, PunchEvent


class PunchRepository(Protocol):
    def list_for_employee_between(self, employee_id: int, start: datetime, end: datetime) -> Sequence[PunchEvent]:
        raise NotImplementedError

    def add_many(self, events: Sequence[NewPunchEvent]) -> int:
        """Insert events, skipping any (employee, timestamp) already stored. Returns rows inserted."""
        raise NotImplementedError

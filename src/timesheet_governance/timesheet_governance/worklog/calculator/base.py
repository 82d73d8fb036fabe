from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..model import Punch, WorkdayConfig, WorklogCalculation


class WorklogCalculator(ABC):
    """Calculator interface (Strategy Pattern for the daily worklog)."""

    @abstractmethod
    def calculate(self, punches: Sequence[Punch], config: WorkdayConfig) -> WorklogCalculation:
        raise NotImplementedError

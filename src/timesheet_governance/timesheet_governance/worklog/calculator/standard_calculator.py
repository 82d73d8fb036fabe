from __future__ import annotations

from typing import Sequence

from ..calculations import calculate_worklog
from ..model import Punch, WorkdayConfig, WorklogCalculation
from .base import WorklogCalculator


class StandardWorklogCalculator(WorklogCalculator):
    """Standard rule: paired intervals, lunch past 6h, total-grace tolerance."""

    def calculate(self, punches: Sequence[Punch], config: WorkdayConfig) -> WorklogCalculation:
        return calculate_worklog(punches, config)

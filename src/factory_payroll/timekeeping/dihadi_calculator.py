from __future__ import annotations

from datetime import time

from ..core.constants import (
    DIHADI_FIRST_LUNCH_CUT,
    DIHADI_SECOND_LUNCH_CUT,
    FULL_LUNCH_MINUTES,
    LATE_ARRIVAL_AFTER,
    LATE_ARRIVAL_PENALTY_MINUTES,
    SHORT_LUNCH_MINUTES,
)
from .base import WorkedTimeCalculator


class DihadiCalculator(WorkedTimeCalculator):
    """Daily-wage workers: lunch follows the punch-out clock, late arrival costs an hour."""

    def lunch_minutes(self, start: time, end: time) -> int:
        if end <= DIHADI_FIRST_LUNCH_CUT:
            return 0
        if end <= DIHADI_SECOND_LUNCH_CUT:
            return SHORT_LUNCH_MINUTES
        return FULL_LUNCH_MINUTES

    def late_minutes(self, punch_in: time) -> int:
        if punch_in > LATE_ARRIVAL_AFTER:
            return LATE_ARRIVAL_PENALTY_MINUTES
        return 0

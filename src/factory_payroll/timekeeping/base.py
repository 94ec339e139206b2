from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import time

from ..common.datetime_utils import minutes_of
from ..core.constants import MAX_DAILY_MINUTES, SHIFT_END, SHIFT_START, SNAP_IN_LATEST, SNAP_OUT_LATEST


def canonical_window(punch_in: time, punch_out: time) -> tuple[time, time]:
    """Snap punches that straddle the 12 hour shift to exactly 09:00-21:00."""
    if SHIFT_START <= punch_in <= SNAP_IN_LATEST and SHIFT_END <= punch_out <= SNAP_OUT_LATEST:
        return SHIFT_START, SHIFT_END
    return punch_in, punch_out


class WorkedTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern per wage type)."""

    @abstractmethod
    def lunch_minutes(self, start: time, end: time) -> int:
        raise NotImplementedError

    def late_minutes(self, punch_in: time) -> int:
        return 0

    def worked_minutes(self, punch_in: time, punch_out: time) -> int:
        start, end = canonical_window(punch_in, punch_out)
        minutes = minutes_of(end) - minutes_of(start)
        minutes -= self.lunch_minutes(start, end)
        minutes -= self.late_minutes(punch_in)
        return min(max(minutes, 0), MAX_DAILY_MINUTES)

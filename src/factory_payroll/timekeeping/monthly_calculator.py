from __future__ import annotations

from datetime import time

from ..common.datetime_utils import minutes_of
from ..core.constants import FULL_LUNCH_MINUTES, MONTHLY_NO_LUNCH_SPAN, MONTHLY_SHORT_LUNCH_SPAN, SHORT_LUNCH_MINUTES
from .base import WorkedTimeCalculator


class MonthlyCalculator(WorkedTimeCalculator):
    """Monthly staff: lunch is tiered by how long the raw span is, no late penalty."""

    def lunch_minutes(self, start: time, end: time) -> int:
        span = minutes_of(end) - minutes_of(start)
        if span <= MONTHLY_NO_LUNCH_SPAN:
            return 0
        if span <= MONTHLY_SHORT_LUNCH_SPAN:
            return SHORT_LUNCH_MINUTES
        return FULL_LUNCH_MINUTES

"""Effective hours for a single punched day.

Both functions are pure: the same punches and wage type always give the same
answer, so they are safe to call from the classifier, the aggregators and the
salary sheet alike.
"""

from __future__ import annotations

from datetime import time
from decimal import Decimal

from ..core.enums import WageType
from .base import WorkedTimeCalculator, canonical_window
from .dihadi_calculator import DihadiCalculator
from .monthly_calculator import MonthlyCalculator

_CALCULATORS: dict[WageType, WorkedTimeCalculator] = {
    WageType.MONTHLY: MonthlyCalculator(),
    WageType.DIHADI: DihadiCalculator(),
}


def calculator_for(wage_type: WageType | str) -> WorkedTimeCalculator:
    """Factory Pattern: pick the calculator for a wage type."""
    return _CALCULATORS[WageType(wage_type)]


def effective_hours(punch_in: time, punch_out: time, wage_type: WageType | str = WageType.MONTHLY) -> Decimal:
    minutes = calculator_for(wage_type).worked_minutes(punch_in, punch_out)
    return Decimal(minutes) / Decimal(60)


def lunch_deduction(punch_in: time, punch_out: time, wage_type: WageType | str = WageType.MONTHLY) -> int:
    start, end = canonical_window(punch_in, punch_out)
    return calculator_for(wage_type).lunch_minutes(start, end)


def format_hours(hours: Decimal) -> str:
    total = int((Decimal(hours) * 60).to_integral_value())
    return f"{total // 60:02d}:{total % 60:02d}"

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import month_bounds
from ..core.constants import DIHADI_FIRST_HALF_LAST_DAY
from ..core.enums import WageType
from ..employees.model import Employee
from ..timekeeping import effective_hours
from .model import SalaryRecord, money

logger = logging.getLogger(__name__)


def dihadi_period(month: str, half: Optional[int] = None) -> tuple[date, date]:
    """Whole month, or the 1-15 / 16-end half used for fortnightly payouts."""
    first, last = month_bounds(month)
    if half == 1:
        return first, first.replace(day=DIHADI_FIRST_HALF_LAST_DAY)
    if half == 2:
        return first.replace(day=DIHADI_FIRST_HALF_LAST_DAY + 1), last
    return first, last


def hourly_rate(employee: Employee) -> Decimal:
    if employee.allotted > 0:
        return Decimal(employee.base_salary) / employee.allotted
    return Decimal(0)


@dataclass(frozen=True)
class DihadiTotals:
    start: date
    end: date
    total_hours: Decimal
    hourly_rate: Decimal
    gross: Decimal


class DihadiAggregator:
    """Daily-wage pay: effective hours x hourly rate, every day on its own."""

    def __init__(self, uow):
        self._uow = uow

    def compute(self, employee: Employee, start: date, end: date) -> DihadiTotals:
        if employee.date_of_joining and employee.date_of_joining > start:
            start = employee.date_of_joining

        total_hours = Decimal(0)
        if start <= end:
            for day in self._uow.attendance.get_for_range(employee.employee_id, start, end):
                if not day.has_punches:
                    continue
                total_hours += effective_hours(day.punch_in, day.punch_out, WageType.DIHADI)

        rate = hourly_rate(employee)
        return DihadiTotals(start=start, end=end, total_hours=total_hours, hourly_rate=rate, gross=money(total_hours * rate))

    def calculate(self, employee: Employee, month: str) -> SalaryRecord:
        """Whole-month record; half-month payouts are read through `compute`."""
        start, end = dihadi_period(month)
        totals = self.compute(employee, start, end)
        advances = Decimal(self._uow.ledgers.advance_total(employee.employee_id, month))

        record = SalaryRecord.build(
            employee_id=employee.employee_id,
            month=month,
            gross=totals.gross,
            deduction=advances,
        )
        self._uow.salaries.upsert(record)
        logger.info(
            "employee=%s month=%s dihadi hours=%s rate=%s gross=%s net=%s",
            employee.employee_id,
            month,
            totals.total_hours,
            totals.hourly_rate,
            record.gross,
            record.net,
        )
        return record

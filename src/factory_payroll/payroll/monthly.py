from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from ..attendance.classifier import StatusClassifier
from ..attendance.rules import DayOutcome
from ..attendance.window import load_month_window
from ..common.datetime_utils import days_in_month
from ..core.constants import HALF_DAY_DEDUCTION
from ..core.enums import DayEffect
from ..employees.model import Employee
from ..org_calendar.policy import PayrollPolicy
from .model import MonthTotals, SalaryRecord

logger = logging.getLogger(__name__)


def tally(outcomes: Iterable[DayOutcome], daily_rate: Decimal) -> MonthTotals:
    """Fold classified days, in date order, into the month's totals."""
    totals = MonthTotals()
    for outcome in sorted(outcomes, key=lambda o: o.work_date):
        if outcome.effect == DayEffect.ABSENT:
            totals.absent += 1
        elif outcome.effect == DayEffect.HALF_DAY:
            totals.half_deduct += HALF_DAY_DEDUCTION
        elif outcome.effect == DayEffect.EXTRA_PAY:
            totals.extra_pay += daily_rate
        elif outcome.effect == DayEffect.CREDIT_LEAVE:
            totals.credit_leaves.append(outcome.work_date)
    return totals


class MonthlyAggregator:
    """Salary for monthly-wage employees.

    Must run inside one unit of work: the leave credits and the salary row
    are written together or not at all.
    """

    def __init__(self, uow, policy: PayrollPolicy):
        self._uow = uow
        self._policy = policy
        self._classifier = StatusClassifier(policy)

    def calculate(self, employee: Employee, month: str) -> SalaryRecord:
        base = Decimal(employee.base_salary)

        if self._policy.has_full_salary(employee.employee_id):
            record = SalaryRecord.build(employee_id=employee.employee_id, month=month, gross=base, deduction=0)
            self._uow.salaries.upsert(record)
            logger.info("employee=%s month=%s full salary override", employee.employee_id, month)
            return record

        daily_rate = base / Decimal(days_in_month(month))

        window = load_month_window(self._uow.attendance, employee.employee_id, month)
        sandwich_dates = self._uow.calendar.get_sandwich_dates(month)
        outcomes = self._classifier.classify(employee, window, sandwich_dates)
        totals = tally(outcomes, daily_rate)

        for credit_date in totals.credit_leaves:
            if not self._uow.leaves.has_credit(employee.employee_id, credit_date):
                self._uow.leaves.insert_credit(employee.employee_id, credit_date)

        leave_days = Decimal(self._uow.leaves.ordinary_leave_days(employee.employee_id, month))
        absent = max(totals.absent - leave_days, Decimal(0))

        nights = int(self._uow.ledgers.night_total(employee.employee_id, month) or 0)
        extra_pay = totals.extra_pay + nights * daily_rate
        advances = Decimal(self._uow.ledgers.advance_total(employee.employee_id, month))

        gross = base + extra_pay
        deduction = (absent + totals.half_deduct) * daily_rate + advances
        record = SalaryRecord.build(employee_id=employee.employee_id, month=month, gross=gross, deduction=deduction)
        self._uow.salaries.upsert(record)

        logger.info(
            "employee=%s month=%s absent=%s half=%s credits=%d nights=%d gross=%s deduction=%s net=%s",
            employee.employee_id,
            month,
            absent,
            totals.half_deduct,
            len(totals.credit_leaves),
            nights,
            record.gross,
            record.deduction,
            record.net,
        )
        return record

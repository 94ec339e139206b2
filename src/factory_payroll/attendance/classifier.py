from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from ..employees.model import Employee
from ..org_calendar.policy import PayrollPolicy
from .adjacency import resolve_skip_set
from .rules import DayContext, DayOutcome, DayState, fold_month
from .window import MonthWindow

logger = logging.getLogger(__name__)


class StatusClassifier:
    """Labels every day of an employee-month.

    The monthly aggregator runs the same classification and reads the
    effects instead of the labels.
    """

    def __init__(self, policy: PayrollPolicy):
        self._policy = policy

    def prepare(
        self,
        employee: Employee,
        window: MonthWindow,
        sandwich_dates: Iterable[date] = (),
    ) -> tuple[DayContext, DayState]:
        special_supervisor = self._policy.is_special_supervisor(employee)
        skip_set = resolve_skip_set(window.all_days(), special_supervisor=special_supervisor)
        logger.debug(
            "employee=%s month=%s skip_set=%s",
            employee.employee_id,
            window.month,
            sorted(d.isoformat() for d in skip_set),
        )

        ctx = DayContext(
            statuses=window.statuses(),
            sandwich_dates=frozenset(sandwich_dates),
            special_supervisor=special_supervisor,
            special_department=self._policy.is_special_department(employee),
            paid_sunday_allowance=int(employee.paid_sunday_allowance or 0),
            pay_sunday=bool(employee.pay_sunday),
            allotted_hours=employee.allotted,
        )
        return ctx, DayState(skip_set=skip_set)

    def classify(
        self,
        employee: Employee,
        window: MonthWindow,
        sandwich_dates: Iterable[date] = (),
    ) -> list[DayOutcome]:
        ctx, state = self.prepare(employee, window, sandwich_dates)
        outcomes, _ = fold_month(window.days, ctx, state)
        return outcomes

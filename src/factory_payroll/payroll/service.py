from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..attendance.classifier import StatusClassifier
from ..attendance.rules import DayOutcome
from ..attendance.window import load_month_window
from ..common.datetime_utils import parse_month
from ..database.unit_of_work import UnitOfWork, UnitOfWorkFactory
from ..org_calendar.policy import PayrollPolicy
from .dihadi import DihadiAggregator
from .locks import EmployeeLocks
from .model import SalaryRecord
from .monthly import MonthlyAggregator

logger = logging.getLogger(__name__)


class PayrollService:
    """Entry point for salary computation.

    Each employee-month runs in its own unit of work under the employee's
    lock; a failure rolls back everything that month wrote.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        policy: PayrollPolicy,
        *,
        locks: Optional[EmployeeLocks] = None,
    ):
        self._uow_factory = uow_factory
        self._policy = policy
        self._locks = locks or EmployeeLocks()

    @property
    def locks(self) -> EmployeeLocks:
        return self._locks

    def calculate_salary_for_month(self, employee_id: int, month: str) -> Optional[SalaryRecord]:
        parse_month(month)
        with self._locks.hold(employee_id):
            with self._uow_factory() as uow:
                return self.calculate_in(uow, employee_id, month)

    def calculate_in(self, uow: UnitOfWork, employee_id: int, month: str) -> Optional[SalaryRecord]:
        """Compute inside a unit of work the caller already holds."""
        employee = uow.employees.get_by_id(int(employee_id))
        if not employee:
            logger.warning("employee=%s not found, salary for %s skipped", employee_id, month)
            return None

        if employee.is_dihadi:
            return DihadiAggregator(uow).calculate(employee, month)
        return MonthlyAggregator(uow, self._policy).calculate(employee, month)

    def recalculate_many(self, pairs: Iterable[tuple[int, str]]) -> list[SalaryRecord]:
        """Recompute each distinct (employee_id, month) once, in first-seen order."""
        seen: dict[tuple[int, str], None] = {}
        for employee_id, month in pairs:
            seen.setdefault((int(employee_id), month), None)

        records = []
        for employee_id, month in seen:
            record = self.calculate_salary_for_month(employee_id, month)
            if record is not None:
                records.append(record)
        return records

    def classify_month(self, employee_id: int, month: str) -> Optional[list[DayOutcome]]:
        """Day-by-day labels for a monthly employee; None for unknown or dihadi."""
        parse_month(month)
        with self._uow_factory() as uow:
            employee = uow.employees.get_by_id(int(employee_id))
            if not employee or employee.is_dihadi:
                return None
            window = load_month_window(uow.attendance, employee.employee_id, month)
            sandwich_dates = uow.calendar.get_sandwich_dates(month)
            return StatusClassifier(self._policy).classify(employee, window, sandwich_dates)

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import month_key, months_between
from ..common.validators import require_positive_decimal
from ..core.constants import LEAVE_ACCRUAL_GRACE_MONTHS, LEAVE_ACCRUAL_PER_MONTH, LEAVE_ACCRUAL_START_MONTHS
from ..core.exceptions import NotFoundError, ValidationError
from ..database.unit_of_work import UnitOfWorkFactory
from ..payroll.service import PayrollService

logger = logging.getLogger(__name__)


def earned_leave(date_of_joining: Optional[date], today: date) -> Decimal:
    if not date_of_joining:
        return Decimal(0)
    months = months_between(date_of_joining, today)
    if months < LEAVE_ACCRUAL_START_MONTHS:
        return Decimal(0)
    return (months - LEAVE_ACCRUAL_GRACE_MONTHS) * LEAVE_ACCRUAL_PER_MONTH


class LeaveService:
    def __init__(self, uow_factory: UnitOfWorkFactory, payroll: PayrollService):
        self._uow_factory = uow_factory
        self._payroll = payroll

    def record_leave(self, employee_id: int, leave_date: date, days, remark: str = "") -> None:
        """Record leave taken and recompute that month's salary in the same transaction."""
        days = require_positive_decimal(days, "Leave days")
        remark = (remark or "").strip() or None

        with self._payroll.locks.hold(employee_id), self._uow_factory() as uow:
            employee = uow.employees.get_by_id(int(employee_id))
            if not employee:
                raise NotFoundError("Employee not found")
            if employee.is_dihadi:
                raise ValidationError("Dihadi employees cannot record leaves")

            uow.leaves.record_leave(employee_id=employee.employee_id, leave_date=leave_date, days=days, remark=remark)
            self._payroll.calculate_in(uow, employee.employee_id, month_key(leave_date))

        logger.info("employee=%s leave recorded on %s days=%s", employee_id, leave_date, days)

    def leave_balance(self, employee_id: int, today: date) -> Optional[Decimal]:
        """Earned leave plus Sunday credits minus leave taken; None for dihadi."""
        with self._uow_factory() as uow:
            employee = uow.employees.get_by_id(int(employee_id))
            if not employee:
                raise NotFoundError("Employee not found")
            if employee.is_dihadi:
                return None
            entries = list(uow.leaves.list_for_employee(employee.employee_id))

        credits = sum((e.days for e in entries if e.is_sunday_credit), Decimal(0))
        taken = sum((e.days for e in entries if not e.is_sunday_credit), Decimal(0))
        return earned_leave(employee.date_of_joining, today) + credits - taken

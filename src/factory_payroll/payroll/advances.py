from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal

from ..common.datetime_utils import parse_month
from ..common.validators import require_positive_decimal
from ..core.exceptions import NotFoundError, ValidationError
from ..database.unit_of_work import UnitOfWorkFactory
from .locks import EmployeeLocks
from .model import SalaryRecord, money

logger = logging.getLogger(__name__)


class AdvanceService:
    """Recover part of an outstanding advance from the latest salary."""

    def __init__(self, uow_factory: UnitOfWorkFactory, locks: EmployeeLocks):
        self._uow_factory = uow_factory
        self._locks = locks

    def deduct_advance(self, employee_id: int, month: str, amount) -> SalaryRecord:
        parse_month(month)
        amt = money(require_positive_decimal(amount, "Deduction amount"))
        if amt <= 0:
            raise ValidationError("Deduction amount must be at least 0.01")

        with self._locks.hold(employee_id), self._uow_factory() as uow:
            if not uow.employees.get_by_id(int(employee_id)):
                raise NotFoundError("Employee not found")

            latest = uow.salaries.latest(int(employee_id))
            if not latest or latest.month != month:
                raise ValidationError("Can only deduct from the latest salary record")
            if uow.ledgers.has_advance_deduction(int(employee_id), month):
                raise ValidationError("Advance already deducted for this salary")

            outstanding = Decimal(uow.ledgers.outstanding_advance(int(employee_id)))
            if amt > outstanding:
                raise ValidationError("Invalid deduction amount")

            deduction = latest.deduction + amt
            record = replace(latest, deduction=deduction, net=latest.gross - deduction)
            uow.salaries.upsert(record)
            uow.ledgers.insert_advance_deduction(employee_id=int(employee_id), month=month, amount=amt)

        logger.info("employee=%s month=%s advance deducted=%s net=%s", employee_id, month, amt, record.net)
        return record

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import LeaveEntry


class LeaveRepository(Protocol):
    def has_credit(self, employee_id: int, on: date) -> bool:
        raise NotImplementedError

    def insert_credit(self, employee_id: int, on: date) -> None:
        """Insert a one-day Sunday credit. Callers check `has_credit` first."""

        raise NotImplementedError

    def ordinary_leave_days(self, employee_id: int, month: str) -> Decimal:
        """Leave taken in the month, Sunday credits excluded."""

        raise NotImplementedError

    def record_leave(self, *, employee_id: int, leave_date: date, days: Decimal, remark: Optional[str]) -> None:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveEntry]:
        raise NotImplementedError

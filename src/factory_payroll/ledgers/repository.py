from __future__ import annotations

from decimal import Decimal
from typing import Protocol


class LedgerRepository(Protocol):
    """Advance and night-shift ledgers, kept by other parts of the factory system."""

    def advance_total(self, employee_id: int, month: str) -> Decimal:
        """Advance amounts already deducted from the YYYY-MM salary."""

        raise NotImplementedError

    def night_total(self, employee_id: int, month: str) -> int:
        raise NotImplementedError

    def outstanding_advance(self, employee_id: int) -> Decimal:
        """All advances given minus all advances deducted so far."""

        raise NotImplementedError

    def has_advance_deduction(self, employee_id: int, month: str) -> bool:
        raise NotImplementedError

    def insert_advance_deduction(self, *, employee_id: int, month: str, amount: Decimal) -> None:
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.constants import SUNDAY_CREDIT_REMARK


@dataclass(frozen=True)
class LeaveEntry:
    """One row of the leave ledger: leave taken, or a Sunday credit."""

    employee_id: int
    leave_date: date
    days: Decimal
    remark: Optional[str] = None

    @property
    def is_sunday_credit(self) -> bool:
        return (self.remark or "").strip().lower() == SUNDAY_CREDIT_REMARK.lower()

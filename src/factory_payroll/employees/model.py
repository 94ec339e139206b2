from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import WageType


@dataclass(frozen=True)
class Employee:
    """Domain entity: one row of the employee directory.

    Note: Plain data object, no database access.
    """

    employee_id: int
    name: str
    wage_type: WageType
    base_salary: Decimal
    allotted_hours: Optional[Decimal] = None
    paid_sunday_allowance: int = 0
    pay_sunday: bool = False
    department: str = ""
    supervisor_name: str = ""
    date_of_joining: Optional[date] = None

    @property
    def allotted(self) -> Decimal:
        """Allotted hours with a missing value read as zero."""
        return self.allotted_hours or Decimal(0)

    @property
    def is_dihadi(self) -> bool:
        return self.wage_type == WageType.DIHADI

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import MONEY_QUANTUM


def money(value) -> Decimal:
    return Decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class SalaryRecord:
    """Stored salary for one employee-month, keyed by (employee_id, month)."""

    employee_id: int
    month: str
    gross: Decimal
    deduction: Decimal
    net: Decimal

    @classmethod
    def build(cls, *, employee_id: int, month: str, gross, deduction) -> "SalaryRecord":
        gross = money(gross)
        deduction = money(deduction)
        return cls(employee_id=employee_id, month=month, gross=gross, deduction=deduction, net=gross - deduction)


@dataclass
class MonthTotals:
    """Running totals of the monthly day walk."""

    absent: Decimal = Decimal(0)
    half_deduct: Decimal = Decimal(0)
    extra_pay: Decimal = Decimal(0)
    credit_leaves: list[date] = field(default_factory=list)

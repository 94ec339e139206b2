from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..attendance.classifier import StatusClassifier
from ..attendance.window import load_month_window
from ..common.datetime_utils import days_in_month
from ..core.constants import LATE_ARRIVAL_AFTER
from ..core.enums import WageType
from ..core.exceptions import NotFoundError
from ..database.unit_of_work import UnitOfWorkFactory
from ..employees.model import Employee
from ..org_calendar.policy import PayrollPolicy
from ..timekeeping import effective_hours, format_hours, lunch_deduction
from .dihadi import DihadiAggregator, dihadi_period
from .model import SalaryRecord


@dataclass(frozen=True)
class SheetRow:
    work_date: str
    punch_in: str
    punch_out: str
    hours: str
    lunch_deduction: int
    overtime: Optional[str]
    undertime: Optional[str]
    status: str
    note: str = ""


@dataclass(frozen=True)
class SalarySheet:
    employee: Employee
    month: str
    rows: list[SheetRow]
    daily_rate: Decimal
    hourly_rate: Decimal
    salary: Optional[SalaryRecord]
    outstanding_advance: Decimal
    total_hours: Optional[str] = None
    overtime_total: Optional[str] = None
    undertime_total: Optional[str] = None
    partial_amount: Optional[Decimal] = None


def _clock(value) -> str:
    return value.strftime("%H:%M") if value else "-"


class SalarySheetService:
    """Read-only month view a supervisor checks before salaries are paid out."""

    def __init__(self, uow_factory: UnitOfWorkFactory, policy: PayrollPolicy):
        self._uow_factory = uow_factory
        self._classifier = StatusClassifier(policy)

    def build(self, employee_id: int, month: str, *, half: Optional[int] = None) -> SalarySheet:
        with self._uow_factory() as uow:
            employee = uow.employees.get_by_id(int(employee_id))
            if not employee:
                raise NotFoundError("Employee not found")

            window = load_month_window(uow.attendance, employee.employee_id, month)
            salary = uow.salaries.get(employee.employee_id, month)
            outstanding = Decimal(uow.ledgers.outstanding_advance(employee.employee_id))

            if employee.is_dihadi:
                start, end = dihadi_period(month, half)
                totals = DihadiAggregator(uow).compute(employee, start, end)
                days = [d for d in window.days if totals.start <= d.work_date <= end]
                labels = {d.work_date: d.status.label() for d in days}
            else:
                days = list(window.days)
                sandwich_dates = uow.calendar.get_sandwich_dates(month)
                outcomes = self._classifier.classify(employee, window, sandwich_dates)
                labels = {o.work_date: o.label for o in outcomes}
                totals = None

        rows: list[SheetRow] = []
        overtime_total = Decimal(0)
        undertime_total = Decimal(0)
        for day in days:
            hours = Decimal(0)
            lunch = 0
            if day.has_punches:
                hours = effective_hours(day.punch_in, day.punch_out, employee.wage_type)
                lunch = lunch_deduction(day.punch_in, day.punch_out, employee.wage_type)

            overtime = undertime = None
            if employee.wage_type == WageType.MONTHLY:
                diff = hours - employee.allotted if day.has_punches else Decimal(0)
                overtime = format_hours(max(diff, Decimal(0)))
                undertime = format_hours(max(-diff, Decimal(0)))
                overtime_total += max(diff, Decimal(0))
                undertime_total += max(-diff, Decimal(0))

            note = ""
            if employee.is_dihadi and day.punch_in and day.punch_in > LATE_ARRIVAL_AFTER:
                note = f"Late arrival after {LATE_ARRIVAL_AFTER.strftime('%H:%M')}"

            rows.append(
                SheetRow(
                    work_date=day.work_date.isoformat(),
                    punch_in=_clock(day.punch_in),
                    punch_out=_clock(day.punch_out),
                    hours=format_hours(hours),
                    lunch_deduction=lunch,
                    overtime=overtime,
                    undertime=undertime,
                    status=labels.get(day.work_date, day.status.label()),
                    note=note,
                )
            )

        daily_rate = Decimal(employee.base_salary) / Decimal(days_in_month(month))
        if totals is not None:
            return SalarySheet(
                employee=employee,
                month=month,
                rows=rows,
                daily_rate=daily_rate,
                hourly_rate=totals.hourly_rate,
                salary=salary,
                outstanding_advance=outstanding,
                total_hours=format_hours(totals.total_hours),
                partial_amount=totals.gross,
            )
        return SalarySheet(
            employee=employee,
            month=month,
            rows=rows,
            daily_rate=daily_rate,
            hourly_rate=Decimal(0),
            salary=salary,
            outstanding_advance=outstanding,
            overtime_total=format_hours(overtime_total),
            undertime_total=format_hours(undertime_total),
        )

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import date, time, timedelta
from decimal import Decimal
from typing import Optional

import pytest

from factory_payroll.attendance.model import AttendanceDay
from factory_payroll.common.datetime_utils import iter_days, month_bounds, month_key
from factory_payroll.core.constants import SUNDAY_CREDIT_REMARK
from factory_payroll.core.enums import AttendanceStatus, WageType
from factory_payroll.core.exceptions import PersistenceError
from factory_payroll.employees.model import Employee
from factory_payroll.leaves.model import LeaveEntry
from factory_payroll.org_calendar.policy import PayrollPolicy
from factory_payroll.payroll.advances import AdvanceService
from factory_payroll.payroll.locks import EmployeeLocks
from factory_payroll.payroll.model import SalaryRecord
from factory_payroll.payroll.service import PayrollService


@dataclass
class FakeStore:
    """Everything the MySQL tables would hold, as plain dicts and lists."""

    employees: dict[int, Employee] = field(default_factory=dict)
    attendance: dict[tuple[int, date], AttendanceDay] = field(default_factory=dict)
    sandwich_dates: set[date] = field(default_factory=set)
    leaves: list[LeaveEntry] = field(default_factory=list)
    advances_given: dict[int, Decimal] = field(default_factory=dict)
    advance_deductions: list[tuple[int, str, Decimal]] = field(default_factory=list)
    nights: dict[tuple[int, str], int] = field(default_factory=dict)
    salaries: dict[tuple[int, str], SalaryRecord] = field(default_factory=dict)
    fail_salary_upsert: bool = False

    _TABLES = (
        "employees",
        "attendance",
        "sandwich_dates",
        "leaves",
        "advances_given",
        "advance_deductions",
        "nights",
        "salaries",
    )

    def snapshot(self) -> dict:
        return {name: copy.deepcopy(getattr(self, name)) for name in self._TABLES}

    def restore(self, snap: dict) -> None:
        for name, value in snap.items():
            setattr(self, name, value)

    # -- seeding helpers -------------------------------------------------

    def add_employee(self, employee_id: int = 1, **kwargs) -> Employee:
        values = dict(
            employee_id=employee_id,
            name=f"Worker {employee_id}",
            wage_type=WageType.MONTHLY,
            base_salary=Decimal("30000"),
            allotted_hours=Decimal("9"),
        )
        values.update(kwargs)
        emp = Employee(**values)
        self.employees[employee_id] = emp
        return emp

    def punch(self, employee_id: int, day: date, punch_in: Optional[str], punch_out: Optional[str]) -> None:
        p_in = time.fromisoformat(punch_in) if punch_in else None
        p_out = time.fromisoformat(punch_out) if punch_out else None
        status = AttendanceStatus.PRESENT if p_in and p_out else AttendanceStatus.ONE_PUNCH
        self.attendance[(employee_id, day)] = AttendanceDay(
            employee_id=employee_id,
            work_date=day,
            status=status,
            punch_in=p_in,
            punch_out=p_out,
        )

    def mark_absent(self, employee_id: int, *days: date) -> None:
        for day in days:
            self.attendance[(employee_id, day)] = AttendanceDay.absent(employee_id, day)

    def fill_month(self, employee_id: int, month: str, punch_in: str = "09:00", punch_out: str = "19:00") -> None:
        """Present every day of the month and both boundary days."""
        first, last = month_bounds(month)
        for day in iter_days(first - timedelta(days=1), last + timedelta(days=1)):
            self.punch(employee_id, day, punch_in, punch_out)

    def credit_dates(self, employee_id: int) -> list[date]:
        return sorted(e.leave_date for e in self.leaves if e.employee_id == employee_id and e.is_sunday_credit)


class InMemoryEmployees:
    def __init__(self, store: FakeStore):
        self._store = store

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._store.employees.get(employee_id)


class InMemoryAttendance:
    def __init__(self, store: FakeStore):
        self._store = store

    def get_for_range(self, employee_id: int, start: date, end: date):
        rows = [
            r
            for (eid, d), r in self._store.attendance.items()
            if eid == employee_id and start <= d <= end
        ]
        return sorted(rows, key=lambda r: r.work_date)


class InMemoryCalendar:
    def __init__(self, store: FakeStore):
        self._store = store

    def get_sandwich_dates(self, month: str) -> frozenset[date]:
        return frozenset(d for d in self._store.sandwich_dates if month_key(d) == month)


class InMemoryLedgers:
    def __init__(self, store: FakeStore):
        self._store = store

    def advance_total(self, employee_id: int, month: str) -> Decimal:
        return sum((a for eid, m, a in self._store.advance_deductions if eid == employee_id and m == month), Decimal(0))

    def night_total(self, employee_id: int, month: str) -> int:
        return self._store.nights.get((employee_id, month), 0)

    def outstanding_advance(self, employee_id: int) -> Decimal:
        given = self._store.advances_given.get(employee_id, Decimal(0))
        taken = sum((a for eid, _, a in self._store.advance_deductions if eid == employee_id), Decimal(0))
        return given - taken

    def has_advance_deduction(self, employee_id: int, month: str) -> bool:
        return any(eid == employee_id and m == month for eid, m, _ in self._store.advance_deductions)

    def insert_advance_deduction(self, *, employee_id: int, month: str, amount: Decimal) -> None:
        self._store.advance_deductions.append((employee_id, month, Decimal(amount)))


class InMemoryLeaves:
    def __init__(self, store: FakeStore):
        self._store = store

    def has_credit(self, employee_id: int, on: date) -> bool:
        return on in self._store.credit_dates(employee_id)

    def insert_credit(self, employee_id: int, on: date) -> None:
        self._store.leaves.append(LeaveEntry(employee_id, on, Decimal(1), SUNDAY_CREDIT_REMARK))

    def ordinary_leave_days(self, employee_id: int, month: str) -> Decimal:
        return sum(
            (
                e.days
                for e in self._store.leaves
                if e.employee_id == employee_id and month_key(e.leave_date) == month and not e.is_sunday_credit
            ),
            Decimal(0),
        )

    def record_leave(self, *, employee_id: int, leave_date: date, days: Decimal, remark: Optional[str]) -> None:
        self._store.leaves.append(LeaveEntry(employee_id, leave_date, Decimal(days), remark))

    def list_for_employee(self, employee_id: int):
        return [e for e in self._store.leaves if e.employee_id == employee_id]


class InMemorySalaries:
    def __init__(self, store: FakeStore):
        self._store = store

    def get(self, employee_id: int, month: str) -> Optional[SalaryRecord]:
        return self._store.salaries.get((employee_id, month))

    def latest(self, employee_id: int) -> Optional[SalaryRecord]:
        months = sorted(m for eid, m in self._store.salaries if eid == employee_id)
        return self._store.salaries[(employee_id, months[-1])] if months else None

    def upsert(self, record: SalaryRecord) -> None:
        if self._store.fail_salary_upsert:
            raise PersistenceError("salary write failed")
        self._store.salaries[(record.employee_id, record.month)] = record


class InMemoryUnitOfWork:
    """Restores the store snapshot when the block raises, like a rollback."""

    def __init__(self, store: FakeStore):
        self._store = store
        self._snapshot = None
        self.employees = InMemoryEmployees(store)
        self.attendance = InMemoryAttendance(store)
        self.calendar = InMemoryCalendar(store)
        self.ledgers = InMemoryLedgers(store)
        self.leaves = InMemoryLeaves(store)
        self.salaries = InMemorySalaries(store)

    def __enter__(self) -> "InMemoryUnitOfWork":
        self._snapshot = self._store.snapshot()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self._store.restore(self._snapshot)
        self._snapshot = None
        return None


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def uow_factory(store):
    return lambda: InMemoryUnitOfWork(store)


@pytest.fixture
def policy() -> PayrollPolicy:
    return PayrollPolicy()


@pytest.fixture
def locks() -> EmployeeLocks:
    return EmployeeLocks()


@pytest.fixture
def payroll(uow_factory, policy, locks) -> PayrollService:
    return PayrollService(uow_factory, policy, locks=locks)


@pytest.fixture
def advances(uow_factory, locks) -> AdvanceService:
    return AdvanceService(uow_factory, locks)

from __future__ import annotations

from contextlib import ExitStack
from typing import Callable, Optional, Protocol

from ..attendance.mysql_attendance_repository import MySQLAttendanceRepository
from ..attendance.repository import AttendanceRepository
from ..employees.mysql_employee_repository import MySQLEmployeeRepository
from ..employees.repository import EmployeeRepository
from ..ledgers.mysql_ledger_repository import MySQLLedgerRepository
from ..ledgers.repository import LedgerRepository
from ..leaves.mysql_leave_repository import MySQLLeaveRepository
from ..leaves.repository import LeaveRepository
from ..org_calendar.mysql_calendar_repository import MySQLCalendarRepository
from ..org_calendar.repository import CalendarRepository
from ..payroll.mysql_salary_repository import MySQLSalaryRepository
from ..payroll.repository import SalaryRepository
from .connection import DatabaseConnection
from .mysql_base import transaction


class UnitOfWork(Protocol):
    """Every repository a payroll computation touches, bound to one transaction."""

    employees: EmployeeRepository
    attendance: AttendanceRepository
    calendar: CalendarRepository
    ledgers: LedgerRepository
    leaves: LeaveRepository
    salaries: SalaryRepository

    def __enter__(self) -> "UnitOfWork":
        raise NotImplementedError

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        raise NotImplementedError


UnitOfWorkFactory = Callable[[], UnitOfWork]


class MySQLUnitOfWork:
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._stack: Optional[ExitStack] = None

    def __enter__(self) -> "MySQLUnitOfWork":
        self._stack = ExitStack()
        conn = self._stack.enter_context(transaction(self._conn_factory))
        self.employees = MySQLEmployeeRepository(conn)
        self.attendance = MySQLAttendanceRepository(conn)
        self.calendar = MySQLCalendarRepository(conn)
        self.ledgers = MySQLLedgerRepository(conn)
        self.leaves = MySQLLeaveRepository(conn)
        self.salaries = MySQLSalaryRepository(conn)
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        stack, self._stack = self._stack, None
        return stack.__exit__(exc_type, exc, tb)

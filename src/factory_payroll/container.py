from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .database.unit_of_work import MySQLUnitOfWork
from .leaves.service import LeaveService
from .org_calendar.policy import PayrollPolicy
from .payroll.advances import AdvanceService
from .payroll.locks import EmployeeLocks
from .payroll.service import PayrollService
from .payroll.sheet import SalarySheetService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    policy: PayrollPolicy
    locks: EmployeeLocks

    payroll_service: PayrollService
    leave_service: LeaveService
    advance_service: AdvanceService
    sheet_service: SalarySheetService


def build_policy(settings) -> PayrollPolicy:
    return PayrollPolicy.from_lists(
        special_departments=getattr(settings, "SPECIAL_DEPARTMENTS", ()),
        special_supervisors=getattr(settings, "SPECIAL_SUNDAY_SUPERVISORS", ()),
        full_salary_employee_ids=getattr(settings, "FULL_SALARY_EMPLOYEE_IDS", ()),
    )


def build_container(settings) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
    policy = build_policy(settings)
    locks = EmployeeLocks()

    def uow_factory() -> MySQLUnitOfWork:
        return MySQLUnitOfWork(conn)

    payroll_service = PayrollService(uow_factory, policy, locks=locks)

    return Container(
        conn=conn,
        policy=policy,
        locks=locks,
        payroll_service=payroll_service,
        leave_service=LeaveService(uow_factory, payroll_service),
        advance_service=AdvanceService(uow_factory, locks),
        sheet_service=SalarySheetService(uow_factory, policy),
    )

from __future__ import annotations

from typing import Optional

from ..core.enums import WageType
from ..database.mysql_base import as_decimal, db_cursor, fetchone
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn):
        self._conn = conn

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn) as cur:
            cur.execute(
                """
                SELECT e.id, e.name, e.salary, e.salary_type, e.allotted_hours,
                       e.paid_sunday_allowance, e.pay_sunday, e.date_of_joining,
                       u.name AS supervisor_name, d.name AS department
                FROM employees e
                LEFT JOIN users u ON u.id = e.supervisor_id
                LEFT JOIN (
                    SELECT user_id, MIN(department_id) AS department_id
                    FROM department_supervisors
                    GROUP BY user_id
                ) ds ON ds.user_id = e.supervisor_id
                LEFT JOIN departments d ON d.id = ds.department_id
                WHERE e.id=%s
                """,
                (int(employee_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Employee(
                employee_id=int(r["id"]),
                name=r["name"],
                wage_type=WageType(r["salary_type"]),
                base_salary=as_decimal(r["salary"]),
                allotted_hours=as_decimal(r["allotted_hours"]) if r.get("allotted_hours") is not None else None,
                paid_sunday_allowance=int(r.get("paid_sunday_allowance") or 0),
                pay_sunday=bool(int(r.get("pay_sunday") or 0)),
                department=r.get("department") or "",
                supervisor_name=r.get("supervisor_name") or "",
                date_of_joining=r.get("date_of_joining"),
            )

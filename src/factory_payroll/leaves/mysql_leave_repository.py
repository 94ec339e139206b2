from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import month_bounds
from ..core.constants import SUNDAY_CREDIT_REMARK
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone
from .model import LeaveEntry
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn):
        self._conn = conn

    def has_credit(self, employee_id: int, on: date) -> bool:
        with db_cursor(self._conn) as cur:
            cur.execute(
                "SELECT id FROM employee_leaves WHERE employee_id=%s AND leave_date=%s AND remark=%s LIMIT 1",
                (int(employee_id), on, SUNDAY_CREDIT_REMARK),
            )
            return fetchone(cur) is not None

    def insert_credit(self, employee_id: int, on: date) -> None:
        self.record_leave(employee_id=employee_id, leave_date=on, days=Decimal(1), remark=SUNDAY_CREDIT_REMARK)

    def ordinary_leave_days(self, employee_id: int, month: str) -> Decimal:
        first, last = month_bounds(month)
        with db_cursor(self._conn) as cur:
            cur.execute(
                """
                SELECT COALESCE(SUM(days),0) AS total
                FROM employee_leaves
                WHERE employee_id=%s AND leave_date BETWEEN %s AND %s
                  AND (remark IS NULL OR LOWER(remark) <> LOWER(%s))
                """,
                (int(employee_id), first, last, SUNDAY_CREDIT_REMARK),
            )
            r = fetchone(cur)
            return as_decimal(r["total"] if r else 0)

    def record_leave(self, *, employee_id: int, leave_date: date, days: Decimal, remark: Optional[str]) -> None:
        with db_cursor(self._conn) as cur:
            cur.execute(
                "INSERT INTO employee_leaves(employee_id, leave_date, days, remark) VALUES(%s,%s,%s,%s)",
                (int(employee_id), leave_date, days, remark),
            )

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveEntry]:
        with db_cursor(self._conn) as cur:
            cur.execute(
                """
                SELECT employee_id, leave_date, days, remark
                FROM employee_leaves
                WHERE employee_id=%s
                ORDER BY leave_date DESC
                """,
                (int(employee_id),),
            )
            return [
                LeaveEntry(
                    employee_id=int(r["employee_id"]),
                    leave_date=r["leave_date"],
                    days=as_decimal(r["days"]),
                    remark=r.get("remark"),
                )
                for r in fetchall(cur)
            ]

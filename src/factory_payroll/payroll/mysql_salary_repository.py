from __future__ import annotations

from typing import Optional

from ..database.mysql_base import as_decimal, db_cursor, fetchone
from .model import SalaryRecord
from .repository import SalaryRepository


def _to_record(r: dict) -> SalaryRecord:
    return SalaryRecord(
        employee_id=int(r["employee_id"]),
        month=r["month"],
        gross=as_decimal(r["gross"]),
        deduction=as_decimal(r["deduction"]),
        net=as_decimal(r["net"]),
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn):
        self._conn = conn

    def get(self, employee_id: int, month: str) -> Optional[SalaryRecord]:
        with db_cursor(self._conn) as cur:
            cur.execute(
                "SELECT employee_id, month, gross, deduction, net FROM employee_salaries WHERE employee_id=%s AND month=%s",
                (int(employee_id), month),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def latest(self, employee_id: int) -> Optional[SalaryRecord]:
        with db_cursor(self._conn) as cur:
            cur.execute(
                """
                SELECT employee_id, month, gross, deduction, net
                FROM employee_salaries
                WHERE employee_id=%s
                ORDER BY month DESC
                LIMIT 1
                """,
                (int(employee_id),),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, record: SalaryRecord) -> None:
        with db_cursor(self._conn) as cur:
            cur.execute(
                """
                INSERT INTO employee_salaries(employee_id, month, gross, deduction, net, created_at)
                VALUES(%s,%s,%s,%s,%s,NOW())
                ON DUPLICATE KEY UPDATE gross=VALUES(gross), deduction=VALUES(deduction), net=VALUES(net)
                """,
                (record.employee_id, record.month, record.gross, record.deduction, record.net),
            )

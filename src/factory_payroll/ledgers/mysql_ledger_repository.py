from __future__ import annotations

from decimal import Decimal

from ..database.mysql_base import as_decimal, db_cursor, fetchone
from .repository import LedgerRepository


class MySQLLedgerRepository(LedgerRepository):
    def __init__(self, conn):
        self._conn = conn

    def _scalar(self, sql: str, params: tuple):
        with db_cursor(self._conn) as cur:
            cur.execute(sql, params)
            r = fetchone(cur)
            return r["total"] if r else None

    def advance_total(self, employee_id: int, month: str) -> Decimal:
        return as_decimal(
            self._scalar(
                "SELECT COALESCE(SUM(amount),0) AS total FROM advance_deductions WHERE employee_id=%s AND month=%s",
                (int(employee_id), month),
            )
        )

    def night_total(self, employee_id: int, month: str) -> int:
        total = self._scalar(
            "SELECT COALESCE(SUM(nights),0) AS total FROM employee_nights WHERE employee_id=%s AND month=%s",
            (int(employee_id), month),
        )
        return int(total or 0)

    def outstanding_advance(self, employee_id: int) -> Decimal:
        given = as_decimal(
            self._scalar(
                "SELECT COALESCE(SUM(amount),0) AS total FROM employee_advances WHERE employee_id=%s",
                (int(employee_id),),
            )
        )
        deducted = as_decimal(
            self._scalar(
                "SELECT COALESCE(SUM(amount),0) AS total FROM advance_deductions WHERE employee_id=%s",
                (int(employee_id),),
            )
        )
        return given - deducted

    def has_advance_deduction(self, employee_id: int, month: str) -> bool:
        with db_cursor(self._conn) as cur:
            cur.execute(
                "SELECT id FROM advance_deductions WHERE employee_id=%s AND month=%s LIMIT 1",
                (int(employee_id), month),
            )
            return fetchone(cur) is not None

    def insert_advance_deduction(self, *, employee_id: int, month: str, amount: Decimal) -> None:
        with db_cursor(self._conn) as cur:
            cur.execute(
                "INSERT INTO advance_deductions(employee_id, month, amount) VALUES(%s,%s,%s)",
                (int(employee_id), month, amount),
            )

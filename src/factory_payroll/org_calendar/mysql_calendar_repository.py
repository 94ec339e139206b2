from __future__ import annotations

from datetime import date

from ..common.datetime_utils import month_bounds
from ..database.mysql_base import db_cursor, fetchall
from .repository import CalendarRepository


class MySQLCalendarRepository(CalendarRepository):
    def __init__(self, conn):
        self._conn = conn

    def get_sandwich_dates(self, month: str) -> frozenset[date]:
        first, last = month_bounds(month)
        with db_cursor(self._conn) as cur:
            cur.execute("SELECT date FROM sandwich_dates WHERE date BETWEEN %s AND %s", (first, last))
            return frozenset(r["date"] for r in fetchall(cur))

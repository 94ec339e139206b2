from __future__ import annotations

from datetime import date
from typing import Any, Dict, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import AttendanceDay
from .repository import AttendanceRepository


def _to_day(r: Dict[str, Any]) -> AttendanceDay:
    try:
        status = AttendanceStatus.parse(r.get("status"))
    except ValueError:
        raise ValidationError(
            f"Unknown attendance status {r.get('status')!r} for employee {r['employee_id']} on {r['date']}"
        )
    return AttendanceDay(
        employee_id=int(r["employee_id"]),
        work_date=r["date"],
        status=status,
        punch_in=normalize_mysql_time(r.get("punch_in")),
        punch_out=normalize_mysql_time(r.get("punch_out")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn):
        self._conn = conn

    def get_for_range(self, employee_id: int, start: date, end: date) -> Sequence[AttendanceDay]:
        with db_cursor(self._conn) as cur:
            cur.execute(
                """
                SELECT employee_id, date, punch_in, punch_out, status
                FROM employee_attendance
                WHERE employee_id=%s AND date BETWEEN %s AND %s
                ORDER BY date
                """,
                (int(employee_id), start, end),
            )
            return [_to_day(r) for r in fetchall(cur)]

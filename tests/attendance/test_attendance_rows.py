from datetime import date, time, timedelta

import pytest

from factory_payroll.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from factory_payroll.core.enums import AttendanceStatus
from factory_payroll.core.exceptions import ValidationError


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows

    def execute(self, sql, params):
        self.params = params

    def fetchall(self):
        return self._rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows):
        self._rows = rows

    def cursor(self, dictionary=False):
        return FakeCursor(self._rows)


def _row(status, day=date(2025, 6, 2), punch_in=timedelta(hours=9), punch_out="19:00:00"):
    return {"employee_id": 1, "date": day, "punch_in": punch_in, "punch_out": punch_out, "status": status}


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("present", AttendanceStatus.PRESENT),
        (" Absent ", AttendanceStatus.ABSENT),
        ("One  Punch only", AttendanceStatus.ONE_PUNCH),
        (None, AttendanceStatus.PRESENT),
    ],
)
def test_status_text_is_normalised(raw, expected):
    repo = MySQLAttendanceRepository(FakeConnection([_row(raw)]))

    (day,) = repo.get_for_range(1, date(2025, 6, 1), date(2025, 6, 30))

    assert day.status == expected
    assert (day.punch_in, day.punch_out) == (time(9, 0), time(19, 0))


def test_unknown_status_names_the_row():
    repo = MySQLAttendanceRepository(FakeConnection([_row("on leave", day=date(2025, 6, 3))]))

    with pytest.raises(ValidationError, match="2025-06-03"):
        repo.get_for_range(1, date(2025, 6, 1), date(2025, 6, 30))

from datetime import date, time

from factory_payroll.attendance.adjacency import neighbour_missed, resolve_skip_set, status_map
from factory_payroll.attendance.model import AttendanceDay
from factory_payroll.core.enums import AttendanceStatus

SAT, SUN, MON = date(2025, 6, 7), date(2025, 6, 8), date(2025, 6, 9)


def _present(d: date) -> AttendanceDay:
    return AttendanceDay(1, d, AttendanceStatus.PRESENT, time(9, 0), time(19, 0))


def _status(d: date, status: AttendanceStatus) -> AttendanceDay:
    return AttendanceDay(1, d, status)


def test_absent_saturday_next_to_worked_sunday_is_forgiven():
    days = [_status(SAT, AttendanceStatus.ABSENT), _present(SUN), _present(MON)]

    skip = resolve_skip_set(days, special_supervisor=False)

    assert SAT in skip
    assert MON not in skip


def test_each_side_is_judged_independently():
    days = [
        _status(SAT, AttendanceStatus.ABSENT),
        _present(SUN),
        _status(MON, AttendanceStatus.ONE_PUNCH),
    ]

    assert resolve_skip_set(days, special_supervisor=False) == {SAT, MON}


def test_missing_row_counts_as_present():
    days = [_present(SUN), _status(MON, AttendanceStatus.ABSENT)]

    assert not neighbour_missed(status_map(days), SAT)
    assert resolve_skip_set(days, special_supervisor=False) == {MON}


def test_unworked_sunday_forgives_nothing():
    days = [
        _status(SAT, AttendanceStatus.ABSENT),
        _status(SUN, AttendanceStatus.ABSENT),
        _status(MON, AttendanceStatus.ABSENT),
    ]

    assert resolve_skip_set(days, special_supervisor=False) == frozenset()


def test_special_supervisor_gets_no_forgiveness_here():
    days = [_status(SAT, AttendanceStatus.ABSENT), _present(SUN), _status(MON, AttendanceStatus.ABSENT)]

    assert resolve_skip_set(days, special_supervisor=True) == frozenset()


def test_result_does_not_depend_on_row_order():
    days = [_status(MON, AttendanceStatus.ABSENT), _present(SUN), _status(SAT, AttendanceStatus.ABSENT)]

    assert resolve_skip_set(days, special_supervisor=False) == resolve_skip_set(
        list(reversed(days)), special_supervisor=False
    )

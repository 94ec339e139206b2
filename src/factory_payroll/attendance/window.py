from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from ..common.datetime_utils import iter_days, month_bounds
from ..core.enums import AttendanceStatus
from .model import AttendanceDay
from .repository import AttendanceRepository


@dataclass(frozen=True)
class MonthWindow:
    """A month of attendance with every calendar day filled in.

    `before` and `after` are the last day of the previous month and the
    first day of the next one; they are only read for neighbour lookups.
    """

    month: str
    days: tuple[AttendanceDay, ...]
    before: AttendanceDay
    after: AttendanceDay

    def all_days(self) -> tuple[AttendanceDay, ...]:
        return (self.before, *self.days, self.after)

    def statuses(self) -> dict[date, AttendanceStatus]:
        return {d.work_date: d.status for d in self.all_days()}


def build_month_window(employee_id: int, month: str, rows) -> MonthWindow:
    """Backfill missing dates as absent and split off the boundary days."""
    first, last = month_bounds(month)
    before_date = first - timedelta(days=1)
    after_date = last + timedelta(days=1)

    by_date = {r.work_date: r for r in rows}

    def _get(d: date) -> AttendanceDay:
        return by_date.get(d) or AttendanceDay.absent(employee_id, d)

    return MonthWindow(
        month=month,
        days=tuple(_get(d) for d in iter_days(first, last)),
        before=_get(before_date),
        after=_get(after_date),
    )


def load_month_window(attendance: AttendanceRepository, employee_id: int, month: str) -> MonthWindow:
    first, last = month_bounds(month)
    rows = attendance.get_for_range(employee_id, first - timedelta(days=1), last + timedelta(days=1))
    return build_month_window(employee_id, month, rows)

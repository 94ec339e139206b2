"""Sunday adjacency: which absences are forgiven by a worked Sunday.

`resolve_skip_set` is the only place this rule lives. The status classifier
and the monthly aggregator both start from its result.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Mapping

from ..common.datetime_utils import is_sunday
from ..core.enums import AttendanceStatus
from .model import AttendanceDay


def status_map(days: Iterable[AttendanceDay]) -> dict[date, AttendanceStatus]:
    return {d.work_date: d.status for d in days}


def neighbour_missed(statuses: Mapping[date, AttendanceStatus], day: date) -> bool:
    """True when the day has an explicit absent / one-punch row.

    A day with no row at all counts as present here.
    """
    status = statuses.get(day)
    return status is not None and status.missed


def resolve_skip_set(days: Iterable[AttendanceDay], *, special_supervisor: bool) -> frozenset[date]:
    """Saturdays and Mondays forgiven because the Sunday between was worked.

    Each side is judged on its own. Special supervisors use the stricter
    rule in the classifier instead, so nothing is forgiven here for them.
    """
    if special_supervisor:
        return frozenset()

    statuses = status_map(days)
    skip: set[date] = set()
    for day, status in statuses.items():
        if not is_sunday(day) or status != AttendanceStatus.PRESENT:
            continue
        saturday = day - timedelta(days=1)
        monday = day + timedelta(days=1)
        if neighbour_missed(statuses, saturday):
            skip.add(saturday)
        if neighbour_missed(statuses, monday):
            skip.add(monday)
    return frozenset(skip)

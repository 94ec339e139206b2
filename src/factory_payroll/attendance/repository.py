from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceDay


class AttendanceRepository(Protocol):
    def get_for_range(self, employee_id: int, start: date, end: date) -> Sequence[AttendanceDay]:
        """Rows between start and end inclusive, ordered by date. Days without a row are simply missing."""

        raise NotImplementedError

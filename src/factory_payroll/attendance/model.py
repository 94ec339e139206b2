from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceDay:
    """Domain entity: one employee's punch record for one date."""

    employee_id: int
    work_date: date
    status: AttendanceStatus
    punch_in: Optional[time] = None
    punch_out: Optional[time] = None

    @classmethod
    def absent(cls, employee_id: int, work_date: date) -> "AttendanceDay":
        return cls(employee_id=employee_id, work_date=work_date, status=AttendanceStatus.ABSENT)

    @property
    def has_punches(self) -> bool:
        return self.punch_in is not None and self.punch_out is not None

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT

from __future__ import annotations

from enum import Enum


class WageType(str, Enum):
    """How an employee is paid."""

    MONTHLY = "monthly"
    DIHADI = "dihadi"


class AttendanceStatus(str, Enum):
    """Raw punch-clock status as written by the ingestion job."""

    PRESENT = "present"
    ABSENT = "absent"
    ONE_PUNCH = "one punch only"

    @property
    def missed(self) -> bool:
        return self in (AttendanceStatus.ABSENT, AttendanceStatus.ONE_PUNCH)

    def label(self) -> str:
        return self.value[:1].upper() + self.value[1:]

    @classmethod
    def parse(cls, value) -> "AttendanceStatus":
        """Case- and spacing-insensitive lookup; a blank status reads as present."""
        text = " ".join(str(value or "").split()).lower()
        return cls(text) if text else cls.PRESENT


class DayLabel(str, Enum):
    """Per-day labels shown on the monthly attendance sheet."""

    PAID_DUE_TO_SUNDAY = "Paid due to Sunday work"
    ABSENT_SANDWICH = "Absent (Sandwich)"
    ABSENT_MANDATORY = "Absent (Mandatory)"
    LEAVE_CREDITED = "Leave credited"
    WORKED_SUNDAY = "Worked Sunday"
    PAID_SUNDAY = "Paid Sunday"
    ABSENT_SHORT_HOURS = "Absent (Short hours)"
    HALF_DAY = "Half Day"
    PRESENT = "Present"
    ABSENT = "Absent"
    MISSING_PUNCH = "Missing punch"


class DayEffect(str, Enum):
    """What a classified day does to the month's salary totals."""

    NONE = "NONE"
    FORGIVEN = "FORGIVEN"
    ABSENT = "ABSENT"
    HALF_DAY = "HALF_DAY"
    EXTRA_PAY = "EXTRA_PAY"
    CREDIT_LEAVE = "CREDIT_LEAVE"

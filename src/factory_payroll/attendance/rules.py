"""Per-day attendance rule shared by the status sheet and the salary run.

A month is a left fold over its days: `evaluate_day` takes one day and the
state built up by the days before it, and returns the day's outcome plus the
state for the next day. The outcome carries both the label shown on the sheet
and the effect it has on salary, so the two can never drift apart.

State carried from day to day:

- `mandatory_used`: paid Sunday allowance consumed so far this month.
- `skip_set`: dates whose absence is forgiven. A "Paid Sunday" drops the
  following Monday from it, which only works because days are evaluated in
  date order.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Mapping

from ..common.datetime_utils import is_sunday
from ..core.constants import HALF_DAY_RATIO, SHORT_HOURS_RATIO
from ..core.enums import AttendanceStatus, DayEffect, DayLabel, WageType
from ..timekeeping import effective_hours
from .adjacency import neighbour_missed
from .model import AttendanceDay


@dataclass(frozen=True)
class DayContext:
    """Inputs that stay fixed for a whole employee-month."""

    statuses: Mapping[date, AttendanceStatus]
    sandwich_dates: frozenset[date] = frozenset()
    special_supervisor: bool = False
    special_department: bool = False
    paid_sunday_allowance: int = 0
    pay_sunday: bool = False
    allotted_hours: Decimal = Decimal(0)

    def missed(self, day: date) -> bool:
        return neighbour_missed(self.statuses, day)


@dataclass(frozen=True)
class DayState:
    mandatory_used: int = 0
    skip_set: frozenset[date] = field(default_factory=frozenset)

    def consume_allowance(self) -> "DayState":
        return replace(self, mandatory_used=self.mandatory_used + 1)

    def forget(self, day: date) -> "DayState":
        return replace(self, skip_set=self.skip_set - {day})


@dataclass(frozen=True)
class DayOutcome:
    work_date: date
    label: str
    effect: DayEffect
    hours: Decimal = Decimal(0)


def worked_hours(day: AttendanceDay) -> Decimal:
    if not day.has_punches:
        return Decimal(0)
    return effective_hours(day.punch_in, day.punch_out, WageType.MONTHLY)


def _sunday(day: AttendanceDay, hours: Decimal, ctx: DayContext, state: DayState):
    saturday = day.work_date - timedelta(days=1)
    monday = day.work_date + timedelta(days=1)
    worked = day.is_present and day.has_punches and hours > 0

    if not day.is_present and (ctx.missed(saturday) or ctx.missed(monday)):
        return DayLabel.ABSENT_SANDWICH, DayEffect.ABSENT, state

    if not ctx.special_department and not day.is_present and state.mandatory_used < ctx.paid_sunday_allowance:
        return DayLabel.ABSENT_MANDATORY, DayEffect.NONE, state.consume_allowance()

    if not worked:
        effect = DayEffect.ABSENT if day.status.missed else DayEffect.NONE
        return day.status.label(), effect, state

    both_forgiven = saturday in state.skip_set and monday in state.skip_set
    neither_forgiven = saturday not in state.skip_set and monday not in state.skip_set

    if ctx.special_department:
        if both_forgiven:
            return DayLabel.WORKED_SUNDAY, DayEffect.NONE, state
        return DayLabel.LEAVE_CREDITED, DayEffect.CREDIT_LEAVE, state

    if state.mandatory_used < ctx.paid_sunday_allowance:
        return DayLabel.WORKED_SUNDAY, DayEffect.EXTRA_PAY, state.consume_allowance()

    if ctx.pay_sunday:
        # Paid in cash, so Monday no longer rides on this Sunday.
        return DayLabel.PAID_SUNDAY, DayEffect.EXTRA_PAY, state.forget(monday)

    if neither_forgiven:
        return DayLabel.LEAVE_CREDITED, DayEffect.CREDIT_LEAVE, state
    return DayLabel.WORKED_SUNDAY, DayEffect.NONE, state


def _special_supervisor_sunday(day: AttendanceDay, hours: Decimal, ctx: DayContext, state: DayState):
    saturday = day.work_date - timedelta(days=1)
    monday = day.work_date + timedelta(days=1)

    if not day.is_present and ctx.missed(saturday) and ctx.missed(monday):
        return DayLabel.ABSENT_SANDWICH, DayEffect.ABSENT, state
    if day.is_present and day.has_punches and hours > 0:
        return DayLabel.PAID_SUNDAY, DayEffect.EXTRA_PAY, state
    return day.status.label(), DayEffect.NONE, state


def _weekday(day: AttendanceDay, hours: Decimal, ctx: DayContext, state: DayState):
    holiday = not ctx.special_supervisor and day.work_date in ctx.sandwich_dates
    if holiday:
        before = day.work_date - timedelta(days=1)
        after = day.work_date + timedelta(days=1)
        if ctx.missed(before) or ctx.missed(after):
            return DayLabel.ABSENT_SANDWICH, DayEffect.ABSENT, state

    if day.is_present and day.has_punches and ctx.allotted_hours:
        if hours < ctx.allotted_hours * SHORT_HOURS_RATIO:
            label, effect = DayLabel.ABSENT_SHORT_HOURS, DayEffect.ABSENT
        elif hours < ctx.allotted_hours * HALF_DAY_RATIO:
            label, effect = DayLabel.HALF_DAY, DayEffect.HALF_DAY
        else:
            label, effect = DayLabel.PRESENT, DayEffect.NONE
    elif day.status == AttendanceStatus.ABSENT:
        label, effect = DayLabel.ABSENT, DayEffect.ABSENT
    elif day.status == AttendanceStatus.ONE_PUNCH:
        label, effect = DayLabel.MISSING_PUNCH, DayEffect.ABSENT
    else:
        label, effect = day.status.label(), DayEffect.NONE

    # A sandwich holiday with both neighbours attended is a paid day off.
    if holiday:
        effect = DayEffect.NONE
    return label, effect, state


def _text(label) -> str:
    return label.value if isinstance(label, DayLabel) else label


def evaluate_day(day: AttendanceDay, ctx: DayContext, state: DayState) -> tuple[DayOutcome, DayState]:
    hours = worked_hours(day)

    if day.work_date in state.skip_set:
        label, effect, next_state = DayLabel.PAID_DUE_TO_SUNDAY, DayEffect.FORGIVEN, state
    elif is_sunday(day.work_date) and not ctx.special_supervisor:
        label, effect, next_state = _sunday(day, hours, ctx, state)
    elif is_sunday(day.work_date):
        label, effect, next_state = _special_supervisor_sunday(day, hours, ctx, state)
    else:
        label, effect, next_state = _weekday(day, hours, ctx, state)

    return DayOutcome(work_date=day.work_date, label=_text(label), effect=effect, hours=hours), next_state


def fold_month(days: Iterable[AttendanceDay], ctx: DayContext, state: DayState) -> tuple[list[DayOutcome], DayState]:
    """Evaluate days in date order, threading the state through."""
    outcomes: list[DayOutcome] = []
    for day in sorted(days, key=lambda d: d.work_date):
        outcome, state = evaluate_day(day, ctx, state)
        outcomes.append(outcome)
    return outcomes, state

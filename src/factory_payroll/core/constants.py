"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time
from decimal import Decimal

SHIFT_START = time(9, 0)
SHIFT_END = time(21, 0)

# Punches inside these windows are snapped to the 09:00-21:00 shift.
SNAP_IN_LATEST = time(9, 10)
SNAP_OUT_LATEST = time(21, 10)

LATE_ARRIVAL_AFTER = time(9, 15)
LATE_ARRIVAL_PENALTY_MINUTES = 60

# Dihadi lunch tiers are decided by the punch-out clock time.
DIHADI_FIRST_LUNCH_CUT = time(13, 10)
DIHADI_SECOND_LUNCH_CUT = time(18, 10)

# Monthly lunch tiers are decided by the raw span in minutes.
MONTHLY_NO_LUNCH_SPAN = 4 * 60
MONTHLY_SHORT_LUNCH_SPAN = 8 * 60

SHORT_LUNCH_MINUTES = 30
FULL_LUNCH_MINUTES = 60

MAX_DAILY_MINUTES = 11 * 60

SHORT_HOURS_RATIO = Decimal("0.4")
HALF_DAY_RATIO = Decimal("0.85")
HALF_DAY_DEDUCTION = Decimal("0.5")

SUNDAY_CREDIT_REMARK = "Sunday Credit"

# Earned leave starts after the third month of service.
LEAVE_ACCRUAL_START_MONTHS = 3
LEAVE_ACCRUAL_GRACE_MONTHS = 2
LEAVE_ACCRUAL_PER_MONTH = Decimal("1.5")

DIHADI_FIRST_HALF_LAST_DAY = 15

MONEY_QUANTUM = Decimal("0.01")

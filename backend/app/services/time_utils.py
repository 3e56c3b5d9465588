"""
Time handling: 24-hour HH:MM parsing, minute arithmetic, weekday names.
"""
import math
import re
from datetime import date

from app.core.exceptions import ShiftInputError
from app.services.award_rules import ROUNDING_BLOCK_MINUTES

TIME_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def round_half_up(value: float, decimals: int = 2) -> float:
    """Round to decimals; 0.5 rounds up (so 49.785 -> 49.79)."""
    if decimals <= 0:
        return math.floor(value + 0.5)
    exp = 10 ** decimals
    return math.floor(value * exp + 0.5) / exp


def parse_time(hhmm: str) -> int:
    """Parse HH:MM or H:MM 24h to minutes since midnight."""
    if not isinstance(hhmm, str):
        raise ShiftInputError("malformed_time", f"Time must be a string, got {hhmm!r}")
    m = TIME_RE.match(hhmm.strip())
    if not m:
        raise ShiftInputError("malformed_time", f"Time {hhmm!r} is not in HH:MM format")
    h, mn = int(m.group(1)), int(m.group(2))
    if h > 23 or mn > 59:
        raise ShiftInputError("malformed_time", f"Time {hhmm!r} is out of range")
    return h * 60 + mn


def overlap_minutes(start1: float, end1: float, start2: float, end2: float) -> float:
    return max(0, min(end1, end2) - max(start1, start2))


def to_hours(minutes: float) -> float:
    return round_half_up(minutes / 60, 2)


def day_of_week(d: date) -> str:
    return WEEKDAY_NAMES[d.weekday()]


def round_up_to_quarter(minutes: float) -> int:
    """Round any positive minutes up to the next 15-minute block."""
    if minutes <= 0:
        return 0
    return math.ceil(minutes / ROUNDING_BLOCK_MINUTES) * ROUNDING_BLOCK_MINUTES


def parse_break_minutes(value) -> float:
    """
    Coerce a break entry to non-negative minutes.
    Blank, non-numeric or NaN entries count as no break; an infinite
    break is kept and absorbs the whole shift.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
    try:
        minutes = float(value)
    except (TypeError, ValueError):
        return 0
    except OverflowError:
        # Integers too large for a float
        return math.inf if value > 0 else 0
    if math.isnan(minutes) or minutes <= 0:
        return 0
    return int(minutes) if minutes.is_integer() else minutes

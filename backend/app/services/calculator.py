"""
Shift interpretation engine.
Splits a shift around the 08:00-20:00 span, deducts the unpaid break,
classifies minutes by day type, rounds overtime and public-holiday segments
up to 15-minute blocks, applies the Sunday / public holiday 4-hour minimum
and works out meal allowances.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import NamedTuple, Optional, Union

from app.core.enums import DayClassification
from app.core.exceptions import ShiftInputError
from app.models.schemas import CalculationResult, ShiftInput
from app.services.award_rules import (
    DAY_END,
    MEAL_EARLY_START,
    MEAL_LATE_FINISH,
    MEAL_OVERTIME_MINUTES,
    MEAL_WEEKDAY_CAP,
    MEAL_WEEKEND_HOURS,
    MINIMUM_PAID_MINUTES,
    ORDINARY_MINUTES_LIMIT,
    OVERTIME_FIRST_TIER_MINUTES,
    SPAN_END,
    SPAN_START,
)
from app.services.explanation import build_explanation
from app.services.holidays import HolidayCalendar, default_calendar
from app.services.time_utils import (
    day_of_week,
    overlap_minutes,
    parse_break_minutes,
    parse_time,
    round_up_to_quarter,
    to_hours,
)

logger = logging.getLogger(__name__)


class TimeSegments(NamedTuple):
    pre: float
    mid: float
    post: float

    @property
    def total(self) -> float:
        return self.pre + self.mid + self.post


@dataclass
class PayBuckets:
    """Rounded minutes per pay rate."""
    ordinary: float = 0
    overtime_15: float = 0
    overtime_20: float = 0
    public_holiday_15: float = 0
    public_holiday_25: float = 0


@dataclass
class _Classified:
    buckets: PayBuckets
    paid_minutes: float
    # Weekday overtime before rounding; drives the overtime meal allowance
    overtime_raw: float = 0


def parse_shift_input(
    shift_date: Union[date, str, None],
    start_time: Optional[str],
    end_time: Optional[str],
    break_minutes_input=0,
) -> ShiftInput:
    """Validate raw shift fields. Raises ShiftInputError when no result can be produced."""
    if not shift_date or not start_time or not end_time:
        raise ShiftInputError("missing_input", "Date, start time and end time are all required.")

    if isinstance(shift_date, date):
        d = shift_date
    else:
        try:
            d = datetime.strptime(shift_date.strip(), "%Y-%m-%d").date()
        except ValueError:
            raise ShiftInputError(
                "malformed_date", f"Date {shift_date!r} is not in YYYY-MM-DD format"
            ) from None

    start = parse_time(start_time)
    end = parse_time(end_time)
    if end <= start:
        raise ShiftInputError(
            "invalid_shift_window",
            f"End time {end_time} must be after start time {start_time}.",
        )

    return ShiftInput(
        shift_date=d,
        start_time=start_time.strip(),
        end_time=end_time.strip(),
        start_minutes=start,
        end_minutes=end,
        break_minutes=parse_break_minutes(break_minutes_input),
    )


def classify_day(d: date, calendar: HolidayCalendar) -> DayClassification:
    if calendar.is_public_holiday(d):
        return DayClassification.PUBLIC_HOLIDAY
    w = d.weekday()  # 0=Mon .. 6=Sun
    if w == 6:
        return DayClassification.SUNDAY
    if w == 5:
        return DayClassification.SATURDAY
    return DayClassification.WEEKDAY


def split_span(start: int, end: int) -> TimeSegments:
    """Raw minutes before, inside and after the ordinary-hours span."""
    return TimeSegments(
        pre=overlap_minutes(start, end, 0, SPAN_START),
        mid=overlap_minutes(start, end, SPAN_START, SPAN_END),
        post=overlap_minutes(start, end, SPAN_END, DAY_END),
    )


def allocate_break(segments: TimeSegments, break_minutes: float) -> TimeSegments:
    """Take the unpaid break from in-span time first, then pre-span, then post-span."""
    remaining = break_minutes
    worked = {}
    for key in ("mid", "pre", "post"):
        available = getattr(segments, key)
        cut = min(available, remaining)
        worked[key] = available - cut
        remaining -= cut
    return TimeSegments(**worked)


def _split_overtime_tiers(buckets: PayBuckets, raw_segments: list) -> None:
    # Each segment rounds on its own before the tiers are cut
    total = sum(round_up_to_quarter(m) for m in raw_segments)
    buckets.overtime_15 = min(OVERTIME_FIRST_TIER_MINUTES, total)
    buckets.overtime_20 = max(0, total - OVERTIME_FIRST_TIER_MINUTES)


def _classify_weekday(worked: TimeSegments) -> _Classified:
    buckets = PayBuckets(ordinary=min(worked.mid, ORDINARY_MINUTES_LIMIT))
    extra_in_span = max(0, worked.mid - buckets.ordinary)
    raw = [worked.pre, extra_in_span, worked.post]
    _split_overtime_tiers(buckets, raw)
    return _Classified(
        buckets=buckets,
        paid_minutes=buckets.ordinary + buckets.overtime_15 + buckets.overtime_20,
        overtime_raw=sum(raw),
    )


def _classify_saturday(worked: TimeSegments) -> _Classified:
    buckets = PayBuckets()
    raw = [worked.pre, worked.mid, worked.post]
    _split_overtime_tiers(buckets, raw)
    return _Classified(
        buckets=buckets,
        paid_minutes=buckets.overtime_15 + buckets.overtime_20,
    )


def _classify_sunday(worked: TimeSegments) -> _Classified:
    buckets = PayBuckets(overtime_20=round_up_to_quarter(worked.total))
    return _Classified(
        buckets=buckets,
        paid_minutes=buckets.overtime_20,
    )


def _classify_public_holiday(worked: TimeSegments) -> _Classified:
    ph15_raw = worked.mid
    ph25_raw = worked.pre + worked.post
    buckets = PayBuckets(
        public_holiday_15=round_up_to_quarter(ph15_raw),
        public_holiday_25=round_up_to_quarter(ph25_raw),
    )
    return _Classified(
        buckets=buckets,
        paid_minutes=buckets.public_holiday_15 + buckets.public_holiday_25,
    )


CLASSIFIERS = {
    DayClassification.WEEKDAY: _classify_weekday,
    DayClassification.SATURDAY: _classify_saturday,
    DayClassification.SUNDAY: _classify_sunday,
    DayClassification.PUBLIC_HOLIDAY: _classify_public_holiday,
}


def apply_minimum_payment(day_type: DayClassification, classified: _Classified) -> bool:
    """Top Sunday / public holiday pay up to 4 hours. Returns True when the rule fired."""
    if day_type not in (DayClassification.SUNDAY, DayClassification.PUBLIC_HOLIDAY):
        return False
    shortfall = MINIMUM_PAID_MINUTES - classified.paid_minutes
    if shortfall <= 0:
        return False
    if day_type is DayClassification.PUBLIC_HOLIDAY:
        classified.buckets.public_holiday_25 += shortfall
    else:
        classified.buckets.overtime_20 += shortfall
    classified.paid_minutes = MINIMUM_PAID_MINUTES
    return True


def meal_allowances(
    day_type: DayClassification,
    is_weekend: bool,
    shift: ShiftInput,
    worked_minutes: float,
    overtime_raw: float,
) -> tuple[int, list[str]]:
    """Meal allowance count and the reasons, in the order they triggered."""
    worked_hours = to_hours(worked_minutes)
    is_ph = day_type is DayClassification.PUBLIC_HOLIDAY
    weekday = day_type is DayClassification.WEEKDAY
    meals = 0
    rules: list[str] = []

    if weekday and shift.start_minutes < MEAL_EARLY_START:
        meals += 1
        rules.append("Work commenced before 06:00 on a weekday.")

    if weekday and overtime_raw > MEAL_OVERTIME_MINUTES and shift.end_minutes > MEAL_LATE_FINISH:
        meals += 1
        rules.append("More than 2 hours overtime extending beyond 18:00 on a weekday.")

    # A holiday on a Saturday or Sunday satisfies both rules but is still one meal
    if is_weekend and worked_hours > MEAL_WEEKEND_HOURS:
        meals = 1
        rules.append("More than 5 hours worked on a weekend day.")

    if is_ph and worked_hours > MEAL_WEEKEND_HOURS:
        meals = 1
        rules.append("More than 5 hours worked on a public holiday.")

    if weekday:
        meals = min(meals, MEAL_WEEKDAY_CAP)
    return meals, rules


def calculate_shift(shift: ShiftInput, calendar: Optional[HolidayCalendar] = None) -> CalculationResult:
    """Interpret one validated shift against the award."""
    if calendar is None:
        calendar = default_calendar()
    day_type = classify_day(shift.shift_date, calendar)
    dow = day_of_week(shift.shift_date)
    is_weekend = shift.shift_date.weekday() >= 5

    raw = split_span(shift.start_minutes, shift.end_minutes)
    worked = allocate_break(raw, shift.break_minutes)

    classified = CLASSIFIERS[day_type](worked)
    minimum_applied = apply_minimum_payment(day_type, classified)
    if minimum_applied:
        logger.debug("Minimum payment applied for %s shift on %s", day_type.value, shift.shift_date)

    meals, meal_rules = meal_allowances(
        day_type, is_weekend, shift, worked.total, classified.overtime_raw
    )

    buckets = classified.buckets
    paid_hours = to_hours(classified.paid_minutes)
    explanation = build_explanation(
        day_of_week=dow,
        day_type=day_type,
        start_time=shift.start_time,
        end_time=shift.end_time,
        break_minutes=shift.break_minutes,
        minimum_rule_applied=minimum_applied,
        paid_hours=paid_hours,
        ordinary_hours=to_hours(buckets.ordinary),
        overtime_15=to_hours(buckets.overtime_15),
        overtime_20=to_hours(buckets.overtime_20),
        public_holiday_15=to_hours(buckets.public_holiday_15),
        public_holiday_25=to_hours(buckets.public_holiday_25),
        meal_allowances=meals,
        meal_rules=meal_rules,
    )

    return CalculationResult(
        day_of_week=dow,
        day_type=day_type,
        is_weekend=is_weekend,
        is_public_holiday=day_type is DayClassification.PUBLIC_HOLIDAY,
        paid_hours=paid_hours,
        ordinary_hours=to_hours(buckets.ordinary),
        overtime_15=to_hours(buckets.overtime_15),
        overtime_20=to_hours(buckets.overtime_20),
        public_holiday_15=to_hours(buckets.public_holiday_15),
        public_holiday_25=to_hours(buckets.public_holiday_25),
        minimum_rule_applied=minimum_applied,
        meal_allowances=meals,
        meal_rules=tuple(meal_rules),
        explanation=explanation,
    )


def apply_rules(
    shift_date: Union[date, str, None],
    start_time: Optional[str],
    end_time: Optional[str],
    break_minutes_input=0,
    calendar: Optional[HolidayCalendar] = None,
) -> Optional[CalculationResult]:
    """
    Calculate a shift from raw fields.
    Returns None when the shift cannot be calculated (missing fields,
    malformed times, or an end time not after the start time).
    """
    try:
        shift = parse_shift_input(shift_date, start_time, end_time, break_minutes_input)
    except ShiftInputError as exc:
        logger.info("Cannot calculate shift (%s): %s", exc.reason, exc.message)
        return None
    return calculate_shift(shift, calendar)

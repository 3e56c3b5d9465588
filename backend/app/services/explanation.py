"""
Clause-citing narrative for a calculated shift.
The line order and wording are shown verbatim to employees and reviewers.
"""
import math

from app.core.enums import DayClassification
from app.services.award_rules import APPLIED_CLAUSES


def format_hours(hours: float) -> str:
    """8.5 -> '8.5 h', 4.0 -> '4 h'."""
    return f"{hours:g} h"


def format_minutes(minutes: float) -> str:
    """Full value as entered: 30.0 -> '30', 12.3456789 -> '12.3456789'."""
    if math.isfinite(minutes) and float(minutes).is_integer():
        return str(int(minutes))
    return repr(float(minutes))


def _bucket_lines(
    day_type: DayClassification,
    ordinary_hours: float,
    overtime_15: float,
    overtime_20: float,
    public_holiday_15: float,
    public_holiday_25: float,
) -> list[str]:
    if day_type is DayClassification.WEEKDAY:
        return [
            f"Ordinary Hours (Clauses 26.1–26.2): {format_hours(ordinary_hours)}.",
            f"Overtime 1.5× (Clause 27.2 first 2 hours): {format_hours(overtime_15)}.",
            f"Overtime 2.0× (Clause 27.2 thereafter): {format_hours(overtime_20)}.",
        ]
    if day_type is DayClassification.SUNDAY:
        return [
            f"Sunday overtime (Clause 27.3): {format_hours(overtime_20)} at 2.0×, "
            "rounded up to 15-minute blocks.",
        ]
    if day_type is DayClassification.SATURDAY:
        return [
            "Saturday overtime (Clause 27.2):",
            f"• 1.5× (first 2 hours) after rounding: {format_hours(overtime_15)}.",
            f"• 2.0× (thereafter) after rounding: {format_hours(overtime_20)}.",
        ]
    if day_type is DayClassification.PUBLIC_HOLIDAY:
        return [
            "Public Holiday penalties (Clause 27.4) after rounding:",
            f"• {format_hours(public_holiday_15)} at 1.5× for hours within the 08:00–20:00 span.",
            f"• {format_hours(public_holiday_25)} at 2.5× for all other public holiday hours.",
        ]
    raise ValueError(f"Unhandled day classification: {day_type!r}")


def build_explanation(
    *,
    day_of_week: str,
    day_type: DayClassification,
    start_time: str,
    end_time: str,
    break_minutes: float,
    minimum_rule_applied: bool,
    paid_hours: float,
    ordinary_hours: float,
    overtime_15: float,
    overtime_20: float,
    public_holiday_15: float,
    public_holiday_25: float,
    meal_allowances: int,
    meal_rules: list[str],
) -> str:
    lines = [
        f"Day classification: {day_of_week} ({day_type.label}).",
        f"Shift worked from {start_time} to {end_time}, "
        f"with {format_minutes(break_minutes)} minutes of unpaid break.",
    ]

    if minimum_rule_applied:
        lines.append("\nMinimum 4-hour payment rule applied for Sunday / Public Holiday.")

    lines.append(
        f"\nTotal payable hours after overtime rounding and minimum rules: {format_hours(paid_hours)}."
    )
    lines.extend(_bucket_lines(
        day_type, ordinary_hours, overtime_15, overtime_20, public_holiday_15, public_holiday_25,
    ))

    lines.append(f"Meal allowances (Clause 27.12): {meal_allowances}.")
    lines.extend(f"• {rule}" for rule in meal_rules)

    lines.append(f"\nRelevant clauses applied: {', '.join(APPLIED_CLAUSES)}.")
    return "\n".join(lines)

"""
Fixed award parameters for the shift interpreter.
Times are minutes since midnight; durations are minutes.
"""

RULES_VERSION = "2024-01-01"

# Ordinary-hours span
SPAN_START = 8 * 60
SPAN_END = 20 * 60
DAY_END = 24 * 60

# Weekday ordinary hours inside the span before overtime kicks in
ORDINARY_MINUTES_LIMIT = 7 * 60

# Overtime tiers: first 2 hours at 1.5x, thereafter 2.0x
OVERTIME_FIRST_TIER_MINUTES = 120

# Sunday / public holiday minimum payment
MINIMUM_PAID_MINUTES = 4 * 60

# Overtime and public-holiday segments round up to this block
ROUNDING_BLOCK_MINUTES = 15

# Meal allowance triggers
MEAL_EARLY_START = 6 * 60
MEAL_LATE_FINISH = 18 * 60
MEAL_OVERTIME_MINUTES = 120
MEAL_WEEKEND_HOURS = 5
MEAL_WEEKDAY_CAP = 2

APPLIED_CLAUSES = ("26.1", "26.2", "27.1", "27.2", "27.3", "27.4", "27.12")

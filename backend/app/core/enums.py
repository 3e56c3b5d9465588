from enum import Enum


class DayClassification(str, Enum):
    """How a shift's date is treated. A public holiday overrides the weekday."""

    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    PUBLIC_HOLIDAY = "public_holiday"

    @property
    def label(self) -> str:
        if self is DayClassification.PUBLIC_HOLIDAY:
            return "Public Holiday"
        if self is DayClassification.WEEKDAY:
            return "Weekday"
        return "Weekend"

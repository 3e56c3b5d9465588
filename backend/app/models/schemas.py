import math

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from typing import Optional, Union
from datetime import date

from app.core.enums import DayClassification


class ShiftInput(BaseModel):
    """A validated shift; build with calculator.parse_shift_input."""
    model_config = ConfigDict(frozen=True)

    shift_date: date
    start_time: str                          # HH:MM 24h
    end_time: str                            # HH:MM 24h
    start_minutes: int = Field(ge=0, lt=24 * 60)
    end_minutes: int = Field(gt=0, lt=24 * 60)
    break_minutes: float = Field(default=0, ge=0)


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    day_of_week: str
    day_type: DayClassification
    is_weekend: bool
    is_public_holiday: bool
    paid_hours: float
    ordinary_hours: float
    overtime_15: float
    overtime_20: float
    public_holiday_15: float
    public_holiday_25: float
    minimum_rule_applied: bool
    meal_allowances: int
    meal_rules: tuple[str, ...]
    explanation: str


class ShiftRequest(BaseModel):
    shift_date: Optional[str] = None         # YYYY-MM-DD
    start_time: Optional[str] = None         # HH:MM 24h
    end_time: Optional[str] = None           # HH:MM 24h
    break_minutes: Union[float, str, None] = 0


class ShiftResponse(CalculationResult):
    shift_date: date
    start_time: str
    end_time: str
    break_minutes: float
    holiday_jurisdiction: str
    holiday_calendar_version: str

    @field_serializer("break_minutes", when_used="json")
    def _break_minutes_json(self, value: float) -> Optional[float]:
        # JSON has no infinity; a break that absorbed the whole shift echoes as null
        return value if math.isfinite(value) else None


class InvalidShiftDetail(BaseModel):
    reason: str
    message: str


class HolidayListResponse(BaseModel):
    jurisdiction: str
    version: str
    year: Optional[int] = None
    dates: list[str]


class HolidayCheckResponse(BaseModel):
    holiday_date: date
    is_public_holiday: bool
    jurisdiction: str
    version: str


class HealthResponse(BaseModel):
    status: str
    environment: str
    rules_version: str
    holiday_jurisdiction: str
    holiday_calendar_version: str

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_holiday_calendar
from app.models.schemas import HolidayCheckResponse, HolidayListResponse
from app.services.holidays import HolidayCalendar

router = APIRouter(prefix="/api/v1/holidays", tags=["holidays"])


@router.get("", response_model=HolidayListResponse)
async def list_holidays(
    year: Optional[int] = Query(default=None, ge=1900, le=2999),
    calendar: HolidayCalendar = Depends(get_holiday_calendar),
):
    dates = calendar.all_dates() if year is None else calendar.dates_for_year(year)
    return HolidayListResponse(
        jurisdiction=calendar.jurisdiction,
        version=calendar.version,
        year=year,
        dates=dates,
    )


@router.get("/{holiday_date}", response_model=HolidayCheckResponse)
async def check_holiday(
    holiday_date: date,
    calendar: HolidayCalendar = Depends(get_holiday_calendar),
):
    return HolidayCheckResponse(
        holiday_date=holiday_date,
        is_public_holiday=calendar.is_public_holiday(holiday_date),
        jurisdiction=calendar.jurisdiction,
        version=calendar.version,
    )

from fastapi import APIRouter, Depends

from app.config import settings
from app.dependencies import get_holiday_calendar
from app.models.schemas import HealthResponse
from app.services.award_rules import RULES_VERSION
from app.services.holidays import HolidayCalendar

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(calendar: HolidayCalendar = Depends(get_holiday_calendar)):
    return {
        "status": "healthy",
        "environment": settings.environment,
        "rules_version": RULES_VERSION,
        "holiday_jurisdiction": calendar.jurisdiction,
        "holiday_calendar_version": calendar.version,
    }

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.core.exceptions import ShiftInputError
from app.dependencies import get_holiday_calendar
from app.models.schemas import InvalidShiftDetail, ShiftRequest, ShiftResponse
from app.services.calculator import calculate_shift, parse_shift_input
from app.services.holidays import HolidayCalendar

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/api/v1/calculate/shift",
    response_model=ShiftResponse,
    responses={422: {"model": InvalidShiftDetail}},
)
async def calculate_single_shift(
    request: ShiftRequest,
    calendar: HolidayCalendar = Depends(get_holiday_calendar),
):
    try:
        shift = parse_shift_input(
            request.shift_date, request.start_time, request.end_time, request.break_minutes
        )
    except ShiftInputError as exc:
        logger.info("Rejected shift (%s): %s", exc.reason, exc.message)
        raise HTTPException(
            status_code=422,
            detail={"reason": exc.reason, "message": exc.message},
        )

    result = calculate_shift(shift, calendar)
    return ShiftResponse(
        **result.model_dump(),
        shift_date=shift.shift_date,
        start_time=shift.start_time,
        end_time=shift.end_time,
        break_minutes=shift.break_minutes,
        holiday_jurisdiction=calendar.jurisdiction,
        holiday_calendar_version=calendar.version,
    )

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db_optional
from app.services.holidays import HolidayCalendar, default_calendar, load_calendar_from_db

logger = logging.getLogger(__name__)


def get_holiday_calendar(db: Optional[Session] = Depends(get_db_optional)) -> HolidayCalendar:
    """Database calendar for the configured jurisdiction, else the bundled table."""
    if not db:
        return default_calendar()
    try:
        calendar = load_calendar_from_db(db, settings.holiday_jurisdiction)
    except SQLAlchemyError:
        logger.warning(
            "Could not load %s holidays from the database; using bundled calendar",
            settings.holiday_jurisdiction,
            exc_info=True,
        )
        return default_calendar()
    if calendar is None:
        logger.info(
            "No %s holidays in the database; using bundled calendar",
            settings.holiday_jurisdiction,
        )
        return default_calendar()
    return calendar

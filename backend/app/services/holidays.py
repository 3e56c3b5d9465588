"""
Public holiday calendars.
The rules engine takes a calendar as an argument; the bundled NSW table is
the fallback when no database calendar is configured.
"""
from datetime import date
from typing import Iterable, Optional, Union

from sqlalchemy.orm import Session

from app.models.db_models import PublicHoliday

DEFAULT_JURISDICTION = "NSW"
BUNDLED_VERSION = "nsw-2016-2026"

NSW_PUBLIC_HOLIDAYS = frozenset({
    # 2016
    "2016-01-01", "2016-01-26", "2016-03-25", "2016-03-26", "2016-03-27", "2016-03-28",
    "2016-04-25", "2016-06-13", "2016-10-03", "2016-12-25", "2016-12-26", "2016-12-27",
    # 2017
    "2017-01-01", "2017-01-02", "2017-01-26", "2017-04-14", "2017-04-15", "2017-04-16",
    "2017-04-17", "2017-04-25", "2017-06-12", "2017-10-02", "2017-12-25", "2017-12-26",
    # 2018
    "2018-01-01", "2018-01-26", "2018-03-30", "2018-03-31", "2018-04-01", "2018-04-02",
    "2018-04-25", "2018-06-11", "2018-10-01", "2018-12-25", "2018-12-26",
    # 2019
    "2019-01-01", "2019-01-26", "2019-01-28", "2019-04-19", "2019-04-20", "2019-04-21",
    "2019-04-22", "2019-04-25", "2019-06-10", "2019-10-07", "2019-12-25", "2019-12-26",
    # 2020
    "2020-01-01", "2020-01-26", "2020-01-27", "2020-04-10", "2020-04-11", "2020-04-12",
    "2020-04-13", "2020-04-25", "2020-06-08", "2020-10-05", "2020-12-25", "2020-12-26",
    "2020-12-28",
    # 2021
    "2021-01-01", "2021-01-26", "2021-04-02", "2021-04-03", "2021-04-04", "2021-04-05",
    "2021-04-25", "2021-06-14", "2021-10-04", "2021-12-25", "2021-12-26", "2021-12-27",
    "2021-12-28",
    # 2022
    "2022-01-01", "2022-01-03", "2022-01-26", "2022-04-15", "2022-04-16", "2022-04-17",
    "2022-04-18", "2022-04-25", "2022-06-13", "2022-09-22", "2022-10-03", "2022-12-25",
    "2022-12-26", "2022-12-27",
    # 2023
    "2023-01-01", "2023-01-02", "2023-01-26", "2023-04-07", "2023-04-08", "2023-04-09",
    "2023-04-10", "2023-04-25", "2023-06-12", "2023-10-02", "2023-12-25", "2023-12-26",
    # 2024
    "2024-01-01", "2024-01-26", "2024-03-29", "2024-03-30", "2024-03-31", "2024-04-01",
    "2024-04-25", "2024-06-10", "2024-10-07", "2024-12-25", "2024-12-26",
    # 2025
    "2025-01-01", "2025-01-27", "2025-04-18", "2025-04-19", "2025-04-20", "2025-04-21",
    "2025-04-25", "2025-06-09", "2025-10-06", "2025-12-25", "2025-12-26",
    # 2026
    "2026-01-01", "2026-01-26", "2026-04-03", "2026-04-04", "2026-04-05", "2026-04-06",
    "2026-04-25", "2026-06-08", "2026-10-05", "2026-12-25", "2026-12-26", "2026-12-28",
})


def _iso(value: Union[date, str]) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return value.strip()


class HolidayCalendar:
    """Read-only set of public holiday dates for one jurisdiction."""

    def __init__(self, jurisdiction: str, version: str, dates: Iterable[Union[date, str]]):
        self._jurisdiction = jurisdiction
        self._version = version
        self._dates = frozenset(_iso(d) for d in dates)

    @property
    def jurisdiction(self) -> str:
        return self._jurisdiction

    @property
    def version(self) -> str:
        return self._version

    def is_public_holiday(self, value: Union[date, str]) -> bool:
        return _iso(value) in self._dates

    def all_dates(self) -> list[str]:
        return sorted(self._dates)

    def dates_for_year(self, year: int) -> list[str]:
        prefix = f"{year:04d}-"
        return sorted(d for d in self._dates if d.startswith(prefix))

    def __contains__(self, value) -> bool:
        return self.is_public_holiday(value)

    def __len__(self) -> int:
        return len(self._dates)

    def __repr__(self) -> str:
        return f"HolidayCalendar({self._jurisdiction!r}, {self._version!r}, {len(self)} dates)"


_DEFAULT_CALENDAR = HolidayCalendar(DEFAULT_JURISDICTION, BUNDLED_VERSION, NSW_PUBLIC_HOLIDAYS)


def default_calendar() -> HolidayCalendar:
    return _DEFAULT_CALENDAR


def load_calendar_from_db(db: Session, jurisdiction: str) -> Optional[HolidayCalendar]:
    """Build a calendar from the public_holidays table. None when the table has no rows."""
    rows = (
        db.query(PublicHoliday.holiday_date)
        .filter(PublicHoliday.jurisdiction == jurisdiction)
        .order_by(PublicHoliday.holiday_date)
        .all()
    )
    if not rows:
        return None
    dates = [r.holiday_date for r in rows]
    version = f"{jurisdiction.lower()}-{dates[0].year}-{dates[-1].year}"
    return HolidayCalendar(jurisdiction, version, dates)

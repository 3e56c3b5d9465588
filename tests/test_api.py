"""
HTTP surface tests. Without DATABASE_URL the bundled NSW calendar is used.
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.database import get_db_optional
from app.dependencies import get_holiday_calendar
from app.main import app
from app.models.db_models import PublicHoliday
from app.services.holidays import BUNDLED_VERSION, HolidayCalendar


@pytest.fixture
def client():
    app.dependency_overrides[get_db_optional] = lambda: None
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["holiday_jurisdiction"] == "NSW"
    assert body["holiday_calendar_version"] == BUNDLED_VERSION


def test_calculate_shift(client):
    response = client.post("/api/v1/calculate/shift", json={
        "shift_date": "2025-01-08",
        "start_time": "08:00",
        "end_time": "17:00",
        "break_minutes": "30",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["day_type"] == "weekday"
    assert body["day_of_week"] == "Wednesday"
    assert body["ordinary_hours"] == 7.0
    assert body["overtime_15"] == 1.5
    assert body["paid_hours"] == 8.5
    assert body["break_minutes"] == 30
    assert body["meal_rules"] == []
    assert body["holiday_jurisdiction"] == "NSW"
    assert body["explanation"].startswith("Day classification: Wednesday (Weekday).")


def test_calculate_public_holiday_shift(client):
    response = client.post("/api/v1/calculate/shift", json={
        "shift_date": "2024-01-01",
        "start_time": "06:00",
        "end_time": "22:00",
        "break_minutes": 60,
    })
    body = response.json()
    assert body["is_public_holiday"] is True
    assert body["public_holiday_15"] == 11.0
    assert body["public_holiday_25"] == 4.0
    assert body["paid_hours"] == 15.0
    assert body["meal_allowances"] == 1


def test_non_numeric_break_defaults_to_zero(client):
    response = client.post("/api/v1/calculate/shift", json={
        "shift_date": "2025-01-09",
        "start_time": "09:00",
        "end_time": "15:00",
        "break_minutes": "lunch",
    })
    assert response.status_code == 200
    assert response.json()["break_minutes"] == 0
    assert response.json()["paid_hours"] == 6.0


def test_overflowing_break_absorbs_shift(client):
    response = client.post("/api/v1/calculate/shift", json={
        "shift_date": "2025-01-08",
        "start_time": "09:00",
        "end_time": "17:00",
        "break_minutes": "1e400",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["paid_hours"] == 0
    assert body["break_minutes"] is None


@pytest.mark.parametrize("payload,reason", [
    ({"start_time": "09:00", "end_time": "17:00"}, "missing_input"),
    ({"shift_date": "2025-01-08", "start_time": "17:00", "end_time": "09:00"}, "invalid_shift_window"),
    ({"shift_date": "2025-01-08", "start_time": "nine", "end_time": "17:00"}, "malformed_time"),
    ({"shift_date": "2025-13-01", "start_time": "09:00", "end_time": "17:00"}, "malformed_date"),
])
def test_invalid_shift_is_rejected(client, payload, reason):
    response = client.post("/api/v1/calculate/shift", json=payload)
    assert response.status_code == 422
    assert response.json()["detail"]["reason"] == reason


def test_injected_calendar_is_used(client):
    app.dependency_overrides[get_holiday_calendar] = lambda: HolidayCalendar(
        "TEST", "test-1", ["2025-01-08"]
    )
    response = client.post("/api/v1/calculate/shift", json={
        "shift_date": "2025-01-08",
        "start_time": "09:00",
        "end_time": "11:00",
    })
    body = response.json()
    assert body["day_type"] == "public_holiday"
    assert body["minimum_rule_applied"] is True
    assert body["paid_hours"] == 4.0
    assert body["holiday_calendar_version"] == "test-1"


def test_list_holidays_for_year(client):
    response = client.get("/api/v1/holidays", params={"year": 2024})
    assert response.status_code == 200
    body = response.json()
    assert body["year"] == 2024
    assert len(body["dates"]) == 11
    assert body["dates"][0] == "2024-01-01"


def test_list_all_holidays(client):
    body = client.get("/api/v1/holidays").json()
    assert body["year"] is None
    assert body["dates"] == sorted(body["dates"])
    assert "2016-01-01" in body["dates"]


def test_check_holiday(client):
    assert client.get("/api/v1/holidays/2024-01-01").json()["is_public_holiday"] is True
    assert client.get("/api/v1/holidays/2024-01-02").json()["is_public_holiday"] is False


def test_database_calendar_is_preferred(sqlite_session):
    sqlite_session.add(PublicHoliday(jurisdiction="NSW", holiday_date=date(2030, 1, 1)))
    sqlite_session.commit()
    app.dependency_overrides[get_db_optional] = lambda: sqlite_session
    try:
        with TestClient(app) as c:
            body = c.get("/api/v1/holidays").json()
    finally:
        app.dependency_overrides.clear()
    assert body["dates"] == ["2030-01-01"]
    assert body["version"] == "nsw-2030-2030"


def test_database_error_falls_back_to_bundled_calendar():
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker

    # No tables created, so the holiday query fails
    engine = create_engine("sqlite://")
    session = sessionmaker(bind=engine)()
    try:
        calendar = get_holiday_calendar(db=session)
    finally:
        session.close()
        engine.dispose()
    assert calendar.version == BUNDLED_VERSION

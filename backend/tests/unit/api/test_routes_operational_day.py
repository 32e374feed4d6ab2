"""Unit tests for operational-day API routes.

Tests for:
- GET /api/operational-day/date - Operational date of an instant
- GET /api/operational-day/boundaries - Start and end of a day
- GET /api/operational-day/window - Yesterday/today/tomorrow
- GET /api/operational-day/nights - Night count of a stay
- GET /api/operational-day/contains - Containment check
"""

import datetime as dt

import pytest
from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK, HTTP_400_BAD_REQUEST

from opday_api.main import app

NEW_YORK = "America/New_York"


@pytest.fixture
def client() -> TestClient:
    """Create test client for API."""
    return TestClient(app)


def parse(value: str) -> dt.datetime:
    return dt.datetime.fromisoformat(value)


class TestGetOperationalDate:
    """Tests for GET /api/operational-day/date."""

    def test_before_cutoff(self, client: TestClient) -> None:
        """05:00 EST belongs to the previous operational date."""
        response = client.get(
            "/api/operational-day/date",
            params={"at": "2025-01-15T10:00:00Z", "timezone": NEW_YORK},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["operational_date"] == "2025-01-14"
        assert data["timezone"] == NEW_YORK
        assert parse(data["at"]) == dt.datetime(2025, 1, 15, 10, tzinfo=dt.UTC)

    def test_at_cutoff(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/date",
            params={"at": "2025-01-15T11:00:00Z", "timezone": NEW_YORK},
        )
        assert response.json()["operational_date"] == "2025-01-15"

    def test_offset_in_input(self, client: TestClient) -> None:
        """Instants with an offset are converted to UTC."""
        response = client.get(
            "/api/operational-day/date",
            params={"at": "2025-01-15T06:00:00-05:00", "timezone": NEW_YORK},
        )
        data = response.json()

        assert data["operational_date"] == "2025-01-15"
        assert parse(data["at"]) == dt.datetime(2025, 1, 15, 11, tzinfo=dt.UTC)

    def test_timezone_from_header(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/date",
            params={"at": "2025-01-15T10:00:00Z"},
            headers={"X-Property-Timezone": NEW_YORK},
        )

        assert response.json()["timezone"] == NEW_YORK
        assert response.json()["operational_date"] == "2025-01-14"

    def test_default_timezone_is_utc(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/date", params={"at": "2025-01-15T10:00:00Z"}
        )

        assert response.json()["timezone"] == "UTC"
        assert response.json()["operational_date"] == "2025-01-15"

    def test_default_timezone_from_environment(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DEFAULT_PROPERTY_TIMEZONE", "Asia/Kolkata")

        response = client.get(
            "/api/operational-day/date", params={"at": "2025-01-15T00:00:00Z"}
        )

        assert response.json()["timezone"] == "Asia/Kolkata"
        assert response.json()["operational_date"] == "2025-01-14"

    def test_invalid_timezone(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/date",
            params={"at": "2025-01-15T10:00:00Z", "timezone": "Not/AZone"},
        )
        assert response.status_code == HTTP_400_BAD_REQUEST

        data = response.json()
        assert data["success"] is False
        assert data["error_code"] == "ERR_TZ_001"
        assert data["details"] == {"timezone": "Not/AZone"}

    def test_missing_instant(self, client: TestClient) -> None:
        response = client.get("/api/operational-day/date", params={"timezone": NEW_YORK})
        assert response.status_code == 422


class TestGetBoundaries:
    """Tests for GET /api/operational-day/boundaries."""

    def test_by_date(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/boundaries",
            params={"date": "2025-01-15", "timezone": NEW_YORK},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["operational_date"] == "2025-01-15"
        assert parse(data["start"]) == dt.datetime(2025, 1, 15, 11, tzinfo=dt.UTC)
        assert parse(data["end"]) == dt.datetime(2025, 1, 16, 10, 59, 59, 999000, tzinfo=dt.UTC)
        assert data["duration_seconds"] == pytest.approx(86399.999)

    def test_by_instant(self, client: TestClient) -> None:
        """An instant returns the operational day containing it."""
        response = client.get(
            "/api/operational-day/boundaries",
            params={"at": "2025-01-16T10:00:00Z", "timezone": NEW_YORK},
        )
        data = response.json()

        assert data["operational_date"] == "2025-01-15"
        assert parse(data["start"]) == dt.datetime(2025, 1, 15, 11, tzinfo=dt.UTC)

    def test_dst_day(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/boundaries",
            params={"date": "2025-03-08", "timezone": NEW_YORK},
        )

        assert response.json()["duration_seconds"] == pytest.approx(23 * 3600 - 0.001)

    def test_requires_date_or_instant(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/boundaries", params={"timezone": NEW_YORK}
        )
        assert response.status_code == HTTP_400_BAD_REQUEST

    def test_rejects_both_date_and_instant(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/boundaries",
            params={"date": "2025-01-15", "at": "2025-01-15T12:00:00Z", "timezone": NEW_YORK},
        )
        assert response.status_code == HTTP_400_BAD_REQUEST

    def test_malformed_date(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/boundaries",
            params={"date": "2025-13-01", "timezone": NEW_YORK},
        )
        assert response.status_code == 422


class TestGetWindow:
    """Tests for GET /api/operational-day/window."""

    def test_relative_days_are_consecutive(self, client: TestClient) -> None:
        days = {
            day: client.get(
                "/api/operational-day/window", params={"day": day, "timezone": NEW_YORK}
            ).json()
            for day in ("yesterday", "today", "tomorrow")
        }

        today = dt.date.fromisoformat(days["today"]["operational_date"])
        assert days["yesterday"]["operational_date"] == (today - dt.timedelta(days=1)).isoformat()
        assert days["tomorrow"]["operational_date"] == (today + dt.timedelta(days=1)).isoformat()

    def test_default_is_today(self, client: TestClient) -> None:
        response = client.get("/api/operational-day/window", params={"timezone": NEW_YORK})
        assert response.status_code == HTTP_200_OK

        data = response.json()
        now = dt.datetime.now(dt.UTC)
        assert parse(data["start"]) <= now

    def test_invalid_day(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/window", params={"day": "last-week", "timezone": NEW_YORK}
        )
        assert response.status_code == 422


class TestGetNights:
    """Tests for GET /api/operational-day/nights."""

    def test_one_night(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/nights",
            params={
                "check_in": "2025-01-15T19:00:00Z",
                "check_out": "2025-01-16T15:00:00Z",
                "timezone": NEW_YORK,
            },
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["nights"] == 1
        assert data["check_in_date"] == "2025-01-15"
        assert data["check_out_date"] == "2025-01-16"

    def test_clamped_to_one(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/nights",
            params={
                "check_in": "2025-01-15T19:00:00Z",
                "check_out": "2025-01-16T10:00:00Z",
                "timezone": NEW_YORK,
            },
        )
        data = response.json()

        assert data["nights"] == 1
        assert data["check_out_date"] == "2025-01-15"

    def test_invalid_timezone(self, client: TestClient) -> None:
        response = client.get(
            "/api/operational-day/nights",
            params={
                "check_in": "2025-01-15T19:00:00Z",
                "check_out": "2025-01-16T15:00:00Z",
                "timezone": "Invalid/Timezone",
            },
        )
        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_TZ_001"


class TestGetContains:
    """Tests for GET /api/operational-day/contains."""

    @pytest.mark.parametrize(
        ("at", "within"),
        [
            ("2025-01-15T11:00:00Z", True),
            ("2025-01-16T10:59:59.999Z", True),
            ("2025-01-16T11:00:00Z", False),
            ("2025-01-15T10:59:59Z", False),
        ],
    )
    def test_containment(self, client: TestClient, at: str, within: bool) -> None:
        response = client.get(
            "/api/operational-day/contains",
            params={"at": at, "date": "2025-01-15", "timezone": NEW_YORK},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["within"] is within
        assert data["operational_date"] == "2025-01-15"

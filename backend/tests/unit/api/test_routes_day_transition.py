"""Unit tests for day-transition API routes.

Tests for:
- POST /api/day-transition/validate - Blocking issues before rollover
- POST /api/day-transition/issues - Departure issues for one day
"""

import pytest
from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK, HTTP_400_BAD_REQUEST

from opday_api.main import app

NOW = "2025-01-16T15:00:00Z"


@pytest.fixture
def client() -> TestClient:
    """Create test client for API."""
    return TestClient(app)


@pytest.fixture
def reservations() -> list[dict]:
    """Reservations of a New York property around NOW."""
    return [
        {
            "reservation_id": "RES-ZED",
            "guest_name": "Zed",
            "room_name": "204",
            "status": "CHECKOUT_DUE",
            "payment_status": "PAID",
            "check_in": "2025-01-13T19:00:00Z",
            "check_out": "2025-01-16T09:00:00Z",
        },
        {
            "reservation_id": "RES-ALICE",
            "guest_name": "Alice",
            "room_name": "101",
            "status": "CHECKOUT_DUE",
            "payment_status": "PAID",
            "check_in": "2025-01-14T19:00:00Z",
            "check_out": "2025-01-16T16:00:00Z",
        },
        {
            "reservation_id": "RES-BOB",
            "guest_name": "bob",
            "status": "IN_HOUSE",
            "payment_status": "PARTIALLY_PAID",
            "check_in": "2025-01-12T19:00:00Z",
            "check_out": "2025-01-15T16:00:00Z",
        },
    ]


class TestValidateDayTransition:
    """Tests for POST /api/day-transition/validate."""

    def test_reports_issues(self, client: TestClient, reservations: list[dict]) -> None:
        response = client.post(
            "/api/day-transition/validate",
            params={"timezone": "America/New_York"},
            json={"reservations": reservations, "now": NOW},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["can_transition"] is False
        assert data["operational_date"] == "2025-01-16"
        assert [i["reservation_id"] for i in data["issues"]] == [
            "RES-ZED",
            "RES-ALICE",
            "RES-BOB",
        ]
        assert data["issues"][0]["severity"] == "critical"
        assert data["issues"][2]["room_number"] == "N/A"

    def test_no_reservations(self, client: TestClient) -> None:
        response = client.post(
            "/api/day-transition/validate",
            params={"timezone": "America/New_York"},
            json={"reservations": [], "now": NOW},
        )

        assert response.json()["can_transition"] is True

    def test_invalid_timezone(self, client: TestClient, reservations: list[dict]) -> None:
        response = client.post(
            "/api/day-transition/validate",
            headers={"X-Property-Timezone": "Not/AZone"},
            json={"reservations": reservations, "now": NOW},
        )

        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_TZ_001"

    def test_invalid_status(self, client: TestClient, reservations: list[dict]) -> None:
        reservations[0]["status"] = "SLEEPING"

        response = client.post(
            "/api/day-transition/validate",
            params={"timezone": "America/New_York"},
            json={"reservations": reservations, "now": NOW},
        )

        assert response.status_code == 422


class TestListDayIssues:
    """Tests for POST /api/day-transition/issues."""

    def test_past_day(self, client: TestClient, reservations: list[dict]) -> None:
        response = client.post(
            "/api/day-transition/issues",
            params={"timezone": "America/New_York"},
            json={"reservations": reservations, "now": NOW, "operational_date": "2025-01-15"},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["operational_date"] == "2025-01-15"
        assert data["timezone"] == "America/New_York"
        assert [(i["reservation_id"], i["issue_type"]) for i in data["issues"]] == [
            ("RES-ZED", "CHECKOUT_DUE_NOT_COMPLETED"),
            ("RES-BOB", "PARTIAL_PAYMENT"),
        ]

    def test_current_day(self, client: TestClient, reservations: list[dict]) -> None:
        response = client.post(
            "/api/day-transition/issues",
            params={"timezone": "America/New_York"},
            json={"reservations": reservations, "now": NOW, "operational_date": "2025-01-16"},
        )

        issues = response.json()["issues"]
        assert [(i["reservation_id"], i["issue_type"]) for i in issues] == [
            ("RES-ALICE", "CHECKOUT_DUE_TODAY"),
        ]

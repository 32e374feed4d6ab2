"""Shared pytest fixtures for operational-day tests.

Fixtures here are available to every test module under backend/tests.
"""

import datetime as dt
from collections.abc import Generator

import pytest

from opday.services.operational_day import (
    OperationalDayCalculator,
    reset_operational_day_calculator,
)
from opday.services.timezone_resolver import StaticTimezoneResolver
from opday_api.dependencies import reset_services


# === Environment Fixtures ===


@pytest.fixture(autouse=True)
def reset_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start every test with default configuration and no cached services."""
    monkeypatch.delenv("OPERATIONAL_DAY_START_HOUR", raising=False)
    monkeypatch.delenv("DEFAULT_PROPERTY_TIMEZONE", raising=False)
    reset_services()
    yield
    reset_services()
    reset_operational_day_calculator()


# === Service Fixtures ===


@pytest.fixture
def calculator() -> OperationalDayCalculator:
    """Calculator backed by the IANA tz database."""
    return OperationalDayCalculator()


@pytest.fixture
def static_resolver() -> StaticTimezoneResolver:
    """Resolver over fixed-offset zones, independent of tzdata."""
    return StaticTimezoneResolver(
        {
            "Test/Minus5": dt.timezone(dt.timedelta(hours=-5)),
            "Test/Plus0530": dt.timezone(dt.timedelta(hours=5, minutes=30)),
            "UTC": dt.UTC,
        }
    )


@pytest.fixture
def static_calculator(static_resolver: StaticTimezoneResolver) -> OperationalDayCalculator:
    """Calculator that only knows the static test zones."""
    return OperationalDayCalculator(resolver=static_resolver)


# === Helper Fixtures ===


@pytest.fixture
def freeze_time() -> dt.datetime:
    """Fixed reference instant: 10:00 EST on Jan 16, 2025."""
    return dt.datetime(2025, 1, 16, 15, 0, 0, tzinfo=dt.UTC)

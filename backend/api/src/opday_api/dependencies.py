"""FastAPI dependency providers.

Services are cached with @lru_cache so every request shares one instance;
the calculator is stateless, so sharing is safe.

Usage in routes:
    from opday_api.dependencies import get_calculator, get_property_timezone

    @router.get("/operational-day/date")
    async def get_operational_date(
        timezone: str = Depends(get_property_timezone),
        calculator: OperationalDayCalculator = Depends(get_calculator),
    ):
        ...

Testing:
    Use reset_services() to clear cached instances between tests.
"""

import os
from functools import lru_cache

from fastapi import Header, Query

from opday.models import validate_timezone
from opday.services.day_transition import DayTransitionValidator
from opday.services.operational_day import (
    OperationalDayCalculator,
    get_operational_day_calculator,
    reset_operational_day_calculator,
)

DEFAULT_PROPERTY_TIMEZONE = "UTC"
PROPERTY_TIMEZONE_HEADER = "X-Property-Timezone"


def get_calculator() -> OperationalDayCalculator:
    """Get the shared OperationalDayCalculator."""
    return get_operational_day_calculator()


@lru_cache
def get_day_transition_validator() -> DayTransitionValidator:
    """Get cached DayTransitionValidator instance.

    Returns:
        DayTransitionValidator using the shared calculator.
    """
    return DayTransitionValidator(calculator=get_operational_day_calculator())


def get_property_timezone(
    timezone: str | None = Query(
        default=None,
        description="IANA timezone of the property (e.g., America/New_York)",
        examples=["America/New_York"],
    ),
    x_property_timezone: str | None = Header(
        default=None,
        alias=PROPERTY_TIMEZONE_HEADER,
        description="IANA timezone of the property, if not given as a query parameter",
    ),
) -> str:
    """Resolve the property timezone for this request.

    Precedence: query parameter, then X-Property-Timezone header, then the
    DEFAULT_PROPERTY_TIMEZONE environment variable.

    Raises:
        InvalidTimezoneError: If the resolved name is not an IANA timezone
    """
    name = (
        timezone
        or x_property_timezone
        or os.getenv("DEFAULT_PROPERTY_TIMEZONE", DEFAULT_PROPERTY_TIMEZONE)
    )
    return validate_timezone(name)


def reset_services() -> None:
    """Clear all cached service instances.

    Example:
        @pytest.fixture(autouse=True)
        def reset_state():
            yield
            reset_services()
    """
    get_day_transition_validator.cache_clear()
    reset_operational_day_calculator()

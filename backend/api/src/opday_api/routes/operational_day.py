"""Operational-day endpoints.

Provides REST endpoints for:
- Resolving the operational date of an instant
- Getting the start/end boundaries of an operational day
- Getting yesterday's, today's or tomorrow's window
- Counting the nights of a stay
- Checking whether an instant falls inside an operational day

The property timezone comes from the `timezone` query parameter or the
X-Property-Timezone header. Instants are ISO 8601; responses are UTC.
"""

import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.status import HTTP_400_BAD_REQUEST

from opday.models import OperationalDayBoundary, RelativeDay, as_utc_instant
from opday.services.operational_day import OperationalDayCalculator
from opday_api.dependencies import get_calculator, get_property_timezone
from opday_api.models.operational_day import (
    ContainsResponse,
    NightsResponse,
    OperationalDateResponse,
)

router = APIRouter(prefix="/operational-day", tags=["operational-day"])


@router.get(
    "/date",
    summary="Get operational date",
    description="""
Get the operational date an instant belongs to.

An operational day runs from 06:00 to 05:59:59.999 local time, so instants
before 06:00 local belong to the previous calendar date.

**Notes:**
- `at` is an ISO 8601 instant; values without an offset are taken as UTC
- Returns 400 with ERR_TZ_001 for an unknown timezone
""",
    response_model=OperationalDateResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "at": "2025-01-15T10:00:00Z",
                        "timezone": "America/New_York",
                        "operational_date": "2025-01-14",
                    }
                }
            },
        },
        400: {"description": "Invalid timezone"},
    },
)
async def get_operational_date(
    at: dt.datetime = Query(
        ...,
        description="Instant to classify (ISO 8601)",
        examples=["2025-01-15T10:00:00Z"],
    ),
    timezone: str = Depends(get_property_timezone),
    calculator: OperationalDayCalculator = Depends(get_calculator),
) -> OperationalDateResponse:
    """Resolve the operational date of an instant."""
    at = as_utc_instant(at)
    return OperationalDateResponse(
        at=at,
        timezone=timezone,
        operational_date=calculator.operational_date(at, timezone),
    )


@router.get(
    "/boundaries",
    summary="Get operational day boundaries",
    description="""
Get the UTC start and end of an operational day.

Pass either `date` (the operational date itself) or `at` (any instant;
the operational day containing it is returned).

**Notes:**
- `start` is inclusive; `end` is the last millisecond of the day
- Across DST changes the window is 23 or 25 hours of real time
""",
    response_model=OperationalDayBoundary,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "operational_date": "2025-01-15",
                        "timezone": "America/New_York",
                        "start": "2025-01-15T11:00:00Z",
                        "end": "2025-01-16T10:59:59.999000Z",
                        "duration_seconds": 86399.999,
                    }
                }
            },
        },
        400: {"description": "Missing date/at, or invalid timezone"},
    },
)
async def get_boundaries(
    operational_date: dt.date | None = Query(
        default=None,
        alias="date",
        description="Operational date (YYYY-MM-DD)",
        examples=["2025-01-15"],
    ),
    at: dt.datetime | None = Query(
        default=None,
        description="Instant inside the operational day (ISO 8601)",
    ),
    timezone: str = Depends(get_property_timezone),
    calculator: OperationalDayCalculator = Depends(get_calculator),
) -> OperationalDayBoundary:
    """Get start and end of an operational day."""
    if (operational_date is None) == (at is None):
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail="Provide exactly one of 'date' or 'at'",
        )

    anchor = operational_date if operational_date is not None else at
    return calculator.operational_day(anchor, timezone)  # type: ignore[arg-type]


@router.get(
    "/window",
    summary="Get relative operational day",
    description="""
Get yesterday's, today's or tomorrow's operational day, relative to the
server's current time. Used for dashboard arrivals/departures queries.
""",
    response_model=OperationalDayBoundary,
)
async def get_window(
    day: RelativeDay = Query(default=RelativeDay.TODAY, description="Which day"),
    timezone: str = Depends(get_property_timezone),
    calculator: OperationalDayCalculator = Depends(get_calculator),
) -> OperationalDayBoundary:
    """Get a day window relative to now."""
    return calculator.day_window(timezone, offset_days=day.offset_days)


@router.get(
    "/nights",
    summary="Count nights",
    description="""
Count the nights between check-in and check-out using operational dates.

**Notes:**
- Always at least 1, even for same-day or reversed instants
- Counted on calendar dates, so DST changes do not affect the result
""",
    response_model=NightsResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "check_in": "2025-01-15T19:00:00Z",
                        "check_out": "2025-01-16T15:00:00Z",
                        "timezone": "America/New_York",
                        "check_in_date": "2025-01-15",
                        "check_out_date": "2025-01-16",
                        "nights": 1,
                    }
                }
            },
        },
    },
)
async def get_nights(
    check_in: dt.datetime = Query(..., description="Check-in instant (ISO 8601)"),
    check_out: dt.datetime = Query(..., description="Check-out instant (ISO 8601)"),
    timezone: str = Depends(get_property_timezone),
    calculator: OperationalDayCalculator = Depends(get_calculator),
) -> NightsResponse:
    """Count nights of a stay."""
    check_in = as_utc_instant(check_in)
    check_out = as_utc_instant(check_out)

    return NightsResponse(
        check_in=check_in,
        check_out=check_out,
        timezone=timezone,
        check_in_date=calculator.operational_date(check_in, timezone),
        check_out_date=calculator.operational_date(check_out, timezone),
        nights=calculator.nights(check_in, check_out, timezone),
    )


@router.get(
    "/contains",
    summary="Check instant against operational day",
    response_model=ContainsResponse,
)
async def get_contains(
    at: dt.datetime = Query(..., description="Instant to check (ISO 8601)"),
    operational_date: dt.date = Query(
        ...,
        alias="date",
        description="Operational date (YYYY-MM-DD)",
    ),
    timezone: str = Depends(get_property_timezone),
    calculator: OperationalDayCalculator = Depends(get_calculator),
) -> ContainsResponse:
    """Check whether an instant belongs to an operational day."""
    at = as_utc_instant(at)
    return ContainsResponse(
        at=at,
        operational_date=operational_date.isoformat(),
        timezone=timezone,
        within=calculator.is_within_day(at, operational_date, timezone),
    )

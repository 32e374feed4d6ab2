"""Day-transition endpoints.

Provides REST endpoints for:
- Checking whether the front desk may roll over to the next operational day
- Listing departure issues for a single operational day

The caller posts the property's reservations; nothing is read from storage.
"""

from fastapi import APIRouter, Depends

from opday.models import DayTransitionValidation
from opday.services.day_transition import DayTransitionValidator
from opday_api.dependencies import get_day_transition_validator, get_property_timezone
from opday_api.models.day_transition import (
    DayTransitionIssuesRequest,
    DayTransitionIssuesResponse,
    DayTransitionRequest,
)

router = APIRouter(prefix="/day-transition", tags=["day-transition"])


@router.post(
    "/validate",
    summary="Validate day transition",
    description="""
Check the posted reservations for issues that block the day transition:

- **CHECKOUT_DUE_NOT_COMPLETED** (critical): due out yesterday, never checked out
- **PARTIAL_PAYMENT** (warning): in-house guest departed yesterday with a balance
- **CHECKOUT_DUE_TODAY** (warning): due out today, not yet checked out

`can_transition` is true only when no issues are found. Issues are sorted
critical first, then by guest name.
""",
    response_model=DayTransitionValidation,
    responses={400: {"description": "Invalid timezone"}},
)
async def validate_day_transition(
    request: DayTransitionRequest,
    timezone: str = Depends(get_property_timezone),
    validator: DayTransitionValidator = Depends(get_day_transition_validator),
) -> DayTransitionValidation:
    """Validate the day transition for posted reservations."""
    return validator.validate(request.reservations, timezone, now=request.now)


@router.post(
    "/issues",
    summary="List issues for an operational day",
    response_model=DayTransitionIssuesResponse,
    responses={400: {"description": "Invalid timezone"}},
)
async def list_day_issues(
    request: DayTransitionIssuesRequest,
    timezone: str = Depends(get_property_timezone),
    validator: DayTransitionValidator = Depends(get_day_transition_validator),
) -> DayTransitionIssuesResponse:
    """Report departure issues for one operational day."""
    issues = validator.issues_for_date(
        request.reservations,
        request.operational_date,
        timezone,
        now=request.now,
    )
    return DayTransitionIssuesResponse(
        operational_date=request.operational_date,
        timezone=timezone,
        issues=issues,
    )

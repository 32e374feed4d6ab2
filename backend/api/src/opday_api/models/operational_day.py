"""API models for operational-day endpoints.

Boundaries are returned as opday.models.OperationalDayBoundary directly;
the models here cover the scalar answers.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

OPERATIONAL_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class OperationalDateResponse(BaseModel):
    """Operational date an instant belongs to."""

    model_config = ConfigDict(strict=True)

    at: dt.datetime = Field(..., description="Queried instant (UTC)")
    timezone: str = Field(..., examples=["America/New_York"])
    operational_date: str = Field(
        ...,
        pattern=OPERATIONAL_DATE_PATTERN,
        description="Operational date (YYYY-MM-DD)",
        examples=["2025-01-14"],
    )


class NightsResponse(BaseModel):
    """Night count for a stay."""

    model_config = ConfigDict(strict=True)

    check_in: dt.datetime
    check_out: dt.datetime
    timezone: str = Field(..., examples=["America/New_York"])
    check_in_date: str = Field(
        ...,
        pattern=OPERATIONAL_DATE_PATTERN,
        description="Operational date of check-in",
        examples=["2025-01-15"],
    )
    check_out_date: str = Field(
        ...,
        pattern=OPERATIONAL_DATE_PATTERN,
        description="Operational date of check-out",
        examples=["2025-01-16"],
    )
    nights: int = Field(..., ge=1, description="Number of nights, never less than 1")


class ContainsResponse(BaseModel):
    """Whether an instant falls inside an operational day."""

    model_config = ConfigDict(strict=True)

    at: dt.datetime
    operational_date: str = Field(..., pattern=OPERATIONAL_DATE_PATTERN)
    timezone: str
    within: bool

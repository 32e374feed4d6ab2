"""API models for day-transition endpoints."""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from opday.models import DayTransitionIssue, ReservationSnapshot


class DayTransitionRequest(BaseModel):
    """Reservations to check before rolling over to the next day."""

    reservations: list[ReservationSnapshot] = Field(default_factory=list)
    now: Optional[dt.datetime] = Field(
        default=None,
        description="Reference instant; defaults to the server's current time",
    )


class DayTransitionIssuesRequest(DayTransitionRequest):
    """Reservations to report on for one operational day."""

    operational_date: dt.date = Field(
        ...,
        description="Operational date to report on (YYYY-MM-DD)",
        examples=["2025-01-15"],
    )


class DayTransitionIssuesResponse(BaseModel):
    """Issues found for one operational day."""

    operational_date: dt.date
    timezone: str
    issues: list[DayTransitionIssue] = Field(default_factory=list)

"""Models for day-transition validation.

Before the front desk rolls over to the next operational day, departures
from the previous day must be settled. These models describe the
reservation data the check needs and the issues it reports.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import (
    DayTransitionIssueType,
    IssueSeverity,
    PaymentStatus,
    ReservationStatus,
)
from .operational_day import as_utc_instant


class ReservationSnapshot(BaseModel):
    """The fields of a reservation the day-transition check reads."""

    model_config = ConfigDict(frozen=True)

    reservation_id: str = Field(..., min_length=1, examples=["RES-2025-001"])
    guest_name: Optional[str] = Field(default=None, examples=["Jane Doe"])
    room_name: Optional[str] = Field(default=None, examples=["101"])
    status: ReservationStatus
    payment_status: Optional[PaymentStatus] = None
    check_in: dt.datetime
    check_out: dt.datetime
    deleted_at: Optional[dt.datetime] = None

    @field_validator("check_in", "check_out")
    @classmethod
    def normalize_instant(cls, v: dt.datetime) -> dt.datetime:
        """Store instants as aware UTC datetimes."""
        return as_utc_instant(v)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class DayTransitionIssue(BaseModel):
    """A single reservation problem blocking the day transition."""

    reservation_id: str
    guest_name: str = Field(..., description="Guest name or 'Unknown Guest'")
    room_number: str = Field(..., description="Room name or 'N/A'")
    issue_type: DayTransitionIssueType
    description: str
    severity: IssueSeverity
    check_out_date: dt.datetime
    payment_status: Optional[PaymentStatus] = None
    reservation_status: ReservationStatus


class DayTransitionValidation(BaseModel):
    """Outcome of a day-transition check."""

    can_transition: bool
    issues: list[DayTransitionIssue] = Field(default_factory=list)
    operational_date: str = Field(
        ...,
        description="Operational date the check ran in",
        examples=["2025-01-15"],
    )
    timestamp: dt.datetime = Field(..., description="When the check ran (UTC)")

    @property
    def critical_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == IssueSeverity.CRITICAL)

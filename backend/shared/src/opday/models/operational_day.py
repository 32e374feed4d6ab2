"""Operational-day value types.

An operational day runs from 06:00:00.000 local time to 05:59:59.999 local
time on the following calendar date, in the property's timezone. These
models are created per calculation and never persisted.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .timezone import TimeZoneId

OPERATIONAL_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# Smallest step the boundaries are expressed in
BOUNDARY_RESOLUTION = dt.timedelta(milliseconds=1)


def as_utc_instant(value: dt.datetime) -> dt.datetime:
    """Normalize a datetime to an aware UTC instant.

    Naive datetimes are taken to already be UTC, which is how reservation
    timestamps are stored.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.UTC)
    return value.astimezone(dt.UTC)


class OperationalDayBoundary(BaseModel):
    """Start and end instants of one operational day.

    start is inclusive. end is the last millisecond of the day, so the
    window is [start, end + 1ms).
    """

    model_config = ConfigDict(strict=True, frozen=True)

    operational_date: str = Field(
        ...,
        pattern=OPERATIONAL_DATE_PATTERN,
        description="Operational date (YYYY-MM-DD)",
        examples=["2025-01-15"],
    )
    timezone: str = Field(
        ...,
        description="IANA timezone the boundaries were computed in",
        examples=["America/New_York"],
    )
    start: dt.datetime = Field(
        ...,
        description="Start of the operational day (UTC, inclusive)",
        examples=["2025-01-15T11:00:00Z"],
    )
    end: dt.datetime = Field(
        ...,
        description="Last millisecond of the operational day (UTC)",
        examples=["2025-01-16T10:59:59.999000Z"],
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def duration_seconds(self) -> float:
        """Elapsed real time between start and end."""
        return (self.end - self.start).total_seconds()

    @property
    def next_start(self) -> dt.datetime:
        """Start instant of the following operational day."""
        return self.end + BOUNDARY_RESOLUTION

    def contains(self, instant: dt.datetime) -> bool:
        """Check whether an instant falls inside this operational day."""
        instant = as_utc_instant(instant)
        return self.start <= instant < self.next_start


class ReservationSpan(BaseModel):
    """Check-in and check-out instants of a stay, in a property's timezone.

    Input shape only: the calculator derives nights and operational dates
    from it without modifying it.
    """

    model_config = ConfigDict(frozen=True)

    check_in: dt.datetime = Field(..., description="Check-in instant")
    check_out: dt.datetime = Field(..., description="Check-out instant")
    timezone: TimeZoneId = Field(
        ...,
        description="IANA timezone of the property",
        examples=["America/New_York"],
    )

    @field_validator("check_in", "check_out")
    @classmethod
    def normalize_instant(cls, v: dt.datetime) -> dt.datetime:
        """Store instants as aware UTC datetimes."""
        return as_utc_instant(v)

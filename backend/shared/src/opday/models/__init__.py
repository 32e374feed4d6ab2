"""Pydantic models and value types for operational-day calculations."""

from .errors import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    ErrorCode,
    InvalidDayStartHourError,
    InvalidTimezoneError,
    OperationalDayError,
    ToolError,
)
from .result import Err, Ok, Result, capture
from .timezone import TimeZoneId, load_zone, validate_timezone
from .enums import (
    DayTransitionIssueType,
    IssueSeverity,
    PaymentStatus,
    RelativeDay,
    ReservationStatus,
)
from .operational_day import (
    OperationalDayBoundary,
    ReservationSpan,
    as_utc_instant,
)
from .day_transition import (
    DayTransitionIssue,
    DayTransitionValidation,
    ReservationSnapshot,
)

__all__ = [
    # Errors
    "ErrorCode",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "InvalidDayStartHourError",
    "InvalidTimezoneError",
    "OperationalDayError",
    "ToolError",
    # Result
    "Ok",
    "Err",
    "Result",
    "capture",
    # Timezone
    "TimeZoneId",
    "load_zone",
    "validate_timezone",
    # Enums
    "DayTransitionIssueType",
    "IssueSeverity",
    "PaymentStatus",
    "RelativeDay",
    "ReservationStatus",
    # Operational day
    "OperationalDayBoundary",
    "ReservationSpan",
    "as_utc_instant",
    # Day transition
    "DayTransitionIssue",
    "DayTransitionValidation",
    "ReservationSnapshot",
]

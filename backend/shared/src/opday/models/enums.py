"""Enumeration types for operational-day data models."""

from enum import Enum


class ReservationStatus(str, Enum):
    """Status of a reservation."""

    CONFIRMED = "CONFIRMED"
    IN_HOUSE = "IN_HOUSE"
    CHECKOUT_DUE = "CHECKOUT_DUE"
    CHECKED_OUT = "CHECKED_OUT"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"


class PaymentStatus(str, Enum):
    """Payment status for a reservation."""

    UNPAID = "UNPAID"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    PAID = "PAID"
    REFUNDED = "REFUNDED"


class DayTransitionIssueType(str, Enum):
    """Booking problems that block moving to the next operational day."""

    PARTIAL_PAYMENT = "PARTIAL_PAYMENT"
    CHECKOUT_DUE_NOT_COMPLETED = "CHECKOUT_DUE_NOT_COMPLETED"
    CHECKOUT_DUE_TODAY = "CHECKOUT_DUE_TODAY"


class IssueSeverity(str, Enum):
    """How urgently a day-transition issue needs attention."""

    CRITICAL = "critical"
    WARNING = "warning"


class RelativeDay(str, Enum):
    """Operational day relative to the current one."""

    YESTERDAY = "yesterday"
    TODAY = "today"
    TOMORROW = "tomorrow"

    @property
    def offset_days(self) -> int:
        return {"yesterday": -1, "today": 0, "tomorrow": 1}[self.value]

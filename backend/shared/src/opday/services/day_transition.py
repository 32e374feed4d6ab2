"""Day transition validation.

Detects booking issues that should block rolling the front desk over to the
next operational day:
1. Yesterday's in-house departures with partial payments
2. Yesterday's departures still in CHECKOUT_DUE (never checked out)
3. Today's departures still in CHECKOUT_DUE (not yet checked out)

Reservations are passed in by the caller; this service does no I/O.
"""

import datetime as dt
from typing import Iterable

from opday.models import (
    DayTransitionIssue,
    DayTransitionIssueType,
    DayTransitionValidation,
    IssueSeverity,
    OperationalDayBoundary,
    PaymentStatus,
    ReservationSnapshot,
    ReservationStatus,
    as_utc_instant,
)
from opday.utils.logging import get_logger

from .operational_day import OperationalDayCalculator, get_operational_day_calculator

logger = get_logger(__name__)

UNKNOWN_GUEST = "Unknown Guest"
UNKNOWN_ROOM = "N/A"

ISSUE_DESCRIPTIONS: dict[DayTransitionIssueType, str] = {
    DayTransitionIssueType.PARTIAL_PAYMENT: (
        "Guest checked out yesterday but payment is incomplete. Remaining balance due."
    ),
    DayTransitionIssueType.CHECKOUT_DUE_NOT_COMPLETED: (
        "Guest was marked for checkout yesterday but never completed checkout. "
        "Manual intervention required."
    ),
    DayTransitionIssueType.CHECKOUT_DUE_TODAY: (
        "Guest is marked for checkout today but has not yet checked out."
    ),
}

ISSUE_SEVERITY: dict[DayTransitionIssueType, IssueSeverity] = {
    DayTransitionIssueType.PARTIAL_PAYMENT: IssueSeverity.WARNING,
    DayTransitionIssueType.CHECKOUT_DUE_NOT_COMPLETED: IssueSeverity.CRITICAL,
    DayTransitionIssueType.CHECKOUT_DUE_TODAY: IssueSeverity.WARNING,
}


def _within_closed(boundary: OperationalDayBoundary, instant: dt.datetime) -> bool:
    return boundary.start <= instant <= boundary.end


def _within_before_end(boundary: OperationalDayBoundary, instant: dt.datetime) -> bool:
    # The last millisecond of today is excluded
    return boundary.start <= instant < boundary.end


def _sort_key(issue: DayTransitionIssue) -> tuple[int, str]:
    severity_rank = 0 if issue.severity == IssueSeverity.CRITICAL else 1
    return severity_rank, issue.guest_name.casefold()


class DayTransitionValidator:
    """Service for checking whether a day transition may proceed."""

    def __init__(self, calculator: OperationalDayCalculator | None = None) -> None:
        """Initialize the validator.

        Args:
            calculator: Operational day calculator (default: shared instance)
        """
        self.calculator = calculator or get_operational_day_calculator()

    def validate(
        self,
        reservations: Iterable[ReservationSnapshot],
        timezone: str,
        now: dt.datetime | None = None,
    ) -> DayTransitionValidation:
        """Validate whether the day transition should be blocked.

        Args:
            reservations: Reservations of the property
            timezone: IANA timezone of the property
            now: Reference instant (default: current time)

        Returns:
            DayTransitionValidation with sorted issues

        Raises:
            InvalidTimezoneError: If the timezone cannot be resolved
        """
        now = as_utc_instant(now) if now is not None else dt.datetime.now(dt.UTC)

        today = self.calculator.day_window(timezone, now=now)
        yesterday = self.calculator.day_window(timezone, now=now, offset_days=-1)

        issues: list[DayTransitionIssue] = []
        for reservation in reservations:
            if reservation.is_deleted:
                continue

            issue_type = self._classify(reservation, today, yesterday)
            if issue_type is not None:
                issues.append(self._to_issue(reservation, issue_type))

        issues.sort(key=_sort_key)

        result = DayTransitionValidation(
            can_transition=not issues,
            issues=issues,
            operational_date=today.operational_date,
            timestamp=now,
        )
        logger.info(
            "Day transition check for %s in %s: %d issue(s), %d critical",
            today.operational_date,
            timezone,
            len(issues),
            result.critical_count,
        )
        return result

    def issues_for_date(
        self,
        reservations: Iterable[ReservationSnapshot],
        operational_date: dt.date | str,
        timezone: str,
        now: dt.datetime | None = None,
    ) -> list[DayTransitionIssue]:
        """Report issues for departures on one operational day.

        Partially paid departures are reported as PARTIAL_PAYMENT whatever
        their status. Other CHECKOUT_DUE departures count as not completed
        once that operational day is over, and as due today while it is
        current.

        Args:
            reservations: Reservations of the property
            operational_date: Operational date to report on
            timezone: IANA timezone of the property
            now: Reference instant (default: current time)

        Returns:
            Issues for that day, in input order

        Raises:
            InvalidTimezoneError: If the timezone cannot be resolved
        """
        now = as_utc_instant(now) if now is not None else dt.datetime.now(dt.UTC)

        day = self.calculator.operational_day(operational_date, timezone)
        day_is_over = day.next_start <= now

        issues: list[DayTransitionIssue] = []
        for reservation in reservations:
            if reservation.is_deleted or not _within_closed(day, reservation.check_out):
                continue

            if reservation.payment_status == PaymentStatus.PARTIALLY_PAID:
                issue_type = DayTransitionIssueType.PARTIAL_PAYMENT
            elif reservation.status == ReservationStatus.CHECKOUT_DUE:
                issue_type = (
                    DayTransitionIssueType.CHECKOUT_DUE_NOT_COMPLETED
                    if day_is_over
                    else DayTransitionIssueType.CHECKOUT_DUE_TODAY
                )
            else:
                continue

            issues.append(self._to_issue(reservation, issue_type))

        return issues

    def _classify(
        self,
        reservation: ReservationSnapshot,
        today: OperationalDayBoundary,
        yesterday: OperationalDayBoundary,
    ) -> DayTransitionIssueType | None:
        departed_yesterday = _within_closed(yesterday, reservation.check_out)

        if reservation.status == ReservationStatus.CHECKOUT_DUE:
            if departed_yesterday:
                return DayTransitionIssueType.CHECKOUT_DUE_NOT_COMPLETED
            if _within_before_end(today, reservation.check_out):
                return DayTransitionIssueType.CHECKOUT_DUE_TODAY
            return None

        if (
            departed_yesterday
            and reservation.status == ReservationStatus.IN_HOUSE
            and reservation.payment_status == PaymentStatus.PARTIALLY_PAID
        ):
            return DayTransitionIssueType.PARTIAL_PAYMENT

        return None

    def _to_issue(
        self,
        reservation: ReservationSnapshot,
        issue_type: DayTransitionIssueType,
    ) -> DayTransitionIssue:
        return DayTransitionIssue(
            reservation_id=reservation.reservation_id,
            guest_name=reservation.guest_name or UNKNOWN_GUEST,
            room_number=reservation.room_name or UNKNOWN_ROOM,
            issue_type=issue_type,
            description=ISSUE_DESCRIPTIONS[issue_type],
            severity=ISSUE_SEVERITY[issue_type],
            check_out_date=reservation.check_out,
            payment_status=reservation.payment_status,
            reservation_status=reservation.status,
        )

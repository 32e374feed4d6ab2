"""Timezone-aware operational day calculations.

Operational day: 06:00:00.000 local time to 05:59:59.999 local time on the
next calendar date, in the property's timezone. Instants go in and come
out as UTC; the property's IANA timezone is passed on every call.

Anchor rule for day_start/day_end/operational_day:
- a datetime.date (or "YYYY-MM-DD" string) is used as the operational date
  as given
- a datetime is first mapped to the operational day that contains it, so
  05:00 local on Jan 16 yields the Jan 15 operational day

Usage:
    from opday.services.operational_day import day_start, operational_date

    day_start(dt.date(2025, 1, 15), "America/New_York")
    # -> 2025-01-15 11:00:00+00:00

    operational_date(dt.datetime(2025, 1, 16, 10, tzinfo=dt.UTC), "America/New_York")
    # -> "2025-01-15"
"""

import datetime as dt
import os
from functools import lru_cache
from typing import Union

from opday.models import (
    InvalidDayStartHourError,
    OperationalDayBoundary,
    ReservationSpan,
    as_utc_instant,
)
from opday.models.operational_day import BOUNDARY_RESOLUTION
from opday.utils.logging import get_logger, log_day_boundary_operation

from .timezone_resolver import TimezoneResolver, ZoneInfoResolver

logger = get_logger(__name__)

DEFAULT_DAY_START_HOUR = 6

# A calendar date, an operational date string, or an instant
DayAnchor = Union[dt.date, dt.datetime, str]


def parse_day_start_hour(value: object) -> int:
    """Parse and range-check an operational day start hour.

    Raises:
        InvalidDayStartHourError: If value is not an integer from 0 to 23
    """
    try:
        hour = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as e:
        raise InvalidDayStartHourError(value) from e

    if not 0 <= hour <= 23:
        raise InvalidDayStartHourError(value)
    return hour


class OperationalDayCalculator:
    """Stateless calculator for operational day boundaries.

    Safe to share between threads and tasks: it holds only the resolver and
    the start hour, both read-only after construction.
    """

    def __init__(
        self,
        resolver: TimezoneResolver | None = None,
        day_start_hour: int | None = None,
    ) -> None:
        """Initialize the calculator.

        Args:
            resolver: Timezone resolver (default: IANA tz database)
            day_start_hour: Local hour the operational day starts at
                (default: OPERATIONAL_DAY_START_HOUR env var, else 6)
        """
        self.resolver = resolver or ZoneInfoResolver()
        if day_start_hour is None:
            day_start_hour = os.getenv(
                "OPERATIONAL_DAY_START_HOUR", str(DEFAULT_DAY_START_HOUR)
            )
        self.day_start_hour = parse_day_start_hour(day_start_hour)

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def day_start(self, value: DayAnchor, timezone: str) -> dt.datetime:
        """Get the start of an operational day (06:00 local) as UTC.

        Args:
            value: Operational date, or an instant inside the operational day
            timezone: IANA timezone string (e.g., "America/New_York")

        Returns:
            Aware UTC datetime of 06:00:00.000 local time on the anchor date

        Raises:
            InvalidTimezoneError: If the timezone cannot be resolved

        Example:
            # Jan 15 in New York (EST = UTC-5) starts at 11:00 UTC
            day_start(dt.date(2025, 1, 15), "America/New_York")
        """
        zone = self._zone(timezone, "day_start")
        anchor = self._anchor_date(value, zone)
        start = self._start_of(anchor, zone)

        log_day_boundary_operation(
            logger, "day_start", timezone=timezone, instant=value, result=start.isoformat()
        )
        return start

    def day_end(self, value: DayAnchor, timezone: str) -> dt.datetime:
        """Get the last millisecond of an operational day as UTC.

        That is 05:59:59.999 local time on the calendar date after the
        anchor date. Across a DST change the real elapsed time since
        day_start differs from 24h - 1ms by the offset change.

        Args:
            value: Operational date, or an instant inside the operational day
            timezone: IANA timezone string (e.g., "America/New_York")

        Returns:
            Aware UTC datetime of the operational day's last millisecond

        Raises:
            InvalidTimezoneError: If the timezone cannot be resolved

        Example:
            # Jan 15 in New York ends at Jan 16 10:59:59.999 UTC
            day_end(dt.date(2025, 1, 15), "America/New_York")
        """
        zone = self._zone(timezone, "day_end")
        anchor = self._anchor_date(value, zone)
        end = self._end_of(anchor, zone)

        log_day_boundary_operation(
            logger, "day_end", timezone=timezone, instant=value, result=end.isoformat()
        )
        return end

    def operational_date(self, instant: dt.datetime, timezone: str) -> str:
        """Get the operational date (YYYY-MM-DD) an instant belongs to.

        Instants before 06:00 local time belong to the previous calendar
        date's operational day.

        Args:
            instant: The instant to classify (naive values are taken as UTC)
            timezone: IANA timezone string (e.g., "America/New_York")

        Returns:
            Date string in YYYY-MM-DD format

        Raises:
            InvalidTimezoneError: If the timezone cannot be resolved

        Example:
            # 10:00 UTC = 05:00 EST, still inside the Jan 15 operational day
            operational_date(dt.datetime(2025, 1, 16, 10, tzinfo=dt.UTC), "America/New_York")
            # -> "2025-01-15"
        """
        zone = self._zone(timezone, "operational_date")
        result = self._operational_date(instant, zone).isoformat()

        log_day_boundary_operation(
            logger, "operational_date", timezone=timezone, instant=instant, result=result
        )
        return result

    def nights(
        self,
        check_in: dt.datetime,
        check_out: dt.datetime,
        timezone: str,
    ) -> int:
        """Count the nights between check-in and check-out.

        Uses calendar-day subtraction of the two operational dates, so DST
        changes inside the stay do not skew the count. Never returns less
        than 1.

        Args:
            check_in: Check-in instant
            check_out: Check-out instant
            timezone: IANA timezone string (e.g., "America/New_York")

        Returns:
            Number of nights (operational days), at least 1

        Raises:
            InvalidTimezoneError: If the timezone cannot be resolved

        Example:
            # Check in 14:00 EST, check out 10:00 EST the next day
            nights(
                dt.datetime(2025, 1, 15, 19, tzinfo=dt.UTC),
                dt.datetime(2025, 1, 16, 15, tzinfo=dt.UTC),
                "America/New_York",
            )
            # -> 1
        """
        zone = self._zone(timezone, "nights")
        check_in_date = self._operational_date(check_in, zone)
        check_out_date = self._operational_date(check_out, zone)

        result = max(1, (check_out_date - check_in_date).days)

        log_day_boundary_operation(
            logger,
            "nights",
            timezone=timezone,
            result=result,
            check_in_date=check_in_date.isoformat(),
            check_out_date=check_out_date.isoformat(),
        )
        return result

    def is_within_day(
        self,
        instant: dt.datetime,
        operational_date: dt.date | str,
        timezone: str,
    ) -> bool:
        """Check whether an instant falls inside a given operational day.

        Args:
            instant: The instant to check
            operational_date: Operational date (YYYY-MM-DD string or date)
            timezone: IANA timezone string (e.g., "America/New_York")

        Returns:
            True exactly when operational_date(instant) equals operational_date

        Raises:
            InvalidTimezoneError: If the timezone cannot be resolved

        Example:
            # 05:00 EST on Jan 16 is still inside the Jan 15 operational day
            is_within_day(dt.datetime(2025, 1, 16, 10, tzinfo=dt.UTC), "2025-01-15", "America/New_York")
            # -> True
        """
        zone = self._zone(timezone, "is_within_day")
        if isinstance(operational_date, dt.date) and not isinstance(
            operational_date, dt.datetime
        ):
            operational_date = operational_date.isoformat()

        result = self._operational_date(instant, zone).isoformat() == operational_date

        log_day_boundary_operation(
            logger,
            "is_within_day",
            timezone=timezone,
            instant=instant,
            operational_date=operational_date,
            result=result,
        )
        return result

    def operational_day(self, value: DayAnchor, timezone: str) -> OperationalDayBoundary:
        """Get both boundaries of an operational day.

        Args:
            value: Operational date, or an instant inside the operational day
            timezone: IANA timezone string

        Returns:
            OperationalDayBoundary for the anchor date

        Raises:
            InvalidTimezoneError: If the timezone cannot be resolved
        """
        zone = self._zone(timezone, "operational_day")
        anchor = self._anchor_date(value, zone)
        return self._boundary(anchor, zone, timezone)

    def day_window(
        self,
        timezone: str,
        now: dt.datetime | None = None,
        offset_days: int = 0,
    ) -> OperationalDayBoundary:
        """Get the operational day relative to the current one.

        Args:
            timezone: IANA timezone string
            now: Reference instant (default: current time)
            offset_days: 0 for today, -1 for yesterday, 1 for tomorrow

        Returns:
            OperationalDayBoundary of the requested day

        Raises:
            InvalidTimezoneError: If the timezone cannot be resolved
        """
        zone = self._zone(timezone, "day_window")
        if now is None:
            now = dt.datetime.now(dt.UTC)

        anchor = self._operational_date(now, zone) + dt.timedelta(days=offset_days)
        return self._boundary(anchor, zone, timezone)

    def span_nights(self, span: ReservationSpan) -> int:
        """Count the nights of a reservation span."""
        return self.nights(span.check_in, span.check_out, span.timezone)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _zone(self, timezone: str, operation: str) -> dt.tzinfo:
        """Resolve the timezone before any computation happens."""
        result = self.resolver.resolve(timezone)
        if not result.is_ok:
            log_day_boundary_operation(
                logger, operation, timezone=str(timezone), error=str(result.error)
            )
        return result.unwrap()

    def _operational_date(self, instant: dt.datetime, zone: dt.tzinfo) -> dt.date:
        local = as_utc_instant(instant).astimezone(zone)
        if local.hour < self.day_start_hour:
            return local.date() - dt.timedelta(days=1)
        return local.date()

    def _anchor_date(self, value: DayAnchor, zone: dt.tzinfo) -> dt.date:
        # datetime is a date subclass, so it must be checked first
        if isinstance(value, dt.datetime):
            return self._operational_date(value, zone)
        if isinstance(value, dt.date):
            return value
        return dt.date.fromisoformat(value)

    def _start_of(self, anchor: dt.date, zone: dt.tzinfo) -> dt.datetime:
        # A start hour skipped by a DST gap resolves with fold=0 (pre-gap offset)
        local = dt.datetime.combine(anchor, dt.time(self.day_start_hour))
        return local.replace(tzinfo=zone).astimezone(dt.UTC)

    def _end_of(self, anchor: dt.date, zone: dt.tzinfo) -> dt.datetime:
        # Wall-clock arithmetic: last millisecond before the next day's start
        next_start = dt.datetime.combine(
            anchor + dt.timedelta(days=1), dt.time(self.day_start_hour)
        )
        local = next_start - BOUNDARY_RESOLUTION
        return local.replace(tzinfo=zone).astimezone(dt.UTC)

    def _boundary(
        self, anchor: dt.date, zone: dt.tzinfo, timezone: str
    ) -> OperationalDayBoundary:
        boundary = OperationalDayBoundary(
            operational_date=anchor.isoformat(),
            timezone=timezone,
            start=self._start_of(anchor, zone),
            end=self._end_of(anchor, zone),
        )
        log_day_boundary_operation(
            logger,
            "operational_day",
            timezone=timezone,
            operational_date=boundary.operational_date,
            result=f"{boundary.start.isoformat()}..{boundary.end.isoformat()}",
        )
        return boundary


@lru_cache(maxsize=1)
def get_operational_day_calculator() -> OperationalDayCalculator:
    """Get the shared calculator backed by the IANA tz database.

    Returns:
        OperationalDayCalculator singleton
    """
    return OperationalDayCalculator()


def reset_operational_day_calculator() -> None:
    """Drop the shared calculator so the next call re-reads configuration."""
    get_operational_day_calculator.cache_clear()


# ----------------------------------------------------------------------
# Module-level shortcuts using the shared calculator
# ----------------------------------------------------------------------


def day_start(value: DayAnchor, timezone: str) -> dt.datetime:
    """Start of the operational day, see OperationalDayCalculator.day_start."""
    return get_operational_day_calculator().day_start(value, timezone)


def day_end(value: DayAnchor, timezone: str) -> dt.datetime:
    """End of the operational day, see OperationalDayCalculator.day_end."""
    return get_operational_day_calculator().day_end(value, timezone)


def operational_date(instant: dt.datetime, timezone: str) -> str:
    """Operational date of an instant, see OperationalDayCalculator.operational_date."""
    return get_operational_day_calculator().operational_date(instant, timezone)


def nights(check_in: dt.datetime, check_out: dt.datetime, timezone: str) -> int:
    """Nights between two instants, see OperationalDayCalculator.nights."""
    return get_operational_day_calculator().nights(check_in, check_out, timezone)


def is_within_day(
    instant: dt.datetime, operational_date: dt.date | str, timezone: str
) -> bool:
    """Containment check, see OperationalDayCalculator.is_within_day."""
    return get_operational_day_calculator().is_within_day(
        instant, operational_date, timezone
    )


def operational_day(value: DayAnchor, timezone: str) -> OperationalDayBoundary:
    """Both boundaries, see OperationalDayCalculator.operational_day."""
    return get_operational_day_calculator().operational_day(value, timezone)


__all__ = [
    "DEFAULT_DAY_START_HOUR",
    "DayAnchor",
    "OperationalDayCalculator",
    "day_end",
    "day_start",
    "get_operational_day_calculator",
    "is_within_day",
    "nights",
    "operational_date",
    "operational_day",
    "parse_day_start_hour",
    "reset_operational_day_calculator",
]

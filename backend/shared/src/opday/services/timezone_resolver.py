"""Timezone resolution for the operational-day calculator.

The calculator never reads the tz database directly; it asks a resolver.
Production code uses ZoneInfoResolver. Tests can pass a
StaticTimezoneResolver with fixed-offset zones so results do not depend on
the tzdata release installed on the host.
"""

import datetime as dt
from typing import Mapping, Protocol

from opday.models import Err, InvalidTimezoneError, Ok, Result, load_zone


class TimezoneResolver(Protocol):
    """Anything that can turn an IANA identifier into a tzinfo."""

    def resolve(self, name: str) -> Result[dt.tzinfo]:
        """Resolve a timezone identifier.

        Returns:
            Ok(tzinfo) or Err(InvalidTimezoneError)
        """
        ...


class ZoneInfoResolver:
    """Resolver backed by the IANA tz database via zoneinfo."""

    def resolve(self, name: str) -> Result[dt.tzinfo]:
        return load_zone(name)


class StaticTimezoneResolver:
    """Resolver over a fixed table of zones.

    Usage:
        resolver = StaticTimezoneResolver({
            "Test/Minus5": dt.timezone(dt.timedelta(hours=-5)),
        })
        calculator = OperationalDayCalculator(resolver=resolver)
    """

    def __init__(self, zones: Mapping[str, dt.tzinfo]) -> None:
        """Initialize with a name -> tzinfo table.

        Args:
            zones: Mapping of timezone identifier to tzinfo
        """
        self._zones = dict(zones)

    def resolve(self, name: str) -> Result[dt.tzinfo]:
        try:
            return Ok(self._zones[name])
        except (KeyError, TypeError):
            return Err(InvalidTimezoneError(name))

    def __contains__(self, name: object) -> bool:
        return name in self._zones

"""IANA timezone identifier value type.

A TimeZoneId is a plain string that has been checked against the IANA
timezone database. Use it as a pydantic field type to reject unknown zones
at model construction time.
"""

from typing import Annotated
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AfterValidator

from .errors import InvalidTimezoneError
from .result import Err, Ok, Result


def load_zone(name: str) -> Result[ZoneInfo]:
    """Look up an IANA timezone in the tz database.

    Args:
        name: IANA timezone identifier (e.g., "America/New_York")

    Returns:
        Ok(ZoneInfo) if the zone exists, Err(InvalidTimezoneError) otherwise.
    """
    if not isinstance(name, str) or not name.strip():
        return Err(InvalidTimezoneError(name))

    try:
        return Ok(ZoneInfo(name))
    except (ZoneInfoNotFoundError, ValueError, OSError):
        # OSError covers keys that point at tzdata directories ("America")
        return Err(InvalidTimezoneError(name))


def validate_timezone(name: str) -> str:
    """Validate an IANA timezone identifier.

    Args:
        name: IANA timezone string to validate

    Returns:
        The identifier unchanged.

    Raises:
        InvalidTimezoneError: If the timezone is unknown or malformed
    """
    load_zone(name).unwrap()
    return name


TimeZoneId = Annotated[str, AfterValidator(validate_timezone)]

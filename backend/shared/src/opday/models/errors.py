"""Standard error codes for operational-day calculations.

Every failure raised by the calculator carries an ErrorCode so request
handlers can map it to a consistent response without inspecting messages.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard error codes for the operational-day core."""

    # Timezone error codes (ERR_TZ_001-ERR_TZ_002)
    INVALID_TIMEZONE = "ERR_TZ_001"
    INVALID_DAY_START_HOUR = "ERR_TZ_002"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_TIMEZONE: "Invalid timezone",
    ErrorCode.INVALID_DAY_START_HOUR: "Operational day start hour must be between 0 and 23",
}

# Recovery suggestions for callers
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.INVALID_TIMEZONE: (
        "Check the property's configured timezone is an IANA identifier "
        "such as America/New_York"
    ),
    ErrorCode.INVALID_DAY_START_HOUR: "Set OPERATIONAL_DAY_START_HOUR to a value from 0 to 23",
}


class ToolError(BaseModel):
    """Standard error response format for failed operations."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ToolError":
        """Create a ToolError from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            A ToolError with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class OperationalDayError(Exception):
    """Base exception for operational-day failures.

    Can be caught and converted to a ToolError for API responses.
    """

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self._describe())

    def _describe(self) -> str:
        return self.message

    def to_tool_error(self) -> ToolError:
        """Convert this exception to a ToolError for responses."""
        return ToolError.from_code(self.code, self.details)


class InvalidTimezoneError(OperationalDayError, ValueError):
    """Raised when an IANA timezone identifier cannot be resolved.

    Also a ValueError so pydantic validators report it as a field error.
    """

    def __init__(self, timezone: str):
        self.timezone = timezone
        super().__init__(ErrorCode.INVALID_TIMEZONE, {"timezone": str(timezone)})

    def _describe(self) -> str:
        return f"{self.message}: {self.timezone}"


class InvalidDayStartHourError(OperationalDayError, ValueError):
    """Raised when the configured operational day start hour is out of range."""

    def __init__(self, hour: object):
        self.hour = hour
        super().__init__(ErrorCode.INVALID_DAY_START_HOUR, {"hour": str(hour)})

    def _describe(self) -> str:
        return f"{self.message}, got {self.hour}"

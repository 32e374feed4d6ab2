"""FastAPI exception handlers for operational-day errors.

Converts domain errors (OperationalDayError) to HTTP responses whose JSON
body matches ToolError:
- 400 Bad Request: the caller supplied an unusable timezone
- 500 Internal Server Error: the service itself is misconfigured

Usage:
    from opday_api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from opday.models.errors import ErrorCode, OperationalDayError
from opday.utils.logging import get_logger

logger = get_logger(__name__)

# Map ErrorCode to HTTP status codes
ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_TIMEZONE: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DAY_START_HOUR: HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode.

    Args:
        code: The ErrorCode to map

    Returns:
        HTTP status code, defaults to 400 if not explicitly mapped.
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def operational_day_error_handler(
    request: Request, exc: OperationalDayError
) -> JSONResponse:
    """Convert an OperationalDayError to a ToolError JSON response.

    Args:
        request: The incoming request
        exc: The domain exception

    Returns:
        JSONResponse with error details and mapped status code.
    """
    status_code = get_http_status_for_error(exc.code)
    logger.warning(
        "%s %s failed: %s (%s)", request.method, request.url.path, exc, exc.code.value
    )

    return JSONResponse(
        status_code=status_code,
        content=exc.to_tool_error().model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(OperationalDayError, operational_day_error_handler)  # type: ignore[arg-type]

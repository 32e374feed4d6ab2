"""Correlation ID middleware for request tracing.

The correlation ID of a request is, in order of preference:
1. the caller's X-Correlation-ID header
2. the Lambda request ID Mangum puts in the ASGI scope ("aws.context")
3. a freshly generated UUID

It is echoed back on the response and cleared when the request ends.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from opday.utils.logging import clear_correlation_id, get_logger, set_correlation_id

CORRELATION_ID_HEADER = "X-Correlation-ID"
PROPERTY_TIMEZONE_HEADER = "X-Property-Timezone"

logger = get_logger(__name__)


def _lambda_request_id(request: Request) -> str | None:
    context = request.scope.get("aws.context")
    return getattr(context, "aws_request_id", None)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Tags every request with a correlation ID and logs its outcome."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = set_correlation_id(
            request.headers.get(CORRELATION_ID_HEADER) or _lambda_request_id(request)
        )

        try:
            response = await call_next(request)
            response.headers[CORRELATION_ID_HEADER] = correlation_id
            logger.debug(
                "%s %s -> %d (timezone=%s)",
                request.method,
                request.url.path,
                response.status_code,
                request.query_params.get("timezone")
                or request.headers.get(PROPERTY_TIMEZONE_HEADER, "-"),
            )
            return response
        finally:
            clear_correlation_id()

"""API request/response models.

Domain models (OperationalDayBoundary, DayTransitionValidation, ...) live in
opday.models; this package holds HTTP-layer shapes only.
"""

from opday_api.models.common import ErrorCode, HealthResponse, ToolError
from opday_api.models.day_transition import (
    DayTransitionIssuesRequest,
    DayTransitionIssuesResponse,
    DayTransitionRequest,
)
from opday_api.models.operational_day import (
    ContainsResponse,
    NightsResponse,
    OperationalDateResponse,
)

__all__ = [
    "ContainsResponse",
    "DayTransitionIssuesRequest",
    "DayTransitionIssuesResponse",
    "DayTransitionRequest",
    "ErrorCode",
    "HealthResponse",
    "NightsResponse",
    "OperationalDateResponse",
    "ToolError",
]

"""API routes package.

Routers are organized by domain:

- health: Health check endpoints
- operational_day: Operational date, boundaries, nights, containment
- day_transition: Day-transition validation

All routers are registered in main.py with /api prefix.
"""

from opday_api.routes.day_transition import router as day_transition_router
from opday_api.routes.health import router as health_router
from opday_api.routes.operational_day import router as operational_day_router

__all__ = [
    "day_transition_router",
    "health_router",
    "operational_day_router",
]

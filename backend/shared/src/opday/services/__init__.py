"""Operational-day services."""

from .day_transition import DayTransitionValidator
from .operational_day import (
    DEFAULT_DAY_START_HOUR,
    OperationalDayCalculator,
    get_operational_day_calculator,
    reset_operational_day_calculator,
)
from .timezone_resolver import StaticTimezoneResolver, TimezoneResolver, ZoneInfoResolver

__all__ = [
    "DEFAULT_DAY_START_HOUR",
    "DayTransitionValidator",
    "OperationalDayCalculator",
    "StaticTimezoneResolver",
    "TimezoneResolver",
    "ZoneInfoResolver",
    "get_operational_day_calculator",
    "reset_operational_day_calculator",
]

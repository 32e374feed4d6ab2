"""Operational-day boundary calculations for property management.

A property's business day starts at 06:00 local time rather than midnight.
This package decides which operational day an instant belongs to and
derives day boundaries and night counts from it.
"""

__version__ = "0.1.0"

"""REST API over the operational-day calculator."""

__version__ = "0.1.0"

"""Request and greeting metrics."""

from .metrics import UNMATCHED_ROUTE, increment_greeting, observe_request

__all__ = ["UNMATCHED_ROUTE", "increment_greeting", "observe_request"]

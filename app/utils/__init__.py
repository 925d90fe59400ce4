"""Utility helpers for the greeting service."""

from .clock import Clock, format_rfc3339, get_clock, utc_now

__all__ = [
    "Clock",
    "format_rfc3339",
    "get_clock",
    "utc_now",
]

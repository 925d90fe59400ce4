"""Unit tests for the RFC 3339 clock helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.utils import format_rfc3339, get_clock, utc_now  # noqa: E402


def test_format_rfc3339_uses_zulu_suffix():
    moment = datetime(2024, 1, 1, 0, 0, 0, 123456, tzinfo=timezone.utc)

    assert format_rfc3339(moment) == "2024-01-01T00:00:00.123456Z"


def test_format_rfc3339_always_writes_microseconds():
    moment = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert format_rfc3339(moment) == "2024-01-01T00:00:00.000000Z"


def test_format_rfc3339_converts_offsets_to_utc():
    plus_two = timezone(timedelta(hours=2))
    moment = datetime(2024, 1, 1, 1, 30, tzinfo=plus_two)

    assert format_rfc3339(moment) == "2023-12-31T23:30:00.000000Z"


def test_format_rfc3339_treats_naive_values_as_utc():
    moment = datetime(2024, 6, 15, 12, 0, 0, 5)

    assert format_rfc3339(moment) == "2024-06-15T12:00:00.000005Z"


def test_utc_now_is_aware():
    now = utc_now()

    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)


def test_get_clock_returns_utc_now():
    assert get_clock() is utc_now

"""Wall-clock helpers producing RFC 3339 timestamps."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""

    return datetime.now(timezone.utc)


def format_rfc3339(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SS.ffffffZ``.

    Naive values are taken to be UTC already; aware values are converted.
    Microseconds are always written so rendered values sort in time order.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)

    return moment.replace(tzinfo=None).isoformat(timespec="microseconds") + "Z"


def get_clock() -> Clock:
    """Dependency returning the clock used to stamp responses."""

    return utc_now

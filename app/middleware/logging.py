"""Per-request logging middleware.

Each request produces one record on ``app.middleware.structured``. The
message is a colored one-line summary for the console; the record also
carries ``payload``, the same fields as compact JSON, which the request log
file handler writes out as JSON lines.
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger("app.middleware.structured")

COLOR_RESET = "\u001b[0m"
STATUS_COLORS = {
    2: "\u001b[32m",
    4: "\u001b[33m",
    5: "\u001b[31m",
}
COLOR_OTHER = "\u001b[36m"

SUMMARY_FIELDS = ("timestamp", "method", "url", "client_ip", "status_code", "duration_ms")


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, URL, client, status and latency for every request."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start_time = time.perf_counter()
        entry = self._describe(request)

        try:
            response = await call_next(request)
        except Exception as exc:
            entry.update(
                status_code=500,
                duration_ms=self._elapsed_ms(start_time),
                error=repr(exc),
            )
            logger.exception(
                self._summary(entry), extra={"payload": self._to_json(entry)}
            )
            raise

        entry.update(status_code=response.status_code, duration_ms=self._elapsed_ms(start_time))
        logger.info(self._summary(entry), extra={"payload": self._to_json(entry)})
        return response

    @staticmethod
    def _describe(request: Request) -> dict[str, Any]:
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "method": request.method,
            "url": str(request.url),
            "client_ip": request.client.host if request.client else None,
        }

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)

    @staticmethod
    def _summary(entry: dict[str, Any]) -> str:
        """Render ``entry`` as ``key=value`` pairs colored by status class."""

        status = entry.get("status_code") or 0
        color = STATUS_COLORS.get(status // 100, COLOR_OTHER)
        text = ", ".join(
            f"{name}={'-' if entry.get(name) is None else entry[name]}"
            for name in SUMMARY_FIELDS
        )
        return f"{color}{text}{COLOR_RESET}"

    @staticmethod
    def _to_json(entry: dict[str, Any]) -> str:
        return json.dumps(entry, default=str, separators=(",", ":"))

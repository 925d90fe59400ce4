"""Telemetry middleware for request instrumentation."""

from __future__ import annotations

import time
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from app.telemetry import observe_request


class TelemetryMiddleware(BaseHTTPMiddleware):
    """Feed request counts and latencies into the Prometheus collectors."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start_time = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            # Routing fills scope["route"], so resolve only after call_next.
            observe_request(
                request.method,
                self._matched_template(request),
                status_code,
                time.perf_counter() - start_time,
            )

        return response

    @staticmethod
    def _matched_template(request: Request) -> Optional[str]:
        """Return the template of the route that handled ``request``, if any."""

        route = request.scope.get("route")
        return getattr(route, "path", None) or None

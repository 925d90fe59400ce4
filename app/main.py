"""Application entry point and FastAPI app factory."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .config.settings import settings
from .controllers import hello
from .middleware import StructuredLoggingMiddleware, TelemetryMiddleware
from .views import ErrorResponse

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class _PayloadFormatter(logging.Formatter):
    """Write the JSON ``payload`` attached by StructuredLoggingMiddleware."""

    def format(self, record: logging.LogRecord) -> str:
        return getattr(record, "payload", None) or record.getMessage()


def _rotating_handler(path: str, formatter: logging.Formatter) -> RotatingFileHandler:
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=1_000_000,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def _configure_logging() -> None:
    """Route logs to stdout and to the configured rotating files.

    An empty ``log_file`` or ``request_log_file`` turns that file off.
    """

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(stdout_handler)
    if settings.log_file:
        root_logger.addHandler(
            _rotating_handler(settings.log_file, logging.Formatter(LOG_FORMAT))
        )
    root_logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    request_logger = logging.getLogger("app.middleware.structured")
    request_logger.handlers.clear()
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter("%(message)s"))
    request_logger.addHandler(console)
    if settings.request_log_file:
        request_logger.addHandler(
            _rotating_handler(settings.request_log_file, _PayloadFormatter())
        )
    request_logger.setLevel(logging.INFO)
    request_logger.propagate = False

    # Requests are already logged by StructuredLoggingMiddleware.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        description="Greeting endpoint returning a message and the server time",
    )

    app.add_middleware(TelemetryMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.include_router(hello.router)

    if settings.metrics_enabled:

        @app.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            """Expose application metrics for Prometheus scraping."""

            return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error on %s %s: %r", request.method, request.url.path, exc
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(detail="Internal server error").model_dump(),
        )

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )

"""
Observability helpers.

Adds correlation IDs and structured logging context to requests,
and configures the application logger.
"""

import time
import uuid
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from parcel_tracker.app.core.config import settings


logger = logging.getLogger("parcel_tracker")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the application logger."""
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def _resource_of(path: str) -> str:
    """First path segment after the API version, e.g. ``parcels`` for ``/v1/parcels/7``."""
    segments = [s for s in path.split("/") if s]
    if len(segments) >= 2 and segments[0] == settings.api_version:
        return segments[1]
    return segments[0] if segments else "root"


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Tags each request with a correlation ID and logs one line per request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        started = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Correlation-ID"] = correlation_id
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"

        log_data = {
            "correlation_id": correlation_id,
            "method": request.method,
            "path": request.url.path,
            "resource": _resource_of(request.url.path),
            "status_code": response.status_code,
            "duration_ms": round(duration_ms, 2),
        }
        if response.status_code >= 500:
            logger.error("%s %s failed", request.method, request.url.path, extra=log_data)
        elif response.status_code >= 400:
            logger.warning("%s %s rejected", request.method, request.url.path, extra=log_data)
        else:
            logger.info("%s %s", request.method, request.url.path, extra=log_data)

        return response

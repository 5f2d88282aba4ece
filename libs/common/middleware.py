"""Observability middleware for FastAPI.

Provides:
- Request ID generation and propagation
- Request/response timing
- Request lifecycle logging

Usage:
    from libs.common.middleware import add_observability_middleware

    app = FastAPI()
    add_observability_middleware(app)
"""

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from libs.common.logging import configure_logging, get_logger, set_request_id

logger = get_logger(__name__)

QUIET_PATHS = {"/health"}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Sets the request id for log correlation and logs each request's outcome.

    An incoming X-Request-ID header is reused, otherwise a new id is generated.
    The id is echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        set_request_id(request_id)

        start_time = time.perf_counter()
        quiet = request.url.path in QUIET_PATHS

        if not quiet:
            logger.debug("Request started: %s %s", request.method, request.url.path)

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.exception(
                "Request failed: %s %s (%.2fms)",
                request.method,
                request.url.path,
                duration_ms,
            )
            raise
        finally:
            set_request_id(None)

        duration_ms = (time.perf_counter() - start_time) * 1000
        if not quiet:
            log = logger.warning if response.status_code >= 400 else logger.info
            log(
                "%s %s -> %d (%.2fms)",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                extra={
                    "extra_fields": {
                        "status_code": response.status_code,
                        "duration_ms": round(duration_ms, 2),
                    }
                },
            )

        response.headers["X-Request-ID"] = request_id
        return response


def add_observability_middleware(app: FastAPI) -> None:
    """
    Configure logging and add the request context middleware to an app.
    """
    configure_logging()
    app.add_middleware(RequestContextMiddleware)

"""Exception handlers giving every API error the same `{"detail": ...}` shape."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from libs.common.errors import StoreError
from libs.common.logging import get_logger

logger = get_logger(__name__)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s on %s %s: %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc.message,
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def add_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)

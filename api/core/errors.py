"""
Exception handlers that keep storage failures scoped to the request.

Not-found and malformed-id errors are raised as HTTPException by the
feature services. Anything coming out of the DB driver (or the socket under
it) becomes a 500 here and the process keeps serving.
"""

from __future__ import annotations

import asyncio
import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

STORAGE_ERRORS: tuple[type[BaseException], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    # command_timeout; not an OSError before Python 3.11.
    asyncio.TimeoutError,
)


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "storage_error method=%s path=%s error=%s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
        extra={"path": request.url.path},
    )
    # Driver messages can include SQL and connection details; never return them.
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error."},
    )


def register_error_handlers(app: FastAPI) -> None:
    for exc_type in STORAGE_ERRORS:
        app.add_exception_handler(exc_type, storage_error_handler)

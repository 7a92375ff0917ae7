"""
HTTP middleware shared by every route.
"""

from __future__ import annotations

from typing import Awaitable, Callable

from fastapi import Request, Response

JSON_CONTENT_TYPE = "application/json"


async def json_content_type_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """
    Every response is declared as JSON, errors included.
    """
    response = await call_next(request)
    response.headers["content-type"] = JSON_CONTENT_TYPE
    return response

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any
from uuid import uuid4

from fastapi import Request

logger = logging.getLogger("rio_sessions.http")


async def request_logging_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Any]],
) -> Any:
    # Bodies carry raw session tokens and are never logged.
    request_id = request.headers.get("x-request-id", uuid4().hex)
    request_line = _format_request_line(request)
    logger.info(
        "request_received",
        extra={
            "data": {
                "request_id": request_id,
                "request_line": request_line,
                "method": request.method,
                "path": request.url.path,
                "content_length": request.headers.get("content-length"),
            },
        },
    )

    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception(
            "request_failed",
            extra={
                "data": {
                    "request_id": request_id,
                    "request_line": request_line,
                    "method": request.method,
                    "path": request.url.path,
                },
            },
        )
        raise

    duration = time.perf_counter() - start
    logger.info(
        "request_completed",
        extra={
            "data": {
                "request_id": request_id,
                "request_line": request_line,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration * 1000, 2),
            },
        },
    )
    return response


def _format_request_line(request: Request) -> str:
    query = request.url.query
    if query:
        return f"{request.method} {request.url.path}?{query}"
    return f"{request.method} {request.url.path}"

"""HTTP route definitions for the session API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from rio_sessions.application.register_session import RegisterSession
from rio_sessions.errors import SessionParseError, SessionStoreError
from rio_sessions.infrastructure.http.responses import (
    DataResponse,
    InfoResponse,
    ResponseCode,
    SessionDTO,
    make_data_response,
    make_info_response,
    serialize_session,
)

logger = logging.getLogger("rio_sessions.http")


@dataclass(frozen=True)
class SessionRouteDeps:
    register_session: RegisterSession


def add_session_routes(app: FastAPI, dependency_provider: Callable[[], SessionRouteDeps]) -> None:
    def get_dependencies() -> SessionRouteDeps:
        return dependency_provider()

    @app.post(
        "/sessions",
        response_model=SessionDTO,
        description="Create a session from the raw token in the request body; an empty body is anonymous.",
    )
    async def create_session(
        request: Request,
        deps: SessionRouteDeps = Depends(get_dependencies),  # noqa: B008
    ) -> JSONResponse:
        try:
            raw_token = await _read_raw_token(request)
            session = deps.register_session.execute(raw_token)
        except SessionParseError as exc:
            logger.info(
                "session token rejected",
                extra={"data": {"kind": exc.kind.value, "reason": str(exc)}},
            )
            return make_info_response(
                InfoResponse(code=ResponseCode.INVALID_INPUT, msg="Invalid session token")
            )
        except SessionStoreError as exc:
            logger.exception(
                "session store failed",
                extra={"data": {"error_type": type(exc).__name__}},
            )
            return make_info_response(
                InfoResponse(code=ResponseCode.INTERNAL_SERVER_ERROR, msg="Failed to add to database")
            )

        return make_data_response(DataResponse(code=ResponseCode.OK, data=serialize_session(session)))


async def _read_raw_token(request: Request) -> str | None:
    body = await request.body()
    if not body:
        return None
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SessionParseError("session token body is not valid utf-8") from exc


__all__ = ["SessionRouteDeps", "add_session_routes"]

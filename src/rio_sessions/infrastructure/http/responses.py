"""Response envelopes returned by the session HTTP API."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic import JsonValue as PydanticJsonValue

from rio_sessions.domain.session import Session


class ResponseCode(IntEnum):
    """Response codes used by the API, mapped to HTTP status codes."""

    OK = 200
    INVALID_INPUT = 400
    INTERNAL_SERVER_ERROR = 500


@dataclass(frozen=True, slots=True)
class InfoResponse:
    """Textual response describing an outcome, without further data."""

    code: ResponseCode
    msg: str
    info: str | None = None


@dataclass(frozen=True, slots=True)
class DataResponse:
    """Response whose JSON body is ``data`` itself."""

    code: ResponseCode
    data: PydanticJsonValue | None = None


class InfoBodyDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    msg: str
    info: str | None = None


class SessionTokenDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: int = Field(ge=0)
    value: str


class SessionDTO(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    internal_id: str = Field(alias="internalId")
    token: SessionTokenDTO | None = None

    @classmethod
    def from_session(cls, session: Session) -> SessionDTO:
        token = None
        if session.token is not None:
            token = SessionTokenDTO(intent=int(session.token.intent), value=session.token.value)
        return cls(internal_id=session.internal_id, token=token)


def make_info_response(resp: InfoResponse | str) -> JSONResponse:
    if isinstance(resp, str):
        resp = InfoResponse(code=ResponseCode.OK, msg=resp)
    body = InfoBodyDTO(msg=resp.msg, info=resp.info)
    return JSONResponse(status_code=int(resp.code), content=body.model_dump(mode="json"))


def make_data_response(resp: DataResponse) -> JSONResponse:
    return JSONResponse(status_code=int(resp.code), content=resp.data)


def serialize_session(session: Session) -> dict[str, PydanticJsonValue]:
    return SessionDTO.from_session(session).model_dump(mode="json", by_alias=True)


__all__ = [
    "DataResponse",
    "InfoBodyDTO",
    "InfoResponse",
    "ResponseCode",
    "SessionDTO",
    "SessionTokenDTO",
    "make_data_response",
    "make_info_response",
    "serialize_session",
]

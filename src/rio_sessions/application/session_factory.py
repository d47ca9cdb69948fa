"""Session creation use case."""

from __future__ import annotations

from collections.abc import Callable
from uuid import uuid4

from rio_sessions.domain.parser import parse_session_token
from rio_sessions.domain.session import Session
from rio_sessions.domain.token import SessionTokenString

IdFactory = Callable[[], str]


def new_internal_id() -> str:
    return str(uuid4())


class SessionFactory:
    """Builds sessions from an optional raw token and a fresh identifier."""

    def __init__(self, *, id_factory: IdFactory | None = None) -> None:
        self._id_factory = id_factory or new_internal_id

    def create(self, raw_token: SessionTokenString | None = None) -> Session:
        """Create a session, parsing ``raw_token`` when one was supplied.

        Raises:
            SessionParseError: when ``raw_token`` is given but malformed.
        """
        token = None if raw_token is None else parse_session_token(raw_token)
        return Session(internal_id=self._id_factory(), token=token)


def create_session(
    raw_token: SessionTokenString | None = None,
    *,
    id_factory: IdFactory | None = None,
) -> Session:
    """Shortcut for ``SessionFactory(id_factory=...).create(raw_token)``."""
    return SessionFactory(id_factory=id_factory).create(raw_token)


__all__ = ["IdFactory", "SessionFactory", "create_session", "new_internal_id"]

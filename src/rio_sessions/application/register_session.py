"""Create a session for an incoming request and persist it."""

from __future__ import annotations

import logging

from rio_sessions.application.ports.session_store import SessionStorePort
from rio_sessions.application.session_factory import SessionFactory
from rio_sessions.domain.session import Session
from rio_sessions.domain.token import SessionTokenString

logger = logging.getLogger("rio_sessions.register_session")


class RegisterSession:
    """Coordinates session creation and storage."""

    def __init__(self, factory: SessionFactory, store: SessionStorePort) -> None:
        self._factory = factory
        self._store = store

    def execute(self, raw_token: SessionTokenString | None = None) -> Session:
        """Create a session and persist it unless it is anonymous.

        Raises:
            SessionParseError: when ``raw_token`` is malformed; nothing is stored.
            SessionStoreError: when the store rejects the session.
        """
        session = self._factory.create(raw_token)
        if session.token is None:
            logger.debug(
                "anonymous session not persisted",
                extra={"data": {"internal_id": session.internal_id}},
            )
            return session

        self._store.put(session)
        logger.info(
            "session registered",
            extra={
                "data": {
                    "internal_id": session.internal_id,
                    "intent": session.token.intent.name.lower(),
                }
            },
        )
        return session


__all__ = ["RegisterSession"]

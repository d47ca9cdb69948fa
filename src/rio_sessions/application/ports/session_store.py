"""Port describing persistence of issued sessions."""

from __future__ import annotations

from typing import Protocol

from rio_sessions.domain.session import Session


class SessionStorePort(Protocol):
    """Durable storage for sessions keyed by ``internal_id``."""

    def put(self, session: Session) -> None:
        """Store ``session``, replacing any record with the same id.

        Raises:
            SessionStoreError: when the backing store rejects the write.
        """

    def get(self, internal_id: str) -> Session | None:
        """Return the session identified by ``internal_id``."""


__all__ = ["SessionStorePort"]

"""In-memory implementation of the session store port."""

from __future__ import annotations

from collections.abc import Mapping
from threading import Lock
from typing import Any

from rio_sessions.application.ports.session_store import SessionStorePort
from rio_sessions.domain.session import Session
from rio_sessions.domain.token import SessionToken, SessionTokenIntent

SessionRecord = dict[str, Any]


def session_to_record(session: Session) -> SessionRecord:
    """Return the table item stored for ``session``."""
    token: dict[str, Any] | None = None
    if session.token is not None:
        token = {"intent": int(session.token.intent), "token": session.token.value}
    return {"internalId": session.internal_id, "token": token}


def session_from_record(record: Mapping[str, Any]) -> Session:
    token_item = record.get("token")
    token = None
    if token_item is not None:
        token = SessionToken(
            intent=SessionTokenIntent(int(token_item["intent"])),
            value=str(token_item["token"]),
        )
    return Session(internal_id=str(record["internalId"]), token=token)


class InMemorySessionStore(SessionStorePort):
    """Stores session records in memory for the lifetime of the process."""

    def __init__(self, *, table: str = "sessions") -> None:
        self._table = table
        self._records: dict[str, SessionRecord] = {}
        self._lock = Lock()

    @property
    def table(self) -> str:
        return self._table

    def put(self, session: Session) -> None:
        record = session_to_record(session)
        with self._lock:
            self._records[session.internal_id] = record

    def get(self, internal_id: str) -> Session | None:
        with self._lock:
            record = self._records.get(internal_id)
        if record is None:
            return None
        return session_from_record(record)

    def records(self) -> tuple[SessionRecord, ...]:
        with self._lock:
            return tuple(dict(record) for record in self._records.values())


__all__ = [
    "InMemorySessionStore",
    "SessionRecord",
    "session_from_record",
    "session_to_record",
]

from __future__ import annotations

import pytest

from rio_sessions.application.ports.session_store import SessionStorePort
from rio_sessions.application.register_session import RegisterSession
from rio_sessions.application.session_factory import SessionFactory
from rio_sessions.domain.session import Session
from rio_sessions.domain.token import SessionTokenIntent
from rio_sessions.errors import SessionParseError, SessionStoreError


class FakeSessionStore(SessionStorePort):
    def __init__(self) -> None:
        self.sessions: dict[str, Session] = {}

    def put(self, session: Session) -> None:
        self.sessions[session.internal_id] = session

    def get(self, internal_id: str) -> Session | None:
        return self.sessions.get(internal_id)


class FailingSessionStore(FakeSessionStore):
    def put(self, session: Session) -> None:
        raise SessionStoreError("table unavailable")


def make_use_case(store: SessionStorePort) -> RegisterSession:
    return RegisterSession(SessionFactory(id_factory=lambda: "session-1"), store)


def test_tokened_session_is_persisted() -> None:
    store = FakeSessionStore()

    session = make_use_case(store).execute("rio:u:abc")

    assert store.get("session-1") == session
    assert session.has_intent(SessionTokenIntent.USER)


def test_anonymous_session_is_not_persisted() -> None:
    store = FakeSessionStore()

    session = make_use_case(store).execute(None)

    assert session.token is None
    assert store.sessions == {}


def test_malformed_token_stores_nothing() -> None:
    store = FakeSessionStore()

    with pytest.raises(SessionParseError):
        make_use_case(store).execute("rio:z:abc")

    assert store.sessions == {}


def test_store_errors_propagate() -> None:
    with pytest.raises(SessionStoreError):
        make_use_case(FailingSessionStore()).execute("rio:a:abc")

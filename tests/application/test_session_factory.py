from __future__ import annotations

from collections.abc import Iterator
from uuid import UUID

import pytest

from rio_sessions.application.session_factory import SessionFactory, create_session
from rio_sessions.domain.session import has_intent
from rio_sessions.domain.token import SessionToken, SessionTokenIntent
from rio_sessions.errors import SessionParseError


def sequential_ids() -> Iterator[str]:
    counter = 0
    while True:
        counter += 1
        yield f"session-{counter}"


def test_anonymous_session_gets_fresh_id_and_no_token() -> None:
    ids = sequential_ids()
    factory = SessionFactory(id_factory=lambda: next(ids))

    first = factory.create()
    second = factory.create()

    assert first.internal_id == "session-1"
    assert second.internal_id == "session-2"
    assert first.token is None
    assert not any(has_intent(first, intent) for intent in SessionTokenIntent)


@pytest.mark.parametrize(
    ("raw", "intent"),
    [
        ("rio:a:abc", SessionTokenIntent.ACCOUNT),
        ("rio:p:abc", SessionTokenIntent.PROJECT),
        ("rio:u:abc", SessionTokenIntent.USER),
    ],
)
def test_session_carries_parsed_token(raw: str, intent: SessionTokenIntent) -> None:
    session = create_session(raw, id_factory=lambda: "fixed")

    assert session.internal_id == "fixed"
    assert session.token == SessionToken(intent=intent, value="abc")


def test_project_session_has_only_project_intent() -> None:
    session = create_session("rio:p:abc")

    assert has_intent(session, SessionTokenIntent.PROJECT)
    assert not has_intent(session, SessionTokenIntent.ACCOUNT)
    assert not has_intent(session, SessionTokenIntent.USER)


def test_internal_id_is_not_derived_from_token() -> None:
    first = create_session("rio:a:abc")
    second = create_session("rio:a:abc")

    assert first.internal_id != second.internal_id
    assert "abc" not in first.internal_id


def test_default_ids_are_uuid_strings() -> None:
    session = create_session()

    assert str(UUID(session.internal_id)) == session.internal_id


@pytest.mark.parametrize("raw", [":a:abc", "rio::abc", ""])
def test_malformed_token_raises_parse_error(raw: str) -> None:
    with pytest.raises(SessionParseError):
        create_session(raw)


def test_id_factory_called_once_per_session() -> None:
    calls: list[None] = []

    def id_factory() -> str:
        calls.append(None)
        return f"id-{len(calls)}"

    create_session("rio:u:abc", id_factory=id_factory)

    assert len(calls) == 1

from __future__ import annotations

import dataclasses

import pytest

from rio_sessions.domain.session import Session, has_intent
from rio_sessions.domain.token import SessionToken, SessionTokenIntent


def test_anonymous_session_has_no_intent() -> None:
    session = Session(internal_id="id-1")

    assert session.is_anonymous
    for intent in SessionTokenIntent:
        assert has_intent(session, intent) is False
        assert session.has_intent(intent) is False


def test_has_intent_matches_only_the_token_intent() -> None:
    session = Session(
        internal_id="id-1",
        token=SessionToken(intent=SessionTokenIntent.USER, value="abc"),
    )

    assert session.has_intent(SessionTokenIntent.USER)
    assert not session.has_intent(SessionTokenIntent.ACCOUNT)
    assert not session.has_intent(SessionTokenIntent.PROJECT)


def test_session_is_immutable() -> None:
    session = Session(internal_id="id-1")

    with pytest.raises(dataclasses.FrozenInstanceError):
        session.internal_id = "id-2"  # type: ignore[misc]


def test_session_requires_internal_id() -> None:
    with pytest.raises(ValueError):
        Session(internal_id="")


def test_intent_values_and_discriminators() -> None:
    assert [(intent.value, intent.discriminator) for intent in SessionTokenIntent] == [
        (0, "a"),
        (1, "p"),
        (2, "u"),
    ]
    assert SessionTokenIntent.from_discriminator("x") is None

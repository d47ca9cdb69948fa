"""Per-request session record."""

from __future__ import annotations

from dataclasses import dataclass

from rio_sessions.domain.token import SessionToken, SessionTokenIntent


@dataclass(frozen=True, slots=True)
class Session:
    """Session information for the current request.

    ``token`` is ``None`` for anonymous sessions, i.e. when no raw token was
    supplied at creation time.
    """

    internal_id: str
    token: SessionToken | None = None

    def __post_init__(self) -> None:
        if not self.internal_id:
            raise ValueError("internal_id must be non-empty")

    @property
    def is_anonymous(self) -> bool:
        return self.token is None

    def has_intent(self, intent: SessionTokenIntent) -> bool:
        return has_intent(self, intent)


def has_intent(session: Session, intent: SessionTokenIntent) -> bool:
    """Return ``True`` when the session carries a token with ``intent``."""
    return session.token is not None and session.token.intent == intent


__all__ = ["Session", "has_intent"]

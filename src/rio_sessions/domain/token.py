"""Session token grammar: ``rio:<discriminator>:<value>``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

TOKEN_PREFIX = "rio"
TOKEN_SEPARATOR = ":"
TOKEN_SEGMENT_COUNT = 3
TOKEN_MAX_LENGTH = 100

SessionTokenString = str
"""The full raw ``rio:a:value`` string, not only its value segment."""


class SessionTokenIntent(IntEnum):
    """Access intent (or level) requested by a session token."""

    ACCOUNT = 0
    PROJECT = 1
    USER = 2

    @property
    def discriminator(self) -> str:
        return _DISCRIMINATOR_BY_INTENT[self]

    @classmethod
    def from_discriminator(cls, discriminator: str) -> SessionTokenIntent | None:
        """Return the intent for a one-character discriminator, or ``None``."""
        return _INTENT_BY_DISCRIMINATOR.get(discriminator)


_INTENT_BY_DISCRIMINATOR: dict[str, SessionTokenIntent] = {
    "a": SessionTokenIntent.ACCOUNT,
    "p": SessionTokenIntent.PROJECT,
    "u": SessionTokenIntent.USER,
}
_DISCRIMINATOR_BY_INTENT: dict[SessionTokenIntent, str] = {
    intent: discriminator for discriminator, intent in _INTENT_BY_DISCRIMINATOR.items()
}

INTENT_DISCRIMINATORS: frozenset[str] = frozenset(_INTENT_BY_DISCRIMINATOR)


@dataclass(frozen=True, slots=True)
class SessionToken:
    """Request-provided token information for more granular access."""

    intent: SessionTokenIntent
    value: str

    def to_raw(self) -> SessionTokenString:
        """Render the token back into its wire form."""
        return TOKEN_SEPARATOR.join((TOKEN_PREFIX, self.intent.discriminator, self.value))


__all__ = [
    "INTENT_DISCRIMINATORS",
    "SessionToken",
    "SessionTokenIntent",
    "SessionTokenString",
    "TOKEN_MAX_LENGTH",
    "TOKEN_PREFIX",
    "TOKEN_SEGMENT_COUNT",
    "TOKEN_SEPARATOR",
]

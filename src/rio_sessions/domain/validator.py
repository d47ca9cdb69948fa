"""Light admission check for raw session token strings."""

from __future__ import annotations

from rio_sessions.domain.token import (
    INTENT_DISCRIMINATORS,
    TOKEN_MAX_LENGTH,
    TOKEN_PREFIX,
    TOKEN_SEGMENT_COUNT,
    TOKEN_SEPARATOR,
    SessionTokenString,
)

_PREFIX_WITH_SEPARATOR = TOKEN_PREFIX + TOKEN_SEPARATOR


def validate_session_token(raw: SessionTokenString) -> bool:
    """Return ``True`` when ``raw`` looks like a well-formed session token.

    Stricter than :func:`~rio_sessions.domain.parser.parse_session_token`:
    tokens over ``TOKEN_MAX_LENGTH`` characters and values containing a colon
    are rejected here even though they parse.
    """
    if len(raw) > TOKEN_MAX_LENGTH or not raw.startswith(_PREFIX_WITH_SEPARATOR):
        return False

    segments = raw.split(TOKEN_SEPARATOR)
    if len(segments) != TOKEN_SEGMENT_COUNT or len(segments[1]) != 1:
        return False

    return segments[1] in INTENT_DISCRIMINATORS


__all__ = ["validate_session_token"]

"""Full parsing of raw session token strings."""

from __future__ import annotations

from rio_sessions.domain.token import (
    TOKEN_PREFIX,
    TOKEN_SEGMENT_COUNT,
    TOKEN_SEPARATOR,
    SessionToken,
    SessionTokenIntent,
    SessionTokenString,
)
from rio_sessions.errors import ParseErrorKind, SessionParseError


def parse_session_token(raw: SessionTokenString) -> SessionToken:
    """Parse a raw session token such as ``rio:a:qfwewffw``.

    The value segment keeps any further colons, so ``rio:a:x:y`` parses to
    the value ``x:y``. No length limit is applied here.

    Raises:
        SessionParseError: when the prefix, segment count or intent
            discriminator is wrong.
    """
    segments = raw.split(TOKEN_SEPARATOR, TOKEN_SEGMENT_COUNT - 1)
    if len(segments) != TOKEN_SEGMENT_COUNT or segments[0] != TOKEN_PREFIX:
        raise SessionParseError(kind=ParseErrorKind.SHAPE)
    _, discriminator, value = segments
    return SessionToken(intent=_parse_intent(discriminator), value=value)


def _parse_intent(discriminator: str) -> SessionTokenIntent:
    if len(discriminator) != 1:
        raise SessionParseError(
            "Invalid session intent discriminator",
            kind=ParseErrorKind.DISCRIMINATOR,
        )
    intent = SessionTokenIntent.from_discriminator(discriminator)
    if intent is None:
        raise SessionParseError(
            f"Unknown session intent discriminator {discriminator!r} provided",
            kind=ParseErrorKind.DISCRIMINATOR,
        )
    return intent


__all__ = ["parse_session_token"]

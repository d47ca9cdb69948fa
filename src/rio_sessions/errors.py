"""Domain-specific exceptions shared across session components."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Which part of a raw session token failed to parse."""

    SHAPE = "shape"
    DISCRIMINATOR = "discriminator"


class SessionParseError(ValueError):
    """Raised when a raw session token string is malformed."""

    def __init__(
        self,
        message: str = "Invalid session token",
        *,
        kind: ParseErrorKind = ParseErrorKind.SHAPE,
    ) -> None:
        super().__init__(message)
        self.kind = kind


class SessionStoreError(RuntimeError):
    """Raised when an issued session cannot be persisted."""


__all__ = [
    "ParseErrorKind",
    "SessionParseError",
    "SessionStoreError",
]

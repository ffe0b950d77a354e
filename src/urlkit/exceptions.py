"""src/urlkit/exceptions.py

urlkit Exceptions hierarchy.
"""

from enum import Enum
from typing import Optional

__all__ = [
    "ErrorKind",
    "UrlkitError",
    "UrlError",
    "MalformedUrlError",
    "InvalidPortError",
    "InvalidEscapeError",
]


class ErrorKind(Enum):
    """Classification of URL parsing failures."""

    MALFORMED_URL = "malformed_url"
    INVALID_PORT = "invalid_port"
    INVALID_ESCAPE = "invalid_escape"


class UrlkitError(Exception):
    """Base exception for all urlkit errors."""


class UrlError(UrlkitError, ValueError):
    """
    Base exception for URL decomposition errors.

    Attributes:
        kind: The ErrorKind classification of the failure.
        offset: Character offset into the input where the failure was
            detected, or None if it could not be determined.
    """

    kind: ErrorKind = ErrorKind.MALFORMED_URL
    default_message = "Malformed URL"

    def __init__(self, message: Optional[str] = None, offset: Optional[int] = None):
        self.offset = offset
        super().__init__(message or self.default_message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.offset is None:
            return message
        return f"{message} (at offset {self.offset})"

    def shifted(self, delta: int) -> "UrlError":
        """Return a copy of this error with its offset moved by ``delta``."""
        offset = None if self.offset is None else self.offset + delta
        return type(self)(self.args[0], offset)


class MalformedUrlError(UrlError):
    """Input does not match the scheme/authority/path grammar."""

    kind = ErrorKind.MALFORMED_URL
    default_message = "Malformed URL"


class InvalidPortError(UrlError):
    """Port is non-numeric, empty, or outside [0, 65535]."""

    kind = ErrorKind.INVALID_PORT
    default_message = "Invalid port"


class InvalidEscapeError(UrlError):
    """A '%' in the path is not followed by two hex digits."""

    kind = ErrorKind.INVALID_ESCAPE
    default_message = "Invalid percent-escape"

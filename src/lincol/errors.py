"""Errors raised while building a position table."""

from __future__ import annotations


class LincolError(Exception):
    """Base class for all lincol errors."""


class ParseError(LincolError):
    """Raised when the YAML/JSON content cannot be parsed.

    ``line`` and ``column`` follow the ``Position`` convention and are
    ``None`` when the parser did not report a location.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class DecodeError(LincolError):
    """Raised when source bytes are not valid UTF-8 text."""


class SourceReadError(LincolError):
    """Raised when the source cannot be read."""


class DocumentTooLargeError(LincolError):
    """Raised when a document exceeds the configured size limit."""

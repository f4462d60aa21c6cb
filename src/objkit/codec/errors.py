"""Error hierarchy for the JSON bridge."""

from __future__ import annotations


class CodecError(Exception):
    """Base error for all codec failures."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class EncodeError(CodecError):
    """A value is cyclic or cannot be represented as JSON text."""


class DecodeError(CodecError):
    """JSON text is malformed or does not describe an object."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


class UnsupportedTemplateError(CodecError):
    """The decode template's kind has no blank-and-overlay capability."""

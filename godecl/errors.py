"""Exception hierarchy for declaration extraction."""

from __future__ import annotations


class ParseError(RuntimeError):
    """Base class for failures that abort a parse call."""


class SourceSyntaxError(ParseError):
    """Raised when the front end cannot parse the source text."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class RenderError(ParseError):
    """Raised when a syntax node cannot be rendered back to source text."""


class DecodeError(ParseError, ValueError):
    """Raised when a struct tag cannot be decoded."""


__all__ = ["DecodeError", "ParseError", "RenderError", "SourceSyntaxError"]

"""
Exception classes for jadeite

LexError and ParseError describe where the pipeline gave up. In the default
lenient mode they are collected and returned alongside partial results; in
strict mode they are raised.
"""

from typing import Optional


class JadeiteError(Exception):
    """Base exception for all jadeite errors"""


class LexError(JadeiteError):
    """
    Lexing stopped before the end of the source

    Attributes:
        reason: What went wrong (e.g., "unterminated attribute list")
        offset: Character offset where lexing stopped
        line: 1-based line of the offset, when known
        column: 1-based column of the offset, when known
    """

    def __init__(
        self,
        reason: str,
        offset: int,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.reason = reason
        self.offset = offset
        self.line = line
        self.column = column

        location = f"offset {offset}"
        if line is not None and column is not None:
            location = f"line {line}, column {column}"
        super().__init__(f"{reason} ({location})")


class ParseError(JadeiteError):
    """Raised in strict mode when a construct cannot be parsed"""

    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        self.message = message
        self.offset = offset
        if offset is not None:
            message = f"{message} (offset {offset})"
        super().__init__(message)

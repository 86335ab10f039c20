"""
Token models for the jadeite lexer

The lexer turns template source into a flat, ordered list of Token objects.
Nesting is not represented in the token stream itself: INDENT and OUTDENT
markers bracket indented blocks and the parser rebuilds the tree from them.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..lib.errors import LexError


class TokenType(Enum):
    """Kinds of token produced by the lexer"""
    DOCTYPE = "Doctype"
    NEWLINE = "NewLine"
    INDENT = "Indent"
    OUTDENT = "Outdent"
    TAG = "Tag"
    ID = "Id"
    CLASS = "Class"
    ATTR = "Attr"
    TEXT = "Text"
    COLON = "Colon"
    SLASH = "Slash"


@dataclass(frozen=True)
class Token:
    """
    A single lexeme with its span in the source

    Attributes:
        type: Token kind
        start: Offset of the first character of the lexeme
        end: Offset one past the last character (half-open span)
        name: Payload for DOCTYPE, TAG, ID, CLASS and ATTR tokens
        value: ATTR value or TEXT body
        level: Indentation level in effect after an INDENT or OUTDENT

    Offsets count characters (code points), so source[start:end] is
    always the exact lexeme.

    Example:
        For source "p(class=big)":
        Token(TokenType.TAG, 0, 1, name="p")
        Token(TokenType.ATTR, 1, 11, name="class", value="big")
    """
    type: TokenType
    start: int
    end: int
    name: str = ""
    value: str = ""
    level: int = 0

    def __str__(self) -> str:
        label = self.type.value
        if self.type == TokenType.ATTR:
            label = f"{label}({self.name}, {self.value})"
        elif self.type == TokenType.TEXT:
            label = f"{label}({self.value})"
        elif self.type in (TokenType.INDENT, TokenType.OUTDENT):
            label = f"{label}({self.level})"
        elif self.name:
            label = f"{label}({self.name})"
        return f"<{label}: {self.start}..{self.end}>"


@dataclass
class LexResult:
    """
    Output of a lexer run

    Attributes:
        tokens: Tokens produced, in source order. When lexing stopped early
                these are the tokens produced before the failure point.
        error: LexError describing why lexing stopped, or None if the whole
               source was consumed.
    """
    tokens: List[Token] = field(default_factory=list)
    error: Optional["LexError"] = None

    @property
    def complete(self) -> bool:
        return self.error is None

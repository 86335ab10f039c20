"""
Result models for parsing and compilation

Type-safe structures returned by the Parser and Compiler.
"""

from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from .tokens import Token

if TYPE_CHECKING:
    from .nodes import Node
    from ..lib.errors import LexError


@dataclass
class ParseDiagnostic:
    """
    A construct the parser skipped

    Recorded whenever parse_one() meets a token that cannot start a node,
    or a block-closing OUTDENT turns up outside any block. The skipped
    construct becomes an EmptyNode in the tree.

    Attributes:
        message: Human-readable description
        token: Offending token, or None if input ended unexpectedly
    """
    message: str
    token: Optional[Token] = None

    def __str__(self) -> str:
        if self.token is None:
            return self.message
        return f"{self.message} at {self.token.start}..{self.token.end}"


@dataclass
class CompileResult:
    """
    Everything produced by one run of the pipeline

    Attributes:
        html: Rendered HTML (rendered from the partial tree if lexing stopped)
        tokens: Tokens produced by the lexer
        nodes: Top-level nodes produced by the parser
        lex_error: Why lexing stopped early, if it did
        diagnostics: Constructs the parser skipped
    """
    html: str
    tokens: List[Token] = field(default_factory=list)
    nodes: List["Node"] = field(default_factory=list)
    lex_error: Optional["LexError"] = None
    diagnostics: List[ParseDiagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.lex_error is None and not self.diagnostics

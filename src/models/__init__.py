"""
Models package for jadeite

Contains data structures and type definitions for the compilation pipeline.
"""

from .state import ProgramState, pipeline
from .tokens import Token, TokenType, LexResult
from .nodes import (
    Node,
    EmptyNode,
    TextNode,
    CommentNode,
    DoctypeNode,
    HTMLElement,
    VOID_ELEMENTS,
)
from .results import ParseDiagnostic, CompileResult

__all__ = [
    "ProgramState",
    "pipeline",
    "Token",
    "TokenType",
    "LexResult",
    "Node",
    "EmptyNode",
    "TextNode",
    "CommentNode",
    "DoctypeNode",
    "HTMLElement",
    "VOID_ELEMENTS",
    "ParseDiagnostic",
    "CompileResult",
]

"""
jadeite - indentation-based template compiler

Compiles a simplified Pug/Jade markup language into HTML.
"""

__version__ = "1.0.0"

from .lib import (
    Lexer,
    Parser,
    Compiler,
    tokenize,
    parse,
    render,
    compile_source,
    JadeiteError,
    LexError,
    ParseError,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "Lexer",
    "Parser",
    "Compiler",
    "tokenize",
    "parse",
    "render",
    "compile_source",
    "JadeiteError",
    "LexError",
    "ParseError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]

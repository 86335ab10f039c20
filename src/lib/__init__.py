"""
jadeite - indentation-based template compiler

Compiles a simplified Pug/Jade markup into HTML.
"""

__version__ = "1.0.0"

from .lexer import Lexer, tokenize
from .parser import Parser, parse
from .renderer import render
from .compiler import Compiler, compile_source
from .errors import JadeiteError, LexError, ParseError
from .log import LOG, state_connectToLogger

__all__ = [
    "Lexer",
    "tokenize",
    "Parser",
    "parse",
    "render",
    "Compiler",
    "compile_source",
    "JadeiteError",
    "LexError",
    "ParseError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]

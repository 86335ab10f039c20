"""
Compiler for jadeite templates

Runs the full pipeline: source text → Lexer → Parser → renderer → HTML.
"""

from typing import Optional

from ..models.results import CompileResult
from .lexer import Lexer
from .parser import Parser
from .renderer import render
from .log import LOG, TraceSink


class Compiler:
    """
    Compiles jadeite source to HTML

    Responsibilities:
    - Tokenize and parse the source
    - Collect the lexical stop and parse diagnostics
    - Render the (possibly partial) tree
    """

    def __init__(
        self,
        source: str,
        strict: Optional[bool] = None,
        indent_unit: Optional[str] = None,
        trace: Optional[TraceSink] = None,
    ) -> None:
        """
        Initialize compiler

        Args:
            source: Template source with LF line endings
            strict: Raise on the first problem instead of collecting it
                    (default from settings)
            indent_unit: Whitespace per nesting level (default from settings)
            trace: Sink for lexer/parser trace events
        """
        from ..config import appsettings

        self.source = source
        self.strict = appsettings.strict_mode if strict is None else strict
        self.indent_unit = appsettings.indent_unit if indent_unit is None else indent_unit
        self.trace = trace

    def compile(self) -> CompileResult:
        """
        Compile source to HTML

        Returns:
            CompileResult with the HTML and everything produced on the way

        Raises:
            LexError: In strict mode, if lexing stopped early
            ParseError: In strict mode, on the first skipped construct
        """
        LOG("Tokenizing source...", level=2)
        lex_result = Lexer(self.source, trace=self.trace).tokenize()
        LOG(f"Produced {len(lex_result.tokens)} tokens", level=2)

        if lex_result.error is not None:
            if self.strict:
                raise lex_result.error
            LOG(f"Lexing stopped early: {lex_result.error}", level=1)

        LOG("Parsing tokens...", level=2)
        parser = Parser(lex_result.tokens, trace=self.trace, strict=self.strict)
        nodes = parser.parse()
        LOG(f"Parsed {len(nodes)} top-level nodes", level=2)
        for diagnostic in parser.diagnostics:
            LOG(f"Skipped construct: {diagnostic}", level=1)

        html = render(nodes, indent_unit=self.indent_unit)
        LOG(f"Rendered {len(html)} characters of HTML", level=2)

        return CompileResult(
            html=html,
            tokens=lex_result.tokens,
            nodes=nodes,
            lex_error=lex_result.error,
            diagnostics=parser.diagnostics,
        )


def compile_source(source: str, **kwargs) -> str:
    """
    Compile source straight to HTML

    Example:
        >>> compile_source("p hi")
        '<p>\\n  hi\\n</p>\\n'
    """
    return Compiler(source, **kwargs).compile().html

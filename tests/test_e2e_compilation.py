"""
End-to-end compilation tests

Tests the full pipeline: jadeite source → Lexer → Parser → renderer → HTML
"""

import pytest

from jadeite.lib.compiler import Compiler, compile_source
from jadeite.lib.errors import LexError, ParseError
from jadeite.models.nodes import HTMLElement
from jadeite.models.tokens import TokenType


class TestDocuments:
    """Whole templates compiled to HTML"""

    def test_document_skeleton(self):
        """Nested blocks render with one indent unit per level"""
        source = "html\n  body\n    .wrapper\n      p hello"
        assert compile_source(source) == (
            "<html>\n"
            "  <body>\n"
            '    <div class="wrapper">\n'
            "      <p>\n"
            "        hello\n"
            "      </p>\n"
            "    </div>\n"
            "  </body>\n"
            "</html>\n"
        )

    def test_trailing_newline(self):
        """A final line break does not change the output"""
        assert compile_source("p hi\n") == compile_source("p hi")

    def test_doctype(self):
        """The doctype line becomes <!DOCTYPE name>"""
        assert compile_source("doctype html\nhtml") == "<!DOCTYPE html>\n<html></html>\n"

    def test_links_list(self):
        """Colon children with attributes and inline text"""
        source = "ul#nav\n  li: a(href=/) Home\n  li: a(href=/about) About"
        assert compile_source(source) == (
            '<ul id="nav">\n'
            "  <li>\n"
            '    <a href="/">\n'
            "      Home\n"
            "    </a>\n"
            "  </li>\n"
            "  <li>\n"
            '    <a href="/about">\n'
            "      About\n"
            "    </a>\n"
            "  </li>\n"
            "</ul>\n"
        )

    def test_colon_chain_tree(self):
        """The tree behind the HTML is available on the result"""
        result = Compiler("a: b: c").compile()
        assert result.nodes == [
            HTMLElement("a", [], [HTMLElement("b", [], [HTMLElement("c")])])
        ]

    def test_dedent_between_levels(self):
        """A line dedented between two levels closes the block above it"""
        assert compile_source("div\n    p\n  span") == (
            "<div>\n"
            "  <p>  </p>\n"
            "</div>\n"
            "<span></span>\n"
        )


class TestVoidRoundTrip:
    """Void elements through the full pipeline"""

    def test_img(self):
        """A void element with attributes is followed by an empty line"""
        assert compile_source('img(src="x.png")') == '<img src="x.png">\n\n'

    def test_img_with_indented_content(self):
        """Content indented under a void element is dropped"""
        html = compile_source('img(src="x.png")\n  p oops')
        assert html == '<img src="x.png">\n\n'

    def test_meta_viewport(self):
        """Commas in an unquoted value survive into the attribute"""
        source = "meta(name=viewport content=width=device-width,initial-scale=1)"
        assert compile_source(source) == (
            '<meta name="viewport" content="width=device-width,initial-scale=1">\n\n'
        )


class TestCompileResult:
    """What Compiler.compile() reports besides the HTML"""

    def test_clean_result(self):
        """No lex error and no diagnostics means ok"""
        result = Compiler("p hi").compile()
        assert result.ok
        assert [t.type for t in result.tokens] == [TokenType.TAG, TokenType.TEXT]

    def test_lex_stop_renders_partial_tree(self):
        """Tokens before the stop are still parsed and rendered"""
        result = Compiler('p(title="x').compile()
        assert not result.ok
        assert isinstance(result.lex_error, LexError)
        assert result.html == "<p></p>\n"

    def test_diagnostics_collected(self):
        """Skipped constructs are reported and the rest renders"""
        result = Compiler(": p").compile()
        assert not result.ok
        assert len(result.diagnostics) == 1
        assert result.html == "<p></p>\n"

    def test_strict_lex_error(self):
        """Strict mode raises the lexical stop"""
        with pytest.raises(LexError, match="unterminated attribute list"):
            Compiler("a(b", strict=True).compile()

    def test_strict_parse_error(self):
        """Strict mode raises on the first skipped construct"""
        with pytest.raises(ParseError):
            Compiler(": p", strict=True).compile()

    def test_indent_unit(self):
        """The indent unit can be overridden per compile"""
        assert compile_source("p hi", indent_unit="\t") == "<p>\n\thi\n</p>\n"

    def test_repeatable(self):
        """Compiling twice gives identical output"""
        source = "html\n  head\n    title Hi\n  body\n    p: b bold"
        assert compile_source(source) == compile_source(source)

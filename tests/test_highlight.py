"""
Pygments lexer tests - token classes for template source
"""

from pygments.token import Name, String, Punctuation, Keyword

from jadeite.lib.highlight import JadeiteLexer, source_highlight


def tokens_of(source):
    return [(t, v) for t, v in JadeiteLexer().get_tokens(source) if v.strip()]


class TestJadeiteLexer:
    """Token classes the Pygments lexer assigns"""

    def test_element_line(self):
        """Tag, id, class, attribute and inline text on one line"""
        tokens = tokens_of('a#home.nav(href="/") Home')
        assert (Name.Tag, "a") in tokens
        assert (Name.Variable, "#home") in tokens
        assert (Name.Class, ".nav") in tokens
        assert (Name.Attribute, "href") in tokens
        assert (String, '"/"') in tokens
        assert (String, "Home") in tokens

    def test_doctype(self):
        """The doctype keyword is a declaration"""
        tokens = tokens_of("doctype html")
        assert tokens[0] == (Keyword.Declaration, "doctype")

    def test_piped_text(self):
        """The pipe is punctuation, the rest of the line a string"""
        tokens = tokens_of("p\n  | some text")
        assert (Punctuation, "|") in tokens
        assert (String, "some text") in tokens

    def test_colon(self):
        """A colon and its trailing spaces are one punctuation token"""
        tokens = tokens_of("li: a")
        assert tokens == [(Name.Tag, "li"), (Punctuation, ": "), (Name.Tag, "a")]

    def test_unquoted_value_with_comma(self):
        """A bare attribute value keeps its commas"""
        tokens = tokens_of("meta(content=a,b)")
        assert (Name.Attribute, "content") in tokens
        assert (String, "a,b") in tokens

    def test_source_highlight_keeps_text(self):
        """Terminal output still contains the template text"""
        assert "wrapper" in source_highlight(".wrapper\n")

"""
Custom Pygments lexer for jadeite syntax highlighting

Provides syntax highlighting for jadeite templates, e.g. when reviewing
source on a terminal with `jadeite --highlight page.jade`.

Token types:
- Keyword.Declaration: doctype line
- Name.Tag: Tag names (e.g., html, div, img)
- Name.Variable: #id shortcuts
- Name.Class: .class shortcuts
- Name.Attribute: Attribute names inside (...)
- String: Attribute values and inline text
- Punctuation: Parentheses, colons, pipes and slashes
"""

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Punctuation,
    Name,
    String,
    Keyword,
    Operator,
    Whitespace,
)


class JadeiteLexer(RegexLexer):
    """
    Lexer for jadeite templates

    Example:
        a#home.nav(href="/"): span Home

    Tokens:
        a → Name.Tag
        #home → Name.Variable
        .nav → Name.Class
        ( → Punctuation
        href → Name.Attribute
        "/" → String
        : → Punctuation
        Home → String
    """

    name = 'Jadeite'
    aliases = ['jadeite', 'jade']
    filenames = ['*.jade']

    tokens = {
        'root': [
            # Doctype is only meaningful on the first line, but highlight it anywhere
            (r'^(doctype)( )(.*)$', bygroups(Keyword.Declaration, Whitespace, Keyword.Type)),

            # Indentation and line breaks
            (r'\n', Whitespace),
            (r'^ +', Whitespace),

            # Piped text: "| body"
            (r'(\|)( ?)(.*)$', bygroups(Punctuation, Whitespace, String)),

            # Tag names
            (r'[A-Za-z][A-Za-z0-9_-]*', Name.Tag),

            # Id and class shortcuts
            (r'#[A-Za-z0-9_-]*', Name.Variable),
            (r'\.[A-Za-z0-9_-]*', Name.Class),

            # Attribute list
            (r'\(', Punctuation, 'attrs'),

            # Colon chaining and early terminator
            (r': *', Punctuation),
            (r'/', Punctuation),

            # Inline text after a tag
            (r'( )(.*)$', bygroups(Whitespace, String)),

            (r'.', Text),
        ],

        'attrs': [
            (r'\)', Punctuation, '#pop'),
            (r'[\s,]+', Whitespace),
            (r'([A-Za-z][A-Za-z0-9_:-]*)(=)("[^"]*"|\'[^\']*\')',
             bygroups(Name.Attribute, Operator, String)),
            (r'([A-Za-z][A-Za-z0-9_:-]*)(=)([^\s)]*)',
             bygroups(Name.Attribute, Operator, String)),
            (r'[A-Za-z][A-Za-z0-9_:-]*', Name.Attribute),
            (r'.', Text),
        ],
    }


def get_lexer() -> JadeiteLexer:
    """
    Get the JadeiteLexer instance

    Returns:
        JadeiteLexer instance ready for use with Pygments
    """
    return JadeiteLexer()


def source_highlight(source: str) -> str:
    """Render template source with ANSI colours for a terminal"""
    return highlight(source, get_lexer(), TerminalFormatter())

"""
Lexer for jadeite templates

Converts template source into a flat list of Token objects in a single
forward pass with one character of lookahead.

Indentation is tracked with an explicit level stack seeded with [0]. Each
line break is followed by a measurement of the next line's leading spaces:
a deeper line pushes a level and emits INDENT, a shallower one pops levels
(one OUTDENT per pop). Open levels are closed at end of input, so INDENT
and OUTDENT always balance for a complete lex.

Lexing stops at the first malformed construct (unterminated attribute list,
unterminated quoted value, unexpected character). The tokens produced up to
that point are returned with a LexError; scanning never resumes past it.

Example:
    >>> result = tokenize("div: span")
    >>> [str(t) for t in result.tokens]
    ['<Tag(div): 0..3>', '<Colon: 3..4>', '<Tag(span): 5..9>']
"""

import re
from typing import List, Optional

from ..models.tokens import Token, TokenType, LexResult
from .errors import LexError
from .log import TraceSink, trace_toLog


TAG_PATTERN = re.compile(r'[A-Za-z][A-Za-z0-9_-]*')
NAME_PATTERN = re.compile(r'[A-Za-z0-9_-]*')
ATTR_NAME_PATTERN = re.compile(r'[A-Za-z][A-Za-z0-9_:-]*')
ATTR_VALUE_PATTERN = re.compile(r"[^\s)]*")
SPACES_PATTERN = re.compile(r' *')

DOCTYPE_PREFIX = "doctype "
QUOTES = ('"', "'")


class Lexer:
    """
    Tokenizer for jadeite source text

    Handles:
    - Doctype on the first line
    - Tags, #ids, .classes, (attribute lists)
    - Inline text and piped text lines
    - Colon chaining and slash terminators
    - Indentation tracking with INDENT/OUTDENT markers
    """

    def __init__(self, source: str, trace: Optional[TraceSink] = None):
        """
        Initialize lexer with source text

        Args:
            source: Template source with LF line endings
            trace: Sink for trace events; defaults to the debug logger

        Attributes:
            source: Source text being scanned
            position: Offset of the next unread character
            tokens: Tokens produced so far
            indents: Stack of open indentation levels, bottom is always 0
        """
        self.source = source
        self.trace = trace if trace is not None else trace_toLog
        self.position = 0
        self.tokens: List[Token] = []
        self.indents: List[int] = [0]

    def tokenize(self) -> LexResult:
        """
        Scan the whole source into tokens

        Returns:
            LexResult with the token list. If scanning stopped early, the
            result carries the LexError and the tokens produced before it.
        """
        self.position = 0
        self.tokens = []
        self.indents = [0]

        try:
            self.doctype_scan()
            while self.position < len(self.source):
                self.token_scan()
        except LexError as error:
            self.trace(f"lexing stopped: {error}")
            return LexResult(tokens=list(self.tokens), error=error)

        self.indents_close()
        self.trace(f"end of source, {len(self.tokens)} tokens")
        return LexResult(tokens=list(self.tokens))

    def token_add(self, token: Token) -> None:
        self.trace(f"lex {token}")
        self.tokens.append(token)

    def token_source(self, token: Token) -> str:
        """
        Return the lexeme of a token in printable form

        Tabs and line feeds are spelled out so token dumps stay on one line.

        Example:
            For a NEWLINE token: '<LF>'
        """
        printable = self.source[token.start:token.end]
        for char, name in (("\t", "<Tab>"), ("\n", "<LF>")):
            printable = printable.replace(char, name)
        return printable

    def doctype_scan(self) -> None:
        """Consume a leading "doctype <name>" line, if present"""
        first_line = self.source.split("\n", 1)[0]
        if not first_line.startswith(DOCTYPE_PREFIX):
            return
        name = first_line[len(DOCTYPE_PREFIX):].strip()
        self.token_add(Token(TokenType.DOCTYPE, 0, len(first_line), name=name))
        self.position = len(first_line)

    def token_scan(self) -> None:
        """Scan one token (or one attribute list) at the current position"""
        char = self.source[self.position]

        if char.isascii() and char.isalpha():
            self.tag_scan()
        elif char == "\n":
            self.newline_scan()
        elif char in (" ", "|"):
            self.text_scan()
        elif char == "#":
            self.selector_scan(TokenType.ID)
        elif char == ".":
            self.selector_scan(TokenType.CLASS)
        elif char == "(":
            self.attrs_scan()
        elif char == "/":
            self.token_add(Token(TokenType.SLASH, self.position, self.position + 1))
            self.position += 1
        elif char == ":":
            self.colon_scan()
        else:
            self.error(f"unexpected character {char!r}", self.position)

    def tag_scan(self) -> None:
        start = self.position
        match = TAG_PATTERN.match(self.source, start)
        self.token_add(Token(TokenType.TAG, start, match.end(), name=match.group()))
        self.position = match.end()

    def selector_scan(self, token_type: TokenType) -> None:
        """Scan an #id or .class shortcut; the name run may be empty"""
        start = self.position
        match = NAME_PATTERN.match(self.source, start + 1)
        self.token_add(Token(token_type, start, match.end(), name=match.group()))
        self.position = match.end()

    def newline_scan(self) -> None:
        """
        Emit NEWLINE and measure the indentation of the following line

        Blank lines (only spaces before the next line break or end of input)
        keep the current level. A dedent pops levels until the top is no
        deeper than the new line; a line that lands between two open levels
        is measured against the remaining top.

        Example:
            Stack [0, 2, 4], next line indented 0:
            NEWLINE, OUTDENT(level=2), OUTDENT(level=0)
        """
        self.token_add(Token(TokenType.NEWLINE, self.position, self.position + 1))
        self.position += 1

        ws_start = self.position
        ws_end = SPACES_PATTERN.match(self.source, ws_start).end()
        self.position = ws_end
        level = ws_end - ws_start

        if ws_end >= len(self.source) or self.source[ws_end] == "\n":
            return

        if level > self.indents[-1]:
            self.indents.append(level)
            self.token_add(Token(TokenType.INDENT, ws_start, ws_end, level=level))
            return

        while self.indents[-1] > level:
            self.indents.pop()
            self.token_add(
                Token(TokenType.OUTDENT, ws_start, ws_end, level=self.indents[-1])
            )

    def indents_close(self) -> None:
        """Emit a zero-width OUTDENT at end of input for each open level"""
        end = len(self.source)
        while len(self.indents) > 1:
            self.indents.pop()
            self.token_add(Token(TokenType.OUTDENT, end, end, level=self.indents[-1]))

    def text_scan(self) -> None:
        """
        Scan inline or piped text up to the end of the line

        The marker is "| " when a pipe is followed by a space, otherwise the
        single leading character (space or pipe). Everything after the
        marker is the body, verbatim.

        Example:
            "p hello"  → Text("hello") for " hello"
            "| a  b"   → Text("a  b")
            "|x"       → Text("x")
        """
        start = self.position
        marker = 2 if self.source.startswith("| ", start) else 1

        end = self.source.find("\n", start)
        if end == -1:
            end = len(self.source)

        body = self.source[start + marker:end]
        self.token_add(Token(TokenType.TEXT, start, end, value=body))
        self.position = end

    def colon_scan(self) -> None:
        start = self.position
        self.token_add(Token(TokenType.COLON, start, start + 1))
        self.position = SPACES_PATTERN.match(self.source, start + 1).end()

    def attrs_scan(self) -> None:
        """
        Scan a parenthesised attribute list into ATTR tokens

        Attributes are separated by whitespace, or by commas after a name or
        quoted value. Values may be double-quoted, single-quoted (no escapes)
        or bare; a bare value runs to whitespace or ")" and keeps any
        commas. A name without "=" gets an empty value. Any character that
        cannot start an attribute ends the list without being consumed.

        The first ATTR span starts at "(" and every span includes the
        closing quote of its value.

        Raises:
            LexError: End of input before ")" or before a closing quote

        Example:
            For source '(aa=AA bb="B B")':
            Attr(aa, AA) at 0..6, Attr(bb, B B) at 7..15
        """
        open_pos = self.position
        pos = open_pos + 1
        first = True

        while True:
            while pos < len(self.source) and (self.source[pos].isspace() or self.source[pos] == ","):
                pos += 1

            if pos >= len(self.source):
                self.position = pos
                self.error("unterminated attribute list", open_pos)

            char = self.source[pos]
            if char == ")":
                pos += 1
                break
            if not (char.isascii() and char.isalpha()):
                self.trace(f"attribute list ended by {char!r}")
                break

            start = open_pos if first else pos
            match = ATTR_NAME_PATTERN.match(self.source, pos)
            name = match.group()
            pos = match.end()
            value = ""

            if pos < len(self.source) and self.source[pos] == "=":
                pos += 1
                next_char = self.source[pos] if pos < len(self.source) else ""
                if next_char in QUOTES:
                    close = self.source.find(next_char, pos + 1)
                    if close == -1:
                        self.position = pos
                        self.error("unterminated quoted attribute value", pos)
                    value = self.source[pos + 1:close]
                    pos = close + 1
                elif next_char and not next_char.isspace():
                    value_match = ATTR_VALUE_PATTERN.match(self.source, pos)
                    value = value_match.group()
                    pos = value_match.end()

            self.token_add(Token(TokenType.ATTR, start, pos, name=name, value=value))
            first = False

        self.position = pos

    def error(self, reason: str, offset: int) -> None:
        """
        Stop lexing with a LexError located at offset

        Raises:
            LexError: Always (this is an error reporting function)
        """
        line = self.source.count("\n", 0, offset) + 1
        column = offset - (self.source.rfind("\n", 0, offset) + 1) + 1
        raise LexError(reason, offset, line=line, column=column)


def tokenize(source: str, trace: Optional[TraceSink] = None) -> LexResult:
    """
    Tokenize template source

    Args:
        source: Template source with LF line endings
        trace: Optional trace sink

    Returns:
        LexResult with tokens and, if lexing stopped early, the LexError
    """
    return Lexer(source, trace=trace).tokenize()

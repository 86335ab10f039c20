"""
Parser for jadeite token streams

Transforms the flat token list produced by the Lexer into a tree of nodes.

The parser is a recursive descent over three mutually recursive methods:
1. parse(): one indentation block, ended by its OUTDENT
2. parse_one(): exactly one node (text, element, doctype)
3. element_create(): an element's modifiers and children

Nesting comes from the INDENT/OUTDENT markers: an INDENT inside an element
opens a nested parse() whose OUTDENT closes it. A COLON attaches exactly one
inline child via parse_one(). Every token is consumed at most once, with a
single token of lookahead.

Malformed constructs do not abort the parse. The offending token becomes an
EmptyNode and a ParseDiagnostic is recorded (or ParseError raised in strict
mode).

Example:
    >>> nodes = Parser(tokenize("a: b: c").tokens).parse()
    >>> nodes[0].name, nodes[0].children[0].name
    ('a', 'b')
"""

from typing import List, Optional, Tuple

from ..models.tokens import Token, TokenType
from ..models.nodes import Node, EmptyNode, TextNode, DoctypeNode, HTMLElement
from ..models.results import ParseDiagnostic
from .errors import ParseError
from .log import TraceSink, trace_toLog


class Parser:
    """
    Recursive-descent parser producing the document tree

    Handles:
    - Indented child blocks
    - Colon chaining (a: b: c)
    - Implicit div for leading #id / .class
    - Attribute modifiers and inline text
    - Lenient recovery with collected diagnostics
    """

    def __init__(
        self,
        tokens: List[Token],
        trace: Optional[TraceSink] = None,
        strict: bool = False,
    ):
        """
        Initialize parser with a token list

        Args:
            tokens: Tokens from the Lexer, in source order
            trace: Sink for trace events; defaults to the debug logger
            strict: Raise ParseError instead of recording diagnostics

        Attributes:
            index: Position of the next unread token
            nest: Current block nesting depth (0 at top level)
            diagnostics: Constructs skipped so far
        """
        self.tokens = tokens
        self.trace = trace if trace is not None else trace_toLog
        self.strict = strict
        self.index = 0
        self.nest = 0
        self.diagnostics: List[ParseDiagnostic] = []

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def next(self) -> Optional[Token]:
        token = self.peek()
        if token is None:
            self.trace("end of tokens")
            return None
        self.index += 1
        self.trace(f"{' ' * self.nest}- {token}")
        return token

    def parse(self) -> List[Node]:
        """
        Parse one block of sibling nodes

        At nesting depth > 0 the block ends at its OUTDENT, which is
        consumed here and not by the caller. At the top level an OUTDENT
        has no block to close: it is consumed and reported, and parsing
        stops there with the nodes built so far.

        Returns:
            Nodes of the block in source order. NEWLINE and SLASH between
            siblings are skipped.

        Example:
            Tokens for "ul\\n  li\\n  li" at depth 1 (after the INDENT):
            [HTMLElement("li"), HTMLElement("li")], OUTDENT consumed
        """
        nodes: List[Node] = []

        while True:
            token = self.peek()
            if token is None:
                break

            if token.type == TokenType.OUTDENT:
                self.next()
                if self.nest == 0:
                    self.report("outdent without an open block", token)
                break

            if token.type in (TokenType.NEWLINE, TokenType.SLASH):
                self.next()
                continue

            nodes.append(self.parse_one())

        return nodes

    def parse_one(self) -> Node:
        """
        Consume one token and build the node it starts

        Returns:
            TextNode for TEXT, HTMLElement for TAG, an implicit div for a
            leading ID or CLASS, DoctypeNode for DOCTYPE. Any other token
            yields EmptyNode and a diagnostic.

        Example:
            "#main.wide" → HTMLElement("div", [("id", "main"), ("class", "wide")])
        """
        token = self.next()
        if token is None:
            return EmptyNode()

        if token.type == TokenType.TEXT:
            return TextNode(token.value)
        if token.type == TokenType.TAG:
            return self.element_create(token.name)
        if token.type == TokenType.ID:
            return self.element_create("div", [("id", token.name)])
        if token.type == TokenType.CLASS:
            return self.element_create("div", [("class", token.name)])
        if token.type == TokenType.DOCTYPE:
            return DoctypeNode(token.name)

        self.report(f"unexpected {token.type.value} token", token)
        return EmptyNode()

    def element_create(
        self, name: str, attrs: Optional[List[Tuple[str, str]]] = None
    ) -> HTMLElement:
        """
        Build an element from the modifier and child tokens that follow it

        Consumes, in any order:
        - ID / CLASS / ATTR: appended to attrs in arrival order
        - TEXT: appended as a text child
        - NEWLINE: consumed; the element ends if the next token is another
          NEWLINE, a TAG, or end of input, otherwise scanning continues
        - INDENT: a nested parse() supplies children (it eats the OUTDENT)
        - COLON: exactly one child from parse_one()

        OUTDENT, SLASH and anything else end the element unconsumed.

        Args:
            name: Tag name
            attrs: Attributes already known (implicit div id/class)

        Returns:
            The completed HTMLElement
        """
        element = HTMLElement(name, list(attrs or []))

        while True:
            token = self.peek()
            if token is None:
                break

            if token.type == TokenType.ID:
                self.next()
                element.attr_push("id", token.name)
            elif token.type == TokenType.CLASS:
                self.next()
                element.attr_push("class", token.name)
            elif token.type == TokenType.ATTR:
                self.next()
                element.attr_push(token.name, token.value)
            elif token.type == TokenType.TEXT:
                self.next()
                element.child_push(TextNode(token.value))
            elif token.type == TokenType.NEWLINE:
                self.next()
                following = self.peek()
                if following is None or following.type in (TokenType.NEWLINE, TokenType.TAG):
                    break
            elif token.type == TokenType.INDENT:
                self.next()
                self.nest += 1
                self.trace(f"start parse children {self.nest}")
                element.children.extend(self.parse())
                self.trace(f"end parse children {self.nest}")
                self.nest -= 1
            elif token.type == TokenType.COLON:
                self.next()
                self.nest += 1
                self.trace(f"start parse child {self.nest}")
                element.child_push(self.parse_one())
                self.trace(f"end parse child {self.nest}")
                self.nest -= 1
            else:
                break

        return element

    def report(self, message: str, token: Optional[Token] = None) -> None:
        """
        Record a skipped construct

        Raises:
            ParseError: In strict mode, instead of recording
        """
        diagnostic = ParseDiagnostic(message, token)
        self.trace(f"parse error: {diagnostic}")
        if self.strict:
            raise ParseError(message, token.start if token is not None else None)
        self.diagnostics.append(diagnostic)


def parse(
    tokens: List[Token], trace: Optional[TraceSink] = None, strict: bool = False
) -> Tuple[List[Node], List[ParseDiagnostic]]:
    """
    Parse a token list into top-level nodes

    Returns:
        (nodes, diagnostics)
    """
    parser = Parser(tokens, trace=trace, strict=strict)
    nodes = parser.parse()
    return nodes, parser.diagnostics

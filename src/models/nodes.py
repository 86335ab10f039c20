"""
Document tree models

The parser builds a forest of these nodes; the renderer consumes it. Every
element owns its children outright, so the tree has no shared or cyclic
references.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple, Union


@dataclass
class EmptyNode:
    """Stands in for a construct the parser could not build"""


@dataclass
class TextNode:
    body: str


@dataclass
class CommentNode:
    """Reserved for template comments; never rendered"""
    body: str = ""


@dataclass
class DoctypeNode:
    name: str


@dataclass
class HTMLElement:
    """
    An HTML element with its attributes and children

    Attributes:
        name: Tag name (e.g., "div", "img")
        attrs: (name, value) pairs in source order. Ids and classes are
               ordinary entries named "id" and "class"; duplicates are kept.
        children: Child nodes in source order

    Example:
        "a#home.nav(href=/) Home" becomes
        HTMLElement(
            name="a",
            attrs=[("id", "home"), ("class", "nav"), ("href", "/")],
            children=[TextNode("Home")],
        )
    """
    name: str
    attrs: List[Tuple[str, str]] = field(default_factory=list)
    children: List["Node"] = field(default_factory=list)

    def attr_push(self, name: str, value: str) -> None:
        self.attrs.append((name, value))

    def child_push(self, child: "Node") -> None:
        self.children.append(child)

    @property
    def is_void(self) -> bool:
        return self.name in VOID_ELEMENTS


Node = Union[EmptyNode, TextNode, CommentNode, DoctypeNode, HTMLElement]


# Elements that never take children or a closing tag
VOID_ELEMENTS: FrozenSet[str] = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img',
    'input', 'link', 'meta', 'param', 'source', 'track', 'wbr',
})

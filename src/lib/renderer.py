"""
Renderer for jadeite document trees

Serializes parsed nodes to indented HTML text. Rendering is a pure function
of the tree: the same nodes always give byte-identical output.

Attribute names/values and text bodies are emitted as written, without HTML
escaping.
"""

from typing import List, Optional

from ..models.nodes import Node, TextNode, DoctypeNode, HTMLElement


def element_render(element: HTMLElement, depth: int, indent_unit: str) -> str:
    """
    Render one element and its subtree

    Args:
        element: Element to render
        depth: Nesting depth; each emitted line gets indent_unit * depth
        indent_unit: Whitespace for one nesting level

    Returns:
        HTML for the element. Void elements get no children and no
        closing tag.

    Example:
        HTMLElement("p", children=[TextNode("hello")]) at depth 0:
        "<p>\\n  hello\\n</p>\\n"
    """
    prefix = indent_unit * depth
    html = [prefix, "<", element.name]
    for name, value in element.attrs:
        html.append(f' {name}="{value}"')
    html.append(">")

    if element.children or element.attrs:
        html.append("\n")

    if element.is_void:
        html.append("\n")
        return "".join(html)

    for child in element.children:
        if isinstance(child, HTMLElement):
            html.append(element_render(child, depth + 1, indent_unit))
        elif isinstance(child, TextNode):
            html.append(f"{prefix}{indent_unit}{child.body}\n")

    html.append(f"{prefix}</{element.name}>\n")
    return "".join(html)


def render(nodes: List[Node], indent_unit: Optional[str] = None) -> str:
    """
    Render top-level nodes to an HTML string

    Elements render at depth 0, text is concatenated verbatim, a doctype
    becomes "<!DOCTYPE name>". Empty and comment nodes are skipped.

    Args:
        nodes: Top-level nodes from the Parser
        indent_unit: Whitespace per nesting level (default from settings)
    """
    if indent_unit is None:
        from ..config import appsettings
        indent_unit = appsettings.indent_unit

    output = []
    for node in nodes:
        if isinstance(node, HTMLElement):
            output.append(element_render(node, 0, indent_unit))
        elif isinstance(node, TextNode):
            output.append(node.body)
        elif isinstance(node, DoctypeNode):
            output.append(f"<!DOCTYPE {node.name}>\n")
    return "".join(output)

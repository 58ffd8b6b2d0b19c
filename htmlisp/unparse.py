"""Write a Document back out as HTMLisp source."""

from __future__ import annotations

from typing import List, Optional

from .dom_model import Document, Element, Node, Text
from .lexer import is_identifier


def _quote(value: str) -> str:
    if '"' in value:
        raise ValueError(f"cannot express a double quote in an HTMLisp literal: {value!r}")
    return f'"{value}"'


def _is_attribute_shaped(node: Node) -> bool:
    return (
        isinstance(node, Element)
        and not node.attributes
        and len(node.children) == 1
        and isinstance(node.children[0], Text)
    )


def _form_head(element: Element) -> str:
    parts = [element.tag]
    for key, value in element.attributes:
        if not is_identifier(key):
            raise ValueError(f"invalid attribute name: {key!r}")
        parts.append(f"{key} {_quote(value)}")
    return " ".join(parts)


def _first_child_form(element: Element) -> str:
    # A lone "(tag \"text\")" first child would read back as an attribute.
    text = element.children[0].text  # type: ignore[union-attr]
    if not is_identifier(text):
        raise ValueError(
            f"cannot write <{element.tag}> as a first child: it would parse as an attribute"
        )
    return f"({element.tag} {text})"


def _inline(node: Node, first: bool = False) -> str:
    if isinstance(node, Text):
        return _quote(node.text)
    if first and _is_attribute_shaped(node):
        return _first_child_form(node)
    parts = [_form_head(node)]
    for index, child in enumerate(node.children):
        parts.append(_inline(child, first=index == 0))
    return "(" + " ".join(parts) + ")"


def _block(node: Node, depth: int, indent: str, lines: List[str], first: bool = False) -> None:
    prefix = indent * depth
    if isinstance(node, Text) or not any(isinstance(c, Element) for c in node.children):
        lines.append(prefix + _inline(node, first=first))
        return
    lines.append(prefix + "(" + _form_head(node))
    for index, child in enumerate(node.children):
        _block(child, depth + 1, indent, lines, first=index == 0)
    lines[-1] += ")"


def unparse(document: Document, indent: Optional[int] = None) -> str:
    """Return HTMLisp source that parses back to ``document``.

    With ``indent=None`` everything goes on one line; otherwise forms with
    element children are broken over lines, ``indent`` spaces per level.
    Raises ValueError for trees the grammar cannot express.
    """

    if indent is None:
        return " ".join(_inline(node) for node in document.nodes)
    lines: List[str] = []
    for node in document.nodes:
        _block(node, 0, " " * indent, lines)
    return "\n".join(lines) + ("\n" if lines else "")


__all__ = ["unparse"]

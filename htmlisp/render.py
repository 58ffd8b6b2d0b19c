"""Compact and indented HTML serialization of a Document."""

from __future__ import annotations

import html
from typing import Iterable, List, Sequence, Tuple, Union

from .dom_model import Attribute, Document, Element, Node, Text

Renderable = Union[Document, Node, Sequence[Node]]


def _nodes(target: Renderable) -> Iterable[Node]:
    if isinstance(target, (Element, Text)):
        return (target,)
    return target


def _render_attrs(attributes: Sequence[Attribute]) -> str:
    if not attributes:
        return ""
    parts = [f'{name}="{html.escape(value, quote=True)}"' for name, value in attributes]
    return " " + " ".join(parts)


def _escape_text(text: str) -> str:
    return html.escape(text, quote=False)


def _open_tag(element: Element) -> str:
    return f"<{element.tag}{_render_attrs(element.attributes)}>"


def _close_tag(element: Element) -> str:
    return f"</{element.tag}>"


def render_compact(target: Renderable) -> str:
    """Serialize without adding any whitespace between or around tags."""

    parts: List[str] = []
    # Pending work in reverse order: nodes still to open, or closing tags.
    stack: List[Union[Node, str]] = list(reversed(tuple(_nodes(target))))
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Text):
            parts.append(_escape_text(item.text))
        elif isinstance(item, Element):
            parts.append(_open_tag(item))
            stack.append(_close_tag(item))
            stack.extend(reversed(item.children))
        else:
            raise TypeError(f"not a document node: {item!r}")
    return "".join(parts)


def render_pretty(target: Renderable, start_depth: int = 0, indent: str = "  ") -> str:
    """Serialize with one element per line, indented by nesting depth.

    ``start_depth`` is the depth of the top-level nodes; each level adds one
    ``indent``. Closing tags line up with their opening tags and the result
    ends with a newline unless the document is empty.
    """

    if start_depth < 0:
        raise ValueError("start_depth must be >= 0")
    lines: List[str] = []
    stack: List[Tuple[Union[Node, str], int]] = [
        (node, start_depth) for node in reversed(tuple(_nodes(target)))
    ]
    while stack:
        item, depth = stack.pop()
        prefix = indent * depth
        if isinstance(item, str):
            lines.append(prefix + item)
        elif isinstance(item, Text):
            lines.append(prefix + _escape_text(item.text))
        elif isinstance(item, Element):
            if all(isinstance(child, Text) for child in item.children):
                # Text-only content stays on the tag's line.
                lines.append(prefix + render_compact(item))
                continue
            lines.append(prefix + _open_tag(item))
            stack.append((_close_tag(item), depth))
            stack.extend((child, depth + 1) for child in reversed(item.children))
        else:
            raise TypeError(f"not a document node: {item!r}")
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


__all__ = ["render_compact", "render_pretty"]

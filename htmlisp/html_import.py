"""Build a Document from existing HTML markup.

BeautifulSoup does the HTML parsing; tags map onto Elements (attributes kept
in source order) and strings onto Text nodes. Comments, doctypes and other
declarations have no HTMLisp counterpart and are dropped.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction

from .dom_model import Document, Element, Node, Text

_SKIPPED_STRINGS = (CData, Comment, Declaration, Doctype, ProcessingInstruction)


def _convert_children(tag: Tag, *, keep_whitespace: bool) -> List[Node]:
    nodes: List[Node] = []
    for child in tag.contents:
        if isinstance(child, Tag):
            nodes.append(_convert_tag(child, keep_whitespace=keep_whitespace))
            continue
        if isinstance(child, _SKIPPED_STRINGS) or not isinstance(child, NavigableString):
            continue
        text = str(child)
        if not keep_whitespace and not text.strip():
            continue
        nodes.append(Text(text))
    return nodes


def _convert_tag(tag: Tag, *, keep_whitespace: bool) -> Element:
    attributes = []
    for name, value in tag.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        attributes.append((name, value))
    return Element(
        tag=tag.name,
        attributes=tuple(attributes),
        children=tuple(_convert_children(tag, keep_whitespace=keep_whitespace)),
    )


def document_from_html(markup: str, *, keep_whitespace: bool = False) -> Document:
    """Parse HTML into a Document.

    Whitespace-only strings (such as the indentation emitted by the pretty
    renderer) are dropped unless ``keep_whitespace`` is set.
    """

    soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
    return Document(tuple(_convert_children(soup, keep_whitespace=keep_whitespace)))


__all__ = ["document_from_html"]

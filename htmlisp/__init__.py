"""Compile HTMLisp, an S-expression markup language, into HTML."""

from .dom_model import Document, Element, Node, Text
from .errors import HtmlispSyntaxError
from .parser import parse, try_parse
from .render import render_compact, render_pretty
from .unparse import unparse

__version__ = "0.1.0"

__all__ = [
    "Document",
    "Element",
    "HtmlispSyntaxError",
    "Node",
    "Text",
    "parse",
    "render_compact",
    "render_pretty",
    "try_parse",
    "unparse",
]

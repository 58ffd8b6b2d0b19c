"""Parser turning HTMLisp source into a Document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .dom_model import Attribute, Document, Element, Node, Text
from .errors import HtmlispSyntaxError
from .lexer import Lexer, Token


def _fail(message: str, token: Token) -> HtmlispSyntaxError:
    return HtmlispSyntaxError(message, token.line, token.column)


def _describe(token: Token) -> str:
    if token.kind == "EOF":
        return "end of input"
    if token.kind == "STRING":
        return "string literal"
    return repr(token.value)


@dataclass
class _Frame:
    tag: Token
    attributes: List[Attribute] = field(default_factory=list)
    children: List[Node] = field(default_factory=list)

    def close(self) -> Element:
        return Element(self.tag.value, tuple(self.attributes), tuple(self.children))


class Parser:
    """Grammar:

        document   := expression* EOF
        expression := STRING | form
        form       := "(" IDENT item* ")"

    Inside a form, ``key "value"`` is always an attribute, and a
    ``(key "value")`` form is an attribute until the first child is seen, so
    ``(ul (li "a"))`` gives ``<ul li="a">``. To get a child element there,
    start with text (``(ul "" (li "a"))``) or make the child not
    attribute-shaped (``(ul (li a))``).

    Nested forms are tracked on an explicit stack, so nesting depth is not
    bounded by the interpreter's recursion limit.
    """

    def __init__(self, source: str) -> None:
        self._lexer = Lexer(source)

    def parse(self) -> Document:
        nodes: List[Node] = []
        while True:
            token = self._lexer.peek()
            if token.kind == "EOF":
                return Document(tuple(nodes))
            if token.kind == "STRING":
                self._lexer.next()
                nodes.append(Text(token.value))
            elif token.kind == "LPAREN":
                nodes.append(self._parse_form())
            elif token.kind == "RPAREN":
                raise _fail("unmatched ')'", token)
            else:
                raise _fail(f"unexpected bare word {token.value!r} at top level", token)

    def _open_form(self) -> _Frame:
        self._lexer.next()  # "("
        tag_token = self._lexer.next()
        if tag_token.kind != "IDENT":
            raise _fail(f"expected tag name, found {_describe(tag_token)}", tag_token)
        return _Frame(tag_token)

    def _parse_form(self) -> Element:
        stack = [self._open_form()]
        while True:
            frame = stack[-1]
            token = self._lexer.peek()
            if token.kind == "RPAREN":
                self._lexer.next()
                element = frame.close()
                stack.pop()
                if not stack:
                    return element
                stack[-1].children.append(element)
                continue
            if token.kind == "EOF":
                raise _fail(f"unclosed '({frame.tag.value}'", frame.tag)

            if token.kind == "IDENT":
                self._lexer.next()
                value = self._lexer.peek()
                if value.kind == "STRING":
                    self._lexer.next()
                    frame.attributes.append((token.value, value.value))
                else:
                    frame.children.append(Text(token.value))
            elif token.kind == "STRING":
                self._lexer.next()
                frame.children.append(Text(token.value))
            elif not frame.children and self._at_attribute_form():
                self._lexer.next()  # "("
                key = self._lexer.next()
                value = self._lexer.next()
                self._lexer.next()  # ")"
                frame.attributes.append((key.value, value.value))
            else:
                stack.append(self._open_form())

    def _at_attribute_form(self) -> bool:
        return (
            self._lexer.peek(1).kind == "IDENT"
            and self._lexer.peek(2).kind == "STRING"
            and self._lexer.peek(3).kind == "RPAREN"
        )


def parse(source: str) -> Document:
    """Parse ``source`` into a Document or raise HtmlispSyntaxError."""

    return Parser(source).parse()


def try_parse(source: str) -> Optional[Document]:
    """Parse ``source``, returning None instead of raising on a syntax error."""

    try:
        return parse(source)
    except HtmlispSyntaxError:
        return None


__all__ = ["Parser", "parse", "try_parse"]

"""On-demand tokenizer for HTMLisp source."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Literal

from .errors import HtmlispSyntaxError

TokenKind = Literal["LPAREN", "RPAREN", "STRING", "IDENT", "EOF"]

DELIMITERS = frozenset('()"')


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    line: int
    column: int


def is_identifier(text: str) -> bool:
    """Return True when ``text`` would lex as a single bare identifier."""

    return bool(text) and not any(ch.isspace() or ch in DELIMITERS for ch in text)


class Lexer:
    """Cursor over the source that yields tokens as the parser pulls them.

    Tokens are produced lazily; ``peek`` fills a small lookahead buffer so the
    parser can tell attribute shapes apart from child expressions.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self._buffer: Deque[Token] = deque()

    def peek(self, offset: int = 0) -> Token:
        while len(self._buffer) <= offset:
            if self._buffer and self._buffer[-1].kind == "EOF":
                break
            self._buffer.append(self._scan())
        if offset >= len(self._buffer):
            return self._buffer[-1]
        return self._buffer[offset]

    def next(self) -> Token:
        token = self.peek()
        if token.kind != "EOF":
            self._buffer.popleft()
        return token

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and self._source[self._pos].isspace():
            self._advance()

    def _scan(self) -> Token:
        self._skip_whitespace()
        line, column = self._line, self._column
        if self._pos >= len(self._source):
            return Token("EOF", "", line, column)

        ch = self._source[self._pos]
        if ch == "(":
            self._advance()
            return Token("LPAREN", ch, line, column)
        if ch == ")":
            self._advance()
            return Token("RPAREN", ch, line, column)
        if ch == '"':
            return self._scan_string(line, column)

        start = self._pos
        while self._pos < len(self._source):
            ch = self._source[self._pos]
            if ch.isspace() or ch in DELIMITERS:
                break
            self._advance()
        return Token("IDENT", self._source[start : self._pos], line, column)

    def _scan_string(self, line: int, column: int) -> Token:
        self._advance()  # opening quote
        end = self._source.find('"', self._pos)
        if end == -1:
            raise HtmlispSyntaxError("unterminated string literal", line, column)
        value = self._source[self._pos : end]
        while self._pos <= end:
            self._advance()
        return Token("STRING", value, line, column)


__all__ = ["Lexer", "Token", "TokenKind", "is_identifier"]

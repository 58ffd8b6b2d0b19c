"""Document tree produced by the parser and consumed by the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

from .lexer import is_identifier

Attribute = Tuple[str, str]


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Element:
    tag: str
    attributes: Tuple[Attribute, ...] = ()
    children: Tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        if not is_identifier(self.tag):
            raise ValueError(f"invalid tag name: {self.tag!r}")
        # Accept lists from callers but store tuples so the tree stays immutable.
        object.__setattr__(self, "attributes", tuple((str(k), str(v)) for k, v in self.attributes))
        object.__setattr__(self, "children", tuple(self.children))


Node = Union[Element, Text]


@dataclass(frozen=True)
class Document:
    nodes: Tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)


__all__ = ["Attribute", "Document", "Element", "Node", "Text"]

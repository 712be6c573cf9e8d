"""Syntax tree node types shared by the parser, heading extractor and resolver.

Both trees produced by :mod:`linkgate.markdown` are built from the same four
node variants:

    Heading  - a Markdown heading (parse tree only)
    Element  - an HTML element with attributes (rendered tree only)
    Text     - a leaf carrying literal text
    Other    - any other container (root, paragraph, list, link, ...)

Consumers walk them with :func:`walk` and dispatch with ``match``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Text:
    """Leaf node with literal text (text, inline code, raw HTML, ...)."""

    value: str


@dataclass(frozen=True)
class Heading:
    """Heading node; ``level`` is 1-6."""

    level: int
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Element:
    """HTML element. Tag names are lowercase."""

    tag: str
    attrs: Mapping[str, str | None] = field(default_factory=lambda: MappingProxyType({}))
    children: tuple[Node, ...] = ()

    def get(self, name: str) -> str | None:
        """Return an attribute value, None when absent or valueless."""
        return self.attrs.get(name)


@dataclass(frozen=True)
class Other:
    """Any container node without special meaning to linkgate."""

    kind: str
    children: tuple[Node, ...] = ()


Node = Text | Heading | Element | Other


def children_of(node: Node) -> tuple[Node, ...]:
    """Return the direct children of a node (empty for leaves)."""
    match node:
        case Text():
            return ()
        case Heading(children=children) | Element(children=children) | Other(children=children):
            return children
        case _:
            raise TypeError(f"Not a tree node: {type(node).__name__}")


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all its descendants, depth-first in document order."""
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(children_of(current)))


def text_content(node: Node) -> str:
    """Concatenate every literal value below ``node`` (inclusive)."""
    return "".join(n.value for n in walk(node) if isinstance(n, Text))

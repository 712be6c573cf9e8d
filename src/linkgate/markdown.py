"""Markdown/MDX parsing: frontmatter split, syntax tree and rendered tree.

Two views of a document body are needed:

- the *syntax tree* (``parse_to_tree``) holds Markdown headings, and is what
  heading anchors are computed from;
- the *rendered tree* (``render_to_tree``) is the HTML the body renders to,
  with raw HTML/JSX anchors merged in, and is what links are collected from.

Both are expressed with the node variants of :mod:`linkgate.tree`.
"""

from __future__ import annotations

from html.parser import HTMLParser
from types import MappingProxyType
from typing import Any

import frontmatter
import yaml
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from linkgate.exceptions import FrontmatterError
from linkgate.tree import Element, Heading, Node, Other, Text

# Handles the leading `---` block: detect, split and YAML-load
_FRONTMATTER = frontmatter.YAMLHandler()

# Token types whose content is literal text
_LITERAL_TOKENS = frozenset(
    {"text", "code_inline", "html_inline", "html_block", "code_block", "fence"}
)

# HTML elements that never have children or an end tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


# =============================================================================
# Frontmatter
# =============================================================================


def split_frontmatter(raw: str) -> tuple[dict[str, Any], str]:
    """Split a leading ``---`` delimited YAML block from the document body.

    Args:
        raw: Full file content

    Returns:
        Tuple of (metadata mapping, body). Without a frontmatter block the
        metadata is empty and the body is the full content.

    Raises:
        FrontmatterError: If the block is unterminated, not valid YAML,
            or not a mapping.
    """
    text = raw.removeprefix("\ufeff")
    if not _FRONTMATTER.detect(text):
        return {}, text

    try:
        block, body = _FRONTMATTER.split(text)
    except ValueError as e:
        raise FrontmatterError("Unterminated frontmatter block") from e

    try:
        data = _FRONTMATTER.load(block)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid frontmatter YAML: {e}") from e

    # The closing delimiter's line break belongs to the block, not the body
    body = body.removeprefix("\n")
    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontmatterError(f"Frontmatter must be a mapping, got {type(data).__name__}")
    return data, body


# =============================================================================
# Rendered tree
# =============================================================================


class _OpenElement:
    """Element under construction while the HTML is being fed."""

    __slots__ = ("tag", "attrs", "children")

    def __init__(self, tag: str, attrs: dict[str, str | None]) -> None:
        self.tag = tag
        self.attrs = attrs
        self.children: list[Node | _OpenElement] = []

    def freeze(self) -> Element:
        return Element(
            tag=self.tag,
            attrs=MappingProxyType(self.attrs),
            children=tuple(_freeze(child) for child in self.children),
        )


def _freeze(node: Node | _OpenElement) -> Node:
    return node.freeze() if isinstance(node, _OpenElement) else node


class _TreeBuilder(HTMLParser):
    """Builds an :class:`Element` tree from an HTML fragment.

    Tolerates sloppy markup: unknown end tags are dropped and an end tag
    closes every element opened after its matching start tag.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._root: list[Node | _OpenElement] = []
        self._stack: list[_OpenElement] = []

    def _append(self, node: Node | _OpenElement) -> None:
        if self._stack:
            self._stack[-1].children.append(node)
        else:
            self._root.append(node)

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        element = _OpenElement(tag, dict(attrs))
        self._append(element)
        if tag not in VOID_ELEMENTS:
            self._stack.append(element)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._append(_OpenElement(tag, dict(attrs)))

    def handle_endtag(self, tag: str) -> None:
        for depth in range(len(self._stack) - 1, -1, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        self._append(Text(data))

    def tree(self) -> Other:
        self.close()
        return Other("root", tuple(_freeze(child) for child in self._root))


# =============================================================================
# Parser
# =============================================================================


def _convert(node: SyntaxTreeNode) -> Node:
    """Convert a markdown-it syntax tree node into a linkgate node."""
    node_type = node.type
    if node_type in _LITERAL_TOKENS:
        return Text(node.content)
    if node_type == "softbreak":
        return Text("\n")
    if node_type == "image":
        # alt text is not part of the surrounding heading text
        return Other("image")

    children = tuple(_convert(child) for child in node.children)
    if node_type == "heading":
        return Heading(level=int(node.tag[1:]), children=children)
    return Other(node_type, children)


class MarkdownParser:
    """Markdown/MDX parser producing linkgate trees.

    CommonMark with tables and strikethrough; raw HTML (and MDX/JSX tags,
    which parse as HTML) is kept so embedded anchors are checked too.
    """

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])

    def parse_to_tree(self, body: str) -> Node:
        """Parse ``body`` into a syntax tree with :class:`Heading` nodes."""
        tokens = self._md.parse(body)
        return _convert(SyntaxTreeNode(tokens))

    def render_to_tree(self, body: str) -> Node:
        """Render ``body`` to HTML and parse that into an :class:`Element` tree."""
        html = self._md.render(body)
        builder = _TreeBuilder()
        builder.feed(html)
        return builder.tree()

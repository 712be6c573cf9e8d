"""Heading anchor extraction from a document's syntax tree."""

from __future__ import annotations

from linkgate.slugger import Slugger
from linkgate.tree import Element, Heading, Node, Other, Text, text_content, walk


def extract_headings(tree: Node, slugger: Slugger | None = None) -> list[str]:
    """
    Return the anchor slug of every heading in ``tree``, in document order.

    A heading's text is the concatenation of all literal text below it, so
    inline code, emphasis or raw HTML inside a heading still count. Repeated
    headings get numbered slugs (``intro``, ``intro-1``, ...).

    Args:
        tree: Syntax tree from ``MarkdownParser.parse_to_tree``
        slugger: Slugger to use; it is reset first. A new one is created
            when omitted.

    Returns:
        Unique slugs, one per heading
    """
    if slugger is None:
        slugger = Slugger()
    else:
        slugger.reset()

    slugs: list[str] = []
    for node in walk(tree):
        match node:
            case Heading():
                slugs.append(slugger.slug(text_content(node)))
            case Text() | Element() | Other():
                pass
    return slugs

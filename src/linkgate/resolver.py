"""Link resolution against the document index.

Hrefs are classified by their first character:

    /docs/api/example#usage   absolute internal link: target document + anchor
    #usage                    anchor in the current document
    anything else             relative or external, not checked

For absolute links the documentation prefix (``/docs``) is removed first, then
the path is looked up as-is and, failing that, as ``<path>/index``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from urllib.parse import unquote

from linkgate.exceptions import TraversalError
from linkgate.index import DocumentIndex
from linkgate.models import Document, LinkError, LinkErrorKind
from linkgate.tree import Element, Heading, Node, Other, Text, walk

logger = logging.getLogger(__name__)


def strip_prefix(href: str, prefix: str) -> str:
    """Remove ``prefix`` from ``href`` when it ends at a path segment boundary."""
    if prefix and href.startswith(prefix) and href[len(prefix) : len(prefix) + 1] in ("", "/", "#"):
        return href[len(prefix) :]
    return href


class LinkResolver:
    """Checks hrefs against a fully built :class:`DocumentIndex`.

    Args:
        index: The complete document index
        docs_path: URL prefix of documentation links, stripped before lookup
        ignore_paths: Link paths that exist outside the indexed documents
        excluded_hashes: Anchors that are always considered valid
    """

    def __init__(
        self,
        index: DocumentIndex,
        *,
        docs_path: str = "/docs",
        ignore_paths: Iterable[str] = (),
        excluded_hashes: Iterable[str] = (),
    ) -> None:
        self.index = index
        self.docs_path = docs_path
        self.ignore_paths = frozenset(ignore_paths)
        self.excluded_hashes = frozenset(excluded_hashes)

    def resolve(self, document: Document, tree: Node) -> list[LinkError]:
        """
        Check every anchor element of a document's rendered tree.

        Returns:
            Link errors in tree order

        Raises:
            TraversalError: If walking the tree fails; errors found before
                the failure are attached as ``partial_errors``
        """
        errors: list[LinkError] = []
        try:
            for node in walk(tree):
                match node:
                    case Element(tag="a"):
                        href = node.get("href")
                        if href:
                            errors.extend(self.check_href(document, href))
                    case Element() | Heading() | Text() | Other():
                        pass
        except Exception as e:
            logger.error("Error traversing tree of %s: %s", document.path, e)
            raise TraversalError(
                f"Error traversing tree of {document.path}: {e}",
                key=document.key,
                partial_errors=errors,
            ) from e
        return errors

    def check_href(self, document: Document, href: str) -> list[LinkError]:
        """Check a single href found in ``document``.

        Rendered hrefs are percent-encoded (``#caf%C3%A9``) while heading
        slugs are not, so the href is decoded before it is checked and
        reported.
        """
        href = unquote(href)
        if href.startswith("/"):
            return self._check_internal_link(document, href)
        if href.startswith("#"):
            return self._check_hash_link(document, href)
        return []

    def _check_internal_link(self, document: Document, href: str) -> list[LinkError]:
        # /docs/api/example#heading -> ("/api/example", "heading")
        link_path, _, anchor = strip_prefix(href, self.docs_path).partition("#")

        if link_path in self.ignore_paths:
            return []

        target = self.index.find(link_path)
        if target is None:
            logger.debug("%s: no document for %s", document.key, href)
            return [LinkError(LinkErrorKind.LINK, href, document)]

        if anchor and anchor not in self.excluded_hashes and not target.has_heading(anchor):
            logger.debug("%s: %s has no heading %r", document.key, target.key, anchor)
            return [LinkError(LinkErrorKind.HASH, href, document)]

        return []

    def _check_hash_link(self, document: Document, href: str) -> list[LinkError]:
        anchor = href[1:]
        if anchor in self.excluded_hashes or document.has_heading(anchor):
            return []
        logger.debug("%s: no heading %r", document.key, anchor)
        return [LinkError(LinkErrorKind.HASH, href, document)]

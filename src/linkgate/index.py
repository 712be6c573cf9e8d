"""Document index: canonical key → Document, built once per run."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from linkgate.models import Document

logger = logging.getLogger(__name__)

INDEX_SUFFIX = "/index"


class DocumentIndex:
    """Read-only lookup of documents by canonical key.

    Built in one step from the complete set of loaded documents, then only
    read, so it is safe to share between resolver threads.
    """

    def __init__(self, documents: dict[str, Document] | None = None) -> None:
        self._documents = MappingProxyType(dict(documents or {}))

    @classmethod
    def from_documents(cls, documents: Iterable[Document]) -> DocumentIndex:
        """Index documents by key; on duplicate keys the last one wins."""
        mapping: dict[str, Document] = {}
        for doc in documents:
            previous = mapping.get(doc.key)
            if previous is not None:
                logger.debug("Key %s of %s replaced by %s", doc.key, previous.path, doc.path)
            mapping[doc.key] = doc
        return cls(mapping)

    def find(self, path: str) -> Document | None:
        """Look up a link path, falling back to its directory index page."""
        doc = self._documents.get(path)
        if doc is None:
            doc = self._documents.get(path + INDEX_SUFFIX)
        return doc

    def __len__(self) -> int:
        return len(self._documents)

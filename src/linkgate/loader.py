"""Document loading: read, split frontmatter, parse, extract headings."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType

from linkgate.exceptions import DocumentLoadError, FrontmatterError
from linkgate.headings import extract_headings
from linkgate.markdown import MarkdownParser, split_frontmatter
from linkgate.models import Document
from linkgate.paths import PathNormalizer
from linkgate.slugger import Slugger

logger = logging.getLogger(__name__)


def load_document(
    path: Path,
    *,
    normalizer: PathNormalizer,
    parser: MarkdownParser,
) -> Document:
    """
    Load one document source file.

    A fresh :class:`Slugger` is used per call, so loads may run concurrently.

    Args:
        path: Document source file
        normalizer: Maps ``path`` to its canonical key
        parser: Markdown parser

    Returns:
        The loaded Document

    Raises:
        DocumentLoadError: If the file cannot be read, its frontmatter is
            invalid, or the body cannot be parsed
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Cannot read {path}: {e}", path=path) from e

    try:
        metadata, body = split_frontmatter(raw)
    except FrontmatterError as e:
        raise FrontmatterError(f"{path}: {e.message}", path=path) from e

    try:
        tree = parser.parse_to_tree(body)
    except Exception as e:
        raise DocumentLoadError(f"Cannot parse {path}: {e}", path=path) from e

    headings = extract_headings(tree, Slugger())
    key = normalizer.normalize(path)
    logger.debug("Loaded %s as %s (%d headings)", path, key, len(headings))

    return Document(
        key=key,
        path=path,
        body=body,
        headings=tuple(headings),
        metadata=MappingProxyType(dict(metadata)),
    )

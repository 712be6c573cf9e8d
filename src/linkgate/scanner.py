"""Corpus scanning: find every document source file under the documentation roots."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from linkgate.exceptions import ScanError

logger = logging.getLogger(__name__)


def scan_documents(roots: Iterable[Path], extensions: Iterable[str]) -> list[Path]:
    """
    Collect document paths under each root, recursively.

    Roots are scanned in the order given. Within a directory, entries are
    visited in name order and a subdirectory is descended into where it
    appears, so the result is the same on every run and every platform.

    Args:
        roots: Documentation source directories
        extensions: File suffixes that mark a document (e.g. ``.mdx``)

    Returns:
        Document paths, each prefixed with its root

    Raises:
        ScanError: If a root (or a directory below it) cannot be listed
    """
    wanted = frozenset(extensions)
    found: list[Path] = []
    for root in roots:
        if not root.is_dir():
            raise ScanError(f"Documentation root is not a directory: {root}", root=root)
        before = len(found)
        _scan_directory(root, wanted, found)
        logger.debug("Found %d documents under %s", len(found) - before, root)
    return found


def _scan_directory(directory: Path, extensions: frozenset[str], found: list[Path]) -> None:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ScanError(f"Cannot list directory {directory}: {e}", root=directory) from e

    for entry in entries:
        if entry.is_dir():
            _scan_directory(entry, extensions, found)
        elif entry.suffix in extensions:
            found.append(entry)

"""Data models for linkgate.

Plain frozen dataclasses: documents are shared read-only between worker
threads once loaded, and error records are values without identity.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Document:
    """One loaded source file.

    Attributes:
        key: Canonical key (e.g. ``/api/example``) the document is indexed under
        path: Source file path
        body: Content without the frontmatter block
        headings: Anchor slugs in order of appearance, unique within the document
        metadata: Frontmatter key/value pairs
    """

    key: str
    path: Path
    body: str
    headings: tuple[str, ...] = ()
    metadata: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def has_heading(self, slug: str) -> bool:
        return slug in self.headings


class LinkErrorKind(str, Enum):
    """Why a link is broken."""

    LINK = "link"  # target document missing
    HASH = "hash"  # target document exists, anchor missing


@dataclass(frozen=True)
class LinkError:
    """One unresolved reference found in ``source``."""

    kind: LinkErrorKind
    href: str
    source: Document

    @property
    def source_path(self) -> Path:
        return self.source.path

    def describe(self) -> str:
        if self.kind is LinkErrorKind.LINK:
            return f"Broken link to {self.href}"
        return f"Missing heading anchor in {self.href}"

    def to_dict(self) -> dict[str, str]:
        return {
            "kind": self.kind.value,
            "href": self.href,
            "source": self.source.key,
            "path": self.source.path.as_posix(),
        }


@dataclass(frozen=True)
class LoadError:
    """A document that could not be read or parsed."""

    path: Path
    message: str
    error_type: str = "DocumentLoadError"

    def to_dict(self) -> dict[str, str]:
        return {
            "path": self.path.as_posix(),
            "message": self.message,
            "error_type": self.error_type,
        }


@dataclass(frozen=True)
class ResolveFailure:
    """A document whose links could not all be checked."""

    key: str
    path: Path
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "path": self.path.as_posix(), "message": self.message}


@dataclass(frozen=True)
class CheckReport:
    """Outcome of one run, every sequence in document enumeration order."""

    documents: int = 0
    link_errors: tuple[LinkError, ...] = ()
    load_errors: tuple[LoadError, ...] = ()
    resolve_failures: tuple[ResolveFailure, ...] = ()
    fail_on_load_error: bool = True
    fail_on_resolve_error: bool = True

    @property
    def failed(self) -> bool:
        """Whether the run must report failure to its caller."""
        if self.link_errors:
            return True
        if self.fail_on_load_error and self.load_errors:
            return True
        return self.fail_on_resolve_error and bool(self.resolve_failures)

    @property
    def has_problems(self) -> bool:
        return bool(self.link_errors or self.load_errors or self.resolve_failures)

    def to_dict(self) -> dict[str, Any]:
        return {
            "documents": self.documents,
            "failed": self.failed,
            "link_errors": [e.to_dict() for e in self.link_errors],
            "load_errors": [e.to_dict() for e in self.load_errors],
            "resolve_failures": [f.to_dict() for f in self.resolve_failures],
        }

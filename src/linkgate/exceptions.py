"""
linkgate exception hierarchy.

Provides typed exceptions for better error handling and clearer error messages.

Exception Hierarchy:
    LinkgateError (base)
    ├── ConfigurationError - Config file issues, invalid settings
    ├── ScanError - Documentation root missing or unreadable
    ├── DocumentLoadError - A single document could not be read or parsed
    │   └── FrontmatterError - Invalid frontmatter block
    └── TraversalError - Unexpected failure while walking a rendered tree
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from linkgate.models import LinkError


class LinkgateError(Exception):
    """Base exception for all linkgate errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """
        Initialize linkgate exception.

        Args:
            message: Human-readable error message
            details: Optional structured error details for logging/debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(LinkgateError):
    """Configuration file or settings error."""

    def __init__(
        self,
        message: str,
        *,
        config_file: Path | str | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if config_file:
            details["config_file"] = str(config_file)
        if field:
            details["field"] = field
        super().__init__(message, details=details)
        self.config_file = config_file
        self.field = field


# =============================================================================
# Corpus Errors
# =============================================================================


class ScanError(LinkgateError):
    """A documentation root could not be scanned."""

    def __init__(
        self,
        message: str,
        *,
        root: Path | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if root:
            details["root"] = str(root)
        super().__init__(message, details=details)
        self.root = root


class DocumentLoadError(LinkgateError):
    """A document could not be read or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = str(path)
        super().__init__(message, details=details)
        self.path = path


class FrontmatterError(DocumentLoadError):
    """The leading frontmatter block is not a valid YAML mapping."""

    pass


# =============================================================================
# Resolution Errors
# =============================================================================


class TraversalError(LinkgateError):
    """Walking a document's rendered tree failed unexpectedly.

    Carries the link errors collected before the failure so they are not lost.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        partial_errors: list[LinkError] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if key:
            details["key"] = key
        super().__init__(message, details=details)
        self.key = key
        self.partial_errors = partial_errors or []

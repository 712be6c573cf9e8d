"""linkgate - Offline link and anchor checker for Markdown/MDX documentation."""

from linkgate.exceptions import (
    ConfigurationError,
    DocumentLoadError,
    FrontmatterError,
    LinkgateError,
    ScanError,
    TraversalError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Base exception
    "LinkgateError",
    # Configuration
    "ConfigurationError",
    # Corpus
    "ScanError",
    "DocumentLoadError",
    "FrontmatterError",
    # Resolution
    "TraversalError",
]

"""GitHub-compatible heading slugs.

Anchors must match the ids the documentation site generates for headings,
which follow GitHub's rules:

    "Getting Started"      -> "getting-started"
    "`useLink()` API"      -> "uselink-api"
    second "Getting Started" in the same page -> "getting-started-1"
"""

from __future__ import annotations

import unicodedata

# Unicode major categories kept in a slug: letters, marks, numbers
_KEPT_CATEGORIES = frozenset("LMN")
_KEPT_CHARACTERS = frozenset(" -_")


def slugify(value: str) -> str:
    """Convert heading text into an anchor slug without disambiguation.

    Lowercases, drops every character that is not a letter, digit, combining
    mark, space, hyphen or underscore, then turns each space into a hyphen.

    Example:
        >>> slugify("Hello, World!")
        'hello-world'
        >>> slugify("API (v2)")
        'api-v2'
    """
    kept = (
        ch
        for ch in value.lower()
        if ch in _KEPT_CHARACTERS or unicodedata.category(ch)[0] in _KEPT_CATEGORIES
    )
    return "".join(kept).replace(" ", "-")


class Slugger:
    """Stateful slug generator that keeps slugs unique within one document.

    One instance must serve exactly one document at a time. Create a new one
    per document or call :meth:`reset` before reusing it.
    """

    def __init__(self) -> None:
        self._occurrences: dict[str, int] = {}

    def slug(self, value: str) -> str:
        """Return a slug for ``value`` that was not issued before by this instance."""
        base = slugify(value)
        result = base
        while result in self._occurrences:
            self._occurrences[base] += 1
            result = f"{base}-{self._occurrences[base]}"
        self._occurrences[result] = 0
        return result

    def reset(self) -> None:
        """Forget every slug issued so far."""
        self._occurrences.clear()

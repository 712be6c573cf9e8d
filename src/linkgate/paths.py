"""Source path ↔ canonical key mapping.

A document's canonical key is the URL path it is published under, relative to
the documentation link prefix:

    docs/api/example.mdx        → /api/example        (root "docs", prefix "")
    repo-docs/guides/intro.mdx  → /repo/docs/guides/intro
                                   (root "repo-docs", prefix "/repo/docs")

Authored links are reduced to the same form by the resolver, so lookups are
exact string matches.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path, PurePath, PurePosixPath

from linkgate.config import RootMapping


def _is_under(path: str, base: str) -> bool:
    return path == base or path.startswith(base + "/")


class PathNormalizer:
    """Maps source paths to canonical keys.

    Source roots are matched first, so a root may live below a directory
    that happens to share a published prefix (/repo/docs/repo-docs published
    at /repo/docs). A path under no root is returned unchanged, which makes
    ``normalize`` idempotent unless a source directory coincides with a
    published URL path.
    """

    def __init__(self, roots: Sequence[RootMapping], extensions: Iterable[str]) -> None:
        # Longest source first so nested roots take precedence
        self._roots = sorted(
            ((PurePath(r.source).as_posix(), r.prefix) for r in roots),
            key=lambda item: len(item[0]),
            reverse=True,
        )
        self._extensions = frozenset(extensions)

    def normalize(self, path: Path | str) -> str:
        """Return the canonical key for a source path.

        Example:
            >>> PathNormalizer([RootMapping(Path("docs"))], [".mdx"]).normalize("docs/a/b.mdx")
            '/a/b'
        """
        posix = PurePath(path).as_posix()

        for source, prefix in self._roots:
            if source in ("", "."):
                if PurePosixPath(posix).is_absolute():
                    continue
                rest = "/" + posix
            elif _is_under(posix, source):
                rest = posix[len(source) :]
            else:
                continue
            return self._strip_extension(prefix + rest)

        # Not under any root: already a key, or a path outside the corpus
        return posix

    def _strip_extension(self, key: str) -> str:
        suffix = PurePosixPath(key).suffix
        if suffix and suffix in self._extensions:
            return key[: -len(suffix)]
        return key

"""Shared pytest fixtures and helpers for linkgate tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from linkgate.config import RootMapping, Settings
from linkgate.env_settings import clear_env_settings_cache
from linkgate.models import Document

WriteDoc = Callable[[str, str], Path]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep tests independent of the caller's LINKGATE_* variables and working dir."""
    for name in (
        "LINKGATE_LOG_LEVEL",
        "LINKGATE_MAX_WORKERS",
        "LINKGATE_FAIL_ON_LOAD_ERROR",
        "LINKGATE_FAIL_ON_RESOLVE_ERROR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_env_settings_cache()
    yield
    clear_env_settings_cache()


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """Empty documentation root."""
    root = tmp_path / "docs"
    root.mkdir()
    return root


@pytest.fixture
def write_doc(docs_root: Path) -> WriteDoc:
    """Write a document below the docs root and return its path.

    Example:
        write_doc("api/example.mdx", "# Usage")
    """

    def _write(relative: str, content: str) -> Path:
        path = docs_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings(docs_root: Path) -> Settings:
    """Settings checking only the docs root, with a small worker pool."""
    return Settings(roots=(RootMapping(docs_root),), max_workers=4)


def make_document(
    key: str = "/guide",
    headings: tuple[str, ...] = (),
    body: str = "",
    path: Path | None = None,
) -> Document:
    """Create a Document for resolver/index tests without touching the disk."""
    return Document(
        key=key,
        path=path or Path("docs" + key + ".mdx"),
        body=body,
        headings=headings,
    )

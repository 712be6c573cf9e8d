"""Tests for the linkgate.yaml schema."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from linkgate.schemas.config import (
    DEFAULT_IGNORE_PATHS,
    ConfigSchema,
    RootSchema,
    validate_config_yaml,
)


class TestRootSchema:
    """Tests for RootSchema."""

    def test_defaults(self) -> None:
        root = RootSchema(source="docs")
        assert root.prefix == ""

    def test_strips_source(self) -> None:
        assert RootSchema(source="  docs  ").source == "docs"

    def test_empty_source(self) -> None:
        with pytest.raises(ValidationError, match="source is required"):
            RootSchema(source="   ")

    @pytest.mark.parametrize("prefix", ["repo/docs", "/repo/docs/"])
    def test_invalid_prefix(self, prefix: str) -> None:
        with pytest.raises(ValidationError):
            RootSchema(source="docs", prefix=prefix)


class TestConfigSchema:
    """Tests for ConfigSchema."""

    def test_defaults(self) -> None:
        schema = validate_config_yaml({})
        assert schema.docs_path == "/docs"
        assert [r.source for r in schema.roots] == ["docs"]
        assert schema.extensions == [".mdx"]
        assert schema.ignore_paths == DEFAULT_IGNORE_PATHS
        assert schema.excluded_hashes == []
        assert schema.log_level == "INFO"

    def test_empty_docs_path_allowed(self) -> None:
        assert ConfigSchema(docs_path="").docs_path == ""

    def test_log_level_normalized(self) -> None:
        assert ConfigSchema(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize(
        ("data", "message"),
        [
            ({"docs_path": "docs"}, "must start with '/'"),
            ({"docs_path": "/docs/"}, "must not end with '/'"),
            ({"roots": []}, "at least 1"),
            ({"extensions": ["mdx"]}, "must start with a dot"),
            ({"extensions": []}, "at least 1"),
            ({"ignore_paths": ["repo"]}, "must start with '/'"),
            ({"excluded_hashes": ["#top"]}, "without the leading '#'"),
            ({"max_workers": 0}, "greater than or equal to 1"),
            ({"log_level": "LOUD"}, "Invalid log_level"),
        ],
    )
    def test_invalid(self, data: dict, message: str) -> None:
        with pytest.raises(ValidationError, match=message):
            validate_config_yaml(data)

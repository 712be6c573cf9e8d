"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from linkgate.config import (
    RootMapping,
    Settings,
    load_settings,
    load_yaml_config,
    settings_from_schema,
)
from linkgate.exceptions import ConfigurationError
from linkgate.schemas.config import ConfigSchema

FULL_CONFIG = """
docs_path: /docs
roots:
  - source: docs
  - source: repo-docs
    prefix: /repo/docs
extensions: [.mdx, .md]
ignore_paths:
  - /api/remote-cache-spec
excluded_hashes: [top]
fail_on_load_error: false
max_workers: 3
log_level: debug
log_file: logs/linkgate.log
"""


def _write_config(directory: Path, content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "linkgate.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestSettings:
    """Tests for the Settings dataclass."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.roots == (RootMapping(Path("docs")),)
        assert settings.docs_path == "/docs"
        assert settings.extensions == (".mdx",)
        assert settings.ignore_paths == frozenset({"/api/remote-cache-spec", "/repo"})
        assert settings.fail_on_load_error is True
        assert settings.fail_on_resolve_error is True

    def test_with_overrides_skips_none(self) -> None:
        settings = Settings().with_overrides(max_workers=None, fail_on_load_error=False)
        assert settings.max_workers is None
        assert settings.fail_on_load_error is False

    def test_worker_count(self) -> None:
        assert Settings(max_workers=3).worker_count == 3
        assert Settings().worker_count >= 1


class TestLoadYamlConfig:
    """Tests for load_yaml_config."""

    def test_empty_file(self, tmp_path: Path) -> None:
        assert load_yaml_config(_write_config(tmp_path, "")) == {}

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml_config(_write_config(tmp_path, "roots: [unclosed\n"))

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            load_yaml_config(_write_config(tmp_path, "- a\n- b\n"))


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults_without_file(self) -> None:
        settings = load_settings()
        assert settings == Settings()
        assert settings.config_file is None

    def test_full_file(self, tmp_path: Path) -> None:
        config_dir = tmp_path / "site"
        config_file = _write_config(config_dir, FULL_CONFIG)

        settings = load_settings(config_file)

        assert settings.config_file == config_file
        assert settings.roots == (
            RootMapping(config_dir / "docs"),
            RootMapping(config_dir / "repo-docs", "/repo/docs"),
        )
        assert settings.extensions == (".mdx", ".md")
        assert settings.ignore_paths == frozenset({"/api/remote-cache-spec"})
        assert settings.excluded_hashes == frozenset({"top"})
        assert settings.fail_on_load_error is False
        assert settings.fail_on_resolve_error is True
        assert settings.max_workers == 3
        assert settings.log_level == "DEBUG"
        assert settings.log_file == config_dir / "logs" / "linkgate.log"

    def test_absolute_source_kept(self, tmp_path: Path) -> None:
        docs = tmp_path / "elsewhere"
        config_file = _write_config(tmp_path / "site", f"roots:\n  - source: {docs}\n")
        assert load_settings(config_file).roots == (RootMapping(docs),)

    def test_default_file_in_working_directory(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "docs_path: /documentation\n")
        settings = load_settings()
        assert settings.docs_path == "/documentation"
        assert settings.config_file == Path("linkgate.yaml")

    def test_explicit_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found") as exc_info:
            load_settings(tmp_path / "missing.yaml")
        assert exc_info.value.details["config_file"] == str(tmp_path / "missing.yaml")

    def test_schema_violation(self, tmp_path: Path) -> None:
        config_file = _write_config(tmp_path, "extensions: [mdx]\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(config_file)
        assert exc_info.value.field == "extensions"
        assert "must start with a dot" in str(exc_info.value)

    def test_nested_field_name(self, tmp_path: Path) -> None:
        config_file = _write_config(tmp_path, "roots:\n  - source: docs\n    prefix: repo\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(config_file)
        assert exc_info.value.field == "roots.0.prefix"

    def test_environment_overrides_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = _write_config(tmp_path, "max_workers: 3\nfail_on_load_error: true\n")
        monkeypatch.setenv("LINKGATE_MAX_WORKERS", "7")
        monkeypatch.setenv("LINKGATE_FAIL_ON_LOAD_ERROR", "false")
        monkeypatch.setenv("LINKGATE_LOG_LEVEL", "warning")

        settings = load_settings(config_file)

        assert settings.max_workers == 7
        assert settings.fail_on_load_error is False
        assert settings.log_level == "WARNING"

    def test_environment_ignored_when_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINKGATE_MAX_WORKERS", "7")
        assert load_settings(use_env=False).max_workers is None

    def test_invalid_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINKGATE_MAX_WORKERS", "0")
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()
        assert exc_info.value.field == "max_workers"


class TestSettingsFromSchema:
    """Tests for settings_from_schema."""

    def test_without_base_dir(self) -> None:
        settings = settings_from_schema(ConfigSchema())
        assert settings.roots == (RootMapping(Path("docs")),)
        assert settings.log_file is None

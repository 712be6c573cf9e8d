"""
Configuration loading from linkgate.yaml and the environment.

Setting Sources and Precedence
==============================
1. Command-line flags (applied by the CLI on top of the loaded settings)
2. ``LINKGATE_*`` environment variables / ``.env`` (see env_settings)
3. linkgate.yaml:
   - docs_path: URL prefix of documentation links (default ``/docs``)
   - roots: list of ``{source, prefix}`` documentation directories
   - extensions: document file extensions (default ``[.mdx]``)
   - ignore_paths: link paths that exist outside the checked documents
   - excluded_hashes: anchors that are always valid
   - fail_on_load_error / fail_on_resolve_error: failure policy
   - max_workers, log_level, log_file
4. Built-in defaults

Path Resolution
===============
Relative ``roots[].source`` and ``log_file`` paths are resolved relative to
the directory holding linkgate.yaml.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from linkgate.env_settings import get_env_settings
from linkgate.exceptions import ConfigurationError
from linkgate.schemas.config import DEFAULT_IGNORE_PATHS, ConfigSchema, validate_config_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("linkgate.yaml")


@dataclass(frozen=True)
class RootMapping:
    """A documentation source directory and its published URL prefix."""

    source: Path
    prefix: str = ""


@dataclass(frozen=True)
class Settings:
    """Effective settings for one run."""

    roots: tuple[RootMapping, ...] = (RootMapping(Path("docs")),)
    docs_path: str = "/docs"
    extensions: tuple[str, ...] = (".mdx",)
    ignore_paths: frozenset[str] = frozenset(DEFAULT_IGNORE_PATHS)
    excluded_hashes: frozenset[str] = frozenset()
    fail_on_load_error: bool = True
    fail_on_resolve_error: bool = True
    max_workers: int | None = None
    log_level: str = "INFO"
    log_file: Path | None = None
    config_file: Path | None = field(default=None, compare=False)

    @property
    def worker_count(self) -> int:
        """Configured worker count, or a default sized for I/O-bound work."""
        return self.max_workers or min(32, (os.cpu_count() or 4) * 4)

    def with_overrides(self, **changes: Any) -> Settings:
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """
    Read and parse linkgate.yaml.

    Raises:
        ConfigurationError: If the file cannot be read or is not a YAML mapping
    """
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config file: {e}", config_file=config_path
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML: {e}", config_file=config_path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config must be a mapping, got {type(data).__name__}", config_file=config_path
        )
    return data


def _schema_error(e: PydanticValidationError, config_path: Path | None) -> ConfigurationError:
    first = e.errors()[0]
    field_name = ".".join(str(part) for part in first.get("loc", ()))
    return ConfigurationError(
        f"Invalid configuration: {field_name}: {first.get('msg', e)}",
        config_file=config_path,
        field=field_name or None,
        details={"errors": [err.get("msg") for err in e.errors()]},
    )


def settings_from_schema(schema: ConfigSchema, base_dir: Path | None = None) -> Settings:
    """Convert a validated schema into :class:`Settings`."""

    def resolve_path(path_str: str) -> Path:
        p = Path(path_str)
        if p.is_absolute() or base_dir is None:
            return p
        return base_dir / p

    return Settings(
        roots=tuple(RootMapping(resolve_path(r.source), r.prefix) for r in schema.roots),
        docs_path=schema.docs_path,
        extensions=tuple(schema.extensions),
        ignore_paths=frozenset(schema.ignore_paths),
        excluded_hashes=frozenset(schema.excluded_hashes),
        fail_on_load_error=schema.fail_on_load_error,
        fail_on_resolve_error=schema.fail_on_resolve_error,
        max_workers=schema.max_workers,
        log_level=schema.log_level,
        log_file=resolve_path(schema.log_file) if schema.log_file else None,
    )


def load_settings(config_file: Path | None = None, *, use_env: bool = True) -> Settings:
    """
    Load settings from linkgate.yaml and the environment.

    Args:
        config_file: Path to linkgate.yaml. When omitted, ``./linkgate.yaml`` is
            used if it exists and built-in defaults otherwise.
        use_env: Apply ``LINKGATE_*`` environment overrides

    Returns:
        Populated Settings object

    Raises:
        ConfigurationError: If an explicit config file is missing or any
            value is invalid
    """
    config_path: Path | None = config_file
    if config_path is None and DEFAULT_CONFIG_FILE.exists():
        config_path = DEFAULT_CONFIG_FILE
    if config_path is not None and not config_path.exists():
        raise ConfigurationError("Config file not found", config_file=config_path)

    data = load_yaml_config(config_path) if config_path is not None else {}
    try:
        schema = validate_config_yaml(data)
    except PydanticValidationError as e:
        raise _schema_error(e, config_path) from e

    base_dir = config_path.parent if config_path is not None else None
    settings = replace(settings_from_schema(schema, base_dir), config_file=config_path)
    logger.debug("Loaded settings from %s", config_path or "defaults")

    if use_env:
        try:
            env = get_env_settings()
        except PydanticValidationError as e:
            raise _schema_error(e, None) from e
        settings = settings.with_overrides(
            log_level=env.log_level,
            max_workers=env.max_workers,
            fail_on_load_error=env.fail_on_load_error,
            fail_on_resolve_error=env.fail_on_resolve_error,
        )

    return settings

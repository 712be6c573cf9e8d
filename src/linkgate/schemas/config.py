"""
Pydantic schema for linkgate.yaml validation.

This validates the YAML structure at load time before converting to dataclasses.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

DEFAULT_IGNORE_PATHS = ["/api/remote-cache-spec", "/repo"]


def _check_url_prefix(v: str, field_name: str) -> str:
    """URL prefixes are empty or absolute without a trailing slash."""
    v = v.strip()
    if v and not v.startswith("/"):
        raise ValueError(f"{field_name} must start with '/', got: {v!r}")
    if v.endswith("/"):
        raise ValueError(f"{field_name} must not end with '/', got: {v!r}")
    return v


class RootSchema(BaseModel):
    """One documentation source directory and the URL prefix it is published under."""

    source: str = Field(..., description="Directory holding the documents")
    prefix: str = Field(default="", description="Published URL prefix ('' for the top level)")

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: str) -> str:
        """Ensure source directory is non-empty."""
        if not v or not v.strip():
            raise ValueError("source is required but empty")
        return v.strip()

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        return _check_url_prefix(v, "prefix")


class ConfigSchema(BaseModel):
    """Complete linkgate.yaml schema."""

    docs_path: str = Field(default="/docs", description="URL prefix of documentation links")
    roots: list[RootSchema] = Field(
        default_factory=lambda: [RootSchema(source="docs")],
        min_length=1,
    )
    extensions: list[str] = Field(default_factory=lambda: [".mdx"], min_length=1)
    ignore_paths: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE_PATHS))
    excluded_hashes: list[str] = Field(default_factory=list)
    fail_on_load_error: bool = True
    fail_on_resolve_error: bool = True
    max_workers: int | None = Field(default=None, ge=1, le=256)
    log_level: str = "INFO"
    log_file: str | None = None

    @field_validator("docs_path")
    @classmethod
    def validate_docs_path(cls, v: str) -> str:
        return _check_url_prefix(v, "docs_path")

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        """Ensure extensions start with a dot."""
        for ext in v:
            if not ext.startswith("."):
                raise ValueError(f"Extension '{ext}' must start with a dot")
        return v

    @field_validator("ignore_paths")
    @classmethod
    def validate_ignore_paths(cls, v: list[str], info: ValidationInfo) -> list[str]:
        for path in v:
            if not path.startswith("/"):
                raise ValueError(f"{info.field_name} entry '{path}' must start with '/'")
        return v

    @field_validator("excluded_hashes")
    @classmethod
    def validate_excluded_hashes(cls, v: list[str]) -> list[str]:
        for anchor in v:
            if anchor.startswith("#"):
                raise ValueError(f"Excluded hash '{anchor}' must be given without the leading '#'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a recognized value."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return v.upper()


def validate_config_yaml(data: dict[str, Any]) -> ConfigSchema:
    """
    Validate linkgate.yaml data against schema.

    Args:
        data: Parsed YAML dictionary

    Returns:
        Validated ConfigSchema

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return ConfigSchema.model_validate(data)

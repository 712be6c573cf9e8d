"""Pydantic schemas for linkgate configuration files."""

from linkgate.schemas.config import ConfigSchema, RootSchema, validate_config_yaml

__all__ = ["ConfigSchema", "RootSchema", "validate_config_yaml"]

"""Runtime context for CLI commands.

The RuntimeContext is created once in the main callback and handed to every
command via ``ctx.obj``. Settings are loaded on first access so that a broken
linkgate.yaml does not prevent ``--help`` from working.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linkgate.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class RuntimeContext:
    """Typed runtime context available to all commands via ctx.obj."""

    config_path: Path | None = None
    verbose: bool = False

    _settings: Settings | None = field(default=None, repr=False)

    @property
    def settings(self) -> Settings:
        """Get or load settings (lazy-loaded).

        Raises:
            ConfigurationError: If linkgate.yaml or the environment is invalid
        """
        if self._settings is None:
            from linkgate.config import load_settings

            self._settings = load_settings(self.config_path)
            logger.debug("Settings loaded from %s", self._settings.config_file or "defaults")
        return self._settings


def get_runtime_context(ctx_obj: object) -> RuntimeContext:
    """Extract RuntimeContext from the typer context object.

    Raises:
        TypeError: If ctx_obj is not a RuntimeContext
    """
    if isinstance(ctx_obj, RuntimeContext):
        return ctx_obj
    if ctx_obj is None:
        return RuntimeContext()
    raise TypeError(
        f"Expected RuntimeContext, got {type(ctx_obj).__name__}. "
        "Ensure the main callback initializes ctx.obj properly."
    )

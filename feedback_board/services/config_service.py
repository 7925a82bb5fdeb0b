"""Configuration service for Feedback Board.

Updates:
    v0.1.0 - 2025-11-09 - Added typed accessors for storage, theme and logging.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.config_loader import ConfigLoader

STORAGE_BACKENDS = ("sqlite", "memory")


@dataclass(slots=True, frozen=True)
class StorageConfig:
    """Storage backend selection."""

    backend: str = "sqlite"
    sqlite_path: str = "./data/feedback.db"


class ConfigService:
    """Loads and exposes configuration for Feedback Board components."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Load the settings document.

        Args:
            config_path (Path | None): Optional override for the configuration directory.
        """

        self._loader = ConfigLoader(base_path=config_path)
        self._settings = self._loader.load("settings")

    @property
    def app_metadata(self) -> dict[str, Any]:
        """Return general application metadata."""
        return self._section("app")

    @property
    def logging_config(self) -> dict[str, Any]:
        """Return logging configuration settings."""
        return self._section("logging")

    @property
    def theme_config(self) -> dict[str, Any]:
        """Return theme defaults."""
        return self._section("theme")

    @property
    def storage_config(self) -> StorageConfig:
        """Return the storage backend configuration.

        Raises:
            ValueError: If the configured backend is not supported.
        """

        section = self._section("storage")
        backend = str(section.get("backend", "sqlite")).strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unsupported storage backend '{backend}'; expected one of {STORAGE_BACKENDS}."
            )
        sqlite_path = os.path.expandvars(
            str(section.get("sqlite_path", StorageConfig.sqlite_path))
        )
        return StorageConfig(backend=backend, sqlite_path=sqlite_path)

    @staticmethod
    def clear_cache() -> None:
        """Clear cached configuration to reflect file updates."""

        ConfigLoader.load.cache_clear()

    def _section(self, name: str) -> dict[str, Any]:
        section = self._settings.get(name, {})
        return dict(section) if isinstance(section, dict) else {}

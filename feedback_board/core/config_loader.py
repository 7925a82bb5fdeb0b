"""YAML configuration loading.

Updates:
    v0.1.0 - 2025-11-09 - Added cached loader for the settings directory.
"""

from __future__ import annotations

import functools
import os
from pathlib import Path
from typing import Any, Dict

import yaml

CONFIG_PATH_ENV = "FEEDBACK_BOARD_CONFIG_PATH"


class ConfigLoader:
    """Loads YAML documents from the configuration directory."""

    def __init__(self, base_path: Path | None = None) -> None:
        """Resolve the configuration directory.

        Args:
            base_path (Path | None): Explicit directory; defaults to
                ``$FEEDBACK_BOARD_CONFIG_PATH`` or ``./config``.

        Raises:
            FileNotFoundError: If the directory does not exist.
        """

        self._base_path = Path(
            base_path or os.environ.get(CONFIG_PATH_ENV, "config")
        ).resolve()
        if not self._base_path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {self._base_path}")

    @property
    def base_path(self) -> Path:
        return self._base_path

    def _resolve(self, name: str) -> Path:
        candidate = self._base_path / name
        if candidate.suffix not in {".yaml", ".yml"}:
            candidate = candidate.with_suffix(".yaml")
        if not candidate.exists():
            raise FileNotFoundError(f"Config file not found: {candidate}")
        return candidate

    @functools.lru_cache(maxsize=None)
    def load(self, name: str) -> Dict[str, Any]:
        """Load and cache a YAML document as a dictionary.

        Args:
            name (str): File name with or without the ``.yaml`` suffix.

        Returns:
            dict[str, Any]: Parsed content, ``{}`` for an empty file.
        """

        path = self._resolve(name)
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping.")
        return data

    def __hash__(self) -> int:
        return hash(self._base_path)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ConfigLoader) and other._base_path == self._base_path

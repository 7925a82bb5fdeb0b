"""Light/dark theme preference.

Updates:
    v0.1.0 - 2025-11-09 - Persist theme choice next to the feedback collection.
"""

from __future__ import annotations

import logging

from ..core.exceptions import InvalidThemeError
from ..db.storage import THEME_KEY, KeyValueStorage

logger = logging.getLogger(__name__)

LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)


class ThemeService:
    """Reads and writes the stored theme preference."""

    def __init__(self, storage: KeyValueStorage, *, default: str = LIGHT) -> None:
        if default not in THEMES:
            raise InvalidThemeError(f"Unknown default theme '{default}'.")
        self._storage = storage
        self._default = default

    def current(self) -> str:
        """Return the stored theme, or the default when unset or unrecognized."""

        stored = self._storage.get_item(THEME_KEY)
        if stored in THEMES:
            return stored
        if stored is not None:
            logger.warning("theme_invalid", extra={"stored": stored, "fallback": self._default})
        return self._default

    def set(self, theme: str) -> str:
        """Persist ``theme``.

        Raises:
            InvalidThemeError: If ``theme`` is not ``light`` or ``dark``.
        """

        normalized = (theme or "").strip().lower()
        if normalized not in THEMES:
            raise InvalidThemeError(f"Theme must be one of {THEMES}, got '{theme}'.")
        self._storage.set_item(THEME_KEY, normalized)
        logger.info("theme_changed", extra={"theme": normalized})
        return normalized

    def toggle(self) -> str:
        return self.set(LIGHT if self.current() == DARK else DARK)

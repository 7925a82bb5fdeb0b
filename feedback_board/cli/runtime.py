"""Runtime wiring for the Feedback Board CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from feedback_board.cli.renderers import RichChartRenderer, RichListRenderer
from feedback_board.core.config_loader import CONFIG_PATH_ENV
from feedback_board.core.logging_setup import configure_logging
from feedback_board.core.logging_setup import set_runtime_level  # re-exported by feedback_board.cli
from feedback_board.db.storage import KeyValueStorage, MemoryStorage, SQLiteStorage
from feedback_board.services.config_service import ConfigService
from feedback_board.services.feedback_store import FeedbackStore
from feedback_board.services.theme_service import LIGHT, ThemeService
from feedback_board.workflows.view_coordinator import ViewCoordinator

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass
class Runtime:
    """Services shared by the CLI commands of one process."""

    coordinator: ViewCoordinator
    store: FeedbackStore
    themes: ThemeService
    storage: KeyValueStorage


_RUNTIME_CACHE: Runtime | None = None


def build_runtime(storage: KeyValueStorage, *, default_theme: str = LIGHT) -> Runtime:
    """Assemble store, theme service and coordinator over ``storage``.

    The persisted collection is loaded once here.
    """

    store = FeedbackStore(storage)
    themes = ThemeService(storage, default=default_theme)
    coordinator = ViewCoordinator(
        store,
        list_renderer=RichListRenderer(),
        chart_renderer=RichChartRenderer(),
        theme_service=themes,
    )
    store.load()
    return Runtime(coordinator=coordinator, store=store, themes=themes, storage=storage)


def initialize_runtime(config_path: Path | None = None) -> Runtime:
    """Read settings, configure logging and open the configured storage."""

    config_service = ConfigService(config_path or _default_config_path())
    configure_logging(config_service.logging_config)
    storage_config = config_service.storage_config

    storage: KeyValueStorage
    if storage_config.backend == "memory":
        storage = MemoryStorage()
    else:
        sqlite_storage = SQLiteStorage(storage_config.sqlite_path)
        sqlite_storage.initialize_schema()
        storage = sqlite_storage
    logger.debug("Runtime initialized (backend=%s).", storage_config.backend)

    default_theme = str(config_service.theme_config.get("default", LIGHT))
    return build_runtime(storage, default_theme=default_theme)


def get_runtime() -> Runtime:
    """Return the lazily-initialized runtime."""

    global _RUNTIME_CACHE
    if _RUNTIME_CACHE is None:
        _RUNTIME_CACHE = initialize_runtime()
    return _RUNTIME_CACHE


def set_runtime(runtime: Optional[Runtime]) -> None:
    """Replace the cached runtime."""

    global _RUNTIME_CACHE
    _RUNTIME_CACHE = runtime


def get_coordinator() -> ViewCoordinator:
    return get_runtime().coordinator


def _default_config_path() -> Path | None:
    if os.environ.get(CONFIG_PATH_ENV):
        return None
    bundled = PROJECT_ROOT / "config"
    return bundled if bundled.is_dir() else None

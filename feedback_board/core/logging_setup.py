"""Structured logging for Feedback Board.

Updates:
    v0.1.0 - 2025-11-09 - Added JSON formatter and runtime level override.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

_configured = False
_handler: logging.Handler | None = None

# Attributes present on every LogRecord; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def __init__(self, service: str = "feedback_board") -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "service": self._service,
            "message": record.getMessage(),
        }
        payload.update(_extract_extra_fields(record))

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(config: dict[str, Any] | None = None) -> None:
    """Install the JSON handler on the root logger once per process.

    Args:
        config (dict[str, Any] | None): Logging section of the settings file.
            Recognizes ``level`` and ``service``.
    """

    global _configured, _handler
    if _configured:
        return

    config = config or {}
    level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(service=str(config.get("service", "feedback_board"))))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    _handler = handler
    _configured = True


def set_runtime_level(level_name: str) -> None:
    """Change the active log level.

    Raises:
        ValueError: If the level name is unknown to :mod:`logging`.
    """

    if not level_name:
        return
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    logging.getLogger().setLevel(level)
    if _handler:
        _handler.setLevel(level)


def _extract_extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if not key.startswith("_") and key not in _RESERVED_ATTRS
    }

"""Utility helpers shared across CLI command modules."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from feedback_board.core.exceptions import InvalidFilterError
from feedback_board.core.models import Filter
from feedback_board.services.filter_engine import parse_filter

logger = logging.getLogger(__name__)


def _cli():
    return sys.modules["feedback_board.cli"]


def apply_log_override(log_level: Optional[str]) -> None:
    """Override logging level for the current invocation."""

    if not log_level or not isinstance(log_level, str):
        return
    try:
        _cli().set_runtime_level(log_level)
        logger.info("Log level overridden to %s", log_level.upper())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def parse_filter_option(value: Optional[str]) -> Filter:
    """Convert the ``--filter`` option into a filter value."""

    try:
        return parse_filter(value)
    except InvalidFilterError as exc:
        raise typer.BadParameter(str(exc), param_hint="--filter") from exc

"""Theme commands for the Feedback Board CLI."""

from __future__ import annotations

import sys

import typer

from feedback_board.cli.io import console
from feedback_board.cli.utils import apply_log_override
from feedback_board.core.exceptions import InvalidThemeError


def _cli():
    return sys.modules["feedback_board.cli"]


def theme_show(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Print the active theme."""

    apply_log_override(log_level)
    console.print(f"Theme: [bold]{_cli().get_runtime().themes.current()}[/]")


def theme_toggle(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Switch between light and dark and redraw the chart."""

    apply_log_override(log_level)
    applied = _cli().get_coordinator().on_theme_toggle()
    console.print(f"[green]Theme set to {applied}.[/]")


def theme_set(
    theme: str = typer.Argument(..., help="Either 'light' or 'dark'."),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Persist a specific theme and redraw the chart."""

    apply_log_override(log_level)
    try:
        applied = _cli().get_coordinator().on_theme_change(theme)
    except InvalidThemeError as exc:
        raise typer.BadParameter(str(exc), param_hint="THEME") from exc
    console.print(f"[green]Theme set to {applied}.[/]")

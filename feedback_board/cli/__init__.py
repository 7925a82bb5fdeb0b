"""Feedback Board CLI package."""

from __future__ import annotations

import logging

import typer

from feedback_board.cli.commands.feedback import chart, list_feedback, show, submit
from feedback_board.cli.commands.theme import theme_set, theme_show, theme_toggle
from feedback_board.cli.io import console
from feedback_board.cli.renderers import RichChartRenderer, RichListRenderer
from feedback_board.cli.runtime import (
    Runtime,
    build_runtime,
    get_coordinator,
    get_runtime,
    initialize_runtime,
    set_runtime,
    set_runtime_level,
)

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Feedback Board CLI")
theme_app = typer.Typer(add_completion=False, help="Inspect or change the chart theme.")


@theme_app.callback(invoke_without_command=True)
def _theme_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        theme_show(log_level=None)


app.command()(submit)
app.command()(show)
app.command("list")(list_feedback)
app.command()(chart)

theme_app.command("show")(theme_show)
theme_app.command("toggle")(theme_toggle)
theme_app.command("set")(theme_set)

app.add_typer(theme_app, name="theme")


def main() -> None:
    """CLI entry point."""

    app()


__all__: list[str] = [
    "app",
    "theme_app",
    "main",
    "console",
    "logger",
    "Runtime",
    "build_runtime",
    "get_coordinator",
    "get_runtime",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
    "RichChartRenderer",
    "RichListRenderer",
    "submit",
    "show",
    "list_feedback",
    "chart",
    "theme_show",
    "theme_toggle",
    "theme_set",
]

"""Feedback commands for the Feedback Board CLI."""

from __future__ import annotations

import sys
from typing import Optional

import typer

from feedback_board.cli.io import console
from feedback_board.cli.utils import apply_log_override, parse_filter_option
from feedback_board.core.models import NewFeedbackInput


def _cli():
    return sys.modules["feedback_board.cli"]


def submit(
    username: str = typer.Argument(..., help="Name shown next to the feedback."),
    rating: Optional[int] = typer.Option(
        None,
        "--rating",
        "-r",
        help="Rating 1-5 (defaults to 5 when omitted).",
    ),
    comment: Optional[str] = typer.Option(
        None,
        "--comment",
        "-c",
        help="Optional free-form comment.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Record a feedback entry and show the updated list and chart."""

    apply_log_override(log_level)
    if rating is not None and (rating < 1 or rating > 5):
        raise typer.BadParameter("Rating must be between 1 and 5.", param_hint="--rating")

    coordinator = _cli().get_coordinator()
    record = coordinator.on_submit(
        NewFeedbackInput(username=username, rating=rating, comment=comment)
    )
    console.print(f"[green]Feedback #{record.id} saved.[/]")


def show(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Reload stored feedback and show the full list and chart."""

    apply_log_override(log_level)
    _cli().get_coordinator().on_init()


def list_feedback(
    filter_value: str = typer.Option(
        "all",
        "--filter",
        "-f",
        help="Show only one rating (1-5) or 'all'.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Show feedback entries, optionally limited to one rating."""

    apply_log_override(log_level)
    active_filter = parse_filter_option(filter_value)
    _cli().get_coordinator().on_filter_change(active_filter)


def chart(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation.",
    ),
) -> None:
    """Show the rating distribution across all feedback."""

    apply_log_override(log_level)
    _cli().get_coordinator().redraw_chart()

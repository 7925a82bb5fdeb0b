"""Rich renderers for the feedback list and rating chart."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from feedback_board.cli.io import console as default_console
from feedback_board.core.models import ALL, RATING_VALUES, FeedbackRecord, Filter, RatingHistogram
from feedback_board.services.theme_service import DARK

STAR = "★"
BAR_WIDTH = 30
RATING_COLORS = {
    1: "#ef4444",
    2: "#f97316",
    3: "#facc15",
    4: "#84cc16",
    5: "#22c55e",
}
THEME_STYLES = {
    "light": {"text": "#111827", "grid": "#d1d5db"},
    "dark": {"text": "#f9fafb", "grid": "#374151"},
}


def render_stars(rating: int) -> str:
    """Return markup with ``rating`` filled stars followed by empty ones."""

    filled = max(0, min(rating, len(RATING_VALUES)))
    empty = len(RATING_VALUES) - filled
    return f"[yellow]{STAR * filled}[/][dim]{STAR * empty}[/]"


def filter_title(active_filter: Filter) -> str:
    if active_filter == ALL:
        return "Feedback"
    return f"Feedback ({active_filter} {STAR})"


class RichListRenderer:
    """Paints feedback records as panels."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or default_console

    def render_list(self, records: Sequence[FeedbackRecord], active_filter: Filter) -> None:
        title = filter_title(active_filter)
        if not records:
            self._console.print(Panel("No feedback found.", title=title))
            return

        for record in records:
            comment = escape(record.comment) if record.has_comment else "[italic]No comment.[/]"
            body = f"[bold]{escape(record.username)}[/]  {render_stars(record.rating)}\n{comment}"
            self._console.print(Panel(body, title=title, title_align="left"))


class RichChartRenderer:
    """Paints the rating distribution as a horizontal bar table."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or default_console

    def render_chart(self, distribution: RatingHistogram, theme: str) -> None:
        styles = THEME_STYLES.get(theme, THEME_STYLES["light"])
        table = Table(
            title="Ratings",
            style=styles["grid"],
            header_style=f"bold {styles['text']}",
            show_lines=theme == DARK,
        )
        table.add_column("Rating", style=styles["text"])
        table.add_column("Count", justify="right", style=styles["text"])
        table.add_column("Distribution")

        peak = max(distribution.counts) or 1
        for label, rating, count in zip(distribution.labels, RATING_VALUES, distribution.counts):
            width = round(count / peak * BAR_WIDTH)
            bar = f"[{RATING_COLORS[rating]}]{'█' * width}[/]"
            table.add_row(label, str(count), bar)

        self._console.print(table)

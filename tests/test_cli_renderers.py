from io import StringIO

from rich.console import Console

from feedback_board.cli.renderers import (
    RichChartRenderer,
    RichListRenderer,
    filter_title,
    render_stars,
)
from feedback_board.core.models import ALL, FeedbackRecord, RatingHistogram


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=100, color_system=None), buffer


def test_render_stars_pads_with_empty_stars() -> None:
    assert render_stars(2) == "[yellow]★★[/][dim]★★★[/]"
    assert render_stars(9) == "[yellow]★★★★★[/][dim][/]"


def test_filter_title() -> None:
    assert filter_title(ALL) == "Feedback"
    assert filter_title(3) == "Feedback (3 ★)"


def test_list_renderer_handles_empty_and_blank_comment() -> None:
    console, buffer = _console()
    renderer = RichListRenderer(console)

    renderer.render_list((), ALL)
    renderer.render_list((FeedbackRecord(id=1, username="Ana", rating=4, comment="  "),), 4)

    output = buffer.getvalue()
    assert "No feedback found." in output
    assert "Ana" in output
    assert "No comment." in output


def test_chart_renderer_prints_every_bucket() -> None:
    console, buffer = _console()

    RichChartRenderer(console).render_chart(RatingHistogram(counts=(0, 1, 0, 3, 2)), "dark")

    output = buffer.getvalue()
    for label in ("1 ★", "2 ★", "3 ★", "4 ★", "5 ★"):
        assert label in output
    assert "█" in output

"""Recording renderers used to observe coordinator emissions."""

from __future__ import annotations

from typing import Any, Sequence

from feedback_board.core.models import FeedbackRecord, Filter, RatingHistogram


class RecordingListRenderer:
    def __init__(self) -> None:
        self.calls: list[tuple[tuple[FeedbackRecord, ...], Filter]] = []

    def render_list(self, records: Sequence[FeedbackRecord], active_filter: Filter) -> None:
        self.calls.append((tuple(records), active_filter))

    @property
    def last(self) -> tuple[FeedbackRecord, ...]:
        return self.calls[-1][0]


class RecordingChartRenderer:
    def __init__(self) -> None:
        self.calls: list[tuple[RatingHistogram, str]] = []

    def render_chart(self, distribution: RatingHistogram, theme: str) -> None:
        self.calls.append((distribution, theme))

    @property
    def last(self) -> Any:
        return self.calls[-1][0]

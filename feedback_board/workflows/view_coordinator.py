"""Event handling for the feedback list and rating chart.

Updates:
    v0.1.0 - 2025-11-09 - Added coordinator driving store, filter and aggregate views.
    v0.2.0 - 2025-11-12 - Redraw the chart on theme changes.
"""

from __future__ import annotations

import enum
import logging
from contextlib import contextmanager
from time import perf_counter
from typing import Iterator, Optional, Protocol, Sequence

from ..core.exceptions import CoordinatorBusyError
from ..core.models import ALL, FeedbackRecord, Filter, NewFeedbackInput, RatingHistogram
from ..services.aggregator import histogram
from ..services.feedback_store import FeedbackStore
from ..services.filter_engine import parse_filter, select
from ..services.theme_service import LIGHT, ThemeService


class ListRenderer(Protocol):
    """Paints the filtered feedback list."""

    def render_list(self, records: Sequence[FeedbackRecord], active_filter: Filter) -> None:
        ...


class ChartRenderer(Protocol):
    """Paints the rating distribution chart."""

    def render_chart(self, distribution: RatingHistogram, theme: str) -> None:
        ...


class CoordinatorState(enum.Enum):
    IDLE = "idle"
    UPDATING = "updating"


class ViewCoordinator:
    """Applies UI events to the store and pushes derived views to renderers.

    Each handler runs to completion before the coordinator returns to
    ``IDLE``. The list always reflects the active filter; the chart always
    reflects the full collection.
    """

    _logger = logging.getLogger(__name__)

    def __init__(
        self,
        store: FeedbackStore,
        *,
        list_renderer: Optional[ListRenderer] = None,
        chart_renderer: Optional[ChartRenderer] = None,
        theme_service: Optional[ThemeService] = None,
    ) -> None:
        """Wire the coordinator to its collaborators.

        Args:
            store (FeedbackStore): Owner of the feedback collection.
            list_renderer (ListRenderer | None): Target for the filtered list.
            chart_renderer (ChartRenderer | None): Target for the histogram.
            theme_service (ThemeService | None): Theme preference source.
        """

        self._store = store
        self._list_renderer = list_renderer
        self._chart_renderer = chart_renderer
        self._themes = theme_service
        self._active_filter: Filter = ALL
        self._state = CoordinatorState.IDLE

    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def active_filter(self) -> Filter:
        return self._active_filter

    @property
    def theme(self) -> str:
        return self._themes.current() if self._themes else LIGHT

    def filtered(self) -> tuple[FeedbackRecord, ...]:
        return select(self._store.all(), self._active_filter)

    def current_histogram(self) -> RatingHistogram:
        return histogram(self._store.all())

    def on_init(self) -> None:
        """Load persisted feedback and paint both views unfiltered."""

        with self._updating("init"):
            self._store.load()
            self._active_filter = ALL
            self._emit_list()
            self._emit_chart()

    def on_submit(self, feedback: NewFeedbackInput) -> FeedbackRecord:
        """Store a new feedback entry and repaint both views.

        Args:
            feedback (NewFeedbackInput): Form values; an unset rating becomes 5.

        Returns:
            FeedbackRecord: The persisted record.
        """

        with self._updating("submit"):
            record = self._store.add(feedback)
            self._emit_list()
            self._emit_chart()
        return record

    def on_filter_change(self, new_filter: Filter | None) -> tuple[FeedbackRecord, ...]:
        """Switch the list filter and repaint only the list.

        Args:
            new_filter (Filter | None): ``"all"``, a rating 1-5, or its string form.

        Raises:
            InvalidFilterError: If the value names no filter; the active filter is kept.
        """

        normalized = parse_filter(new_filter)
        with self._updating("filter_change"):
            self._active_filter = normalized
            records = self._emit_list()
        return records

    def on_theme_change(self, theme: str) -> str:
        """Persist ``theme`` and redraw the chart in its colors."""

        with self._updating("theme_change"):
            applied = self._require_themes().set(theme)
            self._emit_chart(theme=applied)
        return applied

    def on_theme_toggle(self) -> str:
        """Flip between light and dark and redraw the chart."""

        with self._updating("theme_toggle"):
            applied = self._require_themes().toggle()
            self._emit_chart(theme=applied)
        return applied

    def redraw_chart(self) -> RatingHistogram:
        """Repaint the chart from the current collection without mutating it."""

        with self._updating("redraw_chart"):
            distribution = self._emit_chart()
        return distribution

    def _emit_list(self) -> tuple[FeedbackRecord, ...]:
        records = self.filtered()
        if self._list_renderer is not None:
            self._list_renderer.render_list(records, self._active_filter)
        return records

    def _emit_chart(self, *, theme: str | None = None) -> RatingHistogram:
        distribution = self.current_histogram()
        if self._chart_renderer is not None:
            self._chart_renderer.render_chart(distribution, theme or self.theme)
        return distribution

    def _require_themes(self) -> ThemeService:
        if self._themes is None:
            raise RuntimeError("Theme changes require a ThemeService.")
        return self._themes

    @contextmanager
    def _updating(self, event: str) -> Iterator[None]:
        if self._state is CoordinatorState.UPDATING:
            raise CoordinatorBusyError(f"Cannot handle '{event}' while another event is in progress.")
        self._state = CoordinatorState.UPDATING
        started = perf_counter()
        try:
            yield
        except Exception as exc:
            self._logger.error(
                "view_update_failed",
                extra={
                    "event": event,
                    "duration_ms": round((perf_counter() - started) * 1000, 2),
                    "error": str(exc),
                },
                exc_info=True,
            )
            raise
        finally:
            self._state = CoordinatorState.IDLE

        self._logger.info(
            "view_updated",
            extra={
                "event": event,
                "duration_ms": round((perf_counter() - started) * 1000, 2),
                "active_filter": self._active_filter,
                "count": len(self._store),
            },
        )

"""Feedback collection ownership and persistence.

Updates:
    v0.1.0 - 2025-11-09 - Added newest-first store persisting through the codec.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from ..core.codec import RecordCodec
from ..core.models import FeedbackRecord, NewFeedbackInput
from ..db.storage import FEEDBACKS_KEY, KeyValueStorage

logger = logging.getLogger(__name__)


def _clock_ms() -> int:
    return time.time_ns() // 1_000_000


class FeedbackStore:
    """Sole owner of the feedback collection.

    Records are kept newest first. Every mutation rewrites the whole
    collection to storage before returning.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        codec: RecordCodec | None = None,
        clock: Callable[[], int] = _clock_ms,
    ) -> None:
        """Bind the store to its storage medium.

        Args:
            storage (KeyValueStorage): Medium holding the ``feedbacks`` value.
            codec (RecordCodec | None): Codec for the stored form.
            clock (Callable[[], int]): Millisecond clock used to derive ids.
        """

        self._storage = storage
        self._codec = codec or RecordCodec()
        self._clock = clock
        self._records: list[FeedbackRecord] = []

    def load(self) -> tuple[FeedbackRecord, ...]:
        """Replace the in-memory collection with the persisted one."""

        self._records = self._codec.decode(self._storage.get_item(FEEDBACKS_KEY))
        logger.debug("feedback_loaded", extra={"count": len(self._records)})
        return self.all()

    def add(self, feedback: NewFeedbackInput) -> FeedbackRecord:
        """Create a record from form input and store it at the head.

        Input is accepted as given; only the documented default rating is
        applied when no rating was selected.

        Args:
            feedback (NewFeedbackInput): Values captured by the form.

        Returns:
            FeedbackRecord: The stored record, already persisted.
        """

        record = FeedbackRecord(
            id=self._next_id(),
            username=feedback.username,
            rating=feedback.resolved_rating,
            comment=feedback.resolved_comment,
        )
        self._records.insert(0, record)
        self._persist()
        logger.info(
            "feedback_added",
            extra={"feedback_id": record.id, "rating": record.rating, "count": len(self._records)},
        )
        return record

    def all(self) -> tuple[FeedbackRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def _next_id(self) -> int:
        candidate = self._clock()
        if self._records:
            # Ids stay strictly increasing even when the clock stalls or steps back.
            candidate = max(candidate, max(record.id for record in self._records) + 1)
        return candidate

    def _persist(self) -> None:
        self._storage.set_item(FEEDBACKS_KEY, self._codec.encode(self._records))

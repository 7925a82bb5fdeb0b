"""Rating distribution over the full feedback collection."""

from __future__ import annotations

import logging
from typing import Iterable

from ..core.models import RATING_VALUES, FeedbackRecord, RatingHistogram

logger = logging.getLogger(__name__)


def histogram(records: Iterable[FeedbackRecord]) -> RatingHistogram:
    """Count records per rating.

    The histogram is rebuilt from scratch on every call. Records with a
    rating outside 1-5 have no bucket and are skipped.

    Args:
        records (Iterable[FeedbackRecord]): Full collection.

    Returns:
        RatingHistogram: Five buckets, index ``rating - 1``.
    """

    counts = [0] * len(RATING_VALUES)
    for record in records:
        if record.rating in RATING_VALUES:
            counts[record.rating - 1] += 1
        else:
            logger.debug(
                "rating_out_of_range",
                extra={"feedback_id": record.id, "rating": record.rating},
            )
    return RatingHistogram(counts=tuple(counts))

"""JSON codec for the persisted feedback collection.

Updates:
    v0.1.0 - 2025-11-09 - Added fail-soft decoding of stored feedback.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Optional

from .models import FeedbackRecord

logger = logging.getLogger(__name__)


class RecordCodec:
    """Serializes feedback records to and from their stored string form."""

    def encode(self, records: Iterable[FeedbackRecord]) -> str:
        """Encode records, newest first, as a JSON array.

        Args:
            records (Iterable[FeedbackRecord]): Collection in stored order.

        Returns:
            str: JSON text suitable for the ``feedbacks`` storage key.
        """

        return json.dumps([record.to_dict() for record in records], ensure_ascii=False)

    def decode(self, raw: Optional[str]) -> list[FeedbackRecord]:
        """Decode stored JSON into records.

        Missing or malformed input yields an empty collection; corrupted
        storage is logged and never raised to the caller.

        Args:
            raw (str | None): Stored text, or ``None`` when nothing is stored.

        Returns:
            list[FeedbackRecord]: Decoded records in stored order.
        """

        if not raw:
            return []
        try:
            payload = json.loads(raw, parse_constant=_reject_constant)
            if not isinstance(payload, list):
                raise ValueError(f"expected a list, got {type(payload).__name__}")
            return [_record_from_dict(item) for item in payload]
        except (ValueError, TypeError, KeyError, OverflowError, RecursionError) as exc:
            logger.warning(
                "feedback_decode_failed",
                extra={"error": str(exc), "raw_length": len(raw)},
            )
            return []


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not allowed")


def _record_from_dict(item: Any) -> FeedbackRecord:
    if not isinstance(item, dict):
        raise TypeError(f"expected an object, got {type(item).__name__}")
    comment = item.get("comment")
    return FeedbackRecord(
        id=int(item["id"]),
        username=str(item.get("username") or ""),
        rating=int(item["rating"]),
        comment=str(comment) if comment is not None else "",
    )

"""Rating filters over the feedback collection."""

from __future__ import annotations

from typing import Iterable

from ..core.exceptions import InvalidFilterError
from ..core.models import ALL, RATING_VALUES, FeedbackRecord, Filter


def select(records: Iterable[FeedbackRecord], active_filter: Filter = ALL) -> tuple[FeedbackRecord, ...]:
    """Return the records matching ``active_filter`` in their stored order.

    Args:
        records (Iterable[FeedbackRecord]): Collection, newest first.
        active_filter (Filter): ``"all"`` or a rating between 1 and 5.

    Returns:
        tuple[FeedbackRecord, ...]: The whole collection for ``"all"``,
        otherwise the records whose rating equals the filter.
    """

    if active_filter == ALL:
        return tuple(records)
    return tuple(record for record in records if record.rating == active_filter)


def parse_filter(value: str | int | None) -> Filter:
    """Normalize a user-supplied filter value.

    Raises:
        InvalidFilterError: If the value is neither ``all`` nor a rating 1-5.
    """

    if value is None:
        return ALL
    if isinstance(value, str):
        text = value.strip().lower()
        if text in {"", ALL}:
            return ALL
        try:
            value = int(text)
        except ValueError as exc:
            raise InvalidFilterError(f"Unknown filter '{value}'.") from exc
    if isinstance(value, bool) or value not in RATING_VALUES:
        raise InvalidFilterError(f"Filter must be 'all' or a rating 1-5, got {value!r}.")
    return value

"""Feedback domain structures.

Updates:
    v0.1.0 - 2025-11-09 - Added feedback record and histogram dataclasses.
    v0.2.0 - 2025-11-12 - Made the default rating an explicit input policy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

RATING_VALUES: tuple[int, ...] = (1, 2, 3, 4, 5)
DEFAULT_RATING = 5
ALL = "all"

Filter = Union[str, int]


@dataclass(frozen=True, slots=True)
class FeedbackRecord:
    """Domain object representing a single stored feedback entry."""

    id: int
    username: str
    rating: int
    comment: str = ""

    def __post_init__(self) -> None:
        if self.comment is None:
            object.__setattr__(self, "comment", "")

    @property
    def has_comment(self) -> bool:
        return bool(self.comment and self.comment.strip())

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted representation of the record."""

        return {
            "id": self.id,
            "username": self.username,
            "rating": self.rating,
            "comment": self.comment,
        }


@dataclass(frozen=True, slots=True)
class NewFeedbackInput:
    """Values captured by the feedback form before a record is created.

    A missing rating (``None``) means the user did not pick a grade; the
    resolved rating then falls back to ``DEFAULT_RATING``.
    """

    username: str
    rating: int | None = None
    comment: str | None = None

    @property
    def resolved_rating(self) -> int:
        return DEFAULT_RATING if self.rating is None else self.rating

    @property
    def resolved_comment(self) -> str:
        return self.comment or ""


def _empty_counts() -> tuple[int, ...]:
    return tuple(0 for _ in RATING_VALUES)


@dataclass(frozen=True, slots=True)
class RatingHistogram:
    """Per-rating counts; index ``i`` holds the count for rating ``i + 1``."""

    counts: tuple[int, ...] = field(default_factory=_empty_counts)

    def __post_init__(self) -> None:
        if len(self.counts) != len(RATING_VALUES):
            raise ValueError(
                f"Histogram requires {len(RATING_VALUES)} buckets, got {len(self.counts)}."
            )

    @property
    def total(self) -> int:
        return sum(self.counts)

    @property
    def labels(self) -> list[str]:
        return [f"{rating} ★" for rating in RATING_VALUES]

    def count_for(self, rating: int) -> int:
        """Return the count stored for ``rating``.

        Raises:
            ValueError: If ``rating`` is not one of the five grades.
        """

        if rating not in RATING_VALUES:
            raise ValueError(f"Rating must be between 1 and 5, got {rating}.")
        return self.counts[rating - 1]

    def as_list(self) -> list[int]:
        return list(self.counts)

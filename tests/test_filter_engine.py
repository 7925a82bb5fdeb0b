import pytest

from feedback_board.core.exceptions import InvalidFilterError
from feedback_board.core.models import ALL, FeedbackRecord
from feedback_board.services.filter_engine import parse_filter, select

RECORDS = (
    FeedbackRecord(id=6, username="F", rating=2),
    FeedbackRecord(id=5, username="E", rating=5),
    FeedbackRecord(id=4, username="D", rating=2, comment="meh"),
    FeedbackRecord(id=3, username="C", rating=4),
    FeedbackRecord(id=2, username="B", rating=5),
    FeedbackRecord(id=1, username="A", rating=1),
)


def test_select_all_returns_collection_unchanged() -> None:
    assert select(RECORDS, ALL) == RECORDS


@pytest.mark.parametrize("rating", [1, 2, 3, 4, 5])
def test_select_rating_keeps_only_matching_records_in_order(rating: int) -> None:
    selected = select(RECORDS, rating)

    assert all(record.rating == rating for record in selected)
    assert list(selected) == [record for record in RECORDS if record.rating == rating]


def test_select_is_stable_and_side_effect_free() -> None:
    source = list(RECORDS)

    first = select(source, 2)
    second = select(source, 2)

    assert [record.id for record in first] == [6, 4]
    assert first == second
    assert source == list(RECORDS)


def test_select_with_no_match_is_empty() -> None:
    assert select(RECORDS, 3) == ()


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, ALL), ("all", ALL), (" ALL ", ALL), ("", ALL), ("3", 3), (5, 5)],
)
def test_parse_filter_accepts_known_values(value, expected) -> None:
    assert parse_filter(value) == expected


@pytest.mark.parametrize("value", ["0", "6", "five", 7, True])
def test_parse_filter_rejects_unknown_values(value) -> None:
    with pytest.raises(InvalidFilterError):
        parse_filter(value)

from pathlib import Path

from feedback_board.core.codec import RecordCodec
from feedback_board.core.models import DEFAULT_RATING, FeedbackRecord, NewFeedbackInput
from feedback_board.db.storage import FEEDBACKS_KEY, MemoryStorage, SQLiteStorage
from feedback_board.services.aggregator import histogram
from feedback_board.services.feedback_store import FeedbackStore
from tests.helpers.clock import TickingClock


def test_load_from_empty_storage_yields_empty_collection(storage: MemoryStorage) -> None:
    store = FeedbackStore(storage)

    assert store.load() == ()
    assert histogram(store.all()).as_list() == [0, 0, 0, 0, 0]


def test_add_prepends_and_persists_before_returning(store: FeedbackStore, storage: MemoryStorage) -> None:
    first = store.add(NewFeedbackInput(username="Ana", rating=4, comment="Great"))
    before = store.all()

    second = store.add(NewFeedbackInput(username="Bia", rating=2))

    assert store.all()[0] == second
    assert store.all()[1:] == before
    assert RecordCodec().decode(storage.get_item(FEEDBACKS_KEY)) == [second, first]


def test_add_keeps_newest_first_order(store: FeedbackStore) -> None:
    a = store.add(NewFeedbackInput(username="A", rating=5))
    b = store.add(NewFeedbackInput(username="B", rating=5))
    c = store.add(NewFeedbackInput(username="C", rating=3))

    assert store.all() == (c, b, a)
    assert histogram(store.all()).as_list() == [0, 0, 1, 0, 2]


def test_ids_unique_when_clock_stalls(storage: MemoryStorage) -> None:
    store = FeedbackStore(storage, clock=lambda: 1_000)
    store.load()

    ids = [store.add(NewFeedbackInput(username=f"user{i}", rating=3)).id for i in range(20)]

    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)


def test_ids_stay_unique_after_reload_with_clock_behind(storage: MemoryStorage) -> None:
    storage.set_item(
        FEEDBACKS_KEY,
        RecordCodec().encode([FeedbackRecord(id=5_000, username="old", rating=1)]),
    )
    store = FeedbackStore(storage, clock=lambda: 10)
    store.load()

    record = store.add(NewFeedbackInput(username="new", rating=2))

    assert record.id == 5_001


def test_missing_rating_defaults_and_input_is_not_validated(store: FeedbackStore) -> None:
    defaulted = store.add(NewFeedbackInput(username="Ana"))
    lenient = store.add(NewFeedbackInput(username="", rating=9, comment=None))

    assert defaulted.rating == DEFAULT_RATING
    assert defaulted.comment == ""
    assert lenient.username == ""
    assert lenient.rating == 9


def test_load_recovers_from_corrupted_storage() -> None:
    storage = MemoryStorage({FEEDBACKS_KEY: "<<corrupted>>"})
    store = FeedbackStore(storage)

    assert store.load() == ()


def test_store_round_trips_through_sqlite(tmp_path: Path) -> None:
    db_path = tmp_path / "feedback.db"
    sqlite_storage = SQLiteStorage(db_path)
    sqlite_storage.initialize_schema()

    writer = FeedbackStore(sqlite_storage, clock=TickingClock())
    writer.load()
    writer.add(NewFeedbackInput(username="Ana", rating=4, comment="Great"))
    writer.add(NewFeedbackInput(username="Bia", rating=1, comment="Slow"))
    sqlite_storage.close()

    reopened = SQLiteStorage(db_path)
    reader = FeedbackStore(reopened)

    assert reader.load() == writer.all()
    reopened.close()


def test_load_recovers_from_non_finite_rating() -> None:
    storage = MemoryStorage({FEEDBACKS_KEY: '[{"id": 1, "username": "a", "rating": -Infinity}]'})

    assert FeedbackStore(storage).load() == ()

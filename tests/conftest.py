from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from feedback_board.db.storage import MemoryStorage  # noqa: E402
from feedback_board.services.feedback_store import FeedbackStore  # noqa: E402
from tests.helpers.clock import TickingClock  # noqa: E402


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def store(storage: MemoryStorage) -> FeedbackStore:
    feedback_store = FeedbackStore(storage, clock=TickingClock())
    feedback_store.load()
    return feedback_store

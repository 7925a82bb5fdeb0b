import pytest

from feedback_board.core.exceptions import InvalidThemeError
from feedback_board.db.storage import THEME_KEY, MemoryStorage
from feedback_board.services.theme_service import ThemeService


def test_current_falls_back_to_default() -> None:
    assert ThemeService(MemoryStorage()).current() == "light"
    assert ThemeService(MemoryStorage(), default="dark").current() == "dark"


def test_invalid_stored_theme_uses_default() -> None:
    storage = MemoryStorage({THEME_KEY: "neon"})

    assert ThemeService(storage).current() == "light"


def test_toggle_and_set_persist() -> None:
    storage = MemoryStorage()
    service = ThemeService(storage)

    assert service.toggle() == "dark"
    assert storage.get_item(THEME_KEY) == "dark"
    assert service.toggle() == "light"
    assert service.set(" DARK ") == "dark"
    assert service.current() == "dark"


def test_invalid_theme_rejected() -> None:
    with pytest.raises(InvalidThemeError):
        ThemeService(MemoryStorage()).set("blue")
    with pytest.raises(InvalidThemeError):
        ThemeService(MemoryStorage(), default="blue")

"""Tests for persisted viewer preferences."""

from __future__ import annotations

import pytest

from mdview.render import RenderConfig
from mdview.storage import MemoryStore, ViewerPreferences
from mdview.storage.preferences import DARK_MODE_KEY, FONT_SIZE_KEY


def test_defaults() -> None:
    prefs = ViewerPreferences(MemoryStore())
    assert prefs.font_size == 14.0
    assert prefs.dark_mode is False
    assert prefs.render_config() == RenderConfig(dark_mode=False, font_size=14.0)


def test_custom_defaults() -> None:
    prefs = ViewerPreferences(MemoryStore(), default_font_size=16, default_dark_mode=True)
    assert prefs.font_size == 16
    assert prefs.dark_mode is True


def test_round_trip_through_store() -> None:
    store = MemoryStore()
    prefs = ViewerPreferences(store)
    prefs.font_size = 18.5
    prefs.dark_mode = True
    assert store.get(FONT_SIZE_KEY) == 18.5
    assert store.get(DARK_MODE_KEY) is True
    again = ViewerPreferences(store)
    assert again.render_config() == RenderConfig(dark_mode=True, font_size=18.5)


@pytest.mark.parametrize("size", [9, 33])
def test_font_size_out_of_range(size: float) -> None:
    with pytest.raises(ValueError):
        ViewerPreferences(MemoryStore()).font_size = size


def test_bad_stored_values_fall_back() -> None:
    store = MemoryStore({FONT_SIZE_KEY: 50, DARK_MODE_KEY: "yes"})
    prefs = ViewerPreferences(store)
    assert prefs.font_size == 14.0
    assert prefs.dark_mode is False
    store.set(FONT_SIZE_KEY, True)
    assert prefs.font_size == 14.0

"""Viewer preferences: font size and dark mode."""

from __future__ import annotations

from ..render.document import MAX_FONT_SIZE, MIN_FONT_SIZE, RenderConfig
from ..utils.logging import get_logger
from .kv import KeyValueStore

__all__ = ["FONT_SIZE_KEY", "DARK_MODE_KEY", "ViewerPreferences"]

logger = get_logger(__name__)

FONT_SIZE_KEY = "font_size"
DARK_MODE_KEY = "dark_mode"


class ViewerPreferences:
    """Typed access to the persisted render settings in ``store``.

    Missing or malformed values fall back to the defaults passed at
    construction time.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        default_font_size: float = 14.0,
        default_dark_mode: bool = False,
    ) -> None:
        self._store = store
        self._default_font_size = default_font_size
        self._default_dark_mode = default_dark_mode

    @property
    def font_size(self) -> float:
        value = self._store.get(FONT_SIZE_KEY)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if MIN_FONT_SIZE <= value <= MAX_FONT_SIZE:
                return float(value)
            logger.warning("ignoring stored font size %r outside the allowed range", value)
        return self._default_font_size

    @font_size.setter
    def font_size(self, value: float) -> None:
        if not MIN_FONT_SIZE <= value <= MAX_FONT_SIZE:
            raise ValueError(
                f"font size must be within [{MIN_FONT_SIZE:g}, {MAX_FONT_SIZE:g}], got {value}"
            )
        self._store.set(FONT_SIZE_KEY, float(value))

    @property
    def dark_mode(self) -> bool:
        value = self._store.get(DARK_MODE_KEY)
        return value if isinstance(value, bool) else self._default_dark_mode

    @dark_mode.setter
    def dark_mode(self, value: bool) -> None:
        self._store.set(DARK_MODE_KEY, bool(value))

    def render_config(self) -> RenderConfig:
        return RenderConfig(dark_mode=self.dark_mode, font_size=self.font_size)

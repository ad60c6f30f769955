"""Complete HTML documents for an embedded web view.

:func:`render` converts markdown into a body fragment and wraps it in a
self-contained document: an inline stylesheet, no script and no external
resources.  The document always ends with ``</body></html>`` so a caller may
inject extra markup with a plain string replace on ``</body>``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .markdown import convert_markdown
from .theme import build_stylesheet, palette_for

__all__ = ["MIN_FONT_SIZE", "MAX_FONT_SIZE", "RenderConfig", "render", "wrap_document"]

MIN_FONT_SIZE = 10.0
MAX_FONT_SIZE = 32.0


@dataclass(slots=True, frozen=True)
class RenderConfig:
    """Theme and font settings for a single render call."""

    dark_mode: bool = False
    font_size: float = 14.0

    def __post_init__(self) -> None:
        if not MIN_FONT_SIZE <= self.font_size <= MAX_FONT_SIZE:
            raise ValueError(
                f"font_size must be within [{MIN_FONT_SIZE:g}, {MAX_FONT_SIZE:g}], "
                f"got {self.font_size}"
            )


def wrap_document(body: str, stylesheet: str) -> str:
    """Wrap an HTML ``body`` fragment and ``stylesheet`` in a full document."""

    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<style>\n{stylesheet}</style>\n"
        "</head>\n"
        f"<body>\n{body}\n"
        "</body></html>"
    )


def render(markdown_text: str, config: RenderConfig | None = None) -> str:
    """Render ``markdown_text`` as a styled HTML document.

    Parameters
    ----------
    markdown_text:
        Raw markdown source.  HTML in the source is passed through unescaped.
    config:
        Theme and font size; defaults to the light theme at 14px.
    """

    cfg = config if config is not None else RenderConfig()
    stylesheet = build_stylesheet(palette_for(cfg.dark_mode), cfg.font_size)
    return wrap_document(convert_markdown(markdown_text), stylesheet)

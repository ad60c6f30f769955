"""Markdown to themed HTML rendering."""

from .document import RenderConfig, render
from .markdown import convert_markdown
from .theme import DARK_PALETTE, LIGHT_PALETTE, Palette, build_stylesheet

__all__ = [
    "RenderConfig",
    "render",
    "convert_markdown",
    "Palette",
    "DARK_PALETTE",
    "LIGHT_PALETTE",
    "build_stylesheet",
]

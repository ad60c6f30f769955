"""Colour palettes and the embedded stylesheet for rendered documents."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Palette", "DARK_PALETTE", "LIGHT_PALETTE", "palette_for", "build_stylesheet"]


@dataclass(slots=True, frozen=True)
class Palette:
    """Colours used by the stylesheet."""

    background: str
    text: str
    code_background: str
    link: str
    border: str
    quote: str


DARK_PALETTE = Palette(
    background="#1e1e1e",
    text="#d4d4d4",
    code_background="#2d2d2d",
    link="#9cdcfe",
    border="#444",
    quote="#aaa",
)

LIGHT_PALETTE = Palette(
    background="#ffffff",
    text="#000000",
    code_background="#f4f4f4",
    link="#0066cc",
    border="#ddd",
    quote="#666",
)

# Heading sizes relative to the body font.
HEADING_SCALE: tuple[tuple[str, str], ...] = (
    ("h1", "2em"),
    ("h2", "1.5em"),
    ("h3", "1.25em"),
    ("h4", "1.1em"),
    ("h5", "1em"),
    ("h6", "0.9em"),
)

CODE_SCALE = 0.9


def palette_for(dark_mode: bool) -> Palette:
    return DARK_PALETTE if dark_mode else LIGHT_PALETTE


def _px(value: float) -> str:
    return f"{round(value, 2):g}px"


def build_stylesheet(palette: Palette, font_size: float) -> str:
    """Return the CSS rules for ``palette`` with a base size of ``font_size``."""

    base = _px(font_size)
    code = _px(font_size * CODE_SCALE)
    headings = "".join(
        f"{tag} {{ font-size: {size}; }}\n" for tag, size in HEADING_SCALE if tag != "h1"
    )
    return (
        "body {\n"
        "  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;\n"
        f"  background-color: {palette.background};\n"
        f"  color: {palette.text};\n"
        "  padding: 20px;\n"
        "  line-height: 1.6;\n"
        f"  font-size: {base};\n"
        "  margin: 0;\n"
        "}\n"
        "h1, h2, h3, h4, h5, h6 { margin-top: 1.5em; margin-bottom: 0.5em; }\n"
        f"h1 {{ font-size: {HEADING_SCALE[0][1]}; border-bottom: 1px solid {palette.border};"
        " padding-bottom: 0.3em; }\n"
        f"{headings}"
        f"pre {{ background: {palette.code_background}; padding: 16px; border-radius: 6px;"
        f" overflow-x: auto; font-family: 'Courier New', monospace; font-size: {code}; }}\n"
        f"code {{ background: {palette.code_background}; padding: 2px 4px; border-radius: 3px;"
        f" font-family: 'Courier New', monospace; font-size: {code}; }}\n"
        f"a {{ color: {palette.link}; text-decoration: none; }}\n"
        "a:hover { text-decoration: underline; }\n"
        f"blockquote {{ border-left: 4px solid {palette.border}; padding-left: 16px;"
        f" margin-left: 0; color: {palette.quote}; font-style: italic; }}\n"
        "ul { padding-left: 20px; }\n"
        "li { margin-bottom: 4px; }\n"
        "strong { font-weight: bold; }\n"
        "em { font-style: italic; }\n"
        "img { max-width: 100%; height: auto; }\n"
    )

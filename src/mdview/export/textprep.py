"""Printable line preparation for PDF export.

Two strategies turn source text into a flat list of lines:

``plain``
    Every source line is word-wrapped on its own.  No markdown semantics.
``markdown``
    Markdown is stripped to printable text.  Headers get a marker symbol
    (``■``, ``▪``, ``•`` for levels 1 to 3) followed by a blank line, list
    items become indented bullets, quotes get a leading ``"`` and paragraphs
    are wrapped and followed by a blank line.

The markers are kept as distinct code points in the prepared lines.  The
standard Helvetica encoding has neither ``■`` nor ``▪``, so reportlab draws
both with the same ZapfDingbats square; only ``•`` is native to the font.
In the PDF, level 1 and level 2 headers therefore look alike unless
``page.font_name`` names a font that carries both glyphs.

Inline syntax is removed rather than converted: bold and italic markers are
dropped, inline code becomes ``[code]`` and links collapse to their label.

Preparation never raises.  If a strategy fails the caller still receives a
short error notice followed by the head of the raw input.
"""

from __future__ import annotations

import re
from typing import Literal

from ..utils.logging import get_logger

__all__ = [
    "PrepareMode",
    "DEFAULT_WRAP_WIDTH",
    "DEFAULT_FALLBACK_CHARS",
    "wrap_text",
    "strip_inline_markdown",
    "prepare_plain_lines",
    "prepare_markdown_lines",
    "prepare_lines",
    "fallback_lines",
]

logger = get_logger(__name__)

PrepareMode = Literal["plain", "markdown"]

DEFAULT_WRAP_WIDTH = 80
DEFAULT_FALLBACK_CHARS = 1000

HEADER_MARKERS: tuple[tuple[str, str], ...] = (
    ("# ", "■"),
    ("## ", "▪"),
    ("### ", "•"),
)
LIST_PREFIXES = ("- ", "* ")
QUOTE_PREFIX = "> "

_INLINE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*(.+?)\*\*"), r"\1"),
    (re.compile(r"\*(.+?)\*"), r"\1"),
    (re.compile(r"`(.+?)`"), r"[\1]"),
    (re.compile(r"\[(.+?)\]\(.+?\)"), r"\1"),
)


def wrap_text(text: str, max_length: int = DEFAULT_WRAP_WIDTH) -> list[str]:
    """Greedily wrap ``text`` into lines of at most ``max_length`` characters.

    Text that already fits is returned unchanged as a single line.  Longer
    text is split on whitespace and words are joined with single spaces.  A
    word longer than ``max_length`` is emitted on its own line unsplit.
    """

    if max_length < 1:
        raise ValueError("max_length must be positive")
    if len(text) <= max_length:
        return [text]

    lines: list[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= max_length:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    if current or not lines:
        lines.append(current)
    return lines


def strip_inline_markdown(text: str) -> str:
    """Remove inline markdown syntax from ``text``.

    Returns ``text`` unchanged if a substitution fails.
    """

    try:
        stripped = text
        for pattern, replacement in _INLINE_RULES:
            stripped = pattern.sub(replacement, stripped)
        return stripped
    except Exception as exc:
        logger.warning("inline markdown stripping failed: %s", exc)
        return text


def prepare_plain_lines(text: str, wrap_width: int = DEFAULT_WRAP_WIDTH) -> list[str]:
    lines: list[str] = []
    for raw in text.split("\n"):
        lines.extend(wrap_text(raw, wrap_width))
    return lines


def _header_line(line: str) -> str | None:
    for prefix, marker in HEADER_MARKERS:
        if line.startswith(prefix):
            return f"{marker} {line[len(prefix):].strip()}"
    return None


def prepare_markdown_lines(text: str, wrap_width: int = DEFAULT_WRAP_WIDTH) -> list[str]:
    """Return printable lines for markdown ``text`` with the syntax stripped."""

    lines: list[str] = []
    for raw in text.split("\n"):
        line = raw.strip()
        header = _header_line(line)
        if header is not None:
            lines.extend((header, ""))
        elif line.startswith(LIST_PREFIXES):
            lines.append(f"  • {strip_inline_markdown(line[2:].strip())}")
        elif line.startswith(QUOTE_PREFIX):
            lines.append(f'  " {strip_inline_markdown(line[2:].strip())}')
        elif line:
            lines.extend(wrap_text(strip_inline_markdown(line), wrap_width))
            lines.append("")
        else:
            lines.append("")
    return lines


def fallback_lines(text: str, fallback_chars: int = DEFAULT_FALLBACK_CHARS) -> list[str]:
    """Lines used when preparation fails: a notice and the head of ``text``."""

    return [
        "Content processing error occurred.",
        "Original content:",
        text[:fallback_chars],
    ]


def prepare_lines(
    text: str,
    mode: PrepareMode = "plain",
    wrap_width: int = DEFAULT_WRAP_WIDTH,
    *,
    fallback_chars: int = DEFAULT_FALLBACK_CHARS,
) -> list[str]:
    """Prepare printable lines for ``text`` using the ``mode`` strategy.

    Parameters
    ----------
    text:
        Source text; ``\\r\\n`` line endings are treated as ``\\n``.
    mode:
        ``"plain"`` or ``"markdown"``.
    wrap_width:
        Maximum line length used for word wrapping.
    fallback_chars:
        Number of raw characters kept when preparation fails.

    Raises
    ------
    ValueError
        If ``mode`` is unknown or ``wrap_width`` is not positive.
    """

    if wrap_width < 1:
        raise ValueError("wrap_width must be positive")
    if mode == "plain":
        strategy = prepare_plain_lines
    elif mode == "markdown":
        strategy = prepare_markdown_lines
    else:
        raise ValueError(f"unknown preparation mode: {mode!r}")

    try:
        return strategy(text.replace("\r\n", "\n"), wrap_width)
    except Exception as exc:
        logger.warning("line preparation failed, using fallback: %s", exc)
        return fallback_lines(text, fallback_chars)

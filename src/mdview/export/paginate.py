"""Fixed-size page layout for prepared text lines.

Pages are filled greedily: each holds at most
``floor((height - 2 * margin) / line_height)`` lines and the last page is
emitted even when partially filled.  A document always has at least one page
so that there is somewhere to put the page-number footer.  Pages are numbered
``1..n`` without gaps.

Coordinates follow the top-down convention: line ``i`` of a page (zero based)
sits ``margin + (i + 1) * line_height`` points below the top edge.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from reportlab.pdfbase import pdfmetrics

from .textprep import DEFAULT_FALLBACK_CHARS, DEFAULT_WRAP_WIDTH, PrepareMode, prepare_lines

if TYPE_CHECKING:  # pragma: no cover
    from ..config.schema import PageSettings

__all__ = [
    "PageGeometry",
    "Page",
    "PdfDocument",
    "font_available",
    "paginate",
    "paginate_text",
]


def font_available(name: str) -> bool:
    """Return ``True`` if reportlab can set ``name`` as the canvas font."""

    try:
        pdfmetrics.getFont(name)
    except KeyError:
        return False
    return True


@dataclass(slots=True, frozen=True)
class PageGeometry:
    """Page size and text metrics in points (A4 portrait by default)."""

    width: float = 595.0
    height: float = 842.0
    margin: float = 50.0
    line_height: float = 20.0
    font_size: float = 12.0
    font_name: str = "Helvetica"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.line_height <= 0:
            raise ValueError("page dimensions and line height must be positive")
        if self.margin < 0:
            raise ValueError("margin must not be negative")
        if self.max_lines_per_page < 1:
            raise ValueError("page geometry leaves no room for a single line")
        if not font_available(self.font_name):
            raise ValueError(f"unknown font: {self.font_name!r}")

    @classmethod
    def from_settings(cls, settings: "PageSettings") -> "PageGeometry":
        return cls(
            width=settings.width,
            height=settings.height,
            margin=settings.margin,
            line_height=settings.line_height,
            font_size=settings.font_size,
            font_name=settings.font_name,
        )

    @property
    def max_lines_per_page(self) -> int:
        return math.floor((self.height - 2 * self.margin) / self.line_height)

    def line_offset(self, index: int) -> float:
        """Distance from the top edge to the baseline of line ``index``."""

        return self.margin + (index + 1) * self.line_height


@dataclass(slots=True, frozen=True)
class Page:
    """A single page holding an ordered slice of the document lines."""

    number: int
    lines: tuple[str, ...]

    @property
    def footer(self) -> str:
        return f"Page {self.number}"


@dataclass(slots=True, frozen=True)
class PdfDocument:
    """Ordered pages ready to be drawn."""

    pages: tuple[Page, ...]
    geometry: PageGeometry

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def line_count(self) -> int:
        return sum(len(page.lines) for page in self.pages)


def paginate(lines: Iterable[str], geometry: PageGeometry | None = None) -> PdfDocument:
    """Lay ``lines`` out on pages of ``geometry``."""

    geo = geometry if geometry is not None else PageGeometry()
    all_lines: Sequence[str] = tuple(lines)
    per_page = geo.max_lines_per_page

    pages: list[Page] = []
    for start in range(0, len(all_lines), per_page):
        pages.append(Page(len(pages) + 1, tuple(all_lines[start : start + per_page])))
    if not pages:
        pages.append(Page(1, ()))
    return PdfDocument(tuple(pages), geo)


def paginate_text(
    text: str,
    mode: PrepareMode = "plain",
    geometry: PageGeometry | None = None,
    wrap_width: int = DEFAULT_WRAP_WIDTH,
    *,
    fallback_chars: int = DEFAULT_FALLBACK_CHARS,
) -> PdfDocument:
    """Prepare ``text`` with ``mode`` and paginate the resulting lines."""

    lines = prepare_lines(text, mode, wrap_width, fallback_chars=fallback_chars)
    return paginate(lines, geometry)

"""PDF serialization of paginated documents using ``reportlab``.

Each :class:`~mdview.export.paginate.Page` becomes one canvas page.  Lines are
drawn left-aligned at the left margin and the ``Page n`` footer is drawn
right-aligned against the right margin, half a margin above the bottom edge.

Drawing is forgiving: a line that cannot be drawn is logged and left blank,
and a failing footer is logged and ignored.  If laying out the pages fails
altogether, a one-page document with a short error notice is produced
instead, so callers always receive a PDF.  The notice is set in
:data:`ERROR_PAGE_FONT` rather than the configured font, which may be the
very thing that failed.
"""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import Any

from reportlab.pdfgen import canvas

from ..utils.logging import get_logger
from .paginate import Page, PageGeometry, PdfDocument

__all__ = ["ERROR_PAGE_FONT", "ERROR_PAGE_LINES", "draw_page", "render_pdf_bytes", "write_pdf"]

logger = get_logger(__name__)

ERROR_PAGE_LINES = ("PDF generation error occurred.", "Please try again.")
# Standard Type 1 font, always available to reportlab.
ERROR_PAGE_FONT = "Helvetica"


def _new_canvas(buffer: io.BytesIO, geometry: PageGeometry, title: str | None, compress: bool) -> Any:
    c = canvas.Canvas(
        buffer,
        pagesize=(geometry.width, geometry.height),
        pageCompression=1 if compress else 0,
    )
    c.setAuthor("mdview")
    if title:
        c.setTitle(title)
    return c


def draw_page(c: Any, page: Page, geometry: PageGeometry) -> int:
    """Draw ``page`` onto canvas ``c`` returning the number of lines drawn."""

    c.setFont(geometry.font_name, geometry.font_size)
    drawn = 0
    for index, line in enumerate(page.lines):
        try:
            c.drawString(geometry.margin, geometry.height - geometry.line_offset(index), line)
            drawn += 1
        except Exception as exc:
            logger.warning("skipping line %d on page %d: %s", index + 1, page.number, exc)

    try:
        c.drawRightString(geometry.width - geometry.margin, geometry.margin / 2, page.footer)
    except Exception as exc:
        logger.warning("could not draw footer on page %d: %s", page.number, exc)
    return drawn


def _draw_error_page(c: Any, geometry: PageGeometry) -> None:
    c.setFont(ERROR_PAGE_FONT, geometry.font_size)
    for index, line in enumerate(ERROR_PAGE_LINES):
        c.drawString(geometry.margin, geometry.height - geometry.line_offset(index), line)
    c.showPage()


def render_pdf_bytes(
    document: PdfDocument,
    *,
    title: str | None = None,
    compress: bool = True,
) -> bytes:
    """Serialize ``document`` to PDF bytes.

    Parameters
    ----------
    document:
        Paginated document to draw.
    title:
        Optional document title stored in the PDF metadata.
    compress:
        Compress page content streams.  Disable to inspect drawn text.
    """

    geometry = document.geometry
    with io.BytesIO() as buffer:
        try:
            c = _new_canvas(buffer, geometry, title, compress)
            for page in document.pages:
                draw_page(c, page, geometry)
                c.showPage()
            c.save()
        except Exception as exc:
            logger.error("page construction failed, writing error page: %s", exc)
            buffer.seek(0)
            buffer.truncate()
            c = _new_canvas(buffer, geometry, title, compress)
            _draw_error_page(c, geometry)
            c.save()
        data = buffer.getvalue()
    logger.debug("rendered %d page(s), %d bytes", document.page_count, len(data))
    return data


def write_pdf(
    document: PdfDocument,
    path: str | os.PathLike[str],
    *,
    title: str | None = None,
    compress: bool = True,
) -> Path:
    """Write ``document`` to ``path`` creating parent directories."""

    out_path = Path(path)
    data = render_pdf_bytes(document, title=title or out_path.stem, compress=compress)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "wb") as f:
        f.write(data)
    return out_path

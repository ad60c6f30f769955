"""PDF export entry points.

:func:`export_to_pdf` is the boundary used by front ends.  It never raises:
blank input is reported as a failed :class:`ExportResult` and any unexpected
error is caught, logged and converted into a failed result carrying a
readable message.  :func:`export_bytes` is the lower level variant for
callers that manage their own output sink; it raises
:class:`~mdview.utils.errors.EmptyContentError` for blank input.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..utils.errors import EmptyContentError
from ..utils.logging import get_logger
from .paginate import PageGeometry, PdfDocument, paginate_text
from .pdf_writer import render_pdf_bytes
from .textprep import DEFAULT_FALLBACK_CHARS, DEFAULT_WRAP_WIDTH, PrepareMode

__all__ = [
    "NO_CONTENT_MESSAGE",
    "MARKDOWN_EXTENSIONS",
    "ExportResult",
    "resolve_mode",
    "build_document",
    "export_bytes",
    "export_to_pdf",
]

logger = get_logger(__name__)

NO_CONTENT_MESSAGE = "No content to export"
MARKDOWN_EXTENSIONS = frozenset({".md", ".markdown"})


@dataclass(slots=True, frozen=True)
class ExportResult:
    """Outcome of an export request."""

    ok: bool
    path: Path | None = None
    page_count: int = 0
    error: str | None = None

    @classmethod
    def success(cls, path: Path, page_count: int) -> "ExportResult":
        return cls(True, path, page_count, None)

    @classmethod
    def failure(cls, message: str) -> "ExportResult":
        return cls(False, None, 0, message)


def resolve_mode(
    path: str | os.PathLike[str] | None,
    mode: Literal["auto", "plain", "markdown"] = "auto",
) -> PrepareMode:
    """Return the preparation mode, guessing from the extension for ``auto``."""

    if mode != "auto":
        return mode
    if path is not None and Path(path).suffix.lower() in MARKDOWN_EXTENSIONS:
        return "markdown"
    return "plain"


def _require_content(text: str) -> None:
    if not text or not text.strip():
        raise EmptyContentError(NO_CONTENT_MESSAGE)


def build_document(
    text: str,
    mode: PrepareMode = "markdown",
    *,
    geometry: PageGeometry | None = None,
    wrap_width: int = DEFAULT_WRAP_WIDTH,
    fallback_chars: int = DEFAULT_FALLBACK_CHARS,
) -> PdfDocument:
    """Validate ``text`` and lay it out as a :class:`PdfDocument`."""

    _require_content(text)
    return paginate_text(text, mode, geometry, wrap_width, fallback_chars=fallback_chars)


def export_bytes(
    text: str,
    mode: PrepareMode = "markdown",
    *,
    geometry: PageGeometry | None = None,
    wrap_width: int = DEFAULT_WRAP_WIDTH,
    fallback_chars: int = DEFAULT_FALLBACK_CHARS,
    title: str | None = None,
    compress: bool = True,
) -> bytes:
    """Return ``text`` exported as PDF bytes.

    Raises
    ------
    EmptyContentError
        If ``text`` is empty or whitespace only.
    """

    document = build_document(
        text, mode, geometry=geometry, wrap_width=wrap_width, fallback_chars=fallback_chars
    )
    return render_pdf_bytes(document, title=title, compress=compress)


def export_to_pdf(
    text: str,
    out_path: str | os.PathLike[str],
    mode: PrepareMode = "markdown",
    *,
    geometry: PageGeometry | None = None,
    wrap_width: int = DEFAULT_WRAP_WIDTH,
    fallback_chars: int = DEFAULT_FALLBACK_CHARS,
    compress: bool = True,
) -> ExportResult:
    """Export ``text`` to a PDF file at ``out_path``.

    Nothing is written when the result is a failure.
    """

    path = Path(out_path)
    logger.debug("exporting %d chars to %s (mode=%s)", len(text), path, mode)
    try:
        document = build_document(
            text, mode, geometry=geometry, wrap_width=wrap_width, fallback_chars=fallback_chars
        )
        data = render_pdf_bytes(document, title=path.stem, compress=compress)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
    except EmptyContentError as exc:
        logger.warning("export refused: %s", exc)
        return ExportResult.failure(str(exc))
    except Exception as exc:
        logger.error("PDF export failed: %s", exc, exc_info=True)
        return ExportResult.failure(f"PDF export failed: {exc}")

    logger.info("wrote %s (%d page(s), %d bytes)", path, document.page_count, len(data))
    return ExportResult.success(path, document.page_count)

"""Plain-text PDF export: line preparation, pagination and serialization."""

from .exporter import ExportResult, build_document, export_bytes, export_to_pdf, resolve_mode
from .paginate import Page, PageGeometry, PdfDocument, paginate, paginate_text
from .pdf_writer import render_pdf_bytes, write_pdf
from .textprep import prepare_lines, strip_inline_markdown, wrap_text

__all__ = [
    "ExportResult",
    "build_document",
    "export_bytes",
    "export_to_pdf",
    "resolve_mode",
    "Page",
    "PageGeometry",
    "PdfDocument",
    "paginate",
    "paginate_text",
    "render_pdf_bytes",
    "write_pdf",
    "prepare_lines",
    "strip_inline_markdown",
    "wrap_text",
]

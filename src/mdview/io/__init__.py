"""File access for the CLI, dispatched on the lower-cased file extension.

Markdown (``.md``, ``.markdown``) and plain-text (``.txt``) documents are
read as UTF-8 text; rendered HTML is written to ``.html``/``.htm`` and text to
``.txt``.  Any other extension raises ``UnsupportedFormatError``.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..utils.errors import UnsupportedFormatError
from .readers.text_reader import read_text
from .writers.text_writer import write_text

__all__ = [
    "INPUT_EXTENSIONS",
    "OUTPUT_EXTENSIONS",
    "supported_input_extensions",
    "read_file",
    "write_file",
]

INPUT_EXTENSIONS = frozenset({".md", ".markdown", ".txt"})
OUTPUT_EXTENSIONS = frozenset({".html", ".htm", ".txt"})


def _checked_suffix(path: str | os.PathLike[str], allowed: frozenset[str]) -> None:
    ext = Path(path).suffix.lower()
    if ext not in allowed:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'")


def supported_input_extensions() -> tuple[str, ...]:
    return tuple(sorted(INPUT_EXTENSIONS))


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the text of ``path``; see :func:`~.readers.text_reader.read_text`."""

    _checked_suffix(path, INPUT_EXTENSIONS)
    return read_text(path)


def write_file(path: str | os.PathLike[str], text: str) -> None:
    _checked_suffix(path, OUTPUT_EXTENSIONS)
    write_text(path, text)

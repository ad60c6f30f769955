"""Markdown and plain-text reader.

:func:`read_text` loads a document without normalizing its content.  A UTF-8
byte-order mark is consumed by the default ``"utf-8-sig"`` codec and newline
sequences are returned exactly as stored.  ``FileNotFoundError`` and other
I/O errors propagate to the caller.
"""

from __future__ import annotations

import os

PathLikeStr = os.PathLike[str]


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a markdown or text file as-is.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding; the default consumes a UTF-8 BOM when present.
    errors:
        Error handling strategy passed to :func:`open`.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


__all__ = ["read_text"]

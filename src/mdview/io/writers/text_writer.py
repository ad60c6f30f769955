"""Text writer used for rendered HTML and plain-text output.

Parent directories are created automatically.  The content is written exactly
as provided, UTF-8 without a BOM by default.
"""

from __future__ import annotations

import os
from pathlib import Path

PathLikeStr = os.PathLike[str]


def write_text(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path`` without newline translation."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)


__all__ = ["write_text"]

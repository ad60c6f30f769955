"""Most-recently-used file list.

Entries are kept newest first.  Re-opening a file moves it to the front
instead of duplicating it, and the list is capped at ``max_entries``.  The
list is stored as a JSON array under the ``recent_files`` key; an unreadable
value is treated as an empty list.
"""

from __future__ import annotations

import os
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from ..utils.logging import get_logger
from .kv import KeyValueStore

__all__ = ["RECENT_FILES_KEY", "DEFAULT_MAX_ENTRIES", "RecentFile", "RecentFiles"]

logger = get_logger(__name__)

RECENT_FILES_KEY = "recent_files"
DEFAULT_MAX_ENTRIES = 5


@dataclass(slots=True, frozen=True)
class RecentFile:
    """A previously opened document."""

    path: str
    name: str
    last_accessed: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecentFile":
        return cls(str(data["path"]), str(data["name"]), float(data["last_accessed"]))


class RecentFiles:
    """MRU list persisted in ``store``."""

    def __init__(self, store: KeyValueStore, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be positive")
        self._store = store
        self.max_entries = max_entries

    def list(self) -> list[RecentFile]:
        raw = self._store.get(RECENT_FILES_KEY, [])
        if not isinstance(raw, list):
            logger.warning("ignoring malformed recent file list")
            return []
        entries: list[RecentFile] = []
        for item in raw:
            try:
                entries.append(RecentFile.from_dict(item))
            except (KeyError, TypeError, ValueError):
                logger.warning("ignoring malformed recent file entry: %r", item)
        return entries[: self.max_entries]

    def _save(self, entries: list[RecentFile]) -> None:
        self._store.set(RECENT_FILES_KEY, [asdict(e) for e in entries])

    def add(
        self,
        path: str | os.PathLike[str],
        name: str | None = None,
        now: float | None = None,
    ) -> RecentFile:
        """Record ``path`` as the most recently opened file."""

        key = str(path)
        entry = RecentFile(
            key,
            name if name is not None else Path(key).name or key,
            time.time() if now is None else now,
        )
        entries = [e for e in self.list() if e.path != key]
        entries.insert(0, entry)
        self._save(entries[: self.max_entries])
        return entry

    def remove(self, path: str | os.PathLike[str]) -> bool:
        key = str(path)
        entries = self.list()
        kept = [e for e in entries if e.path != key]
        if len(kept) == len(entries):
            return False
        self._save(kept)
        return True

    def clear(self) -> None:
        self._store.delete(RECENT_FILES_KEY)

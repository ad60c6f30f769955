"""Key-value store capability and two implementations.

Values must be JSON serializable.  :class:`JsonFileStore` keeps a single JSON
object on disk and rewrites it atomically on every change; a missing file is
an empty store.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from ..utils.errors import StorageError
from ..utils.logging import get_logger

__all__ = ["KeyValueStore", "MemoryStore", "JsonFileStore"]

logger = get_logger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal persistence capability used by preferences and recent files."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class MemoryStore:
    """In-process store, mainly for tests and ephemeral sessions."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


def _write_atomic(path: Path, data: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix=path.name + ".", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)


class JsonFileStore:
    """Store backed by a JSON object in ``path``."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"cannot read state file {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"state file {self.path} does not contain a JSON object")
        return data

    def _save(self, data: dict[str, Any]) -> None:
        try:
            _write_atomic(self.path, json.dumps(data, ensure_ascii=False, indent=2))
        except OSError as exc:
            raise StorageError(f"cannot write state file {self.path}: {exc}") from exc
        logger.debug("saved %d key(s) to %s", len(data), self.path)

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

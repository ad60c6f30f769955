"""Persisted viewer state on top of an injected key-value store.

Front ends pass a :class:`KeyValueStore` into :class:`ViewerPreferences` and
:class:`RecentFiles`; nothing in the package reads global settings.
"""

from .kv import JsonFileStore, KeyValueStore, MemoryStore
from .preferences import ViewerPreferences
from .recent import RecentFile, RecentFiles

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "ViewerPreferences",
    "RecentFile",
    "RecentFiles",
]

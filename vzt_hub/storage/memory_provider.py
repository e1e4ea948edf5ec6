"""
In-memory storage provider.
Used by tests and as the fallback when the configured backend cannot be seeded.
"""
from typing import Any, Dict, Iterable, Optional

from . import codec
from .provider import StorageProvider


class MemoryStorageProvider(StorageProvider):
    def __init__(self) -> None:
        # documents are kept serialized so callers never share mutable state with the store
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        if raw is None:
            return None
        return codec.loads(key, raw)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = codec.dumps(key, value)

    def apply(self, updates: Dict[str, Any], removals: Iterable[str]) -> None:
        # encode everything first so a bad value leaves the data untouched
        encoded = {k: codec.dumps(k, v) for k, v in updates.items()}
        self._data.update(encoded)
        for key in removals:
            self._data.pop(key, None)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def exists(self, key: str) -> bool:
        return key in self._data

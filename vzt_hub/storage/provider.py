from typing import Any, Dict, Iterable, Optional


class StorageProvider:
    """Key-value store of JSON documents."""

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def set_many(self, values: Dict[str, Any]) -> None:
        self.apply(values, ())

    def apply(self, updates: Dict[str, Any], removals: Iterable[str]) -> None:
        """Write ``updates`` and delete ``removals`` as one unit: all or nothing."""
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def exists(self, key: str) -> bool:
        raise NotImplementedError

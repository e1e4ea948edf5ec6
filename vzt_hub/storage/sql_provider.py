"""
SQL storage provider.
Keeps each JSON document as one row of the ``kv_store`` table.
"""
from typing import Any, Dict, Iterable, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from ..db import make_session_factory
from ..errors import StorageFailure
from ..models.models import KeyValueEntry
from . import codec
from .provider import StorageProvider


logger = structlog.get_logger(__name__)


class SqlStorageProvider(StorageProvider):
    def __init__(self, database_url: str):
        try:
            self._session_factory = make_session_factory(database_url)
        except (SQLAlchemyError, OSError) as e:
            logger.error("storage_open_failed", database_url=database_url, error=str(e))
            raise StorageFailure(f"Cannot open database: {e}") from e

    def get(self, key: str) -> Optional[Any]:
        try:
            with self._session_factory() as db:
                row = db.get(KeyValueEntry, key)
                raw = row.value if row else None
        except SQLAlchemyError as e:
            logger.error("storage_read_failed", key=key, error=str(e))
            raise StorageFailure(f"Cannot read '{key}'") from e
        if raw is None:
            return None
        return codec.loads(key, raw)

    def set(self, key: str, value: Any) -> None:
        self.apply({key: value}, ())

    def apply(self, updates: Dict[str, Any], removals: Iterable[str]) -> None:
        encoded = {k: codec.dumps(k, v) for k, v in updates.items()}
        removals = list(removals)
        try:
            with self._session_factory() as db:
                with db.begin():
                    for key, raw in encoded.items():
                        row = db.get(KeyValueEntry, key)
                        if row is None:
                            db.add(KeyValueEntry(key=key, value=raw))
                        else:
                            row.value = raw
                    for key in removals:
                        row = db.get(KeyValueEntry, key)
                        if row is not None:
                            db.delete(row)
        except SQLAlchemyError as e:
            logger.error("storage_write_failed", keys=sorted(encoded), removed=removals, error=str(e))
            raise StorageFailure("Cannot save changes") from e

    def remove(self, key: str) -> None:
        self.apply({}, (key,))

    def exists(self, key: str) -> bool:
        try:
            with self._session_factory() as db:
                return db.get(KeyValueEntry, key) is not None
        except SQLAlchemyError as e:
            raise StorageFailure(f"Cannot read '{key}'") from e

"""
Domain store.

Owns every persisted collection. Reads go straight to the storage provider;
writes and removals made inside ``transaction()`` are buffered and committed
in one provider call, so a failing operation never leaves a partial write
behind.
"""
import copy
import threading
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError

from ..config import settings
from ..context import Clock
from ..errors import StorageFailure
from ..schemas.attendance import AttendanceEntry
from ..schemas.audit import AuditLogEntry
from ..schemas.auth import User
from ..schemas.chat import ChatMessage
from ..schemas.projects import Photo, Project, Report
from ..storage.factory import get_storage
from ..storage.memory_provider import MemoryStorageProvider
from ..storage.provider import StorageProvider
from .seed import default_documents


logger = structlog.get_logger(__name__)

USERS = "users"
PROJECTS = "projects"
PHOTOS = "photos"
REPORTS = "reports"
CHAT_MESSAGES = "chat_messages"
ATTENDANCE = "attendance"
AUDIT_LOG = "audit_log"
THEME = "theme"
CURRENT_USER = "current_user"

THEMES = ("light", "dark")

_REMOVED = object()


class DomainStore:
    def __init__(
        self,
        provider: StorageProvider,
        clock: Optional[Clock] = None,
        key_prefix: Optional[str] = None,
        audit_limit: Optional[int] = None,
    ):
        self.provider = provider
        self.clock = clock or Clock()
        self.key_prefix = settings.storage_key_prefix if key_prefix is None else key_prefix
        self.audit_limit = settings.audit_log_limit if audit_limit is None else audit_limit
        self._lock = threading.RLock()
        self._pending: Optional[Dict[str, Any]] = None
        self._last_id = 0

    def key(self, name: str) -> str:
        return f"{self.key_prefix}{name}"

    # -- seeding ---------------------------------------------------------

    def initialize(self) -> None:
        """
        Seed every absent key with its default value.

        A key that already holds a value, even an empty list, is left alone.
        If the backend fails while seeding, the store carries on with an
        in-memory provider holding the defaults.
        """
        try:
            seeded = self._seed(self.provider)
        except StorageFailure as e:
            logger.error("storage_seed_failed", error=e.message, fallback="memory")
            self.provider = MemoryStorageProvider()
            seeded = self._seed(self.provider)
        if seeded:
            logger.info("storage_seeded", keys=seeded)

    def _seed(self, provider: StorageProvider) -> List[str]:
        seeded = []
        with self._lock:
            for name, value in default_documents(self.clock.now(), self.next_id).items():
                if not provider.exists(self.key(name)):
                    provider.set(self.key(name), value)
                    seeded.append(name)
        return seeded

    # -- raw access ------------------------------------------------------

    @contextmanager
    def transaction(self):
        """
        Serialize a read-modify-write sequence.

        Nested transactions join the outermost one. Buffered writes are
        committed only when the outermost block exits without an exception.
        """
        with self._lock:
            if self._pending is not None:
                yield self
                return
            self._pending = {}
            try:
                yield self
                pending = self._pending
            finally:
                self._pending = None
            self._commit(pending)

    def _commit(self, pending: Dict[str, Any]) -> None:
        updates = {self.key(k): v for k, v in pending.items() if v is not _REMOVED}
        removals = [self.key(k) for k, v in pending.items() if v is _REMOVED]
        if updates or removals:
            self.provider.apply(updates, removals)

    def read(self, name: str, default: Any = None) -> Any:
        with self._lock:
            if self._pending is not None and name in self._pending:
                value = self._pending[name]
                return default if value is _REMOVED else copy.deepcopy(value)
            value = self.provider.get(self.key(name))
        return default if value is None else value

    def write(self, name: str, value: Any) -> None:
        with self._lock:
            if self._pending is not None:
                self._pending[name] = copy.deepcopy(value)
            else:
                self.provider.set(self.key(name), value)

    def remove(self, name: str) -> None:
        with self._lock:
            if self._pending is not None:
                self._pending[name] = _REMOVED
            else:
                self.provider.remove(self.key(name))

    def next_id(self) -> int:
        """Creation-time derived id, strictly increasing within the process."""
        with self._lock:
            candidate = int(self.clock.now().timestamp() * 1000)
            self._last_id = max(candidate, self._last_id + 1)
            return self._last_id

    # -- typed collections -----------------------------------------------

    def _validate(self, name: str, model, value):
        try:
            return model.model_validate(value)
        except ValidationError as e:
            logger.error("storage_document_invalid", key=self.key(name), error=str(e))
            raise StorageFailure(f"Corrupt document under '{self.key(name)}'") from e

    def _load(self, name: str, model) -> list:
        items = self.read(name, [])
        if not isinstance(items, list):
            raise StorageFailure(f"Corrupt document under '{self.key(name)}'")
        return [self._validate(name, model, item) for item in items]

    def _save(self, name: str, items: list) -> None:
        self.write(name, [item.model_dump(by_alias=True, exclude_none=True) for item in items])

    def users(self) -> List[User]:
        return self._load(USERS, User)

    def save_users(self, users: List[User]) -> None:
        self._save(USERS, users)

    def projects(self) -> List[Project]:
        return self._load(PROJECTS, Project)

    def save_projects(self, projects: List[Project]) -> None:
        self._save(PROJECTS, projects)

    def photos(self) -> List[Photo]:
        return self._load(PHOTOS, Photo)

    def save_photos(self, photos: List[Photo]) -> None:
        self._save(PHOTOS, photos)

    def reports(self) -> List[Report]:
        return self._load(REPORTS, Report)

    def save_reports(self, reports: List[Report]) -> None:
        self._save(REPORTS, reports)

    def chat_messages(self) -> List[ChatMessage]:
        return self._load(CHAT_MESSAGES, ChatMessage)

    def save_chat_messages(self, messages: List[ChatMessage]) -> None:
        self._save(CHAT_MESSAGES, messages)

    def attendance(self) -> List[AttendanceEntry]:
        return self._load(ATTENDANCE, AttendanceEntry)

    def save_attendance(self, entries: List[AttendanceEntry]) -> None:
        self._save(ATTENDANCE, entries)

    def audit_log(self) -> List[AuditLogEntry]:
        return self._load(AUDIT_LOG, AuditLogEntry)

    def save_audit_log(self, entries: List[AuditLogEntry]) -> None:
        self._save(AUDIT_LOG, entries)

    def theme(self) -> str:
        value = self.read(THEME, "light")
        return value if value in THEMES else "light"

    def save_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme}")
        self.write(THEME, theme)

    def current_user(self) -> Optional[User]:
        value = self.read(CURRENT_USER)
        return self._validate(CURRENT_USER, User, value) if value else None

    def save_current_user(self, user: User) -> None:
        self.write(CURRENT_USER, user.model_dump())

    def clear_current_user(self) -> None:
        self.remove(CURRENT_USER)


def build_store(clock: Optional[Clock] = None) -> DomainStore:
    """Open the configured backend and seed it."""
    try:
        provider = get_storage()
    except StorageFailure as e:
        logger.error("storage_open_failed", error=e.message, fallback="memory")
        provider = MemoryStorageProvider()
    store = DomainStore(provider, clock=clock)
    store.initialize()
    return store

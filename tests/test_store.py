import pytest

from vzt_hub.errors import StorageFailure
from vzt_hub.services.store import DomainStore
from vzt_hub.storage.memory_provider import MemoryStorageProvider
from vzt_hub.storage.sql_provider import SqlStorageProvider


SEEDED = ["users", "projects", "photos", "reports", "chat_messages", "attendance", "audit_log", "theme"]


def test_initialize_seeds_defaults(store, provider):
    for name in SEEDED:
        assert provider.exists(f"vzt_{name}")
    assert not provider.exists("vzt_current_user")

    users = store.users()
    assert [u.role for u in users] == ["admin", "supervisor", "worker"]
    assert [p.id for p in store.projects()] == ["proj_001", "proj_002"]
    messages = store.chat_messages()
    assert len(messages) == 2
    assert {m.channel for m in messages} == {"general"}
    assert messages[0].id < messages[1].id
    assert store.photos() == [] and store.reports() == []
    assert store.theme() == "light"


def test_initialize_is_idempotent(store, provider):
    before = {name: provider.get(f"vzt_{name}") for name in SEEDED}
    store.initialize()
    store.initialize()
    assert {name: provider.get(f"vzt_{name}") for name in SEEDED} == before


def test_presence_not_emptiness_gates_seeding(provider, clock):
    provider.set("vzt_users", [])
    provider.set("vzt_theme", "dark")
    s = DomainStore(provider, clock=clock)
    s.initialize()
    assert s.users() == []
    assert s.theme() == "dark"
    assert len(s.projects()) == 2


def test_transaction_discards_writes_on_error(store):
    with pytest.raises(RuntimeError):
        with store.transaction():
            store.save_theme("dark")
            assert store.theme() == "dark"
            raise RuntimeError("boom")
    assert store.theme() == "light"


def test_nested_transactions_commit_once(store, provider):
    with store.transaction():
        store.save_theme("dark")
        with store.transaction():
            store.save_projects([])
        assert provider.get("vzt_theme") == "light"
    assert provider.get("vzt_theme") == "dark"
    assert provider.get("vzt_projects") == []


def test_next_id_strictly_increases(store):
    ids = [store.next_id() for _ in range(5)]
    assert ids == sorted(set(ids))


class BrokenProvider(MemoryStorageProvider):
    def exists(self, key):
        raise StorageFailure("quota exceeded")


def test_seed_failure_falls_back_to_memory(clock):
    s = DomainStore(BrokenProvider(), clock=clock)
    s.initialize()
    assert isinstance(s.provider, MemoryStorageProvider)
    assert not isinstance(s.provider, BrokenProvider)
    assert len(s.users()) == 3


def test_corrupt_json_raises_storage_failure(store, provider):
    provider._data["vzt_users"] = "{not json"
    with pytest.raises(StorageFailure):
        store.users()


def test_unserializable_value_raises_storage_failure(provider):
    with pytest.raises(StorageFailure):
        provider.set("vzt_x", {"when": object()})
    assert not provider.exists("vzt_x")


def test_sql_provider_persists_documents(clock):
    provider = SqlStorageProvider("sqlite://")
    s = DomainStore(provider, clock=clock)
    s.initialize()
    assert provider.get("vzt_theme") == "light"

    provider.set_many({"vzt_theme": "dark", "vzt_photos": [{"id": "1", "date": "2026-10-14T09:00:00+02:00"}]})
    assert s.theme() == "dark"
    assert s.photos()[0].id == "1"

    provider.remove("vzt_theme")
    assert provider.get("vzt_theme") is None
    assert not provider.exists("vzt_theme")


def test_sql_provider_reseeding_keeps_existing_rows(clock):
    provider = SqlStorageProvider("sqlite://")
    provider.set("vzt_users", [])
    DomainStore(provider, clock=clock).initialize()
    assert provider.get("vzt_users") == []


def test_build_store_uses_configured_backend(monkeypatch, clock):
    from vzt_hub.config import settings
    from vzt_hub.services.store import build_store

    monkeypatch.setattr(settings, "storage_provider", "memory")
    s = build_store(clock=clock)
    assert isinstance(s.provider, MemoryStorageProvider)
    assert len(s.users()) == 3


def test_build_store_falls_back_when_backend_cannot_open(monkeypatch, clock):
    from vzt_hub.config import settings
    from vzt_hub.services.store import build_store

    monkeypatch.setattr(settings, "storage_provider", "sql")
    monkeypatch.setattr(settings, "database_url", "nosuchdialect://localhost/vzt")
    s = build_store(clock=clock)
    assert isinstance(s.provider, MemoryStorageProvider)
    assert s.theme() == "light"


class RejectingCommitProvider(MemoryStorageProvider):
    """Accepts seeding, then fails every commit that removes a key."""

    def apply(self, updates, removals):
        removals = list(removals)
        if removals:
            raise StorageFailure("disk full")
        super().apply(updates, removals)


def test_failed_logout_commit_leaves_audit_and_session_untouched(clock):
    from vzt_hub.context import SessionContext
    from vzt_hub.services import auth

    s = DomainStore(RejectingCommitProvider(), clock=clock)
    s.initialize()
    ctx = SessionContext()
    auth.login(s, ctx, "admin@vzt.cz", "admin123")
    audit_before = len(s.audit_log())

    with pytest.raises(StorageFailure):
        auth.logout(s, ctx)
    assert len(s.audit_log()) == audit_before
    assert s.current_user().id == "admin_001"
    assert ctx.current_user.id == "admin_001"


class ReadOnlyProvider(MemoryStorageProvider):
    read_only = False

    def apply(self, updates, removals):
        if self.read_only:
            raise StorageFailure("read-only")
        super().apply(updates, removals)


def test_failed_register_commit_writes_nothing(clock):
    from vzt_hub.context import SessionContext
    from vzt_hub.services import auth

    provider = ReadOnlyProvider()
    s = DomainStore(provider, clock=clock)
    s.initialize()
    provider.read_only = True

    with pytest.raises(StorageFailure):
        auth.register(s, SessionContext(), "Eva", "eva@vzt.cz", "pw", "worker")
    assert len(s.users()) == 3
    assert s.audit_log() == []


def test_sql_provider_applies_updates_and_removals_together():
    provider = SqlStorageProvider("sqlite://")
    provider.set("vzt_current_user", {"id": "admin_001"})
    provider.apply({"vzt_theme": "dark"}, ["vzt_current_user"])
    assert provider.get("vzt_theme") == "dark"
    assert not provider.exists("vzt_current_user")


def test_sql_provider_bad_value_aborts_whole_commit():
    provider = SqlStorageProvider("sqlite://")
    provider.set("vzt_theme", "light")
    provider.set("vzt_current_user", {"id": "admin_001"})
    with pytest.raises(StorageFailure):
        provider.apply({"vzt_theme": "dark", "vzt_photos": [object()]}, ["vzt_current_user"])
    assert provider.get("vzt_theme") == "light"
    assert provider.exists("vzt_current_user")


def test_wrong_shaped_document_raises_storage_failure(store, provider):
    provider.set("vzt_users", [{"id": "u1", "name": "X", "email": "x@vzt.cz", "password": "x", "role": "manager"}])
    with pytest.raises(StorageFailure):
        store.users()

    provider.set("vzt_attendance", [{"id": "att_1", "userId": "u1", "date": "2026-10-14T09:00:00+02:00"}])
    with pytest.raises(StorageFailure):
        store.attendance()

    provider.set("vzt_projects", {"not": "a list"})
    with pytest.raises(StorageFailure):
        store.projects()


def test_wrong_shaped_session_raises_storage_failure(store, provider):
    provider.set("vzt_current_user", {"id": "admin_001", "role": "manager"})
    with pytest.raises(StorageFailure):
        store.current_user()


def test_sql_provider_unusable_path_raises_storage_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(StorageFailure):
        SqlStorageProvider(f"sqlite:///{blocker}/vzt.db")


def test_build_store_falls_back_when_database_folder_cannot_be_created(monkeypatch, clock, tmp_path):
    from vzt_hub.config import settings
    from vzt_hub.services.store import build_store

    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    monkeypatch.setattr(settings, "storage_provider", "sql")
    monkeypatch.setattr(settings, "database_url", f"sqlite:///{blocker}/vzt.db")
    s = build_store(clock=clock)
    assert isinstance(s.provider, MemoryStorageProvider)
    assert len(s.users()) == 3

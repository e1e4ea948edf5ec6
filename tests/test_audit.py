from vzt_hub.context import SessionContext
from vzt_hub.services.audit import append_audit, get_audit_logs
from vzt_hub.services.store import DomainStore


def test_audit_log_is_capped_fifo(store, ctx):
    for i in range(101):
        append_audit(store, ctx, "Test", f"entry {i}")
    log = store.audit_log()
    assert len(log) == 100
    assert [e.details for e in log] == [f"entry {i}" for i in range(1, 101)]


def test_audit_cap_is_configurable(provider, clock):
    s = DomainStore(provider, clock=clock, audit_limit=3)
    s.initialize()
    for i in range(5):
        append_audit(s, None, "Test", str(i))
    assert [e.details for e in s.audit_log()] == ["2", "3", "4"]


def test_audit_entry_fields(store, clock):
    entry = append_audit(store, SessionContext(), "Check In", "somebody arrived")
    assert entry.user == "System"
    assert entry.timestamp == "14. 10. 2026 9:00:00"
    assert store.audit_log()[-1] == entry


def test_get_audit_logs_newest_first(store, ctx):
    for i in range(3):
        append_audit(store, ctx, "Test", str(i))
    assert [e.details for e in get_audit_logs(store)] == ["2", "1", "0"]
    assert [e.details for e in get_audit_logs(store, limit=1)] == ["2"]

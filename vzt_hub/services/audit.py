"""
Audit logging service.
Append-only audit trail, capped to the most recent entries.
"""
from typing import List, Optional

from ..context import SessionContext
from ..schemas.audit import AuditLogEntry
from .store import DomainStore
from .time_rules import format_locale_timestamp


def append_audit(
    store: DomainStore,
    ctx: Optional[SessionContext],
    action: str,
    details: str,
) -> AuditLogEntry:
    """
    Append an audit entry and drop the oldest ones beyond the cap.

    Args:
        store: Domain store
        ctx: Session context; the entry is attributed to its user, or to
            "System" when nobody is signed in
        action: Short label (e.g. "User login")
        details: Free text description

    Returns:
        Created AuditLogEntry
    """
    with store.transaction():
        log = store.audit_log()
        entry = AuditLogEntry(
            id=store.next_id(),
            action=action,
            details=details,
            user=ctx.user_name if ctx else "System",
            timestamp=format_locale_timestamp(store.clock.now()),
        )
        log.append(entry)
        if len(log) > store.audit_limit:
            del log[: len(log) - store.audit_limit]
        store.save_audit_log(log)
    return entry


def get_audit_logs(store: DomainStore, limit: Optional[int] = None) -> List[AuditLogEntry]:
    """Audit entries, most recent first."""
    log = list(reversed(store.audit_log()))
    if limit is not None:
        log = log[:limit]
    return log

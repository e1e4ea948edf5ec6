"""
Attendance (GPS check-in / check-out).

Repeated check-ins on the same day are allowed and each creates its own open
entry; check-out closes the most recent one.
"""
from datetime import timedelta
from typing import List, Optional

import structlog
from starlette.concurrency import run_in_threadpool

from ..context import SessionContext
from ..schemas.attendance import AttendanceEntry, Coordinate
from .audit import append_audit
from .auth import require_user
from .geolocation import GeolocationProvider
from .store import DomainStore
from .time_rules import hours_between, is_same_day, parse_iso


logger = structlog.get_logger(__name__)


def today_entries(store: DomainStore, user_id: str) -> List[AttendanceEntry]:
    """Entries of ``user_id`` created on the current local calendar day."""
    now = store.clock.now()
    tz = store.clock.timezone_str
    return [
        e for e in store.attendance()
        if e.user_id == user_id and is_same_day(parse_iso(e.date), now, tz)
    ]


def _latest(entries: List[AttendanceEntry]) -> Optional[AttendanceEntry]:
    if not entries:
        return None
    return max(entries, key=lambda e: parse_iso(e.checkin_time))


async def check_in(store: DomainStore, ctx: SessionContext, geolocation: GeolocationProvider) -> AttendanceEntry:
    require_user(ctx)
    # LocationUnavailable propagates before anything is written
    coordinate = await geolocation.request_position()
    # the store lock is blocking, keep it off the event loop
    return await run_in_threadpool(record_check_in, store, ctx, coordinate)


def record_check_in(store: DomainStore, ctx: SessionContext, coordinate: Coordinate) -> AttendanceEntry:
    """Append an open entry at ``coordinate`` for the signed-in user."""
    user = require_user(ctx)
    stamp = store.clock.now().isoformat()
    with store.transaction():
        entries = store.attendance()
        entry = AttendanceEntry(
            id=f"att_{store.next_id()}",
            user_id=user.id,
            date=stamp,
            checkin_time=stamp,
            location=coordinate,
        )
        entries.append(entry)
        store.save_attendance(entries)
        append_audit(store, ctx, "Check In", f"{user.name} checked in on site")

    logger.info("check_in", user_id=user.id, entry_id=entry.id, lat=coordinate.lat, lng=coordinate.lng)
    return entry


def _checkout_stamp(store: DomainStore, entry: AttendanceEntry) -> str:
    now = store.clock.now()
    checkin = parse_iso(entry.checkin_time)
    if now <= checkin:
        # coarse clocks can repeat a reading, checkout must come strictly later
        now = checkin.astimezone(now.tzinfo) + timedelta(microseconds=1)
    return now.isoformat()


def check_out(store: DomainStore, ctx: SessionContext) -> Optional[AttendanceEntry]:
    """Close today's most recent open entry. Returns None when there is none."""
    user = require_user(ctx)
    with store.transaction():
        entries = store.attendance()
        open_today = [e for e in today_entries(store, user.id) if not e.checkout_time]
        latest = _latest(open_today)
        if latest is None:
            return None
        closed = None
        for entry in entries:
            if entry.id == latest.id and not entry.checkout_time:
                entry.checkout_time = _checkout_stamp(store, entry)
                closed = entry
                break
        store.save_attendance(entries)
        append_audit(store, ctx, "Check Out", f"{user.name} checked out")

    logger.info("check_out", user_id=user.id, entry_id=closed.id)
    return closed


def is_checked_in(store: DomainStore, user_id: str) -> bool:
    latest = _latest(today_entries(store, user_id))
    return latest is not None and not latest.checkout_time


def work_hours_today(store: DomainStore, user_id: str) -> float:
    total = 0.0
    for e in today_entries(store, user_id):
        if e.type == "checkin" and e.checkout_time:
            total += hours_between(parse_iso(e.checkin_time), parse_iso(e.checkout_time))
    return total

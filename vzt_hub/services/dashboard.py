import math

from ..context import SessionContext
from ..schemas.projects import DashboardStats
from .attendance import work_hours_today
from .store import DomainStore
from .time_rules import is_same_day, parse_iso, week_start


def dashboard_stats(store: DomainStore, ctx: SessionContext) -> DashboardStats:
    now = store.clock.now()
    tz = store.clock.timezone_str
    monday = week_start(now, tz)

    today_photos = [p for p in store.photos() if is_same_day(parse_iso(p.date), now, tz)]
    weekly_reports = [r for r in store.reports() if parse_iso(r.date) >= monday]
    hours = work_hours_today(store, ctx.current_user.id) if ctx.current_user else 0.0

    return DashboardStats(
        active_projects=len(store.projects()),
        today_photos=len(today_photos),
        weekly_reports=len(weekly_reports),
        work_hours=int(math.floor(hours + 0.5)),
    )

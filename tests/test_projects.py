import asyncio

import pytest

from conftest import local
from vzt_hub.errors import InvalidInput, MissingFields, NotAuthenticated
from vzt_hub.services import attendance, auth
from vzt_hub.services.dashboard import dashboard_stats
from vzt_hub.services.geolocation import FixedPosition
from vzt_hub.services.projects import add_photo, add_report, create_project, list_projects
from vzt_hub.services.theme import get_theme, toggle_theme


@pytest.fixture
def supervisor(store, ctx):
    return auth.login(store, ctx, "vedouci@vzt.cz", "vedouci123")


def test_create_project_keeps_completion_unclamped(store, ctx, supervisor):
    project = create_project(store, ctx, "Hala Ostrava", "warehouse", "Ostrava, Skladová 1", completion=140)
    assert project.completion == 140
    assert project.description is None
    assert list_projects(store)[-1] == project
    assert store.audit_log()[-1].action == "Project created"


def test_create_project_requires_name_type_address(store, ctx, supervisor):
    with pytest.raises(MissingFields):
        create_project(store, ctx, "Hala", "", "Ostrava")
    assert len(list_projects(store)) == 2


def test_records_require_session(store, ctx):
    with pytest.raises(NotAuthenticated):
        add_photo(store, ctx, {"caption": "x"})


def test_photo_keeps_extra_fields_and_gets_dated(store, ctx, clock, supervisor):
    photo = add_photo(store, ctx, {"caption": "Rozvaděč", "projectId": "proj_001"})
    assert photo.date == clock.now().isoformat()
    stored = store.read("photos")[0]
    assert stored["caption"] == "Rozvaděč"
    assert stored["projectId"] == "proj_001"
    assert stored["userId"] == supervisor.id


def test_record_date_must_be_iso(store, ctx, supervisor):
    with pytest.raises(InvalidInput):
        add_report(store, ctx, {"date": "yesterday"})
    assert store.reports() == []


def test_dashboard_stats(store, ctx, clock, supervisor):
    add_photo(store, ctx, {"caption": "today"})
    add_photo(store, ctx, {"caption": "old", "date": local(2026, 10, 13, 18, 0).isoformat()})
    add_report(store, ctx, {"title": "monday", "date": local(2026, 10, 12, 7, 0).isoformat()})
    add_report(store, ctx, {"title": "last sunday", "date": local(2026, 10, 11, 23, 59).isoformat()})

    asyncio.run(attendance.check_in(store, ctx, FixedPosition(50.0, 14.0)))
    clock.advance(hours=2, minutes=40)
    attendance.check_out(store, ctx)

    stats = dashboard_stats(store, ctx)
    assert stats.active_projects == 2
    assert stats.today_photos == 1
    assert stats.weekly_reports == 1
    assert stats.work_hours == 3


def test_dashboard_rounds_half_hours_up(store, ctx, clock, supervisor):
    asyncio.run(attendance.check_in(store, ctx, FixedPosition(50.0, 14.0)))
    clock.advance(hours=2, minutes=30)
    attendance.check_out(store, ctx)
    assert dashboard_stats(store, ctx).work_hours == 3


def test_dashboard_without_session_reports_no_hours(store):
    from vzt_hub.context import SessionContext
    assert dashboard_stats(store, SessionContext()).work_hours == 0


def test_theme_toggles_and_persists(store, ctx, provider):
    assert get_theme(store) == "light"
    assert toggle_theme(store, ctx) == "dark"
    assert provider.get("vzt_theme") == "dark"
    assert ctx.theme == "dark"
    assert toggle_theme(store, ctx) == "light"
    assert get_theme(store) == "light"

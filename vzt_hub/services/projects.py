"""
Projects and site records (photos, reports).
"""
from typing import Any, Dict, List, Optional

import structlog

from ..context import SessionContext
from ..errors import InvalidInput, MissingFields
from ..schemas.projects import Photo, Project, Report
from .audit import append_audit
from .auth import require_user
from .store import DomainStore
from .time_rules import parse_iso


logger = structlog.get_logger(__name__)


def list_projects(store: DomainStore) -> List[Project]:
    return store.projects()


def create_project(
    store: DomainStore,
    ctx: SessionContext,
    name: str,
    type: str,
    address: str,
    completion: int = 0,
    description: Optional[str] = None,
) -> Project:
    # completion is stored as given, out-of-range values included
    user = require_user(ctx)
    name, type, address = (name or "").strip(), (type or "").strip(), (address or "").strip()
    if not (name and type and address):
        raise MissingFields()

    with store.transaction():
        projects = store.projects()
        project = Project(
            id=f"proj_{store.next_id()}",
            name=name,
            type=type,
            address=address,
            completion=completion,
            description=(description or "").strip() or None,
        )
        projects.append(project)
        store.save_projects(projects)
        append_audit(store, ctx, "Project created", f"{user.name} created project {name}")

    logger.info("project_created", project_id=project.id)
    return project


def _record_fields(store: DomainStore, ctx: SessionContext, fields: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    user = require_user(ctx)
    data = {k: v for k, v in (fields or {}).items() if k != "id"}
    data["id"] = str(store.next_id())
    data.setdefault("date", store.clock.now().isoformat())
    data.setdefault("userId", user.id)
    try:
        parse_iso(str(data["date"]))
    except ValueError:
        raise InvalidInput("date must be an ISO timestamp", field="date")
    data["date"] = str(data["date"])
    return data


def add_photo(store: DomainStore, ctx: SessionContext, fields: Optional[Dict[str, Any]] = None) -> Photo:
    with store.transaction():
        photo = Photo.model_validate(_record_fields(store, ctx, fields))
        photos = store.photos()
        photos.append(photo)
        store.save_photos(photos)
    return photo


def add_report(store: DomainStore, ctx: SessionContext, fields: Optional[Dict[str, Any]] = None) -> Report:
    with store.transaction():
        report = Report.model_validate(_record_fields(store, ctx, fields))
        reports = store.reports()
        reports.append(report)
        store.save_reports(reports)
        append_audit(store, ctx, "Report created", f"{ctx.user_name} created a report")
    return report

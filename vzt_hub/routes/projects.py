from typing import List

from fastapi import APIRouter, Depends

from ..context import SessionContext
from ..deps import get_session, get_store
from ..schemas.projects import DashboardStats, Photo, Project, ProjectCreate, Report
from ..services import projects as project_service
from ..services.dashboard import dashboard_stats
from ..services.store import DomainStore


router = APIRouter(tags=["projects"])


@router.get("/projects", response_model=List[Project])
def list_projects(store: DomainStore = Depends(get_store)):
    return project_service.list_projects(store)


@router.post("/projects", response_model=Project, status_code=201)
def create_project(req: ProjectCreate, store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    return project_service.create_project(
        store, ctx, req.name, req.type, req.address, req.completion, req.description
    )


@router.post("/photos", response_model=Photo, status_code=201)
def add_photo(payload: dict, store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    return project_service.add_photo(store, ctx, payload)


@router.post("/reports", response_model=Report, status_code=201)
def add_report(payload: dict, store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    return project_service.add_report(store, ctx, payload)


@router.get("/dashboard", response_model=DashboardStats)
def dashboard(store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    return dashboard_stats(store, ctx)

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Project(BaseModel):
    id: str
    name: str
    type: str  # commercial|industrial|free-form
    address: str
    completion: int = 0  # percent, not clamped
    description: Optional[str] = None


class ProjectCreate(BaseModel):
    name: str = ""
    type: str = ""
    address: str = ""
    completion: int = 0
    description: Optional[str] = None


class Photo(BaseModel):
    """Open record; only ``date`` is read by the core."""
    model_config = ConfigDict(extra="allow")

    id: str
    date: str


class Report(BaseModel):
    """Open record; only ``date`` is read by the core."""
    model_config = ConfigDict(extra="allow")

    id: str
    date: str


class DashboardStats(BaseModel):
    active_projects: int
    today_photos: int
    weekly_reports: int
    work_hours: int

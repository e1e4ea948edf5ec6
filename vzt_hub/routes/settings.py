from typing import List, Optional

from fastapi import APIRouter, Depends

from ..context import SessionContext
from ..deps import get_session, get_store
from ..schemas.audit import AuditLogEntry
from ..schemas.settings import ThemeResponse
from ..services.audit import get_audit_logs
from ..services.auth import require_roles
from ..services.store import DomainStore
from ..services.theme import get_theme, toggle_theme


router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/theme", response_model=ThemeResponse)
def read_theme(store: DomainStore = Depends(get_store)):
    return ThemeResponse(theme=get_theme(store))


@router.post("/theme/toggle", response_model=ThemeResponse)
def flip_theme(store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    return ThemeResponse(theme=toggle_theme(store, ctx))


@router.get("/audit", response_model=List[AuditLogEntry])
def audit_log(limit: Optional[int] = None, store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    require_roles(ctx, "admin")
    return get_audit_logs(store, limit)

from typing import Optional

from fastapi import APIRouter, Depends

from ..context import SessionContext
from ..deps import get_session, get_store
from ..schemas.attendance import AttendanceEntry, AttendanceStatus, CheckInRequest
from ..services import attendance as attendance_service
from ..services.auth import require_user
from ..services.geolocation import FixedPosition, NoPosition
from ..services.store import DomainStore


router = APIRouter(prefix="/attendance", tags=["attendance"])


@router.post("/checkin", response_model=AttendanceEntry, response_model_by_alias=True)
async def check_in(req: CheckInRequest, store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    # The browser resolves its position before calling; a failure is reported in ``error``
    if req.error or req.lat is None or req.lng is None:
        geolocation = NoPosition(req.error)
    else:
        geolocation = FixedPosition(req.lat, req.lng)
    return await attendance_service.check_in(store, ctx, geolocation)


@router.post("/checkout", response_model=Optional[AttendanceEntry], response_model_by_alias=True)
def check_out(store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    return attendance_service.check_out(store, ctx)


@router.get("/today", response_model=AttendanceStatus, response_model_by_alias=True)
def today(store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    user = require_user(ctx)
    return AttendanceStatus(
        checked_in=attendance_service.is_checked_in(store, user.id),
        entries=attendance_service.today_entries(store, user.id),
        work_hours=attendance_service.work_hours_today(store, user.id),
    )

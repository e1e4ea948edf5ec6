from typing import List

from fastapi import APIRouter, Depends

from ..context import SessionContext
from ..deps import get_session, get_store
from ..schemas.auth import (
    DemoAccountResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    SessionResponse,
    User,
)
from ..services import auth as auth_service
from ..services.store import DomainStore


router = APIRouter(prefix="/auth", tags=["auth"])


def _me(user: User) -> MeResponse:
    return MeResponse(id=user.id, name=user.name, email=user.email, role=user.role)


@router.post("/register", response_model=MeResponse, status_code=201)
def register(req: RegisterRequest, store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    user = auth_service.register(store, ctx, req.name, req.email, req.password, req.role)
    return _me(user)


@router.post("/login", response_model=SessionResponse)
def login(req: LoginRequest, store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    user = auth_service.login(store, ctx, req.email, req.password)
    return SessionResponse(user=_me(user), theme=ctx.theme)


@router.post("/logout", status_code=204)
def logout(store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    auth_service.logout(store, ctx)


@router.get("/session", response_model=SessionResponse)
def session(ctx: SessionContext = Depends(get_session)):
    user = _me(ctx.current_user) if ctx.current_user else None
    return SessionResponse(user=user, theme=ctx.theme)


@router.get("/demo/{role}", response_model=DemoAccountResponse)
def demo_account(role: str, store: DomainStore = Depends(get_store)):
    user = auth_service.demo_account(store, role)
    return DemoAccountResponse(email=user.email, password=user.password, role=user.role)


@router.get("/users", response_model=List[MeResponse])
def list_users(store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    return [_me(u) for u in auth_service.list_users(store, ctx)]


@router.delete("/users/{user_id}", status_code=204)
def delete_user(user_id: str, store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    auth_service.delete_user(store, ctx, user_id)

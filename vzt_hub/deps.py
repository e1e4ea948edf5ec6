from fastapi import Depends, Request

from .context import SessionContext
from .services.auth import restore_session
from .services.store import DomainStore


def get_store(request: Request) -> DomainStore:
    return request.app.state.store


def get_session(store: DomainStore = Depends(get_store)) -> SessionContext:
    return restore_session(store)

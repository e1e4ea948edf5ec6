from typing import List, Optional

from fastapi import APIRouter, Depends

from ..context import SessionContext
from ..deps import get_session, get_store
from ..schemas.chat import ChatMessage, SendMessageRequest
from ..services import chat as chat_service
from ..services.store import DomainStore


router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("/messages", response_model=List[ChatMessage])
def list_messages(channel: Optional[str] = None, store: DomainStore = Depends(get_store)):
    return chat_service.list_messages(store, channel)


@router.post("/messages", response_model=Optional[ChatMessage])
def send_message(req: SendMessageRequest, store: DomainStore = Depends(get_store), ctx: SessionContext = Depends(get_session)):
    return chat_service.send_message(store, ctx, req.message, req.channel)

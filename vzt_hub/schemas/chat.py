from typing import Optional

from pydantic import BaseModel


class ChatMessage(BaseModel):
    id: int
    user: str  # display name of the sender
    message: str
    timestamp: str
    channel: str = "general"


class SendMessageRequest(BaseModel):
    message: str = ""
    channel: Optional[str] = None

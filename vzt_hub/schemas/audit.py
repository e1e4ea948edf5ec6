from pydantic import BaseModel


class AuditLogEntry(BaseModel):
    id: int
    action: str
    details: str
    user: str  # display name or "System"
    timestamp: str

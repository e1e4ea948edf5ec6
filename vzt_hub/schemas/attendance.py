from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    lat: float
    lng: float


class AttendanceEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    type: Literal["checkin"] = "checkin"
    date: str  # ISO timestamp of the check-in instant
    checkin_time: str = Field(alias="checkinTime")
    checkout_time: Optional[str] = Field(default=None, alias="checkoutTime")
    location: Coordinate


class CheckInRequest(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None
    error: Optional[str] = None  # reason reported by the client when positioning failed


class AttendanceStatus(BaseModel):
    checked_in: bool
    entries: List[AttendanceEntry]
    work_hours: float

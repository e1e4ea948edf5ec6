from typing import Literal, Optional

from pydantic import BaseModel


ROLES = ("admin", "supervisor", "worker")
Role = Literal["admin", "supervisor", "worker"]


class User(BaseModel):
    id: str
    name: str
    email: str
    password: str  # stored and compared as entered
    role: Role


class RegisterRequest(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""
    role: str = ""


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class MeResponse(BaseModel):
    id: str
    name: str
    email: str
    role: Role


class DemoAccountResponse(BaseModel):
    email: str
    password: str
    role: Role


class SessionResponse(BaseModel):
    user: Optional[MeResponse] = None
    theme: str

# vanfleet/schemas/auth.py
from pydantic import BaseModel
from datetime import datetime


class LoginRequest(BaseModel):
    password: str


class LoginOut(BaseModel):
    success: bool
    message: str
    token: str


class SessionOut(BaseModel):
    authenticated: bool
    issued_at: datetime
    expires_at: datetime

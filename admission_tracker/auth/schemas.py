from datetime import datetime

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    issued_at: datetime


class OperatorSession(BaseModel):
    """The authenticated caller. There is one shared operator identity."""

    subject: str

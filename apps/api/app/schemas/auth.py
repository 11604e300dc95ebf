from pydantic import BaseModel, EmailStr
from uuid import UUID

from app.models.employee import Role


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"


class Caller(BaseModel):
    """The authenticated identity behind a request, as read from its token."""

    id: UUID
    email: str
    name: str
    role: Role

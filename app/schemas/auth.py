from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel


class LoginRequest(CamelModel):
    email: str | None = None
    password: str | None = None


class LoginResponse(CamelModel):
    login: str
    token: str
    role: str
    user_id: str
    name: str


class RegisterResponse(CamelModel):
    # "register" would shadow BaseModel.register
    register_: str = Field(alias="register")
    user_id: str


class TokenIntrospection(CamelModel):
    token_present: bool
    email: str | None = None
    user_found: bool | None = None
    user_id: int | None = None
    user_role: str | None = None
    token_valid: bool | None = None
    expires_at: datetime | None = None
    message: str | None = None

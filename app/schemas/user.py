from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import Field, field_validator

from app.models.enums import UserRole, UserStatus
from app.schemas.base import CamelModel


def check_email(value: str) -> str:
    """Reject malformed addresses but keep the address exactly as given."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    return value


class UserCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255)
    password: str = Field(min_length=1, max_length=72)
    role: UserRole = UserRole.STUDENT
    status: UserStatus = UserStatus.ACTIVE
    profile_image: str | None = None

    @field_validator("email")
    @classmethod
    def email_format(cls, value):
        return check_email(value)

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, value):
        return UserRole.parse(value, field="role")

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value):
        return UserStatus.parse(value)


class UserUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, min_length=1, max_length=72)
    role: UserRole | None = None
    status: UserStatus | None = None
    profile_image: str | None = None

    @field_validator("email")
    @classmethod
    def email_format(cls, value):
        return None if value is None else check_email(value)

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, value):
        return None if value is None else UserRole.parse(value, field="role")

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value):
        return None if value is None else UserStatus.parse(value)


class UserRead(CamelModel):
    id: int
    name: str
    email: str
    role: UserRole
    status: UserStatus
    profile_image: str | None = None
    join_date: datetime
    last_active: datetime | None = None


class StatusUpdate(CamelModel):
    status: str | None = None

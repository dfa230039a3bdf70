from pydantic import Field

from app.schemas.base import CamelModel


class CategoryCreate(CamelModel):
    name: str | None = Field(default=None, max_length=255)
    active: bool | None = None


class CategoryRead(CamelModel):
    id: int
    name: str
    active: bool


class CategoryStatusUpdate(CamelModel):
    active: bool | None = None

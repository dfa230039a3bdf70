from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator

from app.models.enums import CourseStatus
from app.schemas.base import CamelModel


class InstructorSummary(CamelModel):
    id: int
    name: str
    email: str


class CourseCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    instructor_id: int | None = None
    category_id: int | None = None
    price: Decimal | None = None
    thumbnail: str | None = None
    status: CourseStatus = CourseStatus.DRAFT

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value):
        return CourseStatus.parse(value)


class CourseRead(CamelModel):
    id: int
    title: str
    description: str | None = None
    instructor_id: int
    instructor: InstructorSummary | None = None
    category_id: int
    price: Decimal | None = None
    thumbnail: str | None = None
    status: CourseStatus
    created_at: datetime
    updated_at: datetime | None = None

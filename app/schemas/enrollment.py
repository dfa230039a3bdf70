from datetime import datetime

from app.models.enums import EnrollmentStatus
from app.schemas.base import CamelModel


class EnrollmentCreate(CamelModel):
    user_id: int
    course_id: int
    status: str | None = None


class EnrollmentUser(CamelModel):
    id: int
    name: str
    email: str


class EnrollmentCourse(CamelModel):
    id: int
    title: str


class EnrollmentOut(CamelModel):
    id: int
    user_id: int
    course_id: int
    user: EnrollmentUser | None = None
    course: EnrollmentCourse | None = None
    enrollment_date: datetime
    completion_date: datetime | None = None
    status: EnrollmentStatus

from datetime import datetime
from decimal import Decimal

from app.schemas.base import CamelModel


class RecentEnrollment(CamelModel):
    enrollment_id: int
    user_id: int | None = None
    user_name: str
    course_name: str
    enrollment_date: datetime | None = None
    status: str


class EnrollmentStats(CamelModel):
    total_enrollments: int
    enrollment_by_status: dict[str, int]
    monthly_enrollments: list[int]
    recent_enrollments: list[RecentEnrollment]


class RecentUser(CamelModel):
    id: int
    name: str
    email: str
    role: str
    status: str
    registration_date: datetime | None = None


class UserStats(CamelModel):
    total_users: int
    active_users: int
    users_by_role: dict[str, int]
    recent_users: list[RecentUser]


class PopularCourse(CamelModel):
    course_id: int
    title: str
    enrollments: int


class CourseStats(CamelModel):
    total_courses: int
    active_courses: int
    courses_by_category: dict[str, int]
    popular_courses: list[PopularCourse]


class RevenueStats(CamelModel):
    total_revenue: Decimal
    monthly_revenue: list[Decimal]
    revenue_by_category: dict[str, Decimal]

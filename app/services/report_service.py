from collections import Counter
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.enums import CourseStatus, EnrollmentStatus, UserRole, UserStatus
from app.models.user import User

RECENT_LIMIT = 5
UNCATEGORIZED = "Uncategorized"


class ReportService:
    """Aggregate statistics for the admin dashboard."""

    def __init__(self, db: Session):
        self.db = db

    def enrollment_stats(self) -> dict:
        enrollments = self.db.query(Enrollment).all()

        by_status = {s.value: 0 for s in EnrollmentStatus}
        monthly = [0] * 12
        for e in enrollments:
            by_status[e.status.value] += 1
            if e.enrollment_date is not None:
                monthly[e.enrollment_date.month - 1] += 1

        recent = (
            self.db.query(Enrollment)
            .order_by(Enrollment.enrollment_date.desc(), Enrollment.id.desc())
            .limit(RECENT_LIMIT)
            .all()
        )

        return {
            "total_enrollments": len(enrollments),
            "enrollment_by_status": by_status,
            "monthly_enrollments": monthly,
            "recent_enrollments": [
                {
                    "enrollment_id": e.id,
                    "user_id": e.user_id,
                    "user_name": e.user.name if e.user else "Unknown",
                    "course_name": e.course.title if e.course else "Unknown Course",
                    "enrollment_date": e.enrollment_date,
                    "status": e.status.value,
                }
                for e in recent
            ],
        }

    def user_stats(self) -> dict:
        users = self.db.query(User).all()

        by_role = {r.value: 0 for r in UserRole}
        by_role.update(Counter(u.role.value for u in users))

        recent = (
            self.db.query(User)
            .order_by(User.join_date.desc(), User.id.desc())
            .limit(RECENT_LIMIT)
            .all()
        )

        return {
            "total_users": len(users),
            "active_users": sum(1 for u in users if u.status is UserStatus.ACTIVE),
            "users_by_role": by_role,
            "recent_users": [
                {
                    "id": u.id,
                    "name": u.name,
                    "email": u.email,
                    "role": u.role.value,
                    "status": u.status.value,
                    "registration_date": u.join_date,
                }
                for u in recent
            ],
        }

    def course_stats(self) -> dict:
        courses = self.db.query(Course).all()
        category_names = {c.id: c.name for c in self.db.query(Category).all()}

        by_category = {name: 0 for name in category_names.values()}
        by_category.setdefault(UNCATEGORIZED, 0)
        for course in courses:
            name = category_names.get(course.category_id, UNCATEGORIZED)
            by_category[name] += 1

        popular = (
            self.db.query(Course.id, Course.title, func.count(Enrollment.id).label("enrollments"))
            .join(Enrollment, Enrollment.course_id == Course.id)
            .group_by(Course.id, Course.title)
            .order_by(func.count(Enrollment.id).desc(), Course.id.asc())
            .limit(RECENT_LIMIT)
            .all()
        )

        return {
            "total_courses": len(courses),
            "active_courses": sum(1 for c in courses if c.status is CourseStatus.PUBLISHED),
            "courses_by_category": by_category,
            "popular_courses": [
                {"course_id": r.id, "title": r.title, "enrollments": r.enrollments}
                for r in popular
            ],
        }

    def revenue_stats(self) -> dict:
        """Revenue as the sum of course prices over enrollments."""
        enrollments = self.db.query(Enrollment).all()
        category_names = {c.id: c.name for c in self.db.query(Category).all()}

        total = Decimal("0")
        monthly = [Decimal("0")] * 12
        by_category = {name: Decimal("0") for name in category_names.values()}
        by_category.setdefault(UNCATEGORIZED, Decimal("0"))

        for e in enrollments:
            course = e.course
            if course is None or course.price is None:
                continue
            total += course.price
            if e.enrollment_date is not None:
                monthly[e.enrollment_date.month - 1] += course.price
            name = category_names.get(course.category_id, UNCATEGORIZED)
            by_category[name] += course.price

        return {
            "total_revenue": total,
            "monthly_revenue": monthly,
            "revenue_by_category": by_category,
        }

import logging

from sqlalchemy.orm import Session

from app.core.clock import utcnow
from app.core.errors import ConflictError, InvalidArgumentError, NotFoundError
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.enums import EnrollmentStatus
from app.models.user import User

logger = logging.getLogger(__name__)


class EnrollmentService:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Enrollment]:
        return self.db.query(Enrollment).order_by(Enrollment.id.asc()).all()

    def get(self, enrollment_id: int) -> Enrollment:
        enrollment = self.db.get(Enrollment, enrollment_id)
        if enrollment is None:
            raise NotFoundError("Enrollment not found")
        return enrollment

    def list_by_user(self, user_id: int) -> list[Enrollment]:
        if self.db.get(User, user_id) is None:
            return []
        return self.db.query(Enrollment).filter(Enrollment.user_id == user_id).all()

    def list_by_course(self, course_id: int) -> list[Enrollment]:
        if self.db.get(Course, course_id) is None:
            return []
        return self.db.query(Enrollment).filter(Enrollment.course_id == course_id).all()

    def exists(self, user_id: int, course_id: int) -> bool:
        return (
            self.db.query(Enrollment)
            .filter(Enrollment.user_id == user_id, Enrollment.course_id == course_id)
            .first()
            is not None
        )

    def enroll(self, user_id: int, course_id: int, status=None) -> Enrollment:
        # parse first so a bad status never leaves a half-made enrollment
        target = EnrollmentStatus.parse(status) if status is not None else None

        user = self.db.get(User, user_id)
        course = self.db.get(Course, course_id)
        if user is None or course is None:
            raise InvalidArgumentError("User or course not found")

        # Check-then-insert; two concurrent requests can both pass this check.
        if self.exists(user_id, course_id):
            raise ConflictError("User is already enrolled in this course")

        enrollment = Enrollment(
            user_id=user.id,
            course_id=course.id,
            enrollment_date=utcnow(),
            status=EnrollmentStatus.IN_PROGRESS,
        )
        self.db.add(enrollment)
        self.db.commit()
        self.db.refresh(enrollment)
        logger.info("User %s enrolled in course %s", user_id, course_id)

        if target is not None and target is not EnrollmentStatus.IN_PROGRESS:
            return self.update_status(enrollment.id, target)
        return enrollment

    def update_status(self, enrollment_id: int, status) -> Enrollment:
        if status is None:
            raise InvalidArgumentError("Status is required")
        target = EnrollmentStatus.parse(status)
        enrollment = self.get(enrollment_id)

        enrollment.status = target
        if target is EnrollmentStatus.COMPLETED:
            enrollment.completion_date = utcnow()

        self.db.commit()
        self.db.refresh(enrollment)
        return enrollment

    def delete(self, enrollment_id: int) -> None:
        enrollment = self.db.get(Enrollment, enrollment_id)
        if enrollment is None:
            return
        self.db.delete(enrollment)
        self.db.commit()

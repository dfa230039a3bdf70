from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.clock import utcnow
from app.core.errors import ConflictError, InvalidArgumentError, NotFoundError
from app.models.course import Course
from app.models.enums import CourseStatus
from app.models.user import User
from app.schemas.course import CourseCreate


class CourseService:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Course]:
        return self.db.query(Course).order_by(Course.id.asc()).all()

    def get(self, course_id: int) -> Course:
        course = self.db.get(Course, course_id)
        if course is None:
            raise NotFoundError("Course not found")
        return course

    def list_by_instructor(self, instructor_id: int) -> list[Course]:
        if self.db.get(User, instructor_id) is None:
            raise NotFoundError("Instructor not found")
        return self.db.query(Course).filter(Course.instructor_id == instructor_id).all()

    def list_by_category(self, category_id: int) -> list[Course]:
        return self.db.query(Course).filter(Course.category_id == category_id).all()

    def list_by_status(self, status: str) -> list[Course]:
        target = CourseStatus.parse(status)
        return self.db.query(Course).filter(Course.status == target).all()

    def _require_instructor(self, instructor_id: int | None) -> User:
        if instructor_id is None:
            raise InvalidArgumentError("Instructor ID is required")
        instructor = self.db.get(User, instructor_id)
        if instructor is None:
            raise InvalidArgumentError("Instructor not found")
        return instructor

    def create(self, payload: CourseCreate) -> Course:
        instructor = self._require_instructor(payload.instructor_id)
        if payload.category_id is None:
            raise InvalidArgumentError("Category ID is required")

        now = utcnow()
        course = Course(
            title=payload.title,
            description=payload.description,
            instructor_id=instructor.id,
            category_id=payload.category_id,
            price=payload.price,
            thumbnail=payload.thumbnail,
            status=payload.status,
            created_at=now,
            updated_at=now,
        )
        self.db.add(course)
        self.db.commit()
        self.db.refresh(course)
        return course

    def update(self, course_id: int, payload: CourseCreate) -> Course:
        course = self.get(course_id)
        instructor = self._require_instructor(payload.instructor_id)

        course.title = payload.title
        course.description = payload.description
        course.instructor_id = instructor.id
        if payload.category_id is not None:
            course.category_id = payload.category_id
        course.price = payload.price
        if payload.thumbnail:
            course.thumbnail = payload.thumbnail
        if "status" in payload.model_fields_set:
            course.status = payload.status
        # created_at stays as first written
        course.updated_at = utcnow()

        self.db.commit()
        self.db.refresh(course)
        return course

    def update_status(self, course_id: int, status) -> Course:
        if not status:
            raise InvalidArgumentError("Status is required")
        target = CourseStatus.parse(status)
        course = self.get(course_id)
        course.status = target
        course.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(course)
        return course

    def delete(self, course_id: int) -> None:
        course = self.db.get(Course, course_id)
        if course is None:
            return
        self.db.delete(course)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError("Course still has videos or enrollments") from exc

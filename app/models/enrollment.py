from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, func
from sqlalchemy.orm import relationship

from app.db.base_class import Base
from app.models.enums import EnrollmentStatus


class Enrollment(Base):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)

    enrollment_date = Column(DateTime, server_default=func.now(), nullable=False)
    completion_date = Column(DateTime, nullable=True)

    status = Column(
        Enum(EnrollmentStatus, native_enum=False, length=20),
        nullable=False,
        default=EnrollmentStatus.IN_PROGRESS,
    )

    # (user_id, course_id) uniqueness is checked by EnrollmentService, not the schema.

    user = relationship("User", back_populates="enrollments")
    course = relationship("Course", back_populates="enrollments")

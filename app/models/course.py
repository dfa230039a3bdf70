from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base
from app.models.enums import CourseStatus


class Course(Base):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    instructor_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), nullable=False, index=True
    )
    category_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    thumbnail: Mapped[str | None] = mapped_column(String(2083))
    status: Mapped[CourseStatus] = mapped_column(
        Enum(CourseStatus, native_enum=False, length=20),
        nullable=False,
        default=CourseStatus.DRAFT,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime)

    instructor = relationship("User", back_populates="courses")

    enrollments = relationship("Enrollment", back_populates="course")

    videos = relationship("Video", back_populates="course")

import enum

from app.core.errors import InvalidArgumentError


class _ParsableEnum(str, enum.Enum):
    """String enum stored and sent on the wire by member name."""

    @classmethod
    def parse(cls, value, field: str = "status"):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            candidate = value.upper()
            for member in cls:
                if member.name == candidate:
                    return member
        valid = ", ".join(m.name for m in cls)
        raise InvalidArgumentError(f"Invalid {field} value. Valid values are: {valid}")

    def __str__(self) -> str:
        return self.value


class UserRole(_ParsableEnum):
    STUDENT = "STUDENT"
    INSTRUCTOR = "INSTRUCTOR"
    ADMIN = "ADMIN"

    @property
    def authority(self) -> str:
        return f"ROLE_{self.name}"


class UserStatus(_ParsableEnum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    BLOCKED = "BLOCKED"


class CourseStatus(_ParsableEnum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class EnrollmentStatus(_ParsableEnum):
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    DROPPED = "DROPPED"

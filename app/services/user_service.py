import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.clock import utcnow
from app.core.errors import ConflictError, NotFoundError
from app.core.security import hash_password, verify_password
from app.models.enums import UserRole, UserStatus
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session, bcrypt_rounds: int = 12):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds

    def list_all(self) -> list[User]:
        return self.db.query(User).order_by(User.id.asc()).all()

    def get(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, payload: UserCreate) -> User:
        if self.get_by_email(payload.email) is not None:
            raise ConflictError("Email already in use")

        user = User(
            name=payload.name,
            email=payload.email,
            password=hash_password(payload.password, self.bcrypt_rounds),
            role=payload.role,
            status=payload.status,
            profile_image=payload.profile_image,
            join_date=utcnow(),
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info("Registered user %s (id=%s, role=%s)", user.email, user.id, user.role)
        return user

    def update(self, user_id: int, payload: UserUpdate) -> User:
        user = self.get(user_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)

        new_email = changes.get("email")
        if new_email and new_email != user.email:
            other = self.get_by_email(new_email)
            if other is not None and other.id != user.id:
                raise ConflictError("Email already in use")

        password = changes.pop("password", None)
        if password:
            user.password = hash_password(password, self.bcrypt_rounds)

        # join_date is never taken from the payload
        for field, value in changes.items():
            setattr(user, field, value)

        self.db.commit()
        self.db.refresh(user)
        return user

    def update_status(self, user_id: int, status) -> User:
        target = UserStatus.parse(status)
        user = self.get(user_id)
        user.status = target
        self.db.commit()
        self.db.refresh(user)
        return user

    def touch_last_active(self, user: User) -> None:
        user.last_active = utcnow()
        self.db.commit()

    def delete(self, user_id: int) -> None:
        # Missing ids are ignored.
        user = self.db.get(User, user_id)
        if user is None:
            return
        self.db.delete(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # courses and enrollments keep a NOT NULL reference to the user
            self.db.rollback()
            raise ConflictError("User still has courses or enrollments") from exc

    def authenticate(self, email: str, password: str) -> User | None:
        user = self.get_by_email(email)
        if user is None:
            logger.info("User not found with email: %s", email)
            return None
        if not verify_password(password, user.password):
            logger.info("Invalid password for: %s", email)
            return None
        return user

    def ensure_admin(self, email: str, password: str, name: str) -> bool:
        """Create the bootstrap admin if no user has that email. True if created."""
        if self.get_by_email(email) is not None:
            return False
        admin = User(
            name=name,
            email=email,
            password=hash_password(password, self.bcrypt_rounds),
            role=UserRole.ADMIN,
            status=UserStatus.ACTIVE,
            join_date=utcnow(),
        )
        self.db.add(admin)
        self.db.commit()
        return True

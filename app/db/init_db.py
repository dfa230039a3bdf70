import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.core.config import Settings
from app.db.base import Base
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)


def seed_admin(session_factory: sessionmaker, settings: Settings) -> None:
    db = session_factory()
    try:
        created = UserService(db, bcrypt_rounds=settings.bcrypt_rounds).ensure_admin(
            email=settings.admin_email,
            password=settings.admin_password,
            name=settings.admin_name,
        )
        if created:
            logger.info("Admin user %s created", settings.admin_email)
    finally:
        db.close()

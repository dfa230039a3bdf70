import os
from dataclasses import dataclass
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.clock import utcnow
from app.core.config import Settings
from app.core.security import hash_password
from app.db.base import Base
from app.main import create_app
from app.models.category import Category
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.enums import CourseStatus, UserRole
from app.models.product import Headphone, Laptop, Mobile
from app.models.user import User
from app.models.video import Video

TEST_DB_FILE = "test_edulearn.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"
PASSWORD = "password123"

test_settings = Settings(
    database_url=TEST_DB_URL,
    jwt_secret_key="test-secret-key-that-is-long-enough-for-hs256",
    bcrypt_rounds=4,
    razorpay_key_id="rzp_test_key",
    razorpay_key_secret="rzp_test_secret",
    razorpay_api_url="https://gateway.test/v1",
    admin_email="admin@example.com",
    admin_password=PASSWORD,
)

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@dataclass
class Seed:
    admin_id: int
    student_id: int
    instructor_id: int
    category_id: int
    course_id: int
    video_id: int


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def seed():
    """Seed a clean minimal dataset for each test."""
    db = TestingSessionLocal()
    try:
        # Clear tables (child -> parent)
        for model in (Video, Enrollment, Course, Category, Laptop, Mobile, Headphone, User):
            db.query(model).delete()
        db.commit()

        hashed = hash_password(PASSWORD, rounds=4)
        admin = User(
            name="Admin User",
            email="admin@example.com",
            password=hashed,
            role=UserRole.ADMIN,
            join_date=utcnow(),
        )
        student = User(
            name="Student One",
            email="student1@example.com",
            password=hashed,
            role=UserRole.STUDENT,
            join_date=utcnow(),
        )
        instructor = User(
            name="Instructor One",
            email="instructor1@example.com",
            password=hashed,
            role=UserRole.INSTRUCTOR,
            join_date=utcnow(),
        )
        db.add_all([admin, student, instructor])
        db.commit()

        category = Category(name="Programming", active=True)
        db.add(category)
        db.commit()

        now = utcnow()
        course = Course(
            title="Python Basics",
            description="Intro course",
            instructor_id=instructor.id,
            category_id=category.id,
            price=Decimal("499.00"),
            status=CourseStatus.PUBLISHED,
            created_at=now,
            updated_at=now,
        )
        db.add(course)
        db.commit()

        video = Video(
            title="Lesson 1",
            video_link="https://videos.example.com/lesson-1",
            course_id=course.id,
            created_at=now,
            updated_at=now,
        )
        db.add(video)
        db.commit()

        yield Seed(
            admin_id=admin.id,
            student_id=student.id,
            instructor_id=instructor.id,
            category_id=category.id,
            course_id=course.id,
            video_id=video.id,
        )
    finally:
        db.close()


@pytest.fixture()
def app_factory():
    def build(**overrides):
        settings = test_settings.model_copy(update=overrides)
        return create_app(settings=settings, session_factory=TestingSessionLocal)

    return build


@pytest.fixture()
def app(app_factory):
    return app_factory()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


def login(client, email: str, password: str = PASSWORD) -> str:
    r = client.post("/api/users/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["token"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers(client):
    return auth_header(login(client, "admin@example.com"))


@pytest.fixture()
def student_headers(client):
    return auth_header(login(client, "student1@example.com"))


@pytest.fixture()
def instructor_headers(client):
    return auth_header(login(client, "instructor1@example.com"))


@pytest.fixture()
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()

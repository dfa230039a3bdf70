from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.security import TokenService
from app.services.category_service import CategoryService
from app.services.course_service import CourseService
from app.services.enrollment_service import EnrollmentService
from app.services.payment_service import PaymentService
from app.services.product_service import ProductKind, ProductService
from app.services.report_service import ReportService
from app.services.user_service import UserService
from app.services.video_service import VideoService


# every request that needs DB will get a fresh session, and it will always close.
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service


def get_user_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_dep),
) -> UserService:
    return UserService(db, bcrypt_rounds=settings.bcrypt_rounds)


def get_course_service(db: Session = Depends(get_db)) -> CourseService:
    return CourseService(db)


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_enrollment_service(db: Session = Depends(get_db)) -> EnrollmentService:
    return EnrollmentService(db)


def get_video_service(db: Session = Depends(get_db)) -> VideoService:
    return VideoService(db)


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(db)


def get_product_service(kind: ProductKind, db: Session = Depends(get_db)) -> ProductService:
    return ProductService.for_kind(db, kind)

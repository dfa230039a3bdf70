import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import sessionmaker

from app.core.auth_filter import AuthenticationMiddleware
from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.core.logging_middleware import LoggingMiddleware
from app.core.policy import AuthorizationMiddleware
from app.core.security import TokenService
from app.db.init_db import init_db, seed_admin
from app.db.session import SessionLocal
from app.routers.admin import admin_router, user_router
from app.routers.categories import router as categories_router
from app.routers.courses import router as courses_router
from app.routers.enrollments import router as enrollments_router
from app.routers.payments import router as payments_router
from app.routers.products import router as products_router
from app.routers.reports import router as reports_router
from app.routers.users import router as users_router
from app.routers.videos import router as videos_router
from app.services.payment_service import PaymentService

logging.basicConfig(level=logging.INFO)


def create_app(
    settings: Settings | None = None,
    session_factory: sessionmaker | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    session_factory = session_factory or SessionLocal

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(session_factory.kw["bind"])
        seed_admin(session_factory, settings)
        yield

    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

    # Built once, shared read-only by every request
    token_service = TokenService(
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire=settings.access_token_expire,
    )
    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.token_service = token_service
    app.state.payment_service = PaymentService(
        key_id=settings.razorpay_key_id,
        key_secret=settings.razorpay_key_secret,
        api_url=settings.razorpay_api_url,
        timeout=settings.razorpay_timeout,
    )

    # Middleware (last added runs first): CORS -> logging -> authentication -> authorization
    app.add_middleware(AuthorizationMiddleware)
    app.add_middleware(
        AuthenticationMiddleware,
        token_service=token_service,
        session_factory=session_factory,
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH", "HEAD"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "X-Requested-With",
            "Cache-Control",
            "Origin",
        ],
        expose_headers=["Authorization", "X-Request-ID"],
        max_age=settings.cors_max_age,
    )

    register_exception_handlers(app)

    # Health check
    @app.get("/health")
    def health():
        return {"status": "ok"}

    # Include routers
    app.include_router(users_router, prefix="/api/users", tags=["users"])
    app.include_router(courses_router, prefix="/api/courses", tags=["courses"])
    app.include_router(categories_router, prefix="/api/categories", tags=["categories"])
    app.include_router(enrollments_router, prefix="/api/enrollments", tags=["enrollments"])
    app.include_router(videos_router, prefix="/api/videos", tags=["videos"])
    app.include_router(reports_router, prefix="/api/reports", tags=["reports"])
    app.include_router(products_router, prefix="/api", tags=["store"])
    app.include_router(payments_router, prefix="/api", tags=["payments"])
    # legacy unprefixed payment paths used by older front-end builds
    app.include_router(payments_router, tags=["payments"], include_in_schema=False)
    app.include_router(admin_router, prefix="/admin", tags=["admin"])
    app.include_router(user_router, prefix="/user", tags=["user"])

    return app


app = create_app()

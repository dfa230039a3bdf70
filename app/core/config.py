from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Front-end origins allowed to call the API with credentials
DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://localhost:5174",
    "http://localhost:4200",
    "http://localhost:5175",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:4200",
    "https://edulearn-lms.netlify.app",
    "https://www.edulearn-lms.netlify.app",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "EduLearn LMS"
    debug: bool = False

    database_url: str = f"sqlite:///{BASE_DIR}/edulearn.db"

    # DEV ONLY default. Override JWT_SECRET_KEY in every real deployment.
    jwt_secret_key: str = "change-me-in-production-0123456789abcdef"
    jwt_algorithm: str = "HS256"
    access_token_expire: timedelta = timedelta(days=7)

    bcrypt_rounds: int = 12

    cors_origins: list[str] = DEFAULT_CORS_ORIGINS
    cors_max_age: int = 3600

    razorpay_key_id: str = ""
    razorpay_key_secret: str = ""
    razorpay_api_url: str = "https://api.razorpay.com/v1"
    razorpay_timeout: float = 30.0

    # Bootstrap admin created on startup if missing
    admin_email: str = "admin@edulearn.com"
    admin_password: str = "admin123"
    admin_name: str = "Admin User"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()

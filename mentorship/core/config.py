import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


APP_ENV = os.getenv("APP_ENV", "development")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./mentorship.db")
DATABASE_ECHO = _get_bool(os.getenv("DATABASE_ECHO"), default=False)

CORS_ALLOW_ORIGINS = _get_list(os.getenv("CORS_ALLOW_ORIGINS"), ["http://localhost:4200"])

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", "60"))

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))
PASSWORD_MIN_LENGTH = int(os.getenv("PASSWORD_MIN_LENGTH", "6"))

MENTOR_PICTURE_MAX_BYTES = int(os.getenv("MENTOR_PICTURE_MAX_BYTES", str(600 * 1024 * 1024)))


@dataclass(frozen=True)
class Settings:
    """Runtime settings handed to the auth workflow and the routes."""

    jwt_secret_key: str
    app_env: str = "development"
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60
    bcrypt_rounds: int = 10
    password_min_length: int = 6
    mentor_picture_max_bytes: int = 600 * 1024 * 1024

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def token_max_age_seconds(self) -> int | None:
        if self.jwt_expires_minutes <= 0:
            return None
        return self.jwt_expires_minutes * 60


@lru_cache
def get_settings() -> Settings:
    return Settings(
        jwt_secret_key=JWT_SECRET_KEY,
        app_env=APP_ENV,
        jwt_algorithm=JWT_ALGORITHM,
        jwt_expires_minutes=JWT_EXPIRES_MINUTES,
        bcrypt_rounds=BCRYPT_ROUNDS,
        password_min_length=PASSWORD_MIN_LENGTH,
        mentor_picture_max_bytes=MENTOR_PICTURE_MAX_BYTES,
    )


def validate_runtime_config(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    if not settings.jwt_secret_key:
        raise RuntimeError("JWT_SECRET_KEY must be set.")
    if settings.is_production and settings.jwt_secret_key == "change-me":
        raise RuntimeError("JWT_SECRET_KEY must be changed in production.")

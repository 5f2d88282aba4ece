from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    # Application
    ENVIRONMENT: Literal["local", "development", "production"] = "local"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGIN_REGEX: str = r"https?://(localhost|127\.0\.0\.1)(:\d+)?"
    FRONTEND_DIR: str = "."
    UPLOAD_DIR: str = "uploads"
    SEED_PRODUCTS: bool = True

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./ecommerce.db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800

    # Admin auth
    ADMIN_EMAIL: str = ""
    ADMIN_PASSWORD_HASH: str = ""
    # Plaintext fallback, hashed once at startup when no hash is given
    ADMIN_PASSWORD: str = ""
    JWT_SECRET: str = "dev-secret-change-me"
    TOKEN_FORMAT: Literal["hmac", "jwt"] = "hmac"
    SESSION_TTL_SECONDS: int = 60 * 60 * 2
    SESSION_COOKIE_NAME: str = "admin_token"

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "10/minute"
    CONTACT_RATE_LIMIT: str = "5/minute"
    # Only honour X-Forwarded-For when a reverse proxy sets it
    TRUST_FORWARDED_FOR: bool = False

    # Email (SMTP)
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_SECURE: bool = False
    SMTP_USER: str = ""
    SMTP_PASS: str = ""
    DEFAULT_FROM_EMAIL: str = "no-reply@veloce.store"
    ORDER_NOTIFY_EMAIL: str = "orders@veloce.store"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("DATABASE_URL")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str]) -> str:
        if isinstance(v, str):
            if v.startswith("postgresql://"):
                return v.replace("postgresql://", "postgresql+psycopg://", 1)
            if v.startswith("sqlite:///"):
                return v.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
        return v

    @property
    def smtp_configured(self) -> bool:
        return bool(self.SMTP_USER and self.SMTP_PASS)

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """
    Return the global settings instance, cached.
    """
    return Settings()

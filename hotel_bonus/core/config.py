from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hotel_bonus.core.errors import ConfigurationError


class Settings(BaseSettings):
    # Обязательно. В проде Neon PostgreSQL, в тестах sqlite.
    DATABASE_URL: str

    APP_ENV: Literal["production", "development"] = "production"
    LOG_LEVEL: str = "info"
    BUILD_VERSION: str = "dev"

    # Через запятую: "https://usadba4.ru,https://www.usadba4.ru"
    ALLOWED_ORIGINS: str = "https://usadba4.ru"

    # --- Пароль стойки ресепшн ---
    # pbkdf2_sha256$<iterations>$<salt_b64>$<hash_b64>, см. hash_password.py
    AUTH_PASSWORD_HASH: str | None = None
    # старый вариант: hex sha256 от пароля
    AUTH_PASSWORD_SHA256: str | None = None
    AUTH_DISABLED: bool = False

    # --- БД ---
    DB_POOL_TIMEOUT: int = 30
    DB_CONNECT_TIMEOUT: int = 10

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    @field_validator("DATABASE_URL")
    @classmethod
    def _database_url_not_blank(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("DATABASE_URL is empty")
        return v

    @field_validator("AUTH_PASSWORD_HASH", "AUTH_PASSWORD_SHA256")
    @classmethod
    def _blank_is_none(cls, v: str | None) -> str | None:
        v = (v or "").strip()
        return v or None

    @field_validator("LOG_LEVEL")
    @classmethod
    def _log_level_upper(cls, v: str) -> str:
        return (v or "info").strip().upper()

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

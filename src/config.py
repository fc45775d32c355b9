"""
Lumen Viae configuration.
Loads variables from the .env file.
"""

from typing import Any

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Telegram
    BOT_TOKEN: SecretStr

    # Telegram Mini App frontend (enables the "Open app" button and CORS origin)
    TMA_URL: str | None = None

    # Whitelist for the bot and the Mini App API (empty = open access)
    ALLOWED_USER_IDS: list[int] = []

    # Mini App initData older than this is rejected (0 = no limit)
    INIT_DATA_MAX_AGE_SECONDS: int = 86400

    # Database URL (Railway/Render format)
    # If set, overrides PostgreSQL individual vars
    DATABASE_URL: str | None = None

    # PostgreSQL (individual vars, fallback if DATABASE_URL not set)
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "lumen_viae"
    POSTGRES_USER: str = "lumen_viae"
    POSTGRES_PASSWORD: SecretStr | None = None

    # Redis
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0

    # Environment (development | production)
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Webhook (for production)
    WEBHOOK_URL: str | None = None
    WEBHOOK_PATH: str = "/webhook"

    # External cron hits /cron/tick?token=... to send reminders
    CRON_TOKEN: SecretStr | None = None

    # Defaults for new users
    DEFAULT_PRAYER_LANGUAGE: str = "Latin & English"
    DEFAULT_REMINDER_TIME: str = "06:00"
    DEFAULT_TIMEZONE_OFFSET: int = 0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @field_validator("ALLOWED_USER_IDS", mode="before")
    @classmethod
    def parse_allowed_ids(cls, v: str | list[Any]) -> list[int]:
        if isinstance(v, str):
            if not v.strip():
                return []
            v = v.strip()
            if v.startswith("[") and v.endswith("]"):
                import json

                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [int(x.strip()) for x in v.split(",") if x.strip().isdigit()]
        return v

    @field_validator("DEFAULT_REMINDER_TIME")
    @classmethod
    def validate_reminder_time(cls, v: str) -> str:
        hour, _, minute = v.partition(":")
        if not (hour.isdigit() and minute.isdigit()):
            raise ValueError("DEFAULT_REMINDER_TIME must be HH:MM")
        if not (0 <= int(hour) < 24 and 0 <= int(minute) < 60):
            raise ValueError("DEFAULT_REMINDER_TIME out of range")
        return f"{int(hour):02d}:{int(minute):02d}"

    @property
    def database_url(self) -> str:
        """
        Get database URL based on environment.

        Priority:
        1. DATABASE_URL env var (Railway/Render format)
        2. PostgreSQL individual vars (production)
        3. SQLite (development)
        """
        if self.DATABASE_URL:
            url = self.DATABASE_URL
            # Railway uses postgres://, normalise to postgresql://
            if url.startswith("postgres://"):
                url = url.replace("postgres://", "postgresql://", 1)
            return url

        if self.ENVIRONMENT == "production":
            if not self.POSTGRES_PASSWORD:
                raise ValueError("POSTGRES_PASSWORD required for production")
            return (
                f"postgresql://{self.POSTGRES_USER}:"
                f"{self.POSTGRES_PASSWORD.get_secret_value()}"
                f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )

        return "sqlite://db.sqlite3"

    @property
    def redis_url(self) -> str:
        """Get Redis URL."""
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"


config = Settings()

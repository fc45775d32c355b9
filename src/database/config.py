"""
Database configuration (Tortoise ORM).
Supports SQLite (dev) and PostgreSQL (production).
"""

import logging
import os

from src.config import config

logger = logging.getLogger(__name__)


def get_tortoise_db_url() -> str:
    """
    Get database URL with proper scheme for Tortoise ORM.

    Tortoise ORM requires 'postgres://' scheme, but Railway/Render
    provide 'postgresql://' URLs. This function ensures conversion.
    """
    url = config.database_url

    # pydantic may miss the var on some hosts, fall back to the raw env
    if config.ENVIRONMENT == "production":
        env_url = os.environ.get("DATABASE_URL")
        if env_url and (not url or url.startswith("sqlite://")):
            logger.warning(
                f"Using DATABASE_URL from os.environ directly. "
                f"config.database_url was: {url}"
            )
            url = env_url

    if url.startswith("postgresql://"):
        url = "postgres://" + url[len("postgresql://") :]
        logger.info("Converted postgresql:// to postgres:// for Tortoise ORM")

    logger.info(
        f"Database URL scheme: {url.split('://')[0] if '://' in url else 'unknown'}"
    )

    return url


_db_url = get_tortoise_db_url()

# AICODE-NOTE: use_tz=True so completed_at comes back aware (UTC) and
# PrayerHistory can shift it into the user's offset before taking the day.
TORTOISE_ORM = {
    "connections": {"default": _db_url},
    "apps": {
        "models": {
            "models": ["src.database.models", "aerich.models"],
            "default_connection": "default",
        },
    },
    "use_tz": True,
    "timezone": "UTC",
}

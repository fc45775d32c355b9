"""
User Repository - plain CRUD for the User model.

AICODE-NOTE: Data access only, no business logic.
Settings parsing (prayer language -> DisplayMode) lives in core/domain.
"""

from typing import Optional

from src.config import config
from src.database.models import User


async def get_user(telegram_id: int) -> Optional[User]:
    """Get a user by telegram_id."""
    return await User.get_or_none(telegram_id=telegram_id)


async def get_or_create_user(
    telegram_id: int,
    username: str | None = None,
    first_name: str | None = None,
) -> User:
    """Get a user or register a new one with the configured defaults."""
    user, created = await User.get_or_create(
        telegram_id=telegram_id,
        defaults={
            "username": username,
            "first_name": first_name,
            "prayer_language": config.DEFAULT_PRAYER_LANGUAGE,
            "reminder_time": config.DEFAULT_REMINDER_TIME,
            "timezone_offset": config.DEFAULT_TIMEZONE_OFFSET,
        },
    )
    return user


async def update_settings(user: User, **changes: object) -> User:
    """Apply setting changes (only keys that are not None)."""
    for field_name, value in changes.items():
        if value is not None:
            setattr(user, field_name, value)
    await user.save()
    return user


async def save_user(user: User) -> User:
    """Save user changes."""
    await user.save()
    return user

"""
User API router.

Endpoints:
- GET /api/me - current user profile and settings
- PATCH /api/me/settings - change settings
"""

import logging

from fastapi import APIRouter, Depends

from src.database.models import User
from src.interfaces.api.deps import get_db_user
from src.interfaces.api.schemas import SettingsUpdate, UserResponse
from src.services.reminders import setup_user_reminders
from src.storage import user_repo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["user"])


@router.get("/me", response_model=UserResponse)
async def get_me(user: User = Depends(get_db_user)) -> UserResponse:
    return UserResponse.model_validate(user)


@router.patch("/me/settings", response_model=UserResponse)
async def update_settings(
    body: SettingsUpdate, user: User = Depends(get_db_user)
) -> UserResponse:
    """
    Update settings.

    Changing the reminder time, timezone or toggle reschedules the reminder.
    """
    await user_repo.update_settings(
        user,
        prayer_language=body.prayer_language.value if body.prayer_language else None,
        text_size_scale=body.text_size_scale,
        reminder_time=body.reminder_time,
        timezone_offset=body.timezone_offset,
        reminders_enabled=body.reminders_enabled,
    )

    if (
        body.reminder_time is not None
        or body.timezone_offset is not None
        or body.reminders_enabled is not None
    ):
        await setup_user_reminders(user)

    logger.info(f"Settings updated for user {user.telegram_id}")
    return UserResponse.model_validate(user)

"""
Shared FastAPI dependencies.
"""

from fastapi import Depends

from src.database.models import User
from src.interfaces.api.auth import TelegramUser, get_current_user
from src.storage import user_repo


async def get_db_user(tg_user: TelegramUser = Depends(get_current_user)) -> User:
    """
    The User row behind the validated initData.

    Auto-registers on first use, the same as the bot's /start.
    """
    return await user_repo.get_or_create_user(
        telegram_id=tg_user.id,
        username=tg_user.username,
        first_name=tg_user.first_name,
    )

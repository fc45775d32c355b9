"""
Access Control Middleware.

Lets through only users listed in ALLOWED_USER_IDS.
An empty whitelist means open access.
"""

from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import CallbackQuery, Message, TelegramObject

from src.config import config


class AccessMiddleware(BaseMiddleware):
    """
    Whitelist middleware.

    Usage:
        dp.message.middleware(AccessMiddleware())
        dp.callback_query.middleware(AccessMiddleware())
    """

    def __init__(self, allowed_user_ids: list[int] | None = None):
        self._allowed = allowed_user_ids

    @property
    def allowed_user_ids(self) -> list[int]:
        if self._allowed is not None:
            return self._allowed
        return config.ALLOWED_USER_IDS

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        if not self.allowed_user_ids:
            return await handler(event, data)

        user_id = self._get_user_id(event)
        if user_id and user_id in self.allowed_user_ids:
            return await handler(event, data)

        # AICODE-NOTE: No reply to strangers during closed testing,
        # so the bot doesn't reveal itself.
        return None

    @staticmethod
    def _get_user_id(event: TelegramObject) -> int | None:
        if isinstance(event, Message) and event.from_user:
            return event.from_user.id
        if isinstance(event, CallbackQuery) and event.from_user:
            return event.from_user.id
        return None

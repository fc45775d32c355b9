"""
Error Handling Middleware.

Catches exceptions raised in handlers, logs them with the traceback and
answers the user instead of going silent.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.dispatcher.event.bases import SkipHandler
from aiogram.types import CallbackQuery, Message, TelegramObject

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "❌ Something went wrong. Please try again or send /start"


class ErrorHandlingMiddleware(BaseMiddleware):
    """
    Usage:
        dp.message.middleware(ErrorHandlingMiddleware())
        dp.callback_query.middleware(ErrorHandlingMiddleware())
    """

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        try:
            return await handler(event, data)
        except SkipHandler:
            # Routing signal, not an error
            raise
        except Exception as e:
            logger.exception(f"Error handling {type(event).__name__}: {e}")

            try:
                if isinstance(event, Message):
                    await event.answer(ERROR_MESSAGE)
                elif isinstance(event, CallbackQuery):
                    if isinstance(event.message, Message):
                        await event.message.answer(ERROR_MESSAGE)
                    # Always answer the callback to stop the spinner
                    await event.answer("Error")
            except Exception as send_error:
                logger.error(f"Failed to send error message: {send_error}")

            # Swallowed here so one bad update doesn't stop polling
            return None

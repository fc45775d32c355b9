"""
Helpers for bot handlers.
"""

import logging
import re
from functools import wraps
from typing import Any, Callable, Coroutine

from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, InaccessibleMessage, Message

logger = logging.getLogger(__name__)

# Characters with meaning in Telegram's legacy Markdown (ParseMode.MARKDOWN)
MARKDOWN_SPECIAL_CHARS = r"_*`["


def get_callback_message(callback: CallbackQuery) -> Message:
    """
    Message of a CallbackQuery, type-checked.

    Raises:
        RuntimeError: if the message is missing or inaccessible
    """
    if callback.message is None or isinstance(callback.message, InaccessibleMessage):
        raise RuntimeError("Callback message is not accessible")
    return callback.message


def escape_markdown(text: str) -> str:
    """
    Escape Markdown characters so user text (journal entries, names) can't
    break entity parsing.

    Escapes: _ * ` [
    """
    return re.sub(f"([{re.escape(MARKDOWN_SPECIAL_CHARS)}])", r"\\\1", text)


def prevent_double_click(
    feedback_message: str = "⏳ Working on it, one moment...",
) -> Callable[
    [Callable[..., Coroutine[Any, Any, None]]],
    Callable[..., Coroutine[Any, Any, None]],
]:
    """
    Guard callback buttons against repeated taps.

    Sets `processing=True` in FSM data while the handler runs. A second tap
    during that time only gets the feedback toast.

    Usage:
        @router.callback_query(CategoryCallback.filter())
        @prevent_double_click()
        async def prayed(callback: CallbackQuery, state: FSMContext, ...) -> None:
            ...

    AICODE-NOTE: Without this a double tap on "I prayed" records two Rosaries.
    """

    def decorator(
        handler: Callable[..., Coroutine[Any, Any, None]],
    ) -> Callable[..., Coroutine[Any, Any, None]]:
        @wraps(handler)
        async def wrapper(*args: Any, **kwargs: Any) -> None:
            callback: CallbackQuery | None = None
            state: FSMContext | None = None

            for arg in args:
                if isinstance(arg, CallbackQuery):
                    callback = arg
                elif isinstance(arg, FSMContext):
                    state = arg

            if not callback:
                callback = kwargs.get("callback")
            if not state:
                state = kwargs.get("state")

            if not callback or not state:
                logger.warning(
                    f"prevent_double_click applied to handler {handler.__name__} "
                    "without CallbackQuery or FSMContext - skipping protection"
                )
                await handler(*args, **kwargs)
                return

            data = await state.get_data()
            if data.get("processing"):
                logger.info(
                    f"Double click prevented in {handler.__name__} "
                    f"for user {callback.from_user.id if callback.from_user else 'unknown'}"
                )
                await callback.answer(feedback_message, show_alert=False)
                return

            await state.update_data(processing=True)
            try:
                await handler(*args, **kwargs)
            finally:
                await state.update_data(processing=False)

        return wrapper

    return decorator

"""Tests for the error handling and access middlewares."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.dispatcher.event.bases import SkipHandler
from aiogram.types import CallbackQuery, Chat, Message, User

from src.bot.middlewares.access import AccessMiddleware
from src.bot.middlewares.error_handler import ERROR_MESSAGE, ErrorHandlingMiddleware


def make_message(user_id: int = 12345) -> Message:
    user = User(id=user_id, is_bot=False, first_name="Test")
    chat = Chat(id=user_id, type="private")
    return Message(message_id=1, date=1234567890, chat=chat, from_user=user, text="test")


@pytest.mark.asyncio
async def test_error_middleware_catches_exception():
    """Unbound message: sending the error reply fails too, still no raise."""

    async def failing_handler(event, data):
        raise ValueError("Test error")

    middleware = ErrorHandlingMiddleware()

    result = await middleware(handler=failing_handler, event=make_message(), data={})

    assert result is None


@pytest.mark.asyncio
async def test_error_middleware_passes_success():
    async def success_handler(event, data):
        return "success"

    middleware = ErrorHandlingMiddleware()

    result = await middleware(handler=success_handler, event=make_message(), data={})

    assert result == "success"


@pytest.mark.asyncio
async def test_error_middleware_reraises_skip_handler():
    async def skipping_handler(event, data):
        raise SkipHandler()

    middleware = ErrorHandlingMiddleware()

    with pytest.raises(SkipHandler):
        await middleware(handler=skipping_handler, event=make_message(), data={})


@pytest.mark.asyncio
async def test_error_middleware_answers_callback():
    async def failing_handler(event, data):
        raise RuntimeError("boom")

    callback = MagicMock(spec=CallbackQuery)
    callback.message = MagicMock(spec=Message)
    callback.message.answer = AsyncMock()
    callback.answer = AsyncMock()

    await ErrorHandlingMiddleware()(handler=failing_handler, event=callback, data={})

    callback.message.answer.assert_called_once_with(ERROR_MESSAGE)
    callback.answer.assert_called_once()


@pytest.mark.asyncio
async def test_access_open_when_whitelist_empty():
    handler = AsyncMock(return_value="ok")

    result = await AccessMiddleware(allowed_user_ids=[])(handler, make_message(), {})

    assert result == "ok"


@pytest.mark.asyncio
async def test_access_blocks_strangers():
    handler = AsyncMock(return_value="ok")
    middleware = AccessMiddleware(allowed_user_ids=[1, 2])

    assert await middleware(handler, make_message(user_id=999), {}) is None
    assert await middleware(handler, make_message(user_id=2), {}) == "ok"
    handler.assert_called_once()

"""
Fallback handler for unknown messages.

AICODE-NOTE: Must be registered LAST so it only fires when no other
handler took the message.
"""

import logging

from aiogram import Router
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from src.bot.keyboards import main_menu_keyboard

logger = logging.getLogger(__name__)

router = Router(name="fallback")


@router.message()
async def fallback_handler(message: Message, state: FSMContext) -> None:
    """
    Fires when:
    - the text matched no handler
    - the user is in an FSM state but sent something unexpected
    """
    current_state = await state.get_state()
    user_id = message.from_user.id if message.from_user else "unknown"
    preview = message.text[:50] if message.text else "no text"

    if current_state:
        logger.info(f"Fallback: user {user_id} in state {current_state}, message: {preview}")
        await message.answer(
            "I didn't get that. Use /cancel to stop or /help for the commands.",
            reply_markup=main_menu_keyboard(),
        )
    else:
        logger.info(f"Fallback: user {user_id} no state, message: {preview}")
        await message.answer(
            "🤔 I didn't get that.\n\n"
            "*Main commands:*\n"
            "• /today - mysteries of the day\n"
            "• /prayed - log a Rosary\n"
            "• /stats - your streak\n\n"
            "Use /help for the full list.",
            reply_markup=main_menu_keyboard(),
        )

"""
Basic handlers: /start, /help, /id, /app.
"""

from aiogram import F, Router
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.types import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    Message,
    WebAppInfo,
)
from aiogram.types import User as TelegramUser

from src.bot.formatters import md
from src.bot.keyboards import main_menu_keyboard
from src.config import config
from src.core.domain.schedule import category_for_today
from src.core.use_cases.prayer_stats import user_today
from src.database.models import User
from src.storage import user_repo

router = Router()

HELP_TEXT = (
    "*Commands:*\n\n"
    "/today - mysteries of the day\n"
    "/prayers - the Rosary prayers\n"
    "/prayed - log a finished Rosary\n"
    "/stats - streaks and totals\n"
    "/journal - write a reflection\n"
    "/consecration - 33-day consecration\n"
    "/language - English, Latin or both\n"
    "/reminders - daily reminder\n"
    "/app - open the app"
)


def tma_keyboard() -> InlineKeyboardMarkup | None:
    """Inline keyboard with the Mini App button (if TMA_URL configured)."""
    if not config.TMA_URL:
        return None
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(
                    text="📿 Open Lumen Viae",
                    web_app=WebAppInfo(url=config.TMA_URL),
                )
            ]
        ]
    )


async def ensure_user(from_user: TelegramUser | None) -> User:
    """Get or register the user behind a message/callback."""
    if not from_user:
        raise ValueError("No user in update")
    return await user_repo.get_or_create_user(
        telegram_id=from_user.id,
        username=from_user.username,
        first_name=from_user.first_name,
    )


@router.message(CommandStart())
async def cmd_start(message: Message, state: FSMContext) -> None:
    """Greet, register, point at today's mysteries."""
    await state.clear()
    user = await ensure_user(message.from_user)
    category = category_for_today(user_today(user))

    name = user.first_name or "friend"
    await message.answer(
        f"🕊 *Welcome, {md.text(name)}!*\n\n"
        "Lumen Viae walks with you through the Holy Rosary.\n\n"
        f"Today we pray the {md.bold(category.display_name, 'Mysteries')}.\n"
        "Press *Today* to begin, and *I prayed* when you finish.\n\n"
        f"{HELP_TEXT}",
        reply_markup=main_menu_keyboard(),
    )


@router.message(Command("help"))
async def cmd_help(message: Message) -> None:
    await message.answer(HELP_TEXT, reply_markup=main_menu_keyboard())


@router.message(Command("id"))
async def cmd_id(message: Message) -> None:
    """Telegram ID of the user (handy for the whitelist)."""
    user_id = message.from_user.id if message.from_user else "unknown"
    await message.answer(f"Your Telegram ID: `{user_id}`")


@router.message(Command("app"))
async def cmd_app(message: Message) -> None:
    keyboard = tma_keyboard()
    if keyboard is None:
        await message.answer("The app is not available yet.")
        return
    await message.answer("Open the app:", reply_markup=keyboard)


@router.message(Command("cancel"))
async def cmd_cancel(message: Message, state: FSMContext) -> None:
    """Leave any FSM flow (journal, reminder time)."""
    if await state.get_state() is None:
        await message.answer(
            "Nothing to cancel. See /help for the commands.",
            reply_markup=main_menu_keyboard(),
        )
        return

    await state.clear()
    await message.answer("Cancelled.", reply_markup=main_menu_keyboard())


@router.message(F.text.casefold() == "help")
async def help_from_text(message: Message) -> None:
    await cmd_help(message)

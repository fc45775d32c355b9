"""
Rosary handlers: today's mysteries, the prayers, logging a finished Rosary.

Flow:
1. /today -> category from the weekday schedule + its mysteries
2. /prayers -> prayers in the user's language setting
3. /prayed -> pick the category -> session recorded, streak shown
"""

import logging

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from src.bot.callbacks.data import CategoryCallback
from src.bot.formatters import md, render_prayer
from src.bot.handlers.start import ensure_user
from src.bot.keyboards import (
    MENU_PRAYED,
    MENU_TODAY,
    category_keyboard,
    main_menu_keyboard,
)
from src.bot.utils import get_callback_message, prevent_double_click
from src.core.domain.mysteries import MysteryCategory, mysteries_for
from src.core.domain.prayer_language import parse_prayer_language
from src.core.domain.prayers import rosary_prayers
from src.core.domain.schedule import category_for_today, day_label
from src.core.use_cases.prayer_stats import user_today
from src.core.use_cases.record_prayer import record_prayer_use_case

logger = logging.getLogger(__name__)

router = Router()


def mysteries_text(category: MysteryCategory) -> str:
    lines = [
        f"{m.order}. {md.text(m.name)} - {md.italic(m.scripture_reference)}"
        for m in mysteries_for(category)
    ]
    return "\n".join(lines)


@router.message(F.text == MENU_TODAY)
async def today_from_menu(message: Message) -> None:
    await cmd_today(message)


@router.message(Command("today"))
async def cmd_today(message: Message) -> None:
    """Today's mystery category and its scenes."""
    user = await ensure_user(message.from_user)
    today = user_today(user)
    category = category_for_today(today)

    await message.answer(
        f"📅 {md.bold(day_label(today))}\n\n"
        f"🌹 {md.bold(category.display_name, 'Mysteries')}\n"
        f"{md.italic(category.subtitle)}\n\n"
        f"{mysteries_text(category)}\n\n"
        "Send /prayers for the prayers, /prayed when you finish.",
        reply_markup=main_menu_keyboard(),
    )


@router.message(Command("prayers"))
async def cmd_prayers(message: Message) -> None:
    """Rosary prayers, one message each, in the user's language."""
    user = await ensure_user(message.from_user)
    mode = parse_prayer_language(user.prayer_language).display_mode

    for prayer in rosary_prayers():
        await message.answer(render_prayer(prayer, mode))


@router.message(F.text == MENU_PRAYED)
async def prayed_from_menu(message: Message) -> None:
    await cmd_prayed(message)


@router.message(Command("prayed"))
async def cmd_prayed(message: Message) -> None:
    """Ask which mysteries were prayed (today's are starred)."""
    user = await ensure_user(message.from_user)
    suggested = category_for_today(user_today(user))
    await message.answer(
        "🙏 Which mysteries did you pray?",
        reply_markup=category_keyboard(suggested),
    )


@router.callback_query(CategoryCallback.filter())
@prevent_double_click()
async def prayed_category(
    callback: CallbackQuery, callback_data: CategoryCallback, state: FSMContext
) -> None:
    """Record the session and show the streak."""
    message = get_callback_message(callback)
    user = await ensure_user(callback.from_user)

    result = await record_prayer_use_case.execute(user, callback_data.category)
    await callback.answer()

    if not result.success:
        await message.answer(f"Could not save: {result.error_message}")
        return

    # Remembered so /journal can tie the reflection to these mysteries
    await state.update_data(last_category=callback_data.category.value)

    streak_line = (
        f"🔥 Streak: {md.bold(result.current_streak)} "
        f"day{'s' if result.current_streak != 1 else ''}"
    )
    if result.current_streak and result.current_streak == result.longest_streak:
        streak_line += " (your best!)"

    await message.answer(
        f"✨ {md.bold(callback_data.category.display_name, 'Mysteries')} prayed. "
        "Thanks be to God!\n\n"
        f"{streak_line}\n"
        f"📿 Rosaries prayed: {result.total_count}\n\n"
        "Send /journal to write a reflection.",
        reply_markup=main_menu_keyboard(),
    )

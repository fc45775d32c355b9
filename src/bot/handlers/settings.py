"""
Settings: prayer language, daily reminder, timezone.

/language - pick English, Latin or both
/reminders - toggle the reminder, /remindertime - set HH:MM
/timezone <hours> - UTC offset used for "today" and streaks
"""

import logging
import re

from aiogram import Router
from aiogram.filters import Command, CommandObject, StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from src.bot.callbacks.data import LanguageCallback, ReminderAction, ReminderCallback
from src.bot.formatters import md
from src.bot.handlers.start import ensure_user
from src.bot.keyboards import language_keyboard, main_menu_keyboard, reminders_keyboard
from src.bot.states import SettingsStates
from src.bot.utils import get_callback_message
from src.core.domain.prayer_language import parse_prayer_language
from src.services.reminders import setup_user_reminders
from src.storage import user_repo

logger = logging.getLogger(__name__)

router = Router()

TIME_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def parse_reminder_time(raw: str) -> str | None:
    """'6:05' -> '06:05'; None when not a valid time."""
    match = TIME_PATTERN.match(raw.strip())
    if not match:
        return None
    return f"{int(match.group(1)):02d}:{match.group(2)}"


def reminders_text(enabled: bool, reminder_time: str, offset: int) -> str:
    status = "on" if enabled else "off"
    return (
        f"🔔 Daily reminder is {md.bold(status)}\n"
        f"Time: {md.bold(reminder_time)} (UTC{offset:+d})\n\n"
        "Change the time with /remindertime, the offset with /timezone."
    )


# === Language ===


@router.message(Command("language"))
async def cmd_language(message: Message) -> None:
    user = await ensure_user(message.from_user)
    current = parse_prayer_language(user.prayer_language)
    await message.answer(
        f"🌐 Prayer language: {md.bold(current.value)}\n\nChoose how prayers are shown:",
        reply_markup=language_keyboard(current),
    )


@router.callback_query(LanguageCallback.filter())
async def language_chosen(callback: CallbackQuery, callback_data: LanguageCallback) -> None:
    message = get_callback_message(callback)
    user = await ensure_user(callback.from_user)

    await user_repo.update_settings(user, prayer_language=callback_data.language.value)
    logger.info(f"User {user.telegram_id} language -> {callback_data.language.value}")

    await callback.answer()
    await message.edit_text(
        f"🌐 Prayer language: {md.bold(callback_data.language.value)}\n\n"
        "Send /prayers to see them.",
    )


# === Reminders ===


@router.message(Command("reminders"))
async def cmd_reminders(message: Message) -> None:
    user = await ensure_user(message.from_user)
    await message.answer(
        reminders_text(user.reminders_enabled, user.reminder_time, user.timezone_offset),
        reply_markup=reminders_keyboard(user.reminders_enabled),
    )


@router.callback_query(ReminderCallback.filter())
async def reminders_toggled(
    callback: CallbackQuery, callback_data: ReminderCallback
) -> None:
    message = get_callback_message(callback)
    user = await ensure_user(callback.from_user)

    user.reminders_enabled = callback_data.action == ReminderAction.enable
    await setup_user_reminders(user)

    await callback.answer()
    await message.edit_text(
        reminders_text(user.reminders_enabled, user.reminder_time, user.timezone_offset),
        reply_markup=reminders_keyboard(user.reminders_enabled),
    )


@router.message(Command("remindertime"))
async def cmd_reminder_time(message: Message, state: FSMContext) -> None:
    await state.set_state(SettingsStates.waiting_for_reminder_time)
    await message.answer("⏰ Send the reminder time as HH:MM, e.g. 06:30. /cancel to stop.")


@router.message(StateFilter(SettingsStates.waiting_for_reminder_time))
async def reminder_time_entered(message: Message, state: FSMContext) -> None:
    reminder_time = parse_reminder_time(message.text or "")
    if reminder_time is None:
        await message.answer("That doesn't look like HH:MM. Try again, e.g. 21:00.")
        return

    user = await ensure_user(message.from_user)
    user.reminder_time = reminder_time
    await setup_user_reminders(user)
    await state.clear()

    await message.answer(
        reminders_text(user.reminders_enabled, user.reminder_time, user.timezone_offset),
        reply_markup=main_menu_keyboard(),
    )


# === Timezone ===


@router.message(Command("timezone"))
async def cmd_timezone(message: Message, command: CommandObject) -> None:
    user = await ensure_user(message.from_user)

    if not command.args:
        await message.answer(
            f"🕰 Your offset: UTC{user.timezone_offset:+d}\n"
            "Change it with e.g. `/timezone -5` or `/timezone 3`."
        )
        return

    try:
        offset = int(command.args.strip())
    except ValueError:
        await message.answer("The offset must be a whole number of hours, -12 to 14.")
        return
    if not -12 <= offset <= 14:
        await message.answer("The offset must be a whole number of hours, -12 to 14.")
        return

    user.timezone_offset = offset
    await setup_user_reminders(user)
    await message.answer(f"🕰 Offset set to UTC{offset:+d}.")

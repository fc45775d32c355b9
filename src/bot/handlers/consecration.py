"""
33-day Marian consecration (plus the consecration day itself).

/consecration -> status card with the day's reading (or the start options)
Buttons: mark the day done, write a reflection, the phase prayers.
Start: today, or for a Marian feast whose start date is today.
"""

import logging
from datetime import date

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from src.bot.callbacks.data import ConsecrationAction, ConsecrationCallback
from src.bot.formatters import md, render_consecration_prayer
from src.bot.handlers.start import ensure_user
from src.bot.keyboards import consecration_day_keyboard, consecration_start_keyboard
from src.bot.states import JournalStates
from src.bot.utils import get_callback_message, prevent_double_click
from src.core.domain.consecration import TOTAL_DAYS
from src.core.domain.consecration_content import day_content, prayers_for_phase
from src.core.domain.marian_feasts import available_today, next_startable
from src.core.domain.prayer_language import parse_prayer_language
from src.core.use_cases.consecration_flow import (
    ConsecrationStatus,
    consecration_use_case,
)
from src.core.use_cases.prayer_stats import user_today

logger = logging.getLogger(__name__)

router = Router()

INTRO_TEXT = (
    "🕯 *Total Consecration to Jesus through Mary*\n\n"
    f"{TOTAL_DAYS - 1} days of preparation and the consecration day itself:\n"
    "• Days 1-12: spirit of the world\n"
    "• Days 13-19: knowledge of self\n"
    "• Days 20-26: knowledge of Mary\n"
    "• Days 27-33: knowledge of Jesus\n"
    f"• Day {TOTAL_DAYS}: consecration"
)


def next_feast_text(today: date) -> str:
    """Line about the nearest feast start, e.g. for the intro card."""
    feast, start = next_startable(today)
    if start == today:
        return f"🌹 Begin today to consecrate on {md.bold(feast.name)}."
    return (
        f"🌹 Next feast start: {md.text(f'{start:%B %d}')} "
        f"for {md.bold(feast.name)}."
    )


def day_text(day: int) -> str:
    """Title, reading and journal prompt of a day."""
    content = day_content(day)
    if content is None:
        return ""
    parts = [
        f"{md.bold(content.ordinal_label, '-', content.title)}",
        md.italic(content.meditation_title),
    ]
    if content.meditation_text:
        parts.append(md.text(content.meditation_text))
    if content.meditation_source:
        parts.append(f"- {md.text(content.meditation_source)}")
    parts.append(f"✍️ {md.italic(content.journal_prompt)}")
    return "\n\n".join(parts)


def status_text(status: ConsecrationStatus) -> str:
    if status.is_completed:
        feast = f" on {status.feast_name}" if status.feast_name else ""
        return (
            "🎉 *Consecration complete!*\n\n"
            f"Begun on {status.start_date:%B %d, %Y}{md.text(feast)}. Totus tuus."
        )

    day = status.next_day or status.current_day
    content = day_content(day)
    phase = content.phase
    target = (
        f"{md.text(status.feast_name)}, {status.expected_completion:%B %d}"
        if status.feast_name
        else f"{status.expected_completion:%B %d}"
    )
    return (
        f"🕯 *Consecration - day {day} of {TOTAL_DAYS}*\n"
        f"{md.bold(phase.display_name)}\n{md.italic(phase.subtitle)}\n\n"
        f"{day_text(day)}\n\n"
        f"Done: {len(status.completed_days)} ({status.progress * 100:.0f}%)\n"
        f"Days left: {status.days_remaining}\n"
        f"Consecration day: {target}"
    )


@router.message(Command("consecration"))
async def cmd_consecration(message: Message) -> None:
    user = await ensure_user(message.from_user)
    status = await consecration_use_case.status(user)

    if status is None or status.is_completed:
        today = user_today(user)
        intro = INTRO_TEXT if status is None else status_text(status)
        await message.answer(
            f"{intro}\n\n{next_feast_text(today)}",
            reply_markup=consecration_start_keyboard(available_today(today)),
        )
        return

    day = status.next_day or status.current_day
    await message.answer(status_text(status), reply_markup=consecration_day_keyboard(day))


@router.callback_query(ConsecrationCallback.filter(F.action == ConsecrationAction.start))
@prevent_double_click()
async def consecration_start(
    callback: CallbackQuery, callback_data: ConsecrationCallback, state: FSMContext
) -> None:
    message = get_callback_message(callback)
    user = await ensure_user(callback.from_user)

    result = await consecration_use_case.start(user, feast_id=callback_data.feast or None)
    await callback.answer()

    if not result.success or result.status is None:
        await message.answer(f"⚠️ {result.error_message}")
        return

    await message.answer(
        status_text(result.status),
        reply_markup=consecration_day_keyboard(result.status.current_day),
    )


@router.callback_query(ConsecrationCallback.filter(F.action == ConsecrationAction.complete))
@prevent_double_click()
async def consecration_complete(
    callback: CallbackQuery, callback_data: ConsecrationCallback, state: FSMContext
) -> None:
    message = get_callback_message(callback)
    user = await ensure_user(callback.from_user)

    result = await consecration_use_case.complete_day(user, callback_data.day)

    if not result.success or result.status is None:
        await callback.answer(result.error_message, show_alert=True)
        return

    await callback.answer(f"Day {callback_data.day} done 🙏")
    status = result.status
    if status.is_completed:
        await message.answer(status_text(status))
        return

    if status.next_day is None:
        await message.answer(
            f"{status_text(status)}\n\nAll open days are done. See you tomorrow!"
        )
        return

    await message.answer(
        status_text(status), reply_markup=consecration_day_keyboard(status.next_day)
    )


@router.callback_query(ConsecrationCallback.filter(F.action == ConsecrationAction.journal))
async def consecration_journal(
    callback: CallbackQuery, callback_data: ConsecrationCallback, state: FSMContext
) -> None:
    message = get_callback_message(callback)
    await state.update_data(consecration_day=callback_data.day)
    await state.set_state(JournalStates.waiting_for_text)
    await callback.answer()

    content = day_content(callback_data.day)
    prompt = f"\n\n{md.italic(content.journal_prompt)}" if content else ""
    await message.answer(
        f"✍️ Reflection for day {callback_data.day}. Write it, or /cancel.{prompt}"
    )


@router.callback_query(ConsecrationCallback.filter(F.action == ConsecrationAction.prayers))
async def consecration_prayers(
    callback: CallbackQuery, callback_data: ConsecrationCallback, state: FSMContext
) -> None:
    """Prayers of the day's phase, one message each, in the user's language."""
    message = get_callback_message(callback)
    user = await ensure_user(callback.from_user)
    await callback.answer()

    content = day_content(callback_data.day)
    if content is None:
        await message.answer("⚠️ Unknown consecration day.")
        return

    mode = parse_prayer_language(user.prayer_language).display_mode
    for prayer in prayers_for_phase(content.phase):
        await message.answer(render_consecration_prayer(prayer, mode))

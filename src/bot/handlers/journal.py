"""
Journal: free-text reflections.

/journal -> last entries + "write your reflection" -> text saved.
The entry is tied to the last prayed category or, when started from the
consecration card, to a consecration day.
"""

import logging

from aiogram import F, Router
from aiogram.filters import Command, StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from src.bot.formatters import md
from src.bot.handlers.start import ensure_user
from src.bot.keyboards import MENU_JOURNAL, main_menu_keyboard
from src.bot.states import JournalStates
from src.core.domain.consecration import phase_for_day
from src.core.domain.journal_rules import JournalEntryType, subject_label
from src.core.domain.mysteries import MysteryCategory
from src.database.models import JournalEntry
from src.storage import journal_repo

logger = logging.getLogger(__name__)

router = Router()

RECENT_ENTRIES = 5
PREVIEW_LENGTH = 80


def entry_line(entry: JournalEntry) -> str:
    category = MysteryCategory(entry.category) if entry.category else None
    subject = subject_label(
        JournalEntryType(entry.entry_type),
        category=category,
        mystery_title=entry.mystery_title,
        consecration_day=entry.consecration_day,
    )
    preview = entry.text if len(entry.text) <= PREVIEW_LENGTH else entry.text[:PREVIEW_LENGTH] + "..."
    return f"{md.italic(entry.created_at.strftime('%b %d'))} {md.bold(subject)}\n{md.text(preview)}"


@router.message(F.text == MENU_JOURNAL)
async def journal_from_menu(message: Message, state: FSMContext) -> None:
    await cmd_journal(message, state)


@router.message(Command("journal"))
async def cmd_journal(message: Message, state: FSMContext) -> None:
    user = await ensure_user(message.from_user)
    entries = await journal_repo.list_entries(user, limit=RECENT_ENTRIES)

    header = "📖 *Journal*\n\n"
    if entries:
        header += "\n\n".join(entry_line(e) for e in entries) + "\n\n"

    # Consecration reflections come from the consecration card
    await state.update_data(consecration_day=None)
    await state.set_state(JournalStates.waiting_for_text)
    await message.answer(header + "✍️ Write your reflection, or /cancel.")


@router.message(StateFilter(JournalStates.waiting_for_text), F.text)
async def journal_text_entered(message: Message, state: FSMContext) -> None:
    text = (message.text or "").strip()
    if not text or text.startswith("/"):
        await message.answer("Write your reflection as plain text, or /cancel.")
        return

    user = await ensure_user(message.from_user)
    data = await state.get_data()
    consecration_day = data.get("consecration_day")

    if consecration_day:
        entry = await journal_repo.create_consecration_entry(
            user, text, consecration_day, phase_for_day(consecration_day)
        )
    else:
        last_category = data.get("last_category")
        entry = await journal_repo.create_rosary_entry(
            user,
            text,
            category=MysteryCategory(last_category) if last_category else None,
        )

    logger.info(f"Journal entry {entry.id} saved for user {user.telegram_id}")
    await state.set_state(None)
    await state.update_data(consecration_day=None)
    await message.answer("🕊 Saved to your journal.", reply_markup=main_menu_keyboard())

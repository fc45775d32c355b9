"""
Callback Data Factories for the Lumen Viae bot.

All callback_data must use these factories.
Do NOT use raw strings like "cat:joyful" - only CallbackData subclasses.

Usage:
    # In a keyboard
    builder.button(
        text="Joyful",
        callback_data=CategoryCallback(category=MysteryCategory.joyful),
    )

    # In a handler
    @router.callback_query(CategoryCallback.filter())
    async def prayed(cb: CallbackQuery, callback_data: CategoryCallback):
        category = callback_data.category
"""

from enum import Enum

from aiogram.filters.callback_data import CallbackData

from src.core.domain.mysteries import MysteryCategory
from src.core.domain.prayer_language import PrayerLanguage

# === Enums ===


class ConsecrationAction(str, Enum):
    """Actions on the consecration card."""

    start = "start"  # Begin the 33 days today (optionally for a feast)
    complete = "complete"  # Mark a day as done
    journal = "journal"  # Write a reflection for the day
    prayers = "prayers"  # Prayers of the day's phase


class ReminderAction(str, Enum):
    enable = "enable"
    disable = "disable"


# === Callback Data Classes ===


class CategoryCallback(CallbackData, prefix="cat"):
    """
    Mystery category picked after praying (or to view).

    Usage:
        CategoryCallback(category=MysteryCategory.joyful)
    """

    category: MysteryCategory


class LanguageCallback(CallbackData, prefix="lang"):
    """
    Prayer language choice.

    Usage:
        LanguageCallback(language=PrayerLanguage.both)
    """

    language: PrayerLanguage


class ConsecrationCallback(CallbackData, prefix="consec"):
    """
    Consecration action.

    day=0 means "no specific day" (start).
    feast is a Marian feast id for start, "" to begin without a feast.
    """

    action: ConsecrationAction
    day: int = 0
    feast: str = ""


class ReminderCallback(CallbackData, prefix="remind"):
    action: ReminderAction

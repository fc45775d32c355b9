"""
Keyboards for the Lumen Viae bot.

All inline keyboards use CallbackData factories from src.bot.callbacks.data.
Do not use raw strings for callback_data!
"""

from aiogram.types import InlineKeyboardMarkup, KeyboardButton, ReplyKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from src.bot.callbacks.data import (
    CategoryCallback,
    ConsecrationAction,
    ConsecrationCallback,
    LanguageCallback,
    ReminderAction,
    ReminderCallback,
)
from src.core.domain.marian_feasts import MarianFeast
from src.core.domain.mysteries import MysteryCategory
from src.core.domain.prayer_language import PrayerLanguage

# Reply-keyboard labels, matched in handlers with F.text == ...
MENU_TODAY = "🌹 Today"
MENU_PRAYED = "✅ I prayed"
MENU_STATS = "📊 Stats"
MENU_JOURNAL = "📖 Journal"


def main_menu_keyboard() -> ReplyKeyboardMarkup:
    """Main menu with the key commands."""
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text=MENU_TODAY), KeyboardButton(text=MENU_PRAYED)],
            [KeyboardButton(text=MENU_STATS), KeyboardButton(text=MENU_JOURNAL)],
        ],
        resize_keyboard=True,
        input_field_placeholder="Today - mysteries of the day, I prayed - log a Rosary",
    )


def category_keyboard(suggested: MysteryCategory | None = None) -> InlineKeyboardMarkup:
    """All five categories; today's scheduled one is marked with a star."""
    builder = InlineKeyboardBuilder()
    for category in MysteryCategory:
        mark = "⭐ " if category == suggested else ""
        builder.button(
            text=f"{mark}{category.display_name}",
            callback_data=CategoryCallback(category=category),
        )
    builder.adjust(2, 2, 1)
    return builder.as_markup()


def language_keyboard(current: PrayerLanguage | None = None) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for language in PrayerLanguage:
        mark = "✓ " if language == current else ""
        builder.button(
            text=f"{mark}{language.value}",
            callback_data=LanguageCallback(language=language),
        )
    builder.adjust(2, 2)
    return builder.as_markup()


def reminders_keyboard(enabled: bool) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    if enabled:
        builder.button(
            text="🔕 Turn off",
            callback_data=ReminderCallback(action=ReminderAction.disable),
        )
    else:
        builder.button(
            text="🔔 Turn on",
            callback_data=ReminderCallback(action=ReminderAction.enable),
        )
    return builder.as_markup()


def consecration_start_keyboard(
    feasts: list[MarianFeast] | None = None,
) -> InlineKeyboardMarkup:
    """'Begin today', plus one button per feast whose start date is today."""
    builder = InlineKeyboardBuilder()
    for feast in feasts or []:
        builder.button(
            text=f"🌹 Begin for {feast.name}",
            callback_data=ConsecrationCallback(
                action=ConsecrationAction.start, feast=feast.feast_id
            ),
        )
    builder.button(
        text="🕯 Begin today",
        callback_data=ConsecrationCallback(action=ConsecrationAction.start),
    )
    builder.adjust(1)
    return builder.as_markup()


def consecration_day_keyboard(day: int) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(
        text=f"✅ Day {day} done",
        callback_data=ConsecrationCallback(action=ConsecrationAction.complete, day=day),
    )
    builder.button(
        text="✍️ Reflect",
        callback_data=ConsecrationCallback(action=ConsecrationAction.journal, day=day),
    )
    builder.button(
        text="🙏 Prayers",
        callback_data=ConsecrationCallback(action=ConsecrationAction.prayers, day=day),
    )
    builder.adjust(2, 1)
    return builder.as_markup()

"""
/stats - streaks, totals, this week at a glance.
"""

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.types import Message

from src.bot.formatters import md, render_week
from src.bot.handlers.start import ensure_user
from src.bot.keyboards import MENU_STATS, main_menu_keyboard
from src.core.domain.mysteries import MysteryCategory
from src.core.use_cases.prayer_stats import PrayerStats, prayer_stats_use_case

router = Router()


def stats_text(stats: PrayerStats) -> str:
    if stats.total == 0:
        return (
            "📊 *Your prayer life*\n\n"
            "No Rosaries logged yet. Press *I prayed* after your first one!"
        )

    category_lines = "\n".join(
        f"• {category.display_name}: {stats.by_category.get(category, 0)}"
        for category in MysteryCategory
    )
    return (
        "📊 *Your prayer life*\n\n"
        f"🔥 Current streak: {md.bold(stats.current_streak)}\n"
        f"🏆 Longest streak: {md.bold(stats.longest_streak)}\n\n"
        f"This week: {stats.this_week}\n"
        f"This month: {stats.this_month}\n"
        f"All time: {stats.total}\n\n"
        f"{render_week(stats.week)}\n\n"
        f"*By mysteries:*\n{category_lines}"
    )


@router.message(F.text == MENU_STATS)
async def stats_from_menu(message: Message) -> None:
    await cmd_stats(message)


@router.message(Command("stats"))
async def cmd_stats(message: Message) -> None:
    user = await ensure_user(message.from_user)
    stats = await prayer_stats_use_case.execute(user)
    await message.answer(stats_text(stats), reply_markup=main_menu_keyboard())

"""
Prayer Stats Use Case - loads the log and builds the statistics snapshot.

AICODE-NOTE: Use-case = repository + domain rules.
Handlers and API routers call it and render the result.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime

from src.core.domain.mysteries import MysteryCategory
from src.core.domain.prayer_history import (
    DayStatus,
    PrayerHistory,
    timezone_for_offset,
    week_start_for,
)
from src.database.models import User
from src.storage import session_repo

logger = logging.getLogger(__name__)


async def load_history(user: User) -> PrayerHistory:
    """Snapshot of the user's log in the user's timezone."""
    sessions = await session_repo.all_sessions(user)
    return PrayerHistory(sessions, tz=timezone_for_offset(user.timezone_offset))


def user_today(user: User) -> date:
    """Current date in the user's timezone."""
    return datetime.now(timezone_for_offset(user.timezone_offset)).date()


@dataclass
class PrayerStats:
    """Everything the stats screen shows."""

    total: int = 0
    by_category: dict[MysteryCategory, int] = field(default_factory=dict)
    current_streak: int = 0
    longest_streak: int = 0
    this_week: int = 0
    this_month: int = 0
    week: list[DayStatus] = field(default_factory=list)


class PrayerStatsUseCase:
    async def execute(self, user: User, today: date | None = None) -> PrayerStats:
        history = await load_history(user)
        if today is None:
            today = history.today()

        stats = PrayerStats(
            total=history.total_count(),
            by_category=history.count_by_category(),
            current_streak=history.current_streak(today),
            longest_streak=history.longest_streak(),
            this_week=history.rosaries_this_week(today),
            this_month=history.rosaries_this_month(today),
            week=history.weekly_prayer_status(week_start_for(today)),
        )
        logger.info(
            f"Stats for user {user.telegram_id}: total={stats.total}, "
            f"streak={stats.current_streak}/{stats.longest_streak}"
        )
        return stats


prayer_stats_use_case = PrayerStatsUseCase()

"""
Record Prayer Use Case - a Rosary was finished.

AICODE-NOTE: The repository appends the row, then the history is reloaded
and the streaks recomputed from scratch (no streak counter is stored).
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from src.core.domain.mysteries import MysteryCategory
from src.core.domain.prayer_history import timezone_for_offset
from src.core.use_cases.prayer_stats import load_history
from src.database.models import User
from src.storage import session_repo

logger = logging.getLogger(__name__)

# Allowed clock difference between the client and the server
MAX_CLOCK_SKEW = timedelta(minutes=5)


def _is_in_future(completed_at: datetime, user: User) -> bool:
    """
    Later than now (plus skew).

    A naive timestamp may be UTC or the user's local time, so it is checked
    against the later of the two clocks.
    """
    now = datetime.now(timezone.utc)
    if completed_at.tzinfo is None:
        local_now = now.astimezone(timezone_for_offset(user.timezone_offset))
        now = max(now.replace(tzinfo=None), local_now.replace(tzinfo=None))
    return completed_at > now + MAX_CLOCK_SKEW


@dataclass
class PrayerRecordResult:
    """Result of recording a session."""

    success: bool
    session_id: int | None = None
    total_count: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    first_today: bool = False
    error_message: str = ""


class RecordPrayerUseCase:
    async def execute(
        self,
        user: User,
        category: MysteryCategory | str,
        duration_seconds: int | None = None,
        meditation_type: str | None = None,
        completed_at: datetime | None = None,
        today: date | None = None,
    ) -> PrayerRecordResult:
        """
        Record a completed Rosary.

        Args:
            user: who prayed
            category: mystery category (enum or API string)
            duration_seconds: optional session length
            meditation_type: optional meditation style
            completed_at: timestamp (tests), default now
            today: date for the streak (tests), default user's today
        """
        parsed = (
            category
            if isinstance(category, MysteryCategory)
            else MysteryCategory.from_api_string(category)
        )
        if parsed is None:
            return PrayerRecordResult(
                success=False, error_message=f"Unknown mystery category: {category}"
            )

        if duration_seconds is not None and duration_seconds < 0:
            return PrayerRecordResult(
                success=False, error_message="Duration cannot be negative"
            )

        if completed_at is not None and _is_in_future(completed_at, user):
            return PrayerRecordResult(
                success=False, error_message="Completion time is in the future"
            )

        session = await session_repo.record_session(
            user,
            parsed,
            duration_seconds=duration_seconds,
            meditation_type=meditation_type,
            completed_at=completed_at,
        )

        history = await load_history(user)
        if today is None:
            today = history.local_day(session.completed_at)

        result = PrayerRecordResult(
            success=True,
            session_id=session.id,
            total_count=history.total_count(),
            current_streak=history.current_streak(today),
            longest_streak=history.longest_streak(),
            first_today=len(history.sessions_on_day(today)) == 1,
        )

        logger.info(
            f"Rosary ({parsed.value}) recorded for user {user.telegram_id}: "
            f"total={result.total_count}, streak={result.current_streak}"
        )
        return result


record_prayer_use_case = RecordPrayerUseCase()

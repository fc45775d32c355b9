"""
PrayerSession Repository - the append-only prayer log.

AICODE-NOTE: Data access only. Streaks and totals are computed by
core/domain/prayer_history.py from the list returned by all_sessions().
"""

from datetime import datetime, timezone

from src.core.domain.mysteries import MysteryCategory
from src.database.models import PrayerSession, User


async def record_session(
    user: User,
    category: MysteryCategory,
    duration_seconds: int | None = None,
    meditation_type: str | None = None,
    completed_at: datetime | None = None,
) -> PrayerSession:
    """Append a completed session (completed_at defaults to now, UTC)."""
    if completed_at is None:
        completed_at = datetime.now(timezone.utc)
    return await PrayerSession.create(
        user=user,
        category=category,
        completed_at=completed_at,
        duration_seconds=duration_seconds,
        meditation_type=meditation_type,
    )


async def all_sessions(user: User) -> list[PrayerSession]:
    """All sessions of the user, most recent first."""
    return await PrayerSession.filter(user=user).order_by("-completed_at").all()


async def recent_sessions(user: User, limit: int = 20) -> list[PrayerSession]:
    return await (
        PrayerSession.filter(user=user).order_by("-completed_at").limit(limit).all()
    )


async def count_sessions(user: User) -> int:
    return await PrayerSession.filter(user=user).count()


async def delete_all_sessions(user: User) -> int:
    """Clear the history (explicit user action only). Returns deleted rows."""
    return await PrayerSession.filter(user=user).delete()

"""
ConsecrationProgress Repository - plain CRUD, rules live in core/domain/consecration.py.
"""

from datetime import date, datetime, timezone

from src.database.models import ConsecrationProgress, User


async def get_active(user: User) -> ConsecrationProgress | None:
    """The attempt in progress, if any."""
    return await ConsecrationProgress.filter(user=user, is_completed=False).first()


async def get_latest(user: User) -> ConsecrationProgress | None:
    return await (
        ConsecrationProgress.filter(user=user).order_by("-created_at", "-id").first()
    )


async def create(
    user: User, start_date: date, feast_id: str | None = None
) -> ConsecrationProgress:
    return await ConsecrationProgress.create(
        user=user, start_date=start_date, completed_days=[], feast_id=feast_id
    )


async def add_completed_day(
    progress: ConsecrationProgress, day_number: int, finished: bool
) -> ConsecrationProgress:
    """Store one more completed day; finished=True closes the attempt."""
    days = set(progress.completed_days or [])
    days.add(day_number)
    progress.completed_days = sorted(days)
    if finished:
        progress.is_completed = True
        progress.completed_at = datetime.now(timezone.utc)
    await progress.save()
    return progress


async def abandon(progress: ConsecrationProgress) -> None:
    await progress.delete()

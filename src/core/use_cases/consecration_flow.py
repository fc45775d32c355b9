"""
Consecration Use Case - start the 33 days, show today's day, complete a day.
"""

import logging
from dataclasses import dataclass, field
from datetime import date

from src.core.domain.consecration import (
    TOTAL_DAYS,
    ConsecrationPhase,
    can_access_day,
    current_day_number,
    days_remaining,
    expected_completion_date,
    next_incomplete_day,
    phase_for_day,
    progress_percentage,
)
from src.core.domain.marian_feasts import find_feast
from src.core.use_cases.prayer_stats import user_today
from src.database.models import ConsecrationProgress, User
from src.storage import consecration_repo

logger = logging.getLogger(__name__)


@dataclass
class ConsecrationStatus:
    """Snapshot of an attempt for the bot/API."""

    active: bool
    start_date: date | None = None
    current_day: int = 0
    phase: ConsecrationPhase | None = None
    completed_days: list[int] = field(default_factory=list)
    next_day: int | None = None
    progress: float = 0.0
    days_remaining: int = TOTAL_DAYS
    expected_completion: date | None = None
    is_completed: bool = False
    feast_id: str | None = None
    feast_name: str | None = None


@dataclass
class ConsecrationResult:
    success: bool
    status: ConsecrationStatus | None = None
    error_message: str = ""


def build_status(progress: ConsecrationProgress, today: date) -> ConsecrationStatus:
    completed = sorted(progress.completed_days or [])
    day = current_day_number(progress.start_date, today)
    feast = find_feast(progress.feast_id)
    return ConsecrationStatus(
        active=not progress.is_completed,
        start_date=progress.start_date,
        current_day=day,
        phase=phase_for_day(day),
        completed_days=completed,
        next_day=next_incomplete_day(completed, progress.start_date, today),
        progress=progress_percentage(completed),
        days_remaining=days_remaining(completed),
        expected_completion=expected_completion_date(progress.start_date),
        is_completed=progress.is_completed,
        feast_id=feast.feast_id if feast else None,
        feast_name=feast.name if feast else None,
    )


class ConsecrationUseCase:
    async def status(
        self, user: User, today: date | None = None
    ) -> ConsecrationStatus | None:
        """Latest attempt (active or finished), None if never started."""
        if today is None:
            today = user_today(user)
        progress = await consecration_repo.get_latest(user)
        if progress is None:
            return None
        return build_status(progress, today)

    async def start(
        self, user: User, today: date | None = None, feast_id: str | None = None
    ) -> ConsecrationResult:
        """
        Begin day 1 today.

        With feast_id the attempt ends on that Marian feast, so today must be
        exactly 33 days before it.
        """
        if today is None:
            today = user_today(user)

        active = await consecration_repo.get_active(user)
        if active is not None:
            return ConsecrationResult(
                success=False,
                status=build_status(active, today),
                error_message="A consecration is already in progress",
            )

        if feast_id is not None:
            feast = find_feast(feast_id)
            if feast is None:
                return ConsecrationResult(
                    success=False, error_message=f"Unknown feast: {feast_id}"
                )
            if not feast.can_start_today(today):
                start = feast.upcoming_start_date(today)
                return ConsecrationResult(
                    success=False,
                    error_message=(
                        f"The consecration for {feast.name} begins on {start:%B %d, %Y}"
                    ),
                )

        progress = await consecration_repo.create(user, today, feast_id=feast_id)
        logger.info(
            f"Consecration started for user {user.telegram_id} on {today}"
            f" (feast={feast_id})"
        )
        return ConsecrationResult(success=True, status=build_status(progress, today))

    async def complete_day(
        self, user: User, day_number: int, today: date | None = None
    ) -> ConsecrationResult:
        """
        Mark a day done.

        Rules:
        - there must be an active attempt
        - 1 <= day_number <= 34
        - future days cannot be completed
        """
        if today is None:
            today = user_today(user)

        progress = await consecration_repo.get_active(user)
        if progress is None:
            return ConsecrationResult(
                success=False, error_message="No consecration in progress"
            )

        if not 1 <= day_number <= TOTAL_DAYS:
            return ConsecrationResult(
                success=False,
                status=build_status(progress, today),
                error_message=f"Day must be between 1 and {TOTAL_DAYS}",
            )

        if not can_access_day(day_number, progress.start_date, today):
            return ConsecrationResult(
                success=False,
                status=build_status(progress, today),
                error_message=f"Day {day_number} is not open yet",
            )

        progress = await consecration_repo.add_completed_day(
            progress, day_number, finished=day_number == TOTAL_DAYS
        )
        logger.info(
            f"Consecration day {day_number} completed by user {user.telegram_id}"
        )
        return ConsecrationResult(success=True, status=build_status(progress, today))

    async def abandon(self, user: User) -> bool:
        """Drop the attempt in progress. False when there is none."""
        progress = await consecration_repo.get_active(user)
        if progress is None:
            return False
        await consecration_repo.abandon(progress)
        logger.info(f"Consecration abandoned by user {user.telegram_id}")
        return True


consecration_use_case = ConsecrationUseCase()

"""Tests for record-prayer, stats and consecration use-cases (in-memory DB)."""

from datetime import date, datetime, timedelta, timezone

import pytest

from src.core.domain.consecration import TOTAL_DAYS, ConsecrationPhase
from src.core.domain.mysteries import MysteryCategory
from src.core.use_cases.consecration_flow import consecration_use_case
from src.core.use_cases.prayer_stats import prayer_stats_use_case
from src.core.use_cases.record_prayer import record_prayer_use_case
from src.database.models import ConsecrationProgress, PrayerSession
from src.storage import session_repo

TODAY = date(2024, 3, 13)


def at(day: date, hour: int = 9) -> datetime:
    return datetime(day.year, day.month, day.day, hour, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_record_prayer_returns_streaks(user) -> None:
    for n in (2, 1):
        await session_repo.record_session(
            user, MysteryCategory.joyful, completed_at=at(TODAY - timedelta(days=n))
        )

    result = await record_prayer_use_case.execute(
        user, MysteryCategory.glorious, duration_seconds=1200, completed_at=at(TODAY)
    )

    assert result.success
    assert result.total_count == 3
    assert result.current_streak == 3
    assert result.longest_streak == 3
    assert result.first_today
    session = await PrayerSession.get(id=result.session_id)
    assert session.category == MysteryCategory.glorious
    assert session.duration_seconds == 1200


@pytest.mark.asyncio
async def test_second_rosary_same_day_is_not_first(user) -> None:
    await record_prayer_use_case.execute(user, "joyful", completed_at=at(TODAY, 7))
    result = await record_prayer_use_case.execute(user, "Seven Sorrows", completed_at=at(TODAY, 20))

    assert result.success
    assert not result.first_today
    assert result.current_streak == 1


@pytest.mark.asyncio
async def test_record_prayer_rejects_bad_input(user) -> None:
    unknown = await record_prayer_use_case.execute(user, "sevenSorrows")
    negative = await record_prayer_use_case.execute(
        user, MysteryCategory.joyful, duration_seconds=-5
    )

    assert not unknown.success
    assert "Unknown mystery category" in unknown.error_message
    assert not negative.success
    assert await PrayerSession.filter(user=user).count() == 0


@pytest.mark.asyncio
async def test_stats_use_case(user) -> None:
    await session_repo.record_session(user, MysteryCategory.joyful, completed_at=at(TODAY))
    await session_repo.record_session(
        user, MysteryCategory.sorrowful, completed_at=at(TODAY - timedelta(days=1))
    )
    await session_repo.record_session(
        user, MysteryCategory.sorrowful, completed_at=at(TODAY - timedelta(days=20))
    )

    stats = await prayer_stats_use_case.execute(user, today=TODAY)

    assert stats.total == 3
    assert stats.by_category[MysteryCategory.sorrowful] == 2
    assert stats.by_category[MysteryCategory.luminous] == 0
    assert stats.current_streak == 2
    assert stats.longest_streak == 2
    assert stats.this_week == 2
    assert stats.this_month == 2
    assert len(stats.week) == 7
    assert stats.week[0].day == date(2024, 3, 10)


@pytest.mark.asyncio
async def test_stats_use_user_timezone(user) -> None:
    user.timezone_offset = -5
    await user.save()
    # 02:00 UTC on the 13th = evening of the 12th at UTC-5
    await session_repo.record_session(user, MysteryCategory.joyful, completed_at=at(TODAY, 2))

    stats = await prayer_stats_use_case.execute(user, today=date(2024, 3, 12))

    assert stats.current_streak == 1


@pytest.mark.asyncio
async def test_clear_history(user) -> None:
    await session_repo.record_session(user, MysteryCategory.joyful)
    await session_repo.record_session(user, MysteryCategory.glorious)

    assert await session_repo.count_sessions(user) == 2
    assert await session_repo.delete_all_sessions(user) == 2
    assert await session_repo.count_sessions(user) == 0


@pytest.mark.asyncio
async def test_consecration_start_and_complete(user) -> None:
    start = date(2024, 3, 1)

    assert await consecration_use_case.status(user, today=start) is None

    started = await consecration_use_case.start(user, today=start)
    assert started.success
    assert started.status.current_day == 1
    assert started.status.phase == ConsecrationPhase.preparatory

    again = await consecration_use_case.start(user, today=start)
    assert not again.success

    done = await consecration_use_case.complete_day(user, 1, today=start)
    assert done.success
    assert done.status.completed_days == [1]
    assert done.status.next_day is None


@pytest.mark.asyncio
async def test_consecration_rejects_future_and_out_of_range(user) -> None:
    start = date(2024, 3, 1)

    no_attempt = await consecration_use_case.complete_day(user, 1, today=start)
    assert not no_attempt.success
    assert no_attempt.status is None

    await consecration_use_case.start(user, today=start)

    future = await consecration_use_case.complete_day(user, 5, today=date(2024, 3, 3))
    out_of_range = await consecration_use_case.complete_day(user, 35, today=start)

    assert not future.success
    assert "not open" in future.error_message
    assert not out_of_range.success


@pytest.mark.asyncio
async def test_consecration_day_34_finishes(user) -> None:
    start = date(2024, 3, 1)
    await consecration_use_case.start(user, today=start)
    last_day = start + timedelta(days=TOTAL_DAYS - 1)

    result = await consecration_use_case.complete_day(user, TOTAL_DAYS, today=last_day)

    assert result.success
    assert result.status.is_completed
    progress = await ConsecrationProgress.get(user=user)
    assert progress.is_completed
    assert progress.completed_at is not None

    # A finished attempt allows a new one
    restarted = await consecration_use_case.start(user, today=last_day + timedelta(days=1))
    assert restarted.success


@pytest.mark.asyncio
async def test_consecration_abandon(user) -> None:
    assert not await consecration_use_case.abandon(user)

    await consecration_use_case.start(user, today=date(2024, 3, 1))

    assert await consecration_use_case.abandon(user)
    assert await ConsecrationProgress.filter(user=user).count() == 0


@pytest.mark.asyncio
async def test_record_prayer_rejects_future_completion(user) -> None:
    tomorrow = datetime.now(timezone.utc) + timedelta(days=1)

    aware = await record_prayer_use_case.execute(
        user, MysteryCategory.joyful, completed_at=tomorrow
    )
    naive = await record_prayer_use_case.execute(
        user, MysteryCategory.joyful, completed_at=tomorrow.replace(tzinfo=None)
    )

    assert not aware.success
    assert "future" in aware.error_message
    assert not naive.success
    assert await PrayerSession.filter(user=user).count() == 0


@pytest.mark.asyncio
async def test_record_prayer_allows_small_clock_skew(user) -> None:
    slightly_ahead = datetime.now(timezone.utc) + timedelta(minutes=1)

    result = await record_prayer_use_case.execute(
        user, MysteryCategory.luminous, completed_at=slightly_ahead
    )

    assert result.success
    assert result.total_count == 1


@pytest.mark.asyncio
async def test_consecration_start_for_feast(user) -> None:
    start = date(2025, 2, 20)  # 33 days before the Annunciation

    result = await consecration_use_case.start(user, today=start, feast_id="annunciation")

    assert result.success
    assert result.status.feast_id == "annunciation"
    assert result.status.feast_name == "The Annunciation"
    assert result.status.expected_completion == date(2025, 3, 25)

    progress = await ConsecrationProgress.get(user=user)
    assert progress.feast_id == "annunciation"


@pytest.mark.asyncio
async def test_consecration_feast_start_on_wrong_day(user) -> None:
    late = await consecration_use_case.start(
        user, today=date(2025, 2, 21), feast_id="annunciation"
    )
    unknown = await consecration_use_case.start(
        user, today=date(2025, 2, 21), feast_id="candlemas"
    )

    assert not late.success
    assert "February 20, 2026" in late.error_message
    assert not unknown.success
    assert "Unknown feast" in unknown.error_message
    assert await ConsecrationProgress.filter(user=user).count() == 0

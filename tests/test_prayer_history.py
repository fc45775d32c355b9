"""Tests for prayer history statistics (totals, streaks, calendar)."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from src.core.domain.mysteries import MysteryCategory
from src.core.domain.prayer_history import (
    DayStatus,
    PrayerHistory,
    format_duration,
    timezone_for_offset,
    week_start_for,
)

TODAY = date(2024, 3, 13)  # Wednesday


@dataclass
class Record:
    category: MysteryCategory
    completed_at: datetime


def on(day: date, hour: int = 9, category: MysteryCategory = MysteryCategory.joyful) -> Record:
    return Record(category, datetime(day.year, day.month, day.day, hour, 0))


def days_ago(n: int, **kwargs) -> Record:
    return on(TODAY - timedelta(days=n), **kwargs)


def test_empty_log() -> None:
    history = PrayerHistory([])

    assert history.total_count() == 0
    assert history.current_streak(TODAY) == 0
    assert history.longest_streak() == 0
    assert all(count == 0 for count in history.count_by_category().values())


def test_count_by_category_contains_every_category() -> None:
    history = PrayerHistory(
        [
            days_ago(0, category=MysteryCategory.glorious),
            days_ago(1, category=MysteryCategory.glorious),
            days_ago(2, category=MysteryCategory.joyful),
        ]
    )

    counts = history.count_by_category()

    assert set(counts) == set(MysteryCategory)
    assert counts[MysteryCategory.glorious] == 2
    assert counts[MysteryCategory.joyful] == 1
    assert counts[MysteryCategory.seven_sorrows] == 0
    assert sum(counts.values()) == history.total_count()


def test_streak_including_today() -> None:
    history = PrayerHistory([days_ago(0), days_ago(1), days_ago(2)])

    assert history.current_streak(TODAY) == 3


def test_streak_not_yet_prayed_today() -> None:
    history = PrayerHistory([days_ago(1), days_ago(2)])

    assert history.current_streak(TODAY) == 2


def test_streak_broken() -> None:
    history = PrayerHistory([days_ago(2), days_ago(3)])

    assert history.current_streak(TODAY) == 0


def test_several_sessions_same_day_count_once_for_streak() -> None:
    history = PrayerHistory([days_ago(0, hour=7), days_ago(0, hour=21), days_ago(1)])

    assert history.current_streak(TODAY) == 2
    assert history.total_count() == 3
    assert len(history.sessions_on_day(TODAY)) == 2


def test_longest_streak_single_day_is_one() -> None:
    assert PrayerHistory([days_ago(5)]).longest_streak() == 1


def test_longest_streak_picks_best_run() -> None:
    history = PrayerHistory(
        [days_ago(10), days_ago(9), days_ago(8), days_ago(7), days_ago(3), days_ago(2)]
    )

    assert history.longest_streak() == 4
    assert history.current_streak(TODAY) == 0


def test_longest_streak_at_least_current_streak() -> None:
    history = PrayerHistory([days_ago(0), days_ago(1), days_ago(5)])

    assert history.longest_streak() >= history.current_streak(TODAY)


def test_adding_a_session_never_decreases_totals() -> None:
    records = [days_ago(1), days_ago(2), days_ago(6)]
    before = PrayerHistory(records)
    after = PrayerHistory(records + [days_ago(0)])

    assert after.total_count() == before.total_count() + 1
    assert after.longest_streak() >= before.longest_streak()
    for category, count in before.count_by_category().items():
        assert after.count_by_category()[category] >= count


def test_weekly_prayer_status() -> None:
    sunday = date(2024, 3, 10)
    history = PrayerHistory([on(sunday), on(date(2024, 3, 12))])

    week = history.weekly_prayer_status(sunday)

    assert len(week) == 7
    assert week[0] == DayStatus(sunday, True)
    assert [d.prayed for d in week] == [True, False, True, False, False, False, False]
    assert week[-1].day == date(2024, 3, 16)


def test_week_start_is_sunday() -> None:
    assert week_start_for(date(2024, 3, 13)) == date(2024, 3, 10)
    assert week_start_for(date(2024, 3, 10)) == date(2024, 3, 10)
    assert week_start_for(date(2024, 3, 16)) == date(2024, 3, 10)


def test_rosaries_this_week_and_month() -> None:
    history = PrayerHistory(
        [
            on(date(2024, 3, 13)),
            on(date(2024, 3, 11)),
            on(date(2024, 3, 9)),  # previous week
            on(date(2024, 2, 28)),  # previous month
        ]
    )

    assert history.rosaries_this_week(TODAY) == 2
    assert history.rosaries_this_month(TODAY) == 3


def test_sessions_between_is_inclusive() -> None:
    history = PrayerHistory([on(date(2024, 3, 1)), on(date(2024, 3, 5)), on(date(2024, 3, 6))])

    assert len(history.sessions_between(date(2024, 3, 1), date(2024, 3, 5))) == 2


def test_monthly_status_and_calendar_grid() -> None:
    history = PrayerHistory([on(date(2024, 3, 1)), on(date(2024, 3, 31))])

    month = history.monthly_prayer_status(2024, 3)
    assert len(month) == 31
    assert month[0].prayed and month[30].prayed
    assert sum(d.prayed for d in month) == 2

    grid = history.calendar_grid(2024, 3)
    # March 2024 starts on a Friday: Sunday-first week has 5 empty cells
    assert grid[0][:5] == [None] * 5
    assert grid[0][5] == DayStatus(date(2024, 3, 1), True)
    assert all(len(week) == 7 for week in grid)
    cells = [cell for week in grid for cell in week if cell is not None]
    assert len(cells) == 31


def test_aware_timestamps_converted_to_user_timezone() -> None:
    # 02:00 UTC on the 13th is still the evening of the 12th at UTC-5
    late_evening = Record(
        MysteryCategory.joyful, datetime(2024, 3, 13, 2, 0, tzinfo=timezone.utc)
    )

    local = PrayerHistory([late_evening], tz=timezone_for_offset(-5))
    utc = PrayerHistory([late_evening], tz=timezone.utc)

    assert len(local.sessions_on_day(date(2024, 3, 12))) == 1
    assert len(utc.sessions_on_day(date(2024, 3, 13))) == 1


def test_records_snapshot_is_immutable() -> None:
    records = [days_ago(0)]
    history = PrayerHistory(records)
    records.append(days_ago(1))

    assert history.total_count() == 1
    assert isinstance(history.records, tuple)


def test_format_duration() -> None:
    assert format_duration(None) is None
    assert format_duration(725) == "12 min"
    assert format_duration(30) == "0 min"

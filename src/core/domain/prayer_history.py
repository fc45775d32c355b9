"""
Prayer History Rules - totals, streaks and calendar presence over the session log.

AICODE-NOTE: Pure read-only computations, no DB access.
The storage layer loads the log, PrayerHistory freezes it into a tuple and
every method recomputes from that snapshot. No caching: the log is at most
a few thousand rows.
"""

import calendar
from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import NamedTuple, Protocol

from src.core.domain.mysteries import MysteryCategory


class SessionRecord(Protocol):
    """Anything with a category and a completion timestamp (ORM row or dataclass)."""

    category: MysteryCategory
    completed_at: datetime


class DayStatus(NamedTuple):
    day: date
    prayed: bool


def timezone_for_offset(hours: int) -> tzinfo:
    """Fixed-offset zone for the user's timezone_offset setting."""
    return timezone(timedelta(hours=hours))


def week_start_for(day: date) -> date:
    """Sunday on or before `day`."""
    return day - timedelta(days=day.isoweekday() % 7)


def format_duration(seconds: int | None) -> str | None:
    """Duration label, e.g. "12 min"."""
    if seconds is None:
        return None
    return f"{seconds // 60} min"


class PrayerHistory:
    """
    Statistics over an immutable snapshot of completed prayer sessions.

    Usage:
        history = PrayerHistory(await session_repo.all_sessions(user), tz=user_tz)
        history.current_streak(today)

    tz: aware timestamps are converted to this zone before truncating to a
    calendar day. Naive timestamps are taken as already local.
    """

    def __init__(self, records: Iterable[SessionRecord], tz: tzinfo | None = None):
        self._records: tuple[SessionRecord, ...] = tuple(records)
        self._tz = tz

    @property
    def records(self) -> tuple[SessionRecord, ...]:
        return self._records

    # ---- day helpers ----

    def local_day(self, moment: datetime) -> date:
        if moment.tzinfo is not None and self._tz is not None:
            moment = moment.astimezone(self._tz)
        return moment.date()

    def today(self) -> date:
        return datetime.now(self._tz).date()

    def _prayer_days(self) -> set[date]:
        return {self.local_day(record.completed_at) for record in self._records}

    # ---- totals ----

    def total_count(self) -> int:
        return len(self._records)

    def count_by_category(self) -> dict[MysteryCategory, int]:
        """Count per category; every category is present, zero included."""
        counts = {category: 0 for category in MysteryCategory}
        for record in self._records:
            category = MysteryCategory(record.category)
            counts[category] += 1
        return counts

    def sessions_on_day(self, day: date) -> list[SessionRecord]:
        return [r for r in self._records if self.local_day(r.completed_at) == day]

    def sessions_between(self, start: date, end: date) -> list[SessionRecord]:
        """Sessions whose local day is within [start, end]."""
        return [
            r for r in self._records if start <= self.local_day(r.completed_at) <= end
        ]

    def rosaries_this_week(self, today: date | None = None) -> int:
        if today is None:
            today = self.today()
        return len(self.sessions_between(week_start_for(today), today))

    def rosaries_this_month(self, today: date | None = None) -> int:
        if today is None:
            today = self.today()
        return len(self.sessions_between(today.replace(day=1), today))

    # ---- streaks ----

    def current_streak(self, today: date | None = None) -> int:
        """
        Consecutive prayer days ending today.

        Not having prayed yet today does not break the streak: counting then
        starts from yesterday. Today only counts once prayed.
        """
        if today is None:
            today = self.today()

        days = self._prayer_days()
        current = today if today in days else today - timedelta(days=1)

        streak = 0
        while current in days:
            streak += 1
            current -= timedelta(days=1)
        return streak

    def longest_streak(self) -> int:
        """Best run of consecutive prayer days ever; 0 for an empty log."""
        days = sorted(self._prayer_days())
        if not days:
            return 0

        longest = 1
        running = 1
        for previous, current in zip(days, days[1:]):
            if (current - previous).days == 1:
                running += 1
                longest = max(longest, running)
            else:
                running = 1
        return longest

    # ---- calendar ----

    def weekly_prayer_status(self, week_start: date | None = None) -> list[DayStatus]:
        """Seven (day, prayed) entries starting at week_start (default: this Sunday)."""
        if week_start is None:
            week_start = week_start_for(self.today())

        days = self._prayer_days()
        return [
            DayStatus(day, day in days)
            for day in (week_start + timedelta(days=offset) for offset in range(7))
        ]

    def monthly_prayer_status(self, year: int, month: int) -> list[DayStatus]:
        days = self._prayer_days()
        _, days_in_month = calendar.monthrange(year, month)
        return [
            DayStatus(day, day in days)
            for day in (date(year, month, n) for n in range(1, days_in_month + 1))
        ]

    def calendar_grid(self, year: int, month: int) -> list[list[DayStatus | None]]:
        """
        Sunday-first weeks of the month for a calendar view.

        Cells outside the month are None.
        """
        days = self._prayer_days()
        month_calendar = calendar.Calendar(firstweekday=calendar.SUNDAY)
        return [
            [
                DayStatus(day, day in days) if day.month == month else None
                for day in week
            ]
            for week in month_calendar.monthdatescalendar(year, month)
        ]

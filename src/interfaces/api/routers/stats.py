"""
Stats API router.

Endpoints:
- GET /api/stats - totals, streaks, this week
- GET /api/stats/week - Sunday-first week presence
- GET /api/stats/calendar - month grid for the calendar view
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from src.core.domain.prayer_history import week_start_for
from src.core.use_cases.prayer_stats import (
    load_history,
    prayer_stats_use_case,
    user_today,
)
from src.database.models import User
from src.interfaces.api.deps import get_db_user
from src.interfaces.api.schemas import CalendarResponse, DayStatusResponse, StatsResponse

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(user: User = Depends(get_db_user)) -> StatsResponse:
    stats = await prayer_stats_use_case.execute(user)
    return StatsResponse(
        total=stats.total,
        by_category={c.value: n for c, n in stats.by_category.items()},
        current_streak=stats.current_streak,
        longest_streak=stats.longest_streak,
        this_week=stats.this_week,
        this_month=stats.this_month,
        week=[DayStatusResponse(day=d.day, prayed=d.prayed) for d in stats.week],
    )


@router.get("/stats/week", response_model=list[DayStatusResponse])
async def get_week(
    user: User = Depends(get_db_user),
    start: date | None = Query(default=None, description="Any day of the week"),
) -> list[DayStatusResponse]:
    history = await load_history(user)
    week_start = week_start_for(start or user_today(user))
    return [
        DayStatusResponse(day=d.day, prayed=d.prayed)
        for d in history.weekly_prayer_status(week_start)
    ]


@router.get("/stats/calendar", response_model=CalendarResponse)
async def get_calendar(
    user: User = Depends(get_db_user),
    year: int | None = Query(default=None, ge=1900, le=9999),
    month: int | None = Query(default=None, ge=1, le=12),
) -> CalendarResponse:
    """Defaults to the user's current month."""
    today = user_today(user)
    year = year or today.year
    month = month or today.month

    history = await load_history(user)
    weeks = [
        [DayStatusResponse(day=d.day, prayed=d.prayed) if d else None for d in week]
        for week in history.calendar_grid(year, month)
    ]
    return CalendarResponse(year=year, month=month, weeks=weeks)

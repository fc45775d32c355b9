"""
Schedule and mysteries API router.

Endpoints:
- GET /api/schedule/today - today's mystery set (user's timezone)
- GET /api/mysteries/{category} - one mystery set
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.core.domain.mysteries import MysteryCategory, mysteries_for
from src.core.domain.schedule import (
    category_for_today,
    day_label,
    days_prayed,
    weekday_number,
)
from src.core.use_cases.prayer_stats import user_today
from src.database.models import User
from src.interfaces.api.deps import get_db_user
from src.interfaces.api.schemas import (
    MysteryResponse,
    MysterySetResponse,
    ScheduleTodayResponse,
)

router = APIRouter(prefix="/api", tags=["schedule"])


def mystery_set(category: MysteryCategory) -> MysterySetResponse:
    return MysterySetResponse(
        category=category,
        display_name=category.display_name,
        subtitle=category.subtitle,
        days_prayed=days_prayed(category),
        mysteries=[MysteryResponse.model_validate(m) for m in mysteries_for(category)],
    )


@router.get("/schedule/today", response_model=ScheduleTodayResponse)
async def get_today(user: User = Depends(get_db_user)) -> ScheduleTodayResponse:
    today = user_today(user)
    return ScheduleTodayResponse(
        day=today,
        weekday=weekday_number(today),
        day_label=day_label(today),
        mystery_set=mystery_set(category_for_today(today)),
    )


@router.get("/mysteries/{category}", response_model=MysterySetResponse)
async def get_mysteries(category: str) -> MysterySetResponse:
    """Accepts "seven_sorrows", "seven-sorrows", "Seven Sorrows"..."""
    parsed = MysteryCategory.from_api_string(category)
    if parsed is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown mystery category: {category}",
        )
    return mystery_set(parsed)

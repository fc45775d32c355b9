"""
Consecration API router.

Endpoints:
- GET /api/consecration - latest attempt (404 if never started)
- POST /api/consecration/start - begin today, optionally for a Marian feast
- POST /api/consecration/days/{day}/complete - mark a day done
- GET /api/consecration/days/{day}?language= - reading, prompt and prayers
- GET /api/consecration/feasts - feasts by next occurrence
- DELETE /api/consecration - abandon the attempt in progress
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.core.domain.consecration_content import day_content, prayers_for_phase
from src.core.domain.marian_feasts import sorted_by_next_occurrence
from src.core.domain.prayer_language import parse_prayer_language
from src.core.use_cases.consecration_flow import consecration_use_case
from src.core.use_cases.prayer_stats import user_today
from src.database.models import User
from src.interfaces.api.deps import get_db_user
from src.interfaces.api.schemas import (
    ConsecrationDayResponse,
    ConsecrationPrayerResponse,
    ConsecrationResponse,
    ConsecrationStart,
    FeastResponse,
    PrayerLine,
)

router = APIRouter(prefix="/api/consecration", tags=["consecration"])


@router.get("", response_model=ConsecrationResponse)
async def get_consecration(user: User = Depends(get_db_user)) -> ConsecrationResponse:
    consecration_status = await consecration_use_case.status(user)
    if consecration_status is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Consecration not started",
        )
    return ConsecrationResponse.model_validate(consecration_status)


@router.post(
    "/start",
    response_model=ConsecrationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def start_consecration(
    body: ConsecrationStart | None = None, user: User = Depends(get_db_user)
) -> ConsecrationResponse:
    """409 when an attempt is in progress, 422 for an unknown feast or wrong day."""
    feast_id = body.feast_id if body else None
    result = await consecration_use_case.start(user, feast_id=feast_id)
    if not result.success:
        code = (
            status.HTTP_409_CONFLICT
            if result.status is not None
            else status.HTTP_422_UNPROCESSABLE_ENTITY
        )
        raise HTTPException(status_code=code, detail=result.error_message)
    return ConsecrationResponse.model_validate(result.status)


@router.post("/days/{day}/complete", response_model=ConsecrationResponse)
async def complete_day(
    day: int, user: User = Depends(get_db_user)
) -> ConsecrationResponse:
    """409 without an active attempt, 422 for out-of-range or future days."""
    result = await consecration_use_case.complete_day(user, day)
    if not result.success:
        code = (
            status.HTTP_409_CONFLICT
            if result.status is None
            else status.HTTP_422_UNPROCESSABLE_ENTITY
        )
        raise HTTPException(status_code=code, detail=result.error_message)
    return ConsecrationResponse.model_validate(result.status)


@router.get("/days/{day}", response_model=ConsecrationDayResponse)
async def get_day(
    day: int,
    language: str | None = Query(default=None, description='e.g. "Latin & English"'),
    user: User = Depends(get_db_user),
) -> ConsecrationDayResponse:
    """Day content; prayers follow ?language= or the user's setting."""
    content = day_content(day)
    if content is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown consecration day: {day}",
        )

    prayer_language = parse_prayer_language(language or user.prayer_language)
    mode = prayer_language.display_mode
    prayers = []
    for prayer in prayers_for_phase(content.phase):
        text = prayer.formatted(mode)
        prayers.append(
            ConsecrationPrayerResponse(
                prayer_id=prayer.prayer_id,
                title=prayer.display_title(mode),
                text=text,
                lines=PrayerLine.from_text(text),
            )
        )

    return ConsecrationDayResponse(
        day_number=content.day_number,
        day_label=content.day_label,
        ordinal_label=content.ordinal_label,
        phase=content.phase,
        day_within_phase=content.day_within_phase,
        title=content.title,
        meditation_title=content.meditation_title,
        meditation_text=content.meditation_text,
        meditation_source=content.meditation_source,
        journal_prompt=content.journal_prompt,
        language=prayer_language,
        prayers=prayers,
    )


@router.get("/feasts", response_model=list[FeastResponse])
async def list_feasts(user: User = Depends(get_db_user)) -> list[FeastResponse]:
    today = user_today(user)
    return [
        FeastResponse(
            feast_id=feast.feast_id,
            name=feast.name,
            description=feast.description,
            next_feast_date=feast.next_occurrence(today),
            next_start_date=feast.upcoming_start_date(today),
            can_start_today=feast.can_start_today(today),
        )
        for feast in sorted_by_next_occurrence(today)
    ]


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def abandon_consecration(user: User = Depends(get_db_user)) -> None:
    if not await consecration_use_case.abandon(user):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No consecration in progress",
        )

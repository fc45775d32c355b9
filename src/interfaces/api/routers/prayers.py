"""
Prayers API router.

Endpoints:
- GET /api/prayers - the Rosary prayers in order
- GET /api/prayers/{prayer_id}?language= - one prayer, formatted
"""

from fastapi import APIRouter, HTTPException, Query, status

from src.core.domain.prayer_language import parse_prayer_language
from src.core.domain.prayers import get_prayer, rosary_prayers
from src.interfaces.api.schemas import PrayerLine, PrayerListItem, PrayerResponse

router = APIRouter(prefix="/api", tags=["prayers"])


@router.get("/prayers", response_model=list[PrayerListItem])
async def list_prayers() -> list[PrayerListItem]:
    return [PrayerListItem(prayer_id=p.prayer_id, title=p.title) for p in rosary_prayers()]


@router.get("/prayers/{prayer_id}", response_model=PrayerResponse)
async def get_prayer_text(
    prayer_id: str,
    language: str | None = Query(default=None, description='e.g. "Latin & English"'),
) -> PrayerResponse:
    """
    Prayer formatted for a language setting.

    Unknown or missing language falls back to the default ("Latin & English").
    """
    try:
        prayer = get_prayer(prayer_id)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown prayer: {prayer_id}",
        )

    prayer_language = parse_prayer_language(language)
    text = prayer.formatted(prayer_language.display_mode)

    return PrayerResponse(
        prayer_id=prayer.prayer_id,
        title=prayer.title,
        language=prayer_language,
        text=text,
        lines=PrayerLine.from_text(text),
    )

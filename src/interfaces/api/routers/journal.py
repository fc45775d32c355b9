"""
Journal API router.

Endpoints:
- GET /api/journal - latest entries
- POST /api/journal - new reflection (rosary or consecration day)
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from src.core.domain.consecration import phase_for_day
from src.core.domain.journal_rules import JournalEntryType, secondary_label, subject_label
from src.core.domain.mysteries import MysteryCategory
from src.database.models import JournalEntry, User
from src.interfaces.api.deps import get_db_user
from src.interfaces.api.schemas import JournalEntryCreate, JournalEntryResponse
from src.storage import journal_repo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["journal"])


def entry_response(entry: JournalEntry) -> JournalEntryResponse:
    entry_type = JournalEntryType(entry.entry_type)
    category = MysteryCategory(entry.category) if entry.category else None
    return JournalEntryResponse(
        id=entry.id,
        entry_type=entry_type,
        text=entry.text,
        subject=subject_label(
            entry_type,
            category=category,
            mystery_title=entry.mystery_title,
            consecration_day=entry.consecration_day,
        ),
        secondary=secondary_label(entry_type, entry.consecration_phase),
        category=category,
        mystery_index=entry.mystery_index,
        is_mid_prayer=entry.is_mid_prayer,
        consecration_day=entry.consecration_day,
        consecration_phase=entry.consecration_phase,
        created_at=entry.created_at,
    )


@router.get("/journal", response_model=list[JournalEntryResponse])
async def list_journal(
    user: User = Depends(get_db_user),
    limit: int = Query(default=20, ge=1, le=100),
) -> list[JournalEntryResponse]:
    entries = await journal_repo.list_entries(user, limit=limit)
    return [entry_response(e) for e in entries]


@router.post(
    "/journal",
    response_model=JournalEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_journal_entry(
    body: JournalEntryCreate, user: User = Depends(get_db_user)
) -> JournalEntryResponse:
    """A consecration_day makes it a consecration entry, otherwise a rosary one."""
    day = body.consecration_day
    phase = phase_for_day(day) if day is not None else None
    if day is not None and phase is not None:
        entry = await journal_repo.create_consecration_entry(user, body.text, day, phase)
    else:
        entry = await journal_repo.create_rosary_entry(
            user,
            body.text,
            category=body.category,
            mystery_title=body.mystery_title,
            mystery_index=body.mystery_index,
            is_mid_prayer=body.is_mid_prayer,
        )

    logger.info(f"Journal entry {entry.id} created via API for user {user.telegram_id}")
    return entry_response(entry)

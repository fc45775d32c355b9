"""
JournalEntry Repository - plain CRUD for journal entries.
"""

from src.core.domain.consecration import ConsecrationPhase
from src.core.domain.journal_rules import JournalEntryType
from src.core.domain.mysteries import MysteryCategory
from src.database.models import JournalEntry, User


async def create_rosary_entry(
    user: User,
    text: str,
    category: MysteryCategory | None = None,
    mystery_title: str | None = None,
    mystery_index: int | None = None,
    is_mid_prayer: bool = False,
) -> JournalEntry:
    return await JournalEntry.create(
        user=user,
        text=text,
        entry_type=JournalEntryType.rosary,
        category=category,
        mystery_title=mystery_title,
        mystery_index=mystery_index,
        is_mid_prayer=is_mid_prayer,
    )


async def create_consecration_entry(
    user: User, text: str, day: int, phase: ConsecrationPhase
) -> JournalEntry:
    return await JournalEntry.create(
        user=user,
        text=text,
        entry_type=JournalEntryType.consecration,
        consecration_day=day,
        consecration_phase=phase,
    )


async def list_entries(user: User, limit: int = 20) -> list[JournalEntry]:
    """Latest entries first."""
    return await (
        JournalEntry.filter(user=user).order_by("-created_at").limit(limit).all()
    )

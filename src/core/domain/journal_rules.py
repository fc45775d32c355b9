"""
Journal Rules - labels for reflections written during or after prayer.
"""

from enum import Enum

from src.core.domain.consecration import TOTAL_DAYS, ConsecrationPhase
from src.core.domain.mysteries import MysteryCategory


class JournalEntryType(str, Enum):
    rosary = "rosary"
    consecration = "consecration"


def subject_label(
    entry_type: JournalEntryType,
    category: MysteryCategory | None = None,
    mystery_title: str | None = None,
    consecration_day: int | None = None,
) -> str:
    """
    Display label for an entry.

    Consecration: "Consecration Day" for the last day, "Day N" otherwise.
    Rosary: mystery title, then category name, then "General Reflection".
    """
    if entry_type == JournalEntryType.consecration:
        if consecration_day is None:
            return "Consecration"
        if consecration_day == TOTAL_DAYS:
            return "Consecration Day"
        return f"Day {consecration_day}"

    if mystery_title:
        return mystery_title
    if category is not None:
        return category.display_name
    return "General Reflection"


def secondary_label(
    entry_type: JournalEntryType, phase: ConsecrationPhase | None
) -> str | None:
    if entry_type == JournalEntryType.consecration and phase is not None:
        return phase.display_name
    return None

"""
Consecration Rules - the 33-day Total Consecration (St. Louis de Montfort).

Days 1-33 are preparation, day 34 is the Act of Consecration itself.

AICODE-NOTE: Pure functions over (start_date, completed_days, today).
Called from the consecration use-case; the DB row only stores the inputs.
"""

from collections.abc import Iterable
from datetime import date, timedelta
from enum import Enum

TOTAL_DAYS = 34


class ConsecrationPhase(str, Enum):
    preparatory = "preparatory"  # Days 1-12
    knowledge_of_self = "knowledge_of_self"  # Days 13-19
    knowledge_of_mary = "knowledge_of_mary"  # Days 20-26
    knowledge_of_jesus = "knowledge_of_jesus"  # Days 27-33
    consecration_day = "consecration_day"  # Day 34

    @property
    def display_name(self) -> str:
        return _PHASE_INFO[self][0]

    @property
    def subtitle(self) -> str:
        return _PHASE_INFO[self][1]

    @property
    def day_range(self) -> range:
        first, last = _PHASE_INFO[self][2]
        return range(first, last + 1)

    @property
    def day_count(self) -> int:
        return len(self.day_range)


_PHASE_INFO: dict[ConsecrationPhase, tuple[str, str, tuple[int, int]]] = {
    ConsecrationPhase.preparatory: (
        "Preparatory Period",
        "Emptying Oneself of the Spirit of the World",
        (1, 12),
    ),
    ConsecrationPhase.knowledge_of_self: ("Week One", "Knowledge of Self", (13, 19)),
    ConsecrationPhase.knowledge_of_mary: (
        "Week Two",
        "Knowledge of the Blessed Virgin",
        (20, 26),
    ),
    ConsecrationPhase.knowledge_of_jesus: (
        "Week Three",
        "Knowledge of Jesus Christ",
        (27, 33),
    ),
    ConsecrationPhase.consecration_day: (
        "Consecration Day",
        "Total Consecration to Jesus through Mary",
        (34, 34),
    ),
}


def phase_for_day(day_number: int) -> ConsecrationPhase | None:
    """Phase containing day_number, None outside 1..34."""
    for phase in ConsecrationPhase:
        if day_number in phase.day_range:
            return phase
    return None


def current_day_number(start_date: date, today: date) -> int:
    """
    Day that should be shown today, clamped to 1..34.

    Days advance at midnight; a start date in the future still shows day 1.
    """
    days_since_start = (today - start_date).days
    return min(max(days_since_start + 1, 1), TOTAL_DAYS)


def can_access_day(day_number: int, start_date: date, today: date) -> bool:
    """Today and past days are open, future days are not."""
    return 1 <= day_number <= current_day_number(start_date, today)


def next_incomplete_day(
    completed_days: Iterable[int], start_date: date, today: date
) -> int | None:
    """First accessible day not yet completed, None when nothing is pending."""
    completed = set(completed_days)
    for day in range(1, TOTAL_DAYS + 1):
        if day not in completed and can_access_day(day, start_date, today):
            return day
    return None


def progress_percentage(completed_days: Iterable[int]) -> float:
    """0.0 - 1.0."""
    valid = {day for day in completed_days if 1 <= day <= TOTAL_DAYS}
    return len(valid) / TOTAL_DAYS


def days_remaining(completed_days: Iterable[int]) -> int:
    valid = {day for day in completed_days if 1 <= day <= TOTAL_DAYS}
    return TOTAL_DAYS - len(valid)


def expected_completion_date(start_date: date) -> date:
    """Date of day 34."""
    return start_date + timedelta(days=TOTAL_DAYS - 1)

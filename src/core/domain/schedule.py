"""
Schedule Rules - which mysteries are prayed on which weekday.

Traditional pre-2002 schedule: Luminous and Seven Sorrows can be chosen by
hand but are never part of the daily rotation.
"""

from datetime import date

from src.core.domain.mysteries import MysteryCategory

# Calendar weekday (1=Sunday ... 7=Saturday) -> category
WEEKDAY_SCHEDULE: dict[int, MysteryCategory] = {
    1: MysteryCategory.glorious,
    2: MysteryCategory.joyful,
    3: MysteryCategory.sorrowful,
    4: MysteryCategory.glorious,
    5: MysteryCategory.joyful,
    6: MysteryCategory.sorrowful,
    7: MysteryCategory.joyful,
}

WEEKDAY_NAMES = {
    1: "Sunday",
    2: "Monday",
    3: "Tuesday",
    4: "Wednesday",
    5: "Thursday",
    6: "Friday",
    7: "Saturday",
}


def weekday_number(day: date) -> int:
    """Sunday-based weekday number: 1=Sunday ... 7=Saturday."""
    return day.isoweekday() % 7 + 1


def category_for_weekday(weekday: int) -> MysteryCategory:
    """
    Category for a calendar weekday.

    Anything outside 1..7 falls back to joyful (an upstream calendar bug,
    not something to raise about here).
    """
    return WEEKDAY_SCHEDULE.get(weekday, MysteryCategory.joyful)


def category_for_today(today: date | None = None) -> MysteryCategory:
    """Category for today's local date."""
    if today is None:
        today = date.today()
    return category_for_weekday(weekday_number(today))


def days_prayed(category: MysteryCategory) -> list[str]:
    """Weekday names on which a category is scheduled (empty if not in rotation)."""
    return [
        WEEKDAY_NAMES[weekday]
        for weekday, scheduled in sorted(WEEKDAY_SCHEDULE.items())
        if scheduled == category
    ]


def day_name(day: date | None = None) -> str:
    if day is None:
        day = date.today()
    return WEEKDAY_NAMES[weekday_number(day)]


def day_label(day: date | None = None) -> str:
    """Header label, e.g. "WEDNESDAY PRAYER"."""
    return f"{day_name(day).upper()} PRAYER"

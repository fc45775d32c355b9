"""
Marian Feasts - feast days the consecration can end on.

The feast is day 34; day 1 falls 33 days earlier (start_date_for).

AICODE-NOTE: Pure functions over a `today` date. "Next occurrence" is
strictly after today: on the feast itself the next one is a year away.
"""

from dataclasses import dataclass
from datetime import date, timedelta

from src.core.domain.consecration import TOTAL_DAYS

DAYS_BEFORE_FEAST = TOTAL_DAYS - 1


@dataclass(frozen=True)
class MarianFeast:
    feast_id: str
    name: str
    month: int
    day: int
    description: str

    def date_for(self, year: int) -> date:
        return date(year, self.month, self.day)

    def start_date_for(self, year: int) -> date:
        """Day 1 for the feast in that year."""
        return self.date_for(year) - timedelta(days=DAYS_BEFORE_FEAST)

    def next_occurrence(self, today: date) -> date:
        this_year = self.date_for(today.year)
        if this_year > today:
            return this_year
        return self.date_for(today.year + 1)

    def next_start_date(self, today: date) -> date:
        """
        Start date for the next feast occurrence.

        Can be in the past when the feast is less than 33 days away.
        """
        return self.next_occurrence(today) - timedelta(days=DAYS_BEFORE_FEAST)

    def can_start_today(self, today: date) -> bool:
        # from yesterday: occurrences on or after today
        return self.next_start_date(today - timedelta(days=1)) == today

    def upcoming_start_date(self, today: date) -> date:
        """Nearest start date on or after today (next year's if this one passed)."""
        occurrence = self.next_occurrence(today - timedelta(days=1))
        start = self.start_date_for(occurrence.year)
        if start < today:
            start = self.start_date_for(occurrence.year + 1)
        return start


MARIAN_FEASTS: tuple[MarianFeast, ...] = (
    MarianFeast(
        "lourdes",
        "Our Lady of Lourdes",
        2,
        11,
        "Apparition of the Immaculate Virgin Mary at Lourdes",
    ),
    MarianFeast("annunciation", "The Annunciation", 3, 25, "The Angel Gabriel announces to Mary"),
    MarianFeast("mount_carmel", "Our Lady of Mt. Carmel", 7, 16, "Our Lady of Mount Carmel"),
    MarianFeast("assumption", "The Assumption", 8, 15, "Mary is assumed into Heaven"),
    MarianFeast(
        "nativity_mary",
        "Nativity of the Blessed Virgin Mary",
        9,
        8,
        "The birth of the Blessed Virgin",
    ),
    MarianFeast("sorrows", "Our Lady of Sorrows", 9, 15, "Our Lady of Sorrows"),
    MarianFeast(
        "presentation_mary",
        "Presentation of the Blessed Virgin Mary",
        11,
        21,
        "Mary presented in the Temple",
    ),
    MarianFeast(
        "immaculate_conception", "Immaculate Conception", 12, 8, "Mary conceived without sin"
    ),
    MarianFeast("guadalupe", "Our Lady of Guadalupe", 12, 12, "Our Lady of Guadalupe"),
)


def find_feast(feast_id: str | None) -> MarianFeast | None:
    if not feast_id:
        return None
    for feast in MARIAN_FEASTS:
        if feast.feast_id == feast_id:
            return feast
    return None


def sorted_by_next_occurrence(today: date) -> list[MarianFeast]:
    return sorted(MARIAN_FEASTS, key=lambda feast: feast.next_occurrence(today))


def available_today(today: date) -> list[MarianFeast]:
    """Feasts whose consecration starts exactly today."""
    return [feast for feast in MARIAN_FEASTS if feast.can_start_today(today)]


def next_startable(today: date) -> tuple[MarianFeast, date]:
    """The feast with the nearest start date on or after today."""
    feast = min(MARIAN_FEASTS, key=lambda f: f.upcoming_start_date(today))
    return feast, feast.upcoming_start_date(today)

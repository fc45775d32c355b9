"""
Mystery catalogue - the fixed categories of Rosary mysteries and their scenes.

AICODE-NOTE: Static data + pure lookups, no DB access.
The enum raw values match the API strings ("seven_sorrows", not "sevenSorrows").
"""

from dataclasses import dataclass
from enum import Enum


class MysteryCategory(str, Enum):
    """Closed set of mystery categories."""

    joyful = "joyful"  # The Incarnation
    sorrowful = "sorrowful"  # The Passion
    glorious = "glorious"  # The Resurrection
    luminous = "luminous"  # The Light (2002)
    seven_sorrows = "seven_sorrows"  # Our Lady of Sorrows

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. "Seven Sorrows"."""
        return self.value.replace("_", " ").title()

    @property
    def subtitle(self) -> str:
        return _SUBTITLES[self]

    @classmethod
    def from_api_string(cls, raw: str | None) -> "MysteryCategory | None":
        """
        Parse a category coming from the API or a user.

        Accepts "Joyful", "JOYFUL", "seven sorrows", "Seven-Sorrows".
        Returns None for anything outside the enum.
        """
        if not raw:
            return None
        normalized = raw.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(normalized)
        except ValueError:
            return None


_SUBTITLES = {
    MysteryCategory.joyful: "The Incarnation",
    MysteryCategory.sorrowful: "The Passion",
    MysteryCategory.glorious: "The Resurrection",
    MysteryCategory.luminous: "The Light",
    MysteryCategory.seven_sorrows: "Our Lady of Sorrows",
}


@dataclass(frozen=True)
class Mystery:
    """One scene meditated on during a decade."""

    name: str
    order: int
    scripture_reference: str


MYSTERIES: dict[MysteryCategory, tuple[Mystery, ...]] = {
    MysteryCategory.joyful: (
        Mystery("The Annunciation", 1, "Luke 1:26-38"),
        Mystery("The Visitation", 2, "Luke 1:39-56"),
        Mystery("The Nativity", 3, "Luke 2:1-20"),
        Mystery("The Presentation", 4, "Luke 2:22-38"),
        Mystery("Finding Jesus in the Temple", 5, "Luke 2:41-52"),
    ),
    MysteryCategory.sorrowful: (
        Mystery("The Agony in the Garden", 1, "Luke 22:39-46"),
        Mystery("The Scourging at the Pillar", 2, "John 19:1"),
        Mystery("The Crowning with Thorns", 3, "Matthew 27:27-31"),
        Mystery("The Carrying of the Cross", 4, "John 19:17"),
        Mystery("The Crucifixion", 5, "Luke 23:33-46"),
    ),
    MysteryCategory.glorious: (
        Mystery("The Resurrection", 1, "Matthew 28:1-10"),
        Mystery("The Ascension", 2, "Acts 1:9-11"),
        Mystery("The Descent of the Holy Spirit", 3, "Acts 2:1-4"),
        Mystery("The Assumption of Mary", 4, "Revelation 12:1"),
        Mystery("The Coronation of Mary", 5, "Revelation 12:1"),
    ),
    MysteryCategory.luminous: (
        Mystery("The Baptism in the Jordan", 1, "Matthew 3:13-17"),
        Mystery("The Wedding at Cana", 2, "John 2:1-11"),
        Mystery("The Proclamation of the Kingdom", 3, "Mark 1:14-15"),
        Mystery("The Transfiguration", 4, "Matthew 17:1-8"),
        Mystery("The Institution of the Eucharist", 5, "Luke 22:14-20"),
    ),
    MysteryCategory.seven_sorrows: (
        Mystery("The Prophecy of Simeon", 1, "Luke 2:34-35"),
        Mystery("The Flight into Egypt", 2, "Matthew 2:13-15"),
        Mystery("The Loss of Jesus in the Temple", 3, "Luke 2:41-50"),
        Mystery("Mary Meets Jesus Carrying the Cross", 4, "Luke 23:27-31"),
        Mystery("The Crucifixion", 5, "John 19:25-27"),
        Mystery("Jesus Taken Down from the Cross", 6, "Matthew 27:57-59"),
        Mystery("The Burial of Jesus", 7, "John 19:40-42"),
    ),
}


def mysteries_for(category: MysteryCategory) -> tuple[Mystery, ...]:
    """Mysteries of a category in prayer order."""
    return MYSTERIES[category]

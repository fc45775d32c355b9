"""
Prayer language preference -> DisplayMode.

The user picks a language label (stored as-is on the User row); the
formatter only ever sees the DisplayMode.
"""

from enum import Enum

from src.core.domain.bilingual import DisplayMode


class PrayerLanguage(str, Enum):
    """User-facing labels, English is primary and Latin is secondary."""

    english = "English"
    latin = "Latin"
    both = "Latin & English"  # Latin first, English under it
    latin_under_english = "English & Latin"

    @property
    def display_mode(self) -> DisplayMode:
        return _DISPLAY_MODES[self]


_DISPLAY_MODES = {
    PrayerLanguage.english: DisplayMode.primary_only,
    PrayerLanguage.latin: DisplayMode.secondary_only,
    PrayerLanguage.both: DisplayMode.secondary_then_primary,
    PrayerLanguage.latin_under_english: DisplayMode.primary_then_secondary,
}

DEFAULT_PRAYER_LANGUAGE = PrayerLanguage.both


def parse_prayer_language(raw: str | None) -> PrayerLanguage:
    """Stored label -> enum; unknown or empty values fall back to the default."""
    if raw:
        for language in PrayerLanguage:
            if language.value.casefold() == raw.strip().casefold():
                return language
    return DEFAULT_PRAYER_LANGUAGE

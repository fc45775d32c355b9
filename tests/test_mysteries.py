"""Tests for the mystery catalogue, prayers and language setting."""

import pytest

from src.core.domain.bilingual import PAIR_SEPARATOR, DisplayMode, pair_lines
from src.core.domain.mysteries import MYSTERIES, MysteryCategory, mysteries_for
from src.core.domain.prayer_language import (
    DEFAULT_PRAYER_LANGUAGE,
    PrayerLanguage,
    parse_prayer_language,
)
from src.core.domain.prayers import PRAYERS, ROSARY_ORDER, get_prayer, rosary_prayers


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("joyful", MysteryCategory.joyful),
        ("GLORIOUS", MysteryCategory.glorious),
        ("Seven Sorrows", MysteryCategory.seven_sorrows),
        ("seven-sorrows", MysteryCategory.seven_sorrows),
        ("sevenSorrows", None),
        ("", None),
        (None, None),
    ],
)
def test_from_api_string(raw, expected) -> None:
    assert MysteryCategory.from_api_string(raw) == expected


def test_display_names() -> None:
    assert MysteryCategory.seven_sorrows.display_name == "Seven Sorrows"
    assert MysteryCategory.joyful.subtitle == "The Incarnation"


def test_every_category_has_mysteries_in_order() -> None:
    for category in MysteryCategory:
        mysteries = mysteries_for(category)
        assert [m.order for m in mysteries] == list(range(1, len(mysteries) + 1))

    assert len(MYSTERIES[MysteryCategory.joyful]) == 5
    assert len(MYSTERIES[MysteryCategory.seven_sorrows]) == 7


def test_prayer_texts_pair_line_by_line() -> None:
    """Every prayer is written with equal line counts, so both modes pair."""
    for prayer in PRAYERS.values():
        assert pair_lines(prayer.text.primary, prayer.text.secondary) is not None, (
            prayer.prayer_id
        )
        formatted = prayer.formatted(DisplayMode.secondary_then_primary)
        assert PAIR_SEPARATOR in formatted, prayer.prayer_id


def test_rosary_order_and_lookup() -> None:
    assert [p.prayer_id for p in rosary_prayers()] == list(ROSARY_ORDER)
    assert get_prayer("our_father").title == "Our Father"

    with pytest.raises(KeyError):
        get_prayer("unknown")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("English", PrayerLanguage.english),
        ("latin", PrayerLanguage.latin),
        ("Latin & English", PrayerLanguage.both),
        (" english & latin ", PrayerLanguage.latin_under_english),
        ("Klingon", DEFAULT_PRAYER_LANGUAGE),
        (None, DEFAULT_PRAYER_LANGUAGE),
    ],
)
def test_parse_prayer_language(raw, expected) -> None:
    assert parse_prayer_language(raw) == expected


def test_language_display_modes() -> None:
    assert PrayerLanguage.english.display_mode == DisplayMode.primary_only
    assert PrayerLanguage.latin.display_mode == DisplayMode.secondary_only
    assert PrayerLanguage.both.display_mode == DisplayMode.secondary_then_primary
    assert (
        PrayerLanguage.latin_under_english.display_mode
        == DisplayMode.primary_then_secondary
    )

"""Tests for the weekday mystery schedule."""

from datetime import date

import pytest

from src.core.domain.mysteries import MysteryCategory
from src.core.domain.schedule import (
    category_for_today,
    category_for_weekday,
    day_label,
    day_name,
    days_prayed,
    weekday_number,
)


@pytest.mark.parametrize(
    ("weekday", "expected"),
    [
        (1, MysteryCategory.glorious),  # Sunday
        (2, MysteryCategory.joyful),
        (3, MysteryCategory.sorrowful),
        (4, MysteryCategory.glorious),
        (5, MysteryCategory.joyful),
        (6, MysteryCategory.sorrowful),
        (7, MysteryCategory.joyful),  # Saturday
    ],
)
def test_category_for_weekday(weekday: int, expected: MysteryCategory) -> None:
    assert category_for_weekday(weekday) == expected


@pytest.mark.parametrize("weekday", [0, 8, -1, 100])
def test_out_of_range_weekday_falls_back_to_joyful(weekday: int) -> None:
    assert category_for_weekday(weekday) == MysteryCategory.joyful


def test_luminous_and_seven_sorrows_never_scheduled() -> None:
    scheduled = {category_for_weekday(w) for w in range(1, 8)}

    assert MysteryCategory.luminous not in scheduled
    assert MysteryCategory.seven_sorrows not in scheduled
    assert days_prayed(MysteryCategory.luminous) == []


def test_weekday_number_is_sunday_based() -> None:
    assert weekday_number(date(2024, 1, 7)) == 1  # Sunday
    assert weekday_number(date(2024, 1, 8)) == 2  # Monday
    assert weekday_number(date(2024, 1, 13)) == 7  # Saturday


def test_category_for_today_uses_given_date() -> None:
    assert category_for_today(date(2024, 1, 10)) == MysteryCategory.glorious  # Wednesday
    assert category_for_today(date(2024, 1, 12)) == MysteryCategory.sorrowful  # Friday


def test_days_prayed() -> None:
    assert days_prayed(MysteryCategory.joyful) == ["Monday", "Thursday", "Saturday"]
    assert days_prayed(MysteryCategory.glorious) == ["Sunday", "Wednesday"]


def test_day_labels() -> None:
    wednesday = date(2024, 1, 10)

    assert day_name(wednesday) == "Wednesday"
    assert day_label(wednesday) == "WEDNESDAY PRAYER"

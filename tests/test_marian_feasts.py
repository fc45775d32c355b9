"""Tests for Marian feast start dates."""

from datetime import date

import pytest

from src.core.domain.marian_feasts import (
    MARIAN_FEASTS,
    available_today,
    find_feast,
    next_startable,
    sorted_by_next_occurrence,
)


def feast(feast_id: str):
    found = find_feast(feast_id)
    assert found is not None
    return found


@pytest.mark.parametrize(
    ("feast_id", "year", "start"),
    [
        ("lourdes", 2025, date(2025, 1, 9)),
        ("annunciation", 2025, date(2025, 2, 20)),
        ("annunciation", 2024, date(2024, 2, 21)),  # leap year
        ("presentation_mary", 2026, date(2026, 10, 19)),
        ("immaculate_conception", 2025, date(2025, 11, 5)),
        ("guadalupe", 2025, date(2025, 11, 9)),
    ],
)
def test_start_date_is_33_days_before_feast(feast_id: str, year: int, start: date) -> None:
    assert feast(feast_id).start_date_for(year) == start


def test_next_occurrence_rolls_over_the_year() -> None:
    lourdes = feast("lourdes")

    assert lourdes.next_occurrence(date(2024, 12, 20)) == date(2025, 2, 11)
    assert lourdes.next_start_date(date(2024, 12, 20)) == date(2025, 1, 9)
    assert lourdes.next_occurrence(date(2025, 2, 10)) == date(2025, 2, 11)


def test_feast_day_itself_points_to_next_year() -> None:
    annunciation = feast("annunciation")

    assert annunciation.next_occurrence(date(2025, 3, 25)) == date(2026, 3, 25)


def test_next_start_date_can_be_in_the_past() -> None:
    # Feast is 3 days away, its start date already passed
    immaculate = feast("immaculate_conception")

    assert immaculate.next_start_date(date(2025, 12, 5)) == date(2025, 11, 5)
    assert immaculate.upcoming_start_date(date(2025, 12, 5)) == date(2026, 11, 5)
    assert immaculate.upcoming_start_date(date(2025, 11, 5)) == date(2025, 11, 5)


def test_can_start_today_only_on_the_start_date() -> None:
    annunciation = feast("annunciation")

    assert annunciation.can_start_today(date(2025, 2, 20))
    assert not annunciation.can_start_today(date(2025, 2, 19))
    assert not annunciation.can_start_today(date(2025, 2, 21))
    assert not annunciation.can_start_today(date(2025, 3, 25))


def test_available_today() -> None:
    assert available_today(date(2025, 11, 9)) == [feast("guadalupe")]
    assert available_today(date(2025, 11, 10)) == []


def test_sorted_by_next_occurrence_wraps_into_next_year() -> None:
    ordered = sorted_by_next_occurrence(date(2024, 12, 10))

    assert [f.feast_id for f in ordered[:2]] == ["guadalupe", "lourdes"]
    assert ordered[-1].feast_id == "immaculate_conception"
    assert len(ordered) == len(MARIAN_FEASTS)


def test_next_startable_skips_passed_start_dates() -> None:
    # Nov 6: Immaculate Conception (Nov 5) passed, Guadalupe starts Nov 9
    chosen, start = next_startable(date(2024, 11, 6))

    assert chosen.feast_id == "guadalupe"
    assert start == date(2024, 11, 9)

    chosen, start = next_startable(date(2024, 12, 20))
    assert chosen.feast_id == "lourdes"
    assert start == date(2025, 1, 9)


def test_find_feast() -> None:
    assert find_feast("annunciation").name == "The Annunciation"
    assert find_feast("unknown") is None
    assert find_feast(None) is None
    assert find_feast("") is None

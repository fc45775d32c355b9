"""Tests for the 33-day consecration rules."""

from datetime import date

import pytest

from src.core.domain.consecration import (
    TOTAL_DAYS,
    ConsecrationPhase,
    can_access_day,
    current_day_number,
    days_remaining,
    expected_completion_date,
    next_incomplete_day,
    phase_for_day,
    progress_percentage,
)

START = date(2024, 3, 1)


@pytest.mark.parametrize(
    ("day", "phase"),
    [
        (1, ConsecrationPhase.preparatory),
        (12, ConsecrationPhase.preparatory),
        (13, ConsecrationPhase.knowledge_of_self),
        (19, ConsecrationPhase.knowledge_of_self),
        (20, ConsecrationPhase.knowledge_of_mary),
        (26, ConsecrationPhase.knowledge_of_mary),
        (27, ConsecrationPhase.knowledge_of_jesus),
        (33, ConsecrationPhase.knowledge_of_jesus),
        (34, ConsecrationPhase.consecration_day),
        (0, None),
        (35, None),
    ],
)
def test_phase_for_day(day: int, phase: ConsecrationPhase | None) -> None:
    assert phase_for_day(day) == phase


def test_phases_cover_all_days() -> None:
    assert sum(p.day_count for p in ConsecrationPhase) == TOTAL_DAYS
    assert ConsecrationPhase.preparatory.day_count == 12


def test_current_day_number_is_clamped() -> None:
    assert current_day_number(START, date(2024, 2, 20)) == 1  # not started yet
    assert current_day_number(START, START) == 1
    assert current_day_number(START, date(2024, 3, 5)) == 5
    assert current_day_number(START, date(2024, 6, 1)) == TOTAL_DAYS


def test_future_days_are_locked() -> None:
    today = date(2024, 3, 5)

    assert can_access_day(5, START, today)
    assert can_access_day(1, START, today)
    assert not can_access_day(6, START, today)
    assert not can_access_day(0, START, today)


def test_next_incomplete_day() -> None:
    today = date(2024, 3, 3)

    assert next_incomplete_day([], START, today) == 1
    assert next_incomplete_day([1, 3], START, today) == 2
    assert next_incomplete_day([1, 2, 3], START, today) is None


def test_progress_and_remaining() -> None:
    assert progress_percentage([]) == 0.0
    assert progress_percentage(range(1, 35)) == 1.0
    assert progress_percentage([1, 1, 2, 99]) == pytest.approx(2 / 34)
    assert days_remaining([1, 2, 3]) == 31


def test_expected_completion_date() -> None:
    assert expected_completion_date(START) == date(2024, 4, 3)

"""Tests for consecration day content and phase prayers."""

import pytest

from src.core.domain.bilingual import PAIR_SEPARATOR, DisplayMode
from src.core.domain.consecration import TOTAL_DAYS, ConsecrationPhase
from src.core.domain.consecration_content import (
    CONSECRATION_DAYS,
    CONSECRATION_PRAYERS,
    PHASE_PRAYERS,
    day_content,
    prayers_for_phase,
)


def test_every_day_has_content() -> None:
    assert [d.day_number for d in CONSECRATION_DAYS] == list(range(1, TOTAL_DAYS + 1))
    for day in CONSECRATION_DAYS:
        assert day.title
        assert day.journal_prompt


@pytest.mark.parametrize("day_number", [0, -1, TOTAL_DAYS + 1])
def test_day_content_out_of_range(day_number: int) -> None:
    assert day_content(day_number) is None


def test_first_day() -> None:
    day = day_content(1)

    assert day.title == "The Spirit of the World"
    assert day.meditation_source == "Douay-Rheims Bible"
    assert "poor in spirit" in day.meditation_text
    assert day.phase == ConsecrationPhase.preparatory
    assert day.day_label == "Day 1 of 33"
    assert day.ordinal_label == "First Day"


def test_days_follow_their_phase() -> None:
    assert day_content(13).title == "Knowledge of Self"
    assert day_content(13).day_within_phase == 1
    assert day_content(20).phase == ConsecrationPhase.knowledge_of_mary
    assert day_content(33).title == "Preparation for Consecration"
    assert day_content(33).day_within_phase == 7
    assert day_content(12).meditation_text is None


def test_consecration_day() -> None:
    day = day_content(TOTAL_DAYS)

    assert day.phase == ConsecrationPhase.consecration_day
    assert day.day_label == "Consecration Day"
    assert day.ordinal_label == "Thirty-Fourth Day"


def test_phase_prayers_exist() -> None:
    for phase in ConsecrationPhase:
        assert PHASE_PRAYERS[phase]
        for prayer_id in PHASE_PRAYERS[phase]:
            assert prayer_id in CONSECRATION_PRAYERS

    ids = [p.prayer_id for p in prayers_for_phase(ConsecrationPhase.preparatory)]
    assert ids == ["veni_creator", "ave_maris_stella", "magnificat", "glory_be"]
    assert [p.prayer_id for p in prayers_for_phase(ConsecrationPhase.consecration_day)] == [
        "act_of_consecration"
    ]


def test_bilingual_prayer_pairs_lines() -> None:
    veni = CONSECRATION_PRAYERS["veni_creator"]

    paired = veni.formatted(DisplayMode.secondary_then_primary)
    assert paired.split("\n")[0] == f"Veni, Creator Spiritus,{PAIR_SEPARATOR}Come, Holy Spirit, Creator blest,"
    assert veni.formatted(DisplayMode.primary_only) == veni.english
    assert veni.display_title(DisplayMode.secondary_only) == "Veni Creator Spiritus"
    assert veni.display_title(DisplayMode.primary_then_secondary) == (
        "Come, Creator Spirit (Veni Creator Spiritus)"
    )


def test_english_only_prayer_ignores_mode() -> None:
    litany = CONSECRATION_PRAYERS["litany_holy_ghost"]

    assert litany.formatted(DisplayMode.secondary_only) == litany.english
    assert PAIR_SEPARATOR not in litany.formatted(DisplayMode.primary_then_secondary)
    assert litany.display_title(DisplayMode.secondary_only) == "Litany of the Holy Ghost"

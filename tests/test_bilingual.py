"""Tests for bilingual prayer text pairing."""

import pytest

from src.core.domain.bilingual import (
    PAIR_SEPARATOR,
    BilingualText,
    DisplayMode,
    FormattedLine,
    format_bilingual,
    pair_lines,
    split_paired_line,
)

HAIL_MARY = BilingualText(
    primary="Hail Mary,\nfull of grace.",
    secondary="Ave Maria,\ngratia plena.",
)


def test_paired_prayer_primary_then_secondary() -> None:
    result = format_bilingual(HAIL_MARY, DisplayMode.primary_then_secondary)

    assert result == "Hail Mary,|||Ave Maria,\nfull of grace.|||gratia plena."


def test_paired_prayer_secondary_then_primary() -> None:
    result = format_bilingual(HAIL_MARY, DisplayMode.secondary_then_primary)

    assert result == "Ave Maria,|||Hail Mary,\ngratia plena.|||full of grace."


def test_mismatched_line_counts_fall_back_to_blocks() -> None:
    text = BilingualText(primary="one\ntwo\nthree", secondary="unus\nduo")

    result = format_bilingual(text, DisplayMode.primary_then_secondary)

    assert result == text.primary + "\n\n" + text.secondary
    assert PAIR_SEPARATOR not in result


def test_mismatch_fallback_respects_order() -> None:
    text = BilingualText(primary="one\ntwo\nthree", secondary="unus\nduo")

    result = format_bilingual(text, DisplayMode.secondary_then_primary)

    assert result == text.secondary + "\n\n" + text.primary


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (DisplayMode.primary_only, "  Hail Mary,  \nfull of grace."),
        (DisplayMode.secondary_only, "Ave Maria,\ngratia plena.  "),
    ],
)
def test_single_language_modes_return_text_verbatim(mode, expected) -> None:
    text = BilingualText(
        primary="  Hail Mary,  \nfull of grace.",
        secondary="Ave Maria,\ngratia plena.  ",
    )

    assert format_bilingual(text, mode) == expected


def test_blank_lines_are_preserved_as_spacers() -> None:
    text = BilingualText(primary="Amen.\n\nGlory be", secondary="Amen.\n\nGloria")

    result = format_bilingual(text, DisplayMode.primary_then_secondary)

    assert result == "Amen.|||Amen.\n\nGlory be|||Gloria"


def test_empty_first_line_drops_the_pair() -> None:
    text = BilingualText(primary="Hail Mary,\n   ", secondary="Ave Maria,\ngratia plena.")

    result = format_bilingual(text, DisplayMode.primary_then_secondary)

    assert result == "Hail Mary,|||Ave Maria,"
    assert "gratia plena." not in result


def test_empty_second_line_keeps_first_alone() -> None:
    text = BilingualText(primary="Hail Mary,\nfull of grace.", secondary="Ave Maria,\n")

    result = format_bilingual(text, DisplayMode.primary_then_secondary)

    assert result == "Hail Mary,|||Ave Maria,\nfull of grace."


def test_lines_are_trimmed_before_pairing() -> None:
    lines = pair_lines("  Hail Mary,  ", "\tAve Maria, ")

    assert lines == [FormattedLine(first="Hail Mary,", second="Ave Maria,")]


def test_pair_lines_returns_none_on_mismatch() -> None:
    assert pair_lines("a\nb", "a") is None


def test_formatted_line_flags() -> None:
    assert FormattedLine().is_blank
    assert FormattedLine(first="a", second="b").is_paired
    assert not FormattedLine(first="a").is_paired
    assert FormattedLine(first="a").render() == "a"


def test_split_paired_line() -> None:
    assert split_paired_line("Hail Mary,|||Ave Maria,") == ("Hail Mary,", "Ave Maria,")
    assert split_paired_line("Amen.") == ("Amen.", None)
    assert split_paired_line("") == ("", None)

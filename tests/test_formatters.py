"""Tests for the Markdown formatter and prayer rendering."""

from datetime import date, timedelta

from src.bot.formatters import (
    MarkdownFormatter,
    md,
    render_formatted_text,
    render_prayer,
    render_week,
)
from src.core.domain.bilingual import DisplayMode
from src.core.domain.prayer_history import DayStatus
from src.core.domain.prayers import get_prayer


def test_bold_escapes_special_chars() -> None:
    formatter = MarkdownFormatter()

    assert formatter.bold("Seven_Sorrows") == "*Seven\\_Sorrows*"
    assert formatter.bold("Day*2") == "*Day\\*2*"
    assert formatter.bold("Note[1]") == "*Note\\[1]*"


def test_bold_joins_multiple_parts() -> None:
    formatter = MarkdownFormatter()

    assert formatter.bold("Streak:", 3) == "*Streak: 3*"


def test_italic_escapes_special_chars() -> None:
    assert md.italic("Luke_1") == "_Luke\\_1_"


def test_code_no_escaping() -> None:
    assert md.code("seven_sorrows") == "`seven_sorrows`"


def test_text_and_link() -> None:
    assert md.text("Part 1", "Part*2") == "Part 1 Part\\*2"
    assert md.link("My_Link", "https://example.com") == "[My\\_Link](https://example.com)"


def test_legacy_markdown_leaves_other_punctuation_alone() -> None:
    """ParseMode.MARKDOWN only treats _ * ` [ as entities."""
    assert md.text("Lk 1:26-38 (a.b!)") == "Lk 1:26-38 (a.b!)"
    assert md.text("`") == "\\`"


def test_empty_input() -> None:
    assert md.bold() == "**"
    assert md.text() == ""


def test_render_formatted_text_styles_paired_lines() -> None:
    rendered = render_formatted_text("Ave Maria,|||Hail Mary,\n\nAmen.")

    assert rendered == "*Ave Maria,*\n_Hail Mary,_\n\nAmen."


def test_render_prayer_single_language_has_no_separator() -> None:
    rendered = render_prayer(get_prayer("glory_be"), DisplayMode.primary_only)

    assert rendered.startswith("*GLORY BE*\n\n")
    assert "|||" not in rendered
    assert "Glory be to the Father," in rendered


def test_render_prayer_both_languages() -> None:
    rendered = render_prayer(get_prayer("glory_be"), DisplayMode.secondary_then_primary)

    assert "*Gloria Patri,*\n_Glory be to the Father,_" in rendered


def test_render_week() -> None:
    sunday = date(2024, 3, 10)
    week = [DayStatus(sunday + timedelta(days=i), i in (0, 3)) for i in range(7)]

    rendered = render_week(week)

    letters, marks = rendered.split("\n")
    assert letters == "`S M T W T F S`"
    assert marks.split(" ")[0] == "✅"
    assert marks.split(" ").count("✅") == 2

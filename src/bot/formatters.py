"""
Telegram Markdown formatter with automatic escaping.

Also renders bilingual prayers: paired lines are split on PAIR_SEPARATOR
and the two halves get different styles (first bold, second italic).
"""

from src.bot.utils import escape_markdown
from src.core.domain.bilingual import DisplayMode, split_paired_line
from src.core.domain.consecration_content import ConsecrationPrayer
from src.core.domain.prayer_history import DayStatus
from src.core.domain.prayers import BilingualPrayer


class MarkdownFormatter:
    """
    Telegram markdown formatter with automatic escaping.

    Every method escapes special characters, so escape_markdown() can't be
    forgotten.

    Usage:
        from src.bot.formatters import md

        text = f"Today: {md.bold(category.display_name)}"
    """

    @staticmethod
    def bold(*parts: str | int | float) -> str:
        """
        Bold text, parts joined with spaces.

        Example:
            md.bold("Streak:", 3)  # "*Streak: 3*"
        """
        escaped = " ".join(escape_markdown(str(p)) for p in parts)
        return f"*{escaped}*"

    @staticmethod
    def italic(*parts: str | int | float) -> str:
        escaped = " ".join(escape_markdown(str(p)) for p in parts)
        return f"_{escaped}_"

    @staticmethod
    def code(text: str) -> str:
        """Inline code; no escaping inside code spans."""
        return f"`{text}`"

    @staticmethod
    def text(*parts: str | int | float) -> str:
        """Plain escaped text."""
        return " ".join(escape_markdown(str(p)) for p in parts)

    @staticmethod
    def link(text: str, url: str) -> str:
        """[escaped_text](url) - the URL is not escaped."""
        return f"[{escape_markdown(text)}]({url})"


md = MarkdownFormatter()


def render_formatted_text(formatted: str) -> str:
    """
    Turn formatter output into Telegram Markdown.

    Paired line "f|||g" -> "*f*\\n_g_", single line -> escaped text,
    blank line stays blank.
    """
    rendered: list[str] = []
    for line in formatted.split("\n"):
        first, second = split_paired_line(line)
        if second is None:
            rendered.append(md.text(first) if first else "")
        else:
            rendered.append(f"{md.bold(first)}\n{md.italic(second)}")
    return "\n".join(rendered)


def render_prayer(prayer: BilingualPrayer, mode: DisplayMode) -> str:
    return f"{md.bold(prayer.title.upper())}\n\n{render_formatted_text(prayer.formatted(mode))}"


def render_consecration_prayer(prayer: ConsecrationPrayer, mode: DisplayMode) -> str:
    title = prayer.display_title(mode).upper()
    return f"{md.bold(title)}\n\n{render_formatted_text(prayer.formatted(mode))}"


WEEKDAY_LETTERS = "SMTWTFS"


def render_week(week: list[DayStatus]) -> str:
    """
    Sunday-first week row, e.g.:

        S M T W T F S
        ✅ ✅ ▫️ ✅ ▫️ ▫️ ▫️
    """
    letters = " ".join(WEEKDAY_LETTERS[(d.day.isoweekday() % 7)] for d in week)
    marks = " ".join("✅" if d.prayed else "▫️" for d in week)
    return f"`{letters}`\n{marks}"

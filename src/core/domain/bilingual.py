"""
Bilingual Text Rules - pairing of parallel English/Latin prayer texts.

AICODE-NOTE: Pure functions, no DB, no side-effects.
The result is a plain string; paired lines carry PAIR_SEPARATOR between the
two halves and the presentation layer splits on it (see split_paired_line).
"""

from dataclasses import dataclass
from enum import Enum

# Reserved token between the first-language and second-language halves.
PAIR_SEPARATOR = "|||"


class DisplayMode(str, Enum):
    """Which language(s) to show and in which order."""

    primary_only = "primary_only"
    secondary_only = "secondary_only"
    primary_then_secondary = "primary_then_secondary"
    secondary_then_primary = "secondary_then_primary"


@dataclass(frozen=True)
class BilingualText:
    """Two parallel texts of one prayer (primary = English, secondary = Latin)."""

    primary: str
    secondary: str


@dataclass(frozen=True)
class FormattedLine:
    """
    One output line.

    - first and second set: paired line
    - only first set: single-language line
    - both empty: blank spacer
    """

    first: str = ""
    second: str | None = None

    @property
    def is_blank(self) -> bool:
        return not self.first and not self.second

    @property
    def is_paired(self) -> bool:
        return bool(self.first) and bool(self.second)

    def render(self) -> str:
        if self.is_paired:
            return f"{self.first}{PAIR_SEPARATOR}{self.second}"
        return self.first


def pair_lines(first: str, second: str) -> list[FormattedLine] | None:
    """
    Pair two texts line by line.

    Returns None when the line counts differ: partial pairing would put
    lines against the wrong translation, so callers fall back to blocks.

    An empty first-language line drops its counterpart as well, even when
    the second-language line has content.
    """
    first_lines = first.split("\n")
    second_lines = second.split("\n")

    if len(first_lines) != len(second_lines):
        return None

    result: list[FormattedLine] = []
    for first_line, second_line in zip(first_lines, second_lines):
        f = first_line.strip()
        g = second_line.strip()

        if not f and not g:
            result.append(FormattedLine())
        elif not f:
            continue
        elif not g:
            result.append(FormattedLine(first=f))
        else:
            result.append(FormattedLine(first=f, second=g))

    return result


def _ordered(text: BilingualText, mode: DisplayMode) -> tuple[str, str]:
    if mode == DisplayMode.secondary_then_primary:
        return text.secondary, text.primary
    return text.primary, text.secondary


def format_bilingual(text: BilingualText, mode: DisplayMode) -> str:
    """
    Build the renderable block for a prayer.

    Single-language modes return the text verbatim. Paired modes interleave
    lines, or return "first\\n\\nsecond" when line counts differ.
    """
    if mode == DisplayMode.primary_only:
        return text.primary
    if mode == DisplayMode.secondary_only:
        return text.secondary

    first, second = _ordered(text, mode)
    lines = pair_lines(first, second)
    if lines is None:
        return first + "\n\n" + second

    return "\n".join(line.render() for line in lines)


def split_paired_line(line: str) -> tuple[str, str | None]:
    """Split a formatted line back into (first, second); second is None if unpaired."""
    if PAIR_SEPARATOR not in line:
        return line, None
    first, second = line.split(PAIR_SEPARATOR, 1)
    return first, second

"""
Pydantic schemas for the Mini App API.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from src.core.domain.bilingual import split_paired_line
from src.core.domain.consecration import TOTAL_DAYS, ConsecrationPhase
from src.core.domain.journal_rules import JournalEntryType
from src.core.domain.mysteries import MysteryCategory
from src.core.domain.prayer_language import PrayerLanguage

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


# ============ User Schemas ============


class UserResponse(BaseModel):
    """User profile with settings."""

    model_config = ConfigDict(from_attributes=True)

    telegram_id: int
    username: str | None = None
    first_name: str | None = None

    prayer_language: str
    text_size_scale: float
    reminder_time: str
    timezone_offset: int
    reminders_enabled: bool


class SettingsUpdate(BaseModel):
    """PATCH body; omitted fields are left unchanged."""

    prayer_language: PrayerLanguage | None = None
    text_size_scale: float | None = Field(default=None, ge=0.0, le=1.0)
    reminder_time: str | None = Field(default=None, pattern=TIME_PATTERN)
    timezone_offset: int | None = Field(default=None, ge=-12, le=14)
    reminders_enabled: bool | None = None


# ============ Mystery / Schedule Schemas ============


class MysteryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    order: int
    scripture_reference: str


class MysterySetResponse(BaseModel):
    category: MysteryCategory
    display_name: str
    subtitle: str
    days_prayed: list[str]
    mysteries: list[MysteryResponse]


class ScheduleTodayResponse(BaseModel):
    day: date
    weekday: int  # 1 = Sunday ... 7 = Saturday
    day_label: str
    mystery_set: MysterySetResponse


# ============ Prayer Schemas ============


class PrayerListItem(BaseModel):
    prayer_id: str
    title: str


class PrayerLine(BaseModel):
    """One rendered line; second is set only for paired lines."""

    first: str
    second: str | None = None

    @classmethod
    def from_text(cls, text: str) -> list["PrayerLine"]:
        """Split formatter output into lines, unpacking paired ones."""
        lines = []
        for line in text.split("\n"):
            first, second = split_paired_line(line)
            lines.append(cls(first=first, second=second))
        return lines


class PrayerResponse(BaseModel):
    prayer_id: str
    title: str
    language: PrayerLanguage
    text: str
    lines: list[PrayerLine]


# ============ Session Schemas ============


class SessionCreate(BaseModel):
    category: MysteryCategory
    duration_seconds: int | None = Field(default=None, ge=0)
    meditation_type: str | None = Field(default=None, max_length=100)
    completed_at: datetime | None = None  # future values are rejected with 422


class SessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category: MysteryCategory
    completed_at: datetime
    duration_seconds: int | None = None
    duration_label: str | None = None
    meditation_type: str | None = None


class SessionRecordedResponse(BaseModel):
    session_id: int
    total_count: int
    current_streak: int
    longest_streak: int
    first_today: bool


# ============ Stats Schemas ============


class DayStatusResponse(BaseModel):
    day: date
    prayed: bool


class StatsResponse(BaseModel):
    total: int
    by_category: dict[str, int]  # every category, zero included
    current_streak: int
    longest_streak: int
    this_week: int
    this_month: int
    week: list[DayStatusResponse]


class CalendarResponse(BaseModel):
    """Sunday-first weeks; None pads days outside the month."""

    year: int
    month: int
    weeks: list[list[DayStatusResponse | None]]


# ============ Journal Schemas ============


class JournalEntryCreate(BaseModel):
    text: str = Field(min_length=1, max_length=10000)
    category: MysteryCategory | None = None
    mystery_title: str | None = Field(default=None, max_length=255)
    mystery_index: int | None = Field(default=None, ge=0)
    is_mid_prayer: bool = False
    consecration_day: int | None = Field(default=None, ge=1, le=TOTAL_DAYS)


class JournalEntryResponse(BaseModel):
    id: int
    entry_type: JournalEntryType
    text: str
    subject: str
    secondary: str | None = None
    category: MysteryCategory | None = None
    mystery_index: int | None = None
    is_mid_prayer: bool
    consecration_day: int | None = None
    consecration_phase: ConsecrationPhase | None = None
    created_at: datetime


# ============ Consecration Schemas ============


class ConsecrationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    active: bool
    start_date: date | None = None
    current_day: int
    phase: ConsecrationPhase | None = None
    completed_days: list[int]
    next_day: int | None = None
    progress: float
    days_remaining: int
    expected_completion: date | None = None
    is_completed: bool
    feast_id: str | None = None
    feast_name: str | None = None


class ConsecrationStart(BaseModel):
    """Optional body of POST /start; feast_id ties the attempt to a feast."""

    feast_id: str | None = Field(default=None, max_length=50)


class FeastResponse(BaseModel):
    feast_id: str
    name: str
    description: str
    next_feast_date: date
    next_start_date: date  # on or after today
    can_start_today: bool


class ConsecrationPrayerResponse(BaseModel):
    prayer_id: str
    title: str
    text: str
    lines: list[PrayerLine]


class ConsecrationDayResponse(BaseModel):
    day_number: int
    day_label: str
    ordinal_label: str
    phase: ConsecrationPhase
    day_within_phase: int
    title: str
    meditation_title: str
    meditation_text: str | None = None
    meditation_source: str | None = None
    journal_prompt: str
    language: PrayerLanguage
    prayers: list[ConsecrationPrayerResponse]

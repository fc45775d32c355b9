"""
Database models for Lumen Viae.

Structure:
- User: Telegram user with prayer settings
- PrayerSession: one completed Rosary (append-only log)
- JournalEntry: reflection written during or after prayer
- ConsecrationProgress: one 33-day consecration attempt
"""

from tortoise import fields, models

from src.core.domain.consecration import ConsecrationPhase
from src.core.domain.journal_rules import JournalEntryType
from src.core.domain.mysteries import MysteryCategory


class User(models.Model):
    """Bot user."""

    id = fields.IntField(primary_key=True)
    telegram_id = fields.BigIntField(unique=True, db_index=True)
    username = fields.CharField(max_length=255, null=True)
    first_name = fields.CharField(max_length=255, null=True)

    # Settings
    prayer_language = fields.CharField(max_length=32, default="Latin & English")
    text_size_scale = fields.FloatField(default=0.5)  # 0.0 small - 1.0 large

    # Daily reminder (HH:MM in the user's timezone)
    reminder_time = fields.CharField(max_length=5, default="06:00")
    timezone_offset = fields.IntField(default=0)  # hours from UTC
    reminders_enabled = fields.BooleanField(default=True)

    # Next reminder in UTC (picked up by /cron/tick)
    next_reminder_at = fields.DatetimeField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)

    prayer_sessions: fields.ReverseRelation["PrayerSession"]
    journal_entries: fields.ReverseRelation["JournalEntry"]
    consecrations: fields.ReverseRelation["ConsecrationProgress"]

    class Meta:
        table = "users"


class PrayerSession(models.Model):
    """
    A completed Rosary.

    Created once per session and never updated; removed only when the user
    clears their history.
    """

    id = fields.IntField(primary_key=True)
    user: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="prayer_sessions", on_delete=fields.CASCADE
    )
    user_id: int  # AICODE-NOTE: MyPy hint for FK (Tortoise auto-creates this)

    category = fields.CharEnumField(MysteryCategory, max_length=20)
    completed_at = fields.DatetimeField(db_index=True)

    duration_seconds = fields.IntField(null=True)
    # e.g. "traditional", "saint_louis_de_montfort", "scriptural"
    meditation_type = fields.CharField(max_length=100, null=True)

    class Meta:
        table = "prayer_sessions"
        ordering = ["-completed_at"]


class JournalEntry(models.Model):
    """Personal reflection tied to a Rosary or a consecration day."""

    id = fields.IntField(primary_key=True)
    user: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="journal_entries", on_delete=fields.CASCADE
    )
    user_id: int

    text = fields.TextField()
    entry_type = fields.CharEnumField(
        JournalEntryType, max_length=20, default=JournalEntryType.rosary
    )

    # Rosary entries
    category = fields.CharEnumField(MysteryCategory, max_length=20, null=True)
    mystery_title = fields.CharField(max_length=255, null=True)  # null = general
    mystery_index = fields.IntField(null=True)  # 0-based within the set
    is_mid_prayer = fields.BooleanField(default=False)

    # Consecration entries
    consecration_day = fields.IntField(null=True)  # 1-34
    consecration_phase = fields.CharEnumField(
        ConsecrationPhase, max_length=30, null=True
    )

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "journal_entries"
        ordering = ["-created_at"]


class ConsecrationProgress(models.Model):
    """
    One attempt at the 33-day consecration.

    Only one attempt per user is active (is_completed=False) at a time.
    """

    id = fields.IntField(primary_key=True)
    user: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="consecrations", on_delete=fields.CASCADE
    )
    user_id: int

    start_date = fields.DateField()
    # Completed day numbers (JSON list of ints 1-34)
    completed_days: list[int] = fields.JSONField(default=list)
    # Marian feast the attempt ends on (core/domain/marian_feasts.py ids)
    feast_id = fields.CharField(max_length=50, null=True)

    is_completed = fields.BooleanField(default=False)
    completed_at = fields.DatetimeField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "consecration_progress"

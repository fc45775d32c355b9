"""
Reminder Service - daily prayer reminder driven by a cron tick.

Simple architecture:
1. User.next_reminder_at holds the next reminder (UTC)
2. /cron/tick is called every N minutes by an external cron
3. All users with next_reminder_at <= now get a reminder
4. next_reminder_at is moved to the same time tomorrow

No scheduler process, just date math.
"""

import logging
from datetime import datetime, time, timedelta, timezone

from aiogram import Bot

from src.core.domain.schedule import category_for_today
from src.database.models import User

logger = logging.getLogger(__name__)

_bot: Bot | None = None


def set_bot(bot: Bot) -> None:
    """Set the bot instance used to send reminders."""
    global _bot
    _bot = bot


def get_bot() -> Bot:
    if _bot is None:
        raise RuntimeError("Bot not initialized in reminders. Call set_bot() first.")
    return _bot


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def calculate_next_reminder_time(
    reminder_time: str, timezone_offset: int, from_datetime: datetime | None = None
) -> datetime:
    """
    Next reminder moment in UTC.

    Args:
        reminder_time: HH:MM in the user's timezone
        timezone_offset: user's offset from UTC in hours (e.g. -5)
        from_datetime: reference moment, aware or naive UTC (default: now)

    Returns:
        Aware UTC datetime strictly after from_datetime
    """
    if from_datetime is None:
        from_datetime = _utcnow()
    if from_datetime.tzinfo is None:
        from_datetime = from_datetime.replace(tzinfo=timezone.utc)

    hour, minute = map(int, reminder_time.split(":"))
    user_tz = timezone(timedelta(hours=timezone_offset))

    user_local_now = from_datetime.astimezone(user_tz)
    local_reminder_dt = datetime.combine(
        user_local_now.date(), time(hour, minute), tzinfo=user_tz
    )

    # Already passed today -> tomorrow
    if local_reminder_dt <= user_local_now:
        local_reminder_dt += timedelta(days=1)

    return local_reminder_dt.astimezone(timezone.utc)


def reminder_text(user: User, now: datetime | None = None) -> str:
    """Reminder message with the mysteries scheduled for the user's day."""
    if now is None:
        now = _utcnow()
    local_day = now.astimezone(timezone(timedelta(hours=user.timezone_offset))).date()
    category = category_for_today(local_day)
    return (
        "🌹 *Time to pray the Rosary*\n\n"
        "A moment of prayer brings peace to the soul.\n"
        f"Today: *{category.display_name} Mysteries*\n\n"
        "Send /today to begin"
    )


async def setup_user_reminders(user: User) -> None:
    """Compute next_reminder_at (or clear it when reminders are off)."""
    if not user.reminders_enabled:
        user.next_reminder_at = None
        await user.save()
        logger.info(f"Reminders disabled for user {user.telegram_id}")
        return

    user.next_reminder_at = calculate_next_reminder_time(
        user.reminder_time, user.timezone_offset
    )
    await user.save()

    logger.info(
        f"Reminder set for user {user.telegram_id}: next={user.next_reminder_at}"
    )


async def send_reminder(user: User, bot: Bot | None = None) -> bool:
    """Send one reminder and schedule the next one. Returns True if delivered."""
    bot = bot or get_bot()
    delivered = False
    try:
        await bot.send_message(
            chat_id=user.telegram_id,
            text=reminder_text(user),
            parse_mode="Markdown",
        )
        delivered = True
        logger.info(f"Reminder sent to user {user.telegram_id}")
    except Exception as e:
        logger.error(f"Failed to send reminder to {user.telegram_id}: {e}")

    # Move on to tomorrow either way so a blocked chat doesn't retry every tick
    user.next_reminder_at = calculate_next_reminder_time(
        user.reminder_time, user.timezone_offset
    )
    await user.save()
    return delivered


async def process_reminders(bot: Bot | None = None) -> dict[str, int]:
    """
    Send all due reminders (called from /cron/tick).

    Returns:
        {"sent": N, "failed": N}
    """
    now_utc = _utcnow()
    stats = {"sent": 0, "failed": 0}

    due_users = await User.filter(
        reminders_enabled=True,
        next_reminder_at__lte=now_utc,
    ).all()

    for user in due_users:
        if await send_reminder(user, bot):
            stats["sent"] += 1
        else:
            stats["failed"] += 1

    logger.info(f"Reminders processed: {stats['sent']} sent, {stats['failed']} failed")
    return stats

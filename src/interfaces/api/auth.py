"""
Telegram WebApp authentication.

The Mini App sends `Authorization: tma <initData>`; initData is signed by
Telegram with HMAC-SHA256 keyed from the bot token.
Reference: https://core.telegram.org/bots/webapps#validating-data-received-via-the-mini-app
"""

import hashlib
import hmac
import json
import time
import urllib.parse
from dataclasses import dataclass

from fastapi import HTTPException, Request, status

from src.config import config


@dataclass
class TelegramUser:
    """User object carried in validated initData."""

    id: int
    first_name: str
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None


def compute_init_data_hash(data: dict[str, str], bot_token: str) -> str:
    """
    Hash Telegram expects for `data` (all fields except "hash").

    data-check-string = sorted "key=value" pairs joined by "\\n";
    secret = HMAC-SHA256(key="WebAppData", msg=bot_token).
    """
    data_check_string = "\n".join(f"{k}={v}" for k, v in sorted(data.items()))
    secret_key = hmac.new(b"WebAppData", bot_token.encode("utf-8"), hashlib.sha256).digest()
    return hmac.new(secret_key, data_check_string.encode("utf-8"), hashlib.sha256).hexdigest()


def validate_init_data(
    init_data: str,
    bot_token: str,
    max_age_seconds: int = 0,
    now: float | None = None,
) -> dict[str, str] | None:
    """
    Check the initData signature (and age, when max_age_seconds > 0).

    Returns:
        The fields without "hash" if valid, None otherwise.
    """
    if not init_data:
        return None

    data = dict(urllib.parse.parse_qsl(init_data, keep_blank_values=True))
    received_hash = data.pop("hash", None)
    if not received_hash:
        return None

    expected_hash = compute_init_data_hash(data, bot_token)
    if not hmac.compare_digest(expected_hash, received_hash):
        return None

    if max_age_seconds > 0:
        auth_date = data.get("auth_date", "")
        if not auth_date.isdigit():
            return None
        current = time.time() if now is None else now
        if current - int(auth_date) > max_age_seconds:
            return None

    return data


def parse_telegram_user(data: dict[str, str]) -> TelegramUser | None:
    user_json = data.get("user")
    if not user_json:
        return None

    try:
        user_data = json.loads(user_json)
        return TelegramUser(
            id=int(user_data["id"]),
            first_name=user_data.get("first_name", ""),
            last_name=user_data.get("last_name"),
            username=user_data.get("username"),
            language_code=user_data.get("language_code"),
        )
    except (json.JSONDecodeError, KeyError, TypeError, ValueError):
        return None


async def get_current_user(request: Request) -> TelegramUser:
    """
    FastAPI dependency for authenticated endpoints.

    Raises:
        HTTPException 401 if initData is missing/invalid/expired,
        403 if the user is not on the ALLOWED_USER_IDS whitelist
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header missing",
        )

    scheme, _, init_data = auth_header.partition(" ")
    if scheme.lower() != "tma" or not init_data:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization format. Expected: tma <initData>",
        )

    validated = validate_init_data(
        init_data,
        config.BOT_TOKEN.get_secret_value(),
        max_age_seconds=config.INIT_DATA_MAX_AGE_SECONDS,
    )
    if validated is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired initData",
        )

    user = parse_telegram_user(validated)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User data not found in initData",
        )

    if config.ALLOWED_USER_IDS and user.id not in config.ALLOWED_USER_IDS:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")

    return user

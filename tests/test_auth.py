"""Tests for Telegram WebApp initData validation."""

import json
import urllib.parse

from src.interfaces.api.auth import (
    compute_init_data_hash,
    parse_telegram_user,
    validate_init_data,
)

BOT_TOKEN = "123456:test-token"
AUTH_DATE = 1_700_000_000


def signed_init_data(token: str = BOT_TOKEN, auth_date: int = AUTH_DATE) -> str:
    fields = {
        "auth_date": str(auth_date),
        "query_id": "AAH",
        "user": json.dumps({"id": 42, "first_name": "Juan", "username": "juan"}),
    }
    fields["hash"] = compute_init_data_hash(fields, token)
    return urllib.parse.urlencode(fields)


def test_valid_init_data() -> None:
    data = validate_init_data(signed_init_data(), BOT_TOKEN)

    assert data is not None
    assert "hash" not in data
    user = parse_telegram_user(data)
    assert user is not None
    assert user.id == 42
    assert user.username == "juan"


def test_wrong_token_rejected() -> None:
    assert validate_init_data(signed_init_data(token="999:other"), BOT_TOKEN) is None


def test_tampered_data_rejected() -> None:
    tampered = signed_init_data().replace("Juan", "Judas")

    assert validate_init_data(tampered, BOT_TOKEN) is None


def test_missing_hash_or_empty() -> None:
    assert validate_init_data("", BOT_TOKEN) is None
    assert validate_init_data("auth_date=1&user=%7B%7D", BOT_TOKEN) is None


def test_expired_init_data() -> None:
    init_data = signed_init_data()

    fresh = validate_init_data(init_data, BOT_TOKEN, max_age_seconds=60, now=AUTH_DATE + 30)
    stale = validate_init_data(init_data, BOT_TOKEN, max_age_seconds=60, now=AUTH_DATE + 120)

    assert fresh is not None
    assert stale is None


def test_user_missing() -> None:
    assert parse_telegram_user({"auth_date": "1"}) is None
    assert parse_telegram_user({"user": "not json"}) is None

"""
Lumen Viae bot entry point.

Development: long polling.
Production: aiohttp webhook server that also serves /health, /cron/tick
(reminders) and proxies /api/* to the FastAPI app for the Mini App.
"""

import asyncio
import logging
import os
from typing import Any

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.fsm.storage.redis import RedisStorage
from aiogram.types import Update
from aiohttp import web
from redis.asyncio import Redis
from tortoise import Tortoise

from src.bot.handlers import register_routers
from src.bot.middlewares.access import AccessMiddleware
from src.bot.middlewares.error_handler import ErrorHandlingMiddleware
from src.config import config
from src.database.config import TORTOISE_ORM
from src.services import reminders

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def on_startup(bot: Bot) -> None:
    await Tortoise.init(config=TORTOISE_ORM)
    await Tortoise.generate_schemas()
    logger.info("Database initialized")

    reminders.set_bot(bot)
    logger.info("Reminders service initialized")


async def on_shutdown() -> None:
    await Tortoise.close_connections()
    logger.info("Database connections closed")


def build_storage() -> RedisStorage | MemoryStorage:
    """FSM storage: Redis in production, memory otherwise."""
    if config.ENVIRONMENT == "production":
        redis = Redis.from_url(config.redis_url, decode_responses=True, encoding="utf-8")
        logger.info(f"Using RedisStorage at {config.REDIS_HOST}:{config.REDIS_PORT}")
        return RedisStorage(redis=redis)
    logger.info("Using MemoryStorage (development mode)")
    return MemoryStorage()


def build_dispatcher() -> Dispatcher:
    dp = Dispatcher(storage=build_storage())

    dp.message.middleware(AccessMiddleware())
    dp.callback_query.middleware(AccessMiddleware())

    # Error handling goes last so it wraps the handlers directly
    dp.message.middleware(ErrorHandlingMiddleware())
    dp.callback_query.middleware(ErrorHandlingMiddleware())

    register_routers(dp)
    return dp


async def health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})


async def cron_tick(request: web.Request) -> web.Response:
    """Send due reminders (called by an external cron service)."""
    token = request.query.get("token")
    if not config.CRON_TOKEN or token != config.CRON_TOKEN.get_secret_value():
        return web.json_response({"error": "Unauthorized"}, status=401)

    stats = await reminders.process_reminders()
    return web.json_response({"status": "ok", "stats": stats})


async def handle_api(request: web.Request) -> web.Response:
    """
    Proxy /api/* to the FastAPI ASGI app.

    AICODE-NOTE: One process serves both the webhook and the Mini App API.
    """
    from src.interfaces.api.main import app as fastapi_app

    scope: dict[str, Any] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": request.method,
        "scheme": request.scheme,
        "path": request.path,
        "query_string": request.query_string.encode(),
        "root_path": "",
        "headers": [(k.lower().encode(), v.encode()) for k, v in request.headers.items()],
        "server": (request.host.split(":")[0], request.url.port or 80),
    }
    body = await request.read()

    status_code = 200
    response_headers: list[tuple[bytes, bytes]] = []
    body_parts: list[bytes] = []

    async def receive() -> dict[str, Any]:
        return {"type": "http.request", "body": body, "more_body": False}

    async def send(message: dict[str, Any]) -> None:
        nonlocal status_code, response_headers
        if message["type"] == "http.response.start":
            status_code = message["status"]
            response_headers = message.get("headers", [])
        elif message["type"] == "http.response.body":
            body_parts.append(message.get("body", b""))

    await fastapi_app(scope, receive, send)  # type: ignore[arg-type]

    headers = {k.decode(): v.decode() for k, v in response_headers}
    return web.Response(status=status_code, headers=headers, body=b"".join(body_parts))


async def run_webhook(bot: Bot, dp: Dispatcher) -> None:
    base_url = (config.WEBHOOK_URL or "").rstrip("/")
    webhook_url = f"{base_url}{config.WEBHOOK_PATH}"
    await bot.set_webhook(webhook_url, drop_pending_updates=True)
    logger.info(f"Webhook set to: {webhook_url}")

    async def handle_webhook(request: web.Request) -> web.Response:
        update = Update(**await request.json())
        await dp.feed_update(bot, update)
        return web.Response()

    async def on_app_startup(app: web.Application) -> None:
        await on_startup(bot)

    async def on_app_shutdown(app: web.Application) -> None:
        await on_shutdown()

    app = web.Application()
    app.router.add_post(config.WEBHOOK_PATH, handle_webhook)
    app.router.add_get("/health", health)
    app.router.add_get("/cron/tick", cron_tick)
    app.router.add_route("*", "/api{path_info:.*}", handle_api)
    app.on_startup.append(on_app_startup)
    app.on_shutdown.append(on_app_shutdown)
    logger.info("FastAPI endpoints mounted at /api/*")

    port = int(os.getenv("PORT", 8080))
    logger.info(f"Starting webhook server on port {port}")
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "0.0.0.0", port)
    await site.start()

    await asyncio.Event().wait()


async def main() -> None:
    bot = Bot(
        token=config.BOT_TOKEN.get_secret_value(),
        default=DefaultBotProperties(parse_mode=ParseMode.MARKDOWN),
    )
    dp = build_dispatcher()

    logger.info(f"Starting Lumen Viae bot in {config.ENVIRONMENT} mode...")

    if config.ENVIRONMENT == "production" and config.WEBHOOK_URL:
        await run_webhook(bot, dp)
        return

    async def _on_startup() -> None:
        await on_startup(bot)

    dp.startup.register(_on_startup)
    dp.shutdown.register(on_shutdown)
    await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())

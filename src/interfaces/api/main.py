"""
FastAPI application for the Telegram Mini App.

REST endpoints the frontend uses for the schedule, prayers, the prayer log,
journal and consecration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tortoise import Tortoise

from src.config import config
from src.database.config import TORTOISE_ORM
from src.interfaces.api.routers import (
    consecration,
    journal,
    prayers,
    schedule,
    sessions,
    stats,
    user,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Own the DB connection when served standalone (run_api.py).

    AICODE-NOTE: Behind the bot's aiohttp proxy the lifespan never runs;
    the bot's startup hook initializes Tortoise there.
    """
    await Tortoise.init(config=TORTOISE_ORM)
    logger.info("Database initialized (API)")
    yield
    await Tortoise.close_connections()


app = FastAPI(
    title="Lumen Viae API",
    description="REST API for the Lumen Viae Telegram Mini App",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# AICODE-NOTE: localhost for dev, Vercel previews and TMA_URL for production
cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
if config.TMA_URL:
    tma_url = config.TMA_URL.rstrip("/")
    cors_origins.append(tma_url)
    logger.info(f"Added TMA URL to CORS origins: {tma_url}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_origin_regex=r"^https://.*\.vercel\.app$|^https?://localhost:\d+$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(user.router)
app.include_router(schedule.router)
app.include_router(prayers.router)
app.include_router(sessions.router)
app.include_router(stats.router)
app.include_router(journal.router)
app.include_router(consecration.router)


@app.get("/api/health")
async def api_health() -> dict[str, str]:
    return {"status": "ok", "service": "lumen-viae-api"}

"""Standalone launcher for the Mini App API (development).

Usage:
    python run_api.py

Docs: http://localhost:8000/api/docs
"""

import logging

import uvicorn

from src.config import config

if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger(__name__).info("Starting Lumen Viae API on http://localhost:8000")

    uvicorn.run(
        "src.interfaces.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=config.ENVIRONMENT == "development",
        log_level=config.LOG_LEVEL.lower(),
    )

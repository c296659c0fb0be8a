"""Centralized runtime configuration.

Loads environment variables (and an optional ``.env`` file) at import time.
Scoring thresholds are contract constants and live in ``constants``, not here.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

_DEFAULT_CORS_ORIGINS = ",".join([
    "http://localhost:3000",      # Next.js dev server
    "http://127.0.0.1:3000",      # Alternative localhost
    "http://localhost:3001",      # Alternative port
])

CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", _DEFAULT_CORS_ORIGINS).split(",")
    if origin.strip()
]


def configure_logging(level: str | None = None) -> None:
    """Install a root handler once; later calls only adjust the level."""
    root = logging.getLogger()
    resolved = getattr(logging, (level or LOG_LEVEL), logging.INFO)
    if not root.handlers:
        logging.basicConfig(
            level=resolved,
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )
    root.setLevel(resolved)

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")


@dataclass(frozen=True)
class Settings:
    db_path: str = "savings.db"
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS


def _env_or_default(key: str, default: str) -> str:
    # an empty variable counts as unset
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def load_settings() -> Settings:
    """Build settings from .env / environment variables."""
    load_dotenv()

    origins = _env_or_default("CORS_ORIGINS", ",".join(DEFAULT_CORS_ORIGINS))
    return Settings(
        db_path=_env_or_default("SAVINGS_DB_PATH", "savings.db"),
        log_level=_env_or_default("LOG_LEVEL", "INFO").upper(),
        cors_origins=tuple(origin.strip() for origin in origins.split(",") if origin.strip()),
    )

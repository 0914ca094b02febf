# core/settings.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _env_number(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", key, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    listings_source: str = "jobs.csv"
    search_debounce_ms: float = 200
    fetch_timeout: float = 10
    default_image: str = "default-logo.png"
    log_level: str = "INFO"
    api_base: Optional[str] = None

    @property
    def search_debounce_seconds(self) -> float:
        return self.search_debounce_ms / 1000.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        listings_source=os.getenv("LISTINGS_SOURCE") or "jobs.csv",
        search_debounce_ms=_env_number("SEARCH_DEBOUNCE_MS", 200),
        fetch_timeout=_env_number("FETCH_TIMEOUT", 10),
        default_image=os.getenv("DEFAULT_IMAGE") or "default-logo.png",
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        api_base=(os.getenv("API_BASE") or "").rstrip("/") or None,
    )

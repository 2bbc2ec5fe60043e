from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:3001",
    "https://rebaapp.com",
    "https://www.rebaapp.com",
    "http://rebaapp.com",
    "http://www.rebaapp.com",
)

MAX_LIST_LIMIT = 50


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = str(raw).strip().lower()
    if v in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if v in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    return int(_env_float(name, float(default)))


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    items = tuple(p.strip() for p in raw.split(",") if p.strip())
    return items or default


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment.

    The API key is only ever passed to the upstream client; nothing else
    should log or echo it.
    """

    rapidapi_key: str
    rapidapi_host: str
    timeout: float
    demo: bool
    default_limit: int
    cors_origins: Tuple[str, ...]
    port: int

    @property
    def has_api_key(self) -> bool:
        return bool(self.rapidapi_key)

    @classmethod
    def from_env(cls) -> "Settings":
        limit = _env_int("REBA_DEFAULT_LIMIT", 10)
        return cls(
            rapidapi_key=os.getenv("RAPIDAPI_KEY", "").strip(),
            rapidapi_host=(
                os.getenv("RAPIDAPI_HOST", "").strip()
                or "realty-in-us.p.rapidapi.com"
            ),
            timeout=max(0.5, _env_float("REBA_TIMEOUT", 10.0)),
            demo=_env_bool("REBA_DEMO", False),
            default_limit=max(1, min(limit, MAX_LIST_LIMIT)),
            cors_origins=_env_list("REBA_CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            port=_env_int("PORT", 3001),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def reset_settings_cache() -> None:
    """Test helper to force env re-read."""

    get_settings.cache_clear()

from __future__ import annotations

from typing import Optional

from reba.config import Settings, get_settings

from .base import PropertyProvider, RawRecord, UpstreamAuthError, UpstreamError
from .demo import DemoProvider
from .realty import RealtyProvider


def get_provider(settings: Optional[Settings] = None) -> PropertyProvider:
    settings = settings or get_settings()
    if settings.demo:
        return DemoProvider()
    return RealtyProvider(
        api_key=settings.rapidapi_key,
        host=settings.rapidapi_host,
        timeout=settings.timeout,
    )


__all__ = [
    "DemoProvider",
    "PropertyProvider",
    "RawRecord",
    "RealtyProvider",
    "UpstreamAuthError",
    "UpstreamError",
    "get_provider",
]

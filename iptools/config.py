"""Environment configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .logging_config import get_logger

logger = get_logger(__name__)


def _str_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name, "").strip()
    return value or default


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("invalid_env_value", name=name, value=value, default=default)
        return default


@dataclass
class Settings:
    """Service settings loaded from the environment."""

    analytics_id: str | None = field(default_factory=lambda: _str_env("ANALYTICS_ID"))
    public_origin: str | None = field(
        default_factory=lambda: _str_env("PUBLIC_ORIGIN")
    )
    host: str = field(default_factory=lambda: _str_env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _int_env("PORT", 8000))
    forwarded_allow_ips: str = field(
        default_factory=lambda: _str_env("FORWARDED_ALLOW_IPS", "127.0.0.1")
    )
    log_level: str = field(default_factory=lambda: _str_env("LOG_LEVEL", "INFO"))
    log_format: str = field(default_factory=lambda: _str_env("LOG_FORMAT", "console"))

    def __post_init__(self) -> None:
        if self.public_origin:
            self.public_origin = self.public_origin.rstrip("/")


def get_settings() -> Settings:
    """Read settings afresh; used as a per-request FastAPI dependency."""
    return Settings()

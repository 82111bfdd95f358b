"""Application configuration."""

import os
from urllib.parse import parse_qs, urlsplit

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

PROFILE_LINK_PREFIX = "user?id="


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    profile_base_url: str = "https://news.ycombinator.com"
    fetch_timeout_seconds: float = 5.0
    show_delay_ms: int = 300
    hide_delay_ms: int = 150
    cache_ttl_seconds: int = 300
    cache_max_entries: int = 100
    popover_width: int = 320
    popover_estimated_height: int = 120
    abort_superseded_fetches: bool = False
    theme: str = "darkNavy"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_username(href: str | None) -> str | None:
    """Extract the username from a profile link address."""
    if not href or not href.startswith(PROFILE_LINK_PREFIX):
        return None
    values = parse_qs(urlsplit(href).query).get("id")
    if not values:
        return None
    username = values[0].strip()
    return username or None

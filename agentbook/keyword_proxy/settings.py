"""Keyword proxy configuration loaded from AGENTBOOK_PROXY_* environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_UPSTREAM_URL = "https://dohrnlovh4gvm3brkohdvkenia0grppp.lambda-url.us-east-1.on.aws/"


class ProxySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="AGENTBOOK_PROXY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    upstream_url: str = DEFAULT_UPSTREAM_URL
    """Hosted function that receives ``?keyword=...``."""

    upstream_timeout: float = 30.0

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3001


@lru_cache(maxsize=1)
def get_settings() -> ProxySettings:
    return ProxySettings()

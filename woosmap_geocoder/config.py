"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for the adapter settings:
API keys, endpoint URL templates, request shape flags, HTTP transport
and logging options.

Configuration can be overridden via environment variables:
- WOOSMAP_PRIVATE_KEY=...
- WOOSMAP_CC_FORMAT=alpha2
- WOOSMAP_COMPONENT_PROFILE=extended
- WOOSMAP_HTTP_TIMEOUT_SECONDS=5
- WOOSMAP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

GEOCODE_ENDPOINT_URL_SSL = "https://api.woosmap.com/address/geocode/json?address=%s"
REVERSE_ENDPOINT_URL_SSL = "https://api.woosmap.com/address/geocode/json?latlng=%F,%F"


class WoosmapConfig(BaseSettings):
    """Woosmap provider configuration.

    Environment variables prefixed with WOOSMAP_.

    The endpoint URLs are printf-style templates: the forward one takes
    the encoded address (``%s``), the reverse one latitude and longitude
    (``%F,%F``). Override them to point an adapter at a test double.
    """

    model_config = SettingsConfigDict(env_prefix="WOOSMAP_")

    public_key: Optional[str] = None
    private_key: Optional[str] = None
    cc_format: Optional[Literal["alpha2", "alpha3"]] = None

    geocode_endpoint_url: str = GEOCODE_ENDPOINT_URL_SSL
    reverse_endpoint_url: str = REVERSE_ENDPOINT_URL_SSL

    default_limit: int = Field(default=5, ge=1)
    include_limit_param: bool = True
    component_profile: Literal["standard", "extended"] = "standard"

    @field_validator("geocode_endpoint_url")
    @classmethod
    def _check_geocode_template(cls, value: str) -> str:
        if "%s" not in value:
            raise ValueError("geocode_endpoint_url must contain a %s placeholder")
        return value

    @field_validator("reverse_endpoint_url")
    @classmethod
    def _check_reverse_template(cls, value: str) -> str:
        if value.count("%F") != 2:
            raise ValueError("reverse_endpoint_url must contain two %F placeholders")
        return value


class HttpConfig(BaseSettings):
    """HTTP transport configuration.

    Environment variables prefixed with WOOSMAP_HTTP_.
    """

    model_config = SettingsConfigDict(env_prefix="WOOSMAP_HTTP_")

    timeout_seconds: float = 10.0
    user_agent: str = "woosmap-geocoder"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with WOOSMAP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="WOOSMAP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.woosmap.component_profile)
        print(config.http.timeout_seconds)
    """

    model_config = SettingsConfigDict(env_prefix="WOOSMAP_APP_")

    woosmap: WoosmapConfig = Field(default_factory=WoosmapConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()

"""
Application settings resolved from the environment.

A frozen dataclass built once per process (lru_cache). Tests that change env
vars call reset_settings_cache() afterwards.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from backend_solkit.config.env import (
    allow_zero_token_transfer,
    get_api_host,
    get_api_port,
    get_log_level,
)


@dataclass(frozen=True)
class Settings:
    """Typed service settings."""

    api_host: str
    api_port: int
    log_level: str
    allow_zero_token_transfer: bool


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the current application settings."""
    return Settings(
        api_host=get_api_host(),
        api_port=get_api_port(),
        log_level=get_log_level(),
        allow_zero_token_transfer=allow_zero_token_transfer(),
    )


def reset_settings_cache() -> None:
    get_settings.cache_clear()

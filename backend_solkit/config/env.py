"""
Environment variable loading for Solkit.

- API_HOST: bind address (default: 0.0.0.0)
- PORT / API_PORT: listen port (default: 3000); PORT wins when both are set
- LOG_LEVEL: structlog level name (default: INFO)
- ALLOW_ZERO_TOKEN_TRANSFER: 1/true to accept amount 0 on /send/token
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is backend_solkit/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def load_solkit_env() -> None:
    """Load .env from project root. Existing process env wins; safe to call repeatedly."""
    if _ENV_PATH.is_file():
        load_dotenv(_ENV_PATH, override=False)


def parse_bool_env(name: str, default: bool = False) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default


def get_api_host() -> str:
    load_solkit_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    """
    Resolve the listen port. Order: PORT > API_PORT > 3000.
    A non-numeric value raises ValueError so misconfiguration fails at startup.
    """
    load_solkit_env()
    raw = (os.getenv("PORT") or os.getenv("API_PORT") or "").strip()
    if not raw:
        return DEFAULT_API_PORT
    port = int(raw)
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    return port


def get_log_level() -> str:
    load_solkit_env()
    return (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()


def allow_zero_token_transfer() -> bool:
    """Return True when /send/token should accept amount 0."""
    load_solkit_env()
    return parse_bool_env("ALLOW_ZERO_TOKEN_TRANSFER", False)

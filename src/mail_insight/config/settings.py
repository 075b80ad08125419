from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

# Importing paths loads .env before we read the environment.
from mail_insight.config import paths  # noqa: F401

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "compound-beta"
DEFAULT_CREDENTIAL_PREFIX = "gsk_"
# Requested temperatures above this are clamped.
MAX_TEMPERATURE = 0.2


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    temperature: float = 0.1
    max_tokens: int = 1000
    timeout_seconds: float = 30.0
    parse_delay_seconds: float = 1.0
    credential_prefix: str = DEFAULT_CREDENTIAL_PREFIX


def _env_float(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", key, raw, default)
        return default


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %s", key, raw, default)
        return default


def load_settings() -> Settings:
    """Build settings from the environment (.env included)."""
    api_key = (os.getenv("GROQ_API_KEY") or "").strip() or None
    temperature = min(max(_env_float("MAIL_INSIGHT_TEMPERATURE", 0.1), 0.0), MAX_TEMPERATURE)

    return Settings(
        api_key=api_key,
        base_url=os.getenv("MAIL_INSIGHT_API_BASE_URL") or DEFAULT_BASE_URL,
        model=os.getenv("MAIL_INSIGHT_MODEL") or DEFAULT_MODEL,
        temperature=temperature,
        max_tokens=max(1, _env_int("MAIL_INSIGHT_MAX_TOKENS", 1000)),
        timeout_seconds=max(0.0, _env_float("MAIL_INSIGHT_TIMEOUT_SECONDS", 30.0)),
        parse_delay_seconds=max(0.0, _env_float("MAIL_INSIGHT_PARSE_DELAY_SECONDS", 1.0)),
        credential_prefix=os.getenv("MAIL_INSIGHT_CREDENTIAL_PREFIX") or DEFAULT_CREDENTIAL_PREFIX,
    )

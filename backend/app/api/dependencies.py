from __future__ import annotations

from pathlib import Path
from typing import Any

from mail_insight.config.paths import SESSION_PATH
from mail_insight.config.settings import Settings, load_settings


def get_settings() -> Settings:
    return load_settings()


def get_ai_client() -> Any:
    # None lets the analysis client build one from the configured credential.
    return None


def get_session_path() -> Path:
    return SESSION_PATH

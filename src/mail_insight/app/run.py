# src/mail_insight/app/run.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from mail_insight.config.settings import Settings, load_settings
from mail_insight.fixtures.samples import SAMPLES
from mail_insight.pipeline.orchestrator import process_text

logger = logging.getLogger(__name__)


def load_input(*, file: Optional[Path] = None, sample: Optional[str] = None, stdin_text: str = "") -> str:
    """Pick the raw email text: a file, a named sample, or whatever came on stdin."""
    if file is not None:
        return file.read_text(encoding="utf-8", errors="replace")
    if sample is not None:
        if sample not in SAMPLES:
            raise ValueError(f"Unknown sample {sample!r}; choose one of {', '.join(sorted(SAMPLES))}")
        return SAMPLES[sample]
    return stdin_text


def run_once(
    *,
    text: str,
    advanced: bool = False,
    settings: Optional[Settings] = None,
    client: Any = None,
) -> Dict[str, Any]:
    """
    Process one email and return a machine-readable summary.

    Args:
        text: Raw email text.
        advanced: If True, run the AI analysis (or its local fallback) too.

    Returns:
        dict summary (JSON-serializable).

    Raises:
        EmptyInputError: if the text is empty.
    """
    settings = settings or load_settings()
    logger.debug("Processing %d characters (advanced=%s)", len(text), advanced)

    processed = process_text(text, advanced=advanced, settings=settings, client=client)
    summary = processed.to_dict()

    if processed.outcome is not None:
        logger.info("Analysis produced via %s", processed.outcome.path.value)
    return summary

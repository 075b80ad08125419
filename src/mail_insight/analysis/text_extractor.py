from __future__ import annotations

import re
from typing import List, Optional

from mail_insight.models import AnalysisResult, empty_entities, normalize_sentiment, normalize_urgency

DEFAULT_CONTEXTUAL_TYPE = "General Communication"

_CONTEXTUAL_TYPE_RE = re.compile(r"contextual type:?\s*([^.\n]+)", re.IGNORECASE)
_SENTIMENT_RE = re.compile(r"sentiment analysis:?\s*([^.\n]+)", re.IGNORECASE)
_URGENCY_RE = re.compile(r"urgency level:?\s*([^.\n]+)", re.IGNORECASE)
_INSIGHTS_RE = re.compile(
    r"key insights:?\s*([\s\S]*?)(?:sentiment analysis|urgency level|suggested actions|entity recognition|\Z)",
    re.IGNORECASE,
)
_ACTIONS_RE = re.compile(r"suggested actions:?\s*([\s\S]*?)(?:entity recognition|\Z)", re.IGNORECASE)
_LIST_SPLIT_RE = re.compile(r"\n-|\n•|\n\d+\.")


def extract_from_text(response_text: str) -> AnalysisResult:
    """
    Recover analysis fields from a free-text backend answer.

    Starts from the same defaults as the heuristic path; a field is only
    overwritten when its label is found. Entities are not recovered here.
    """
    text = response_text or ""

    contextual_type = _scalar(_CONTEXTUAL_TYPE_RE, text) or DEFAULT_CONTEXTUAL_TYPE
    sentiment = normalize_sentiment(_scalar(_SENTIMENT_RE, text))
    urgency = normalize_urgency(_scalar(_URGENCY_RE, text))

    return AnalysisResult(
        contextual_type=contextual_type,
        key_insights=_section_items(_INSIGHTS_RE, text),
        sentiment_analysis=sentiment,
        urgency_level=urgency,
        suggested_actions=_section_items(_ACTIONS_RE, text),
        entity_recognition=empty_entities(),
    )


def _scalar(pattern: re.Pattern[str], text: str) -> Optional[str]:
    match = pattern.search(text)
    if not match:
        return None
    return match.group(1).strip() or None


def _section_items(pattern: re.Pattern[str], text: str) -> List[str]:
    match = pattern.search(text)
    if not match or not match.group(1):
        return []
    return split_list(match.group(1))


def split_list(section: str) -> List[str]:
    """Split a bulleted or numbered block into its items."""
    # Leading newline so the first bullet splits like the rest.
    parts = _LIST_SPLIT_RE.split("\n" + section.strip("\n"))
    return [part.strip() for part in parts if part.strip()]

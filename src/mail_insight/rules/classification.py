from __future__ import annotations

from mail_insight.rules.builtins import (
    CARRIER_RULES,
    CATEGORY_RULES,
    DEFAULT_TONE,
    EMAIL_TYPE_RULES,
    GENERAL,
    GENERAL_CORRESPONDENCE,
    TONE_RULES,
    UNKNOWN_CARRIER,
    VERIFICATION_TRIGGER_RULES,
    Tone,
)
from mail_insight.rules.core import first_match


def classify_email_type(text: str) -> str:
    """Coarse type label used by the basic parse result."""
    return first_match(EMAIL_TYPE_RULES, text, GENERAL_CORRESPONDENCE)


def has_verification_trigger(text: str) -> bool:
    return first_match(VERIFICATION_TRIGGER_RULES, text, False)


def classify_category(text: str) -> str:
    """Shipping is checked before order, so a shipped order stays a shipping notification."""
    return first_match(CATEGORY_RULES, text, GENERAL)


def detect_carrier(text: str) -> str:
    return first_match(CARRIER_RULES, text, UNKNOWN_CARRIER)


def assess_tone(text: str) -> Tone:
    """Return (sentiment, urgency) from the first matching vocabulary."""
    return first_match(TONE_RULES, text, DEFAULT_TONE)

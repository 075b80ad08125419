from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

NOT_FOUND = "Not found"
NO_URLS = "No URLs found"
NO_ADDRESSES = "No email addresses found"

SENTIMENTS = ("Positive", "Negative", "Neutral", "Urgent")
URGENCY_LEVELS = ("High", "Medium", "Low")
ENTITY_CATEGORIES = ("people", "organizations", "locations", "dates")


def empty_entities() -> Dict[str, List[str]]:
    return {category: [] for category in ENTITY_CATEGORIES}


@dataclass(frozen=True)
class BasicParseResult:
    subject: str
    from_addr: str
    to: str
    date: str
    cc: str
    bcc: str
    reply_to: str
    message_id: str
    urls: str
    email_addresses: str
    type: str
    verification_code: Optional[str] = None
    # Computed for later fields, not part of the emitted mapping.
    body: str = field(default="", repr=False)

    def to_dict(self) -> Dict[str, str]:
        data = {
            "subject": self.subject,
            "from": self.from_addr,
            "to": self.to,
            "date": self.date,
            "cc": self.cc,
            "bcc": self.bcc,
            "replyTo": self.reply_to,
            "messageId": self.message_id,
            "urls": self.urls,
            "emailAddresses": self.email_addresses,
            "type": self.type,
        }
        if self.verification_code is not None:
            data["verificationCode"] = self.verification_code
        return data


@dataclass(frozen=True)
class AnalysisResult:
    contextual_type: str
    key_insights: List[str]
    sentiment_analysis: str
    urgency_level: str
    suggested_actions: List[str]
    entity_recognition: Dict[str, List[str]] = field(default_factory=empty_entities)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contextualType": self.contextual_type,
            "keyInsights": list(self.key_insights),
            "sentimentAnalysis": self.sentiment_analysis,
            "urgencyLevel": self.urgency_level,
            "suggestedActions": list(self.suggested_actions),
            "entityRecognition": {k: list(v) for k, v in self.entity_recognition.items()},
        }


class AnalysisPath(str, Enum):
    STRUCTURED = "structured"
    TEXT_FALLBACK = "text_fallback"
    HEURISTIC_FALLBACK = "heuristic_fallback"


@dataclass(frozen=True)
class AnalysisOutcome:
    """Analysis result plus the stage that produced it."""
    path: AnalysisPath
    result: AnalysisResult
    notice: Optional[str] = None


@dataclass(frozen=True)
class ConnectedEmail:
    id: str
    subject: str
    from_addr: str
    date: str
    preview: str
    body: str
    important: bool = False
    analyzed: bool = False
    analyzing: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "subject": self.subject,
            "from": self.from_addr,
            "date": self.date,
            "preview": self.preview,
            "body": self.body,
            "important": self.important,
            "analyzed": self.analyzed,
            "analyzing": self.analyzing,
        }


def _closed_set_value(value: Any, allowed: tuple[str, ...], default: str) -> str:
    # Backends answer "High - needs a reply today"; keep the leading label only.
    if not isinstance(value, str):
        return default
    cleaned = value.strip().lower()
    for label in allowed:
        if cleaned.startswith(label.lower()):
            return label
    return default


def normalize_sentiment(value: Any, default: str = "Neutral") -> str:
    return _closed_set_value(value, SENTIMENTS, default)


def normalize_urgency(value: Any, default: str = "Low") -> str:
    return _closed_set_value(value, URGENCY_LEVELS, default)


def normalize_entities(value: Any) -> Dict[str, List[str]]:
    """
    Coerce a backend entity map into category -> list of strings.
    The four standard categories are always present; extra categories are kept.
    """
    entities = empty_entities()
    if not isinstance(value, Mapping):
        return entities

    for category, items in value.items():
        if isinstance(items, str):
            items = [items]
        if not isinstance(items, list):
            continue
        entities[str(category)] = [str(item).strip() for item in items if str(item).strip()]
    return entities

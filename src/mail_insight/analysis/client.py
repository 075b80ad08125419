from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional

from openai import APIError, OpenAI

from mail_insight.analysis.heuristic import simulate
from mail_insight.analysis.text_extractor import extract_from_text
from mail_insight.config.settings import Settings, load_settings
from mail_insight.errors import AnalysisParseFailure, BackendUnavailable
from mail_insight.models import (
    AnalysisOutcome,
    AnalysisPath,
    AnalysisResult,
    normalize_entities,
    normalize_sentiment,
    normalize_urgency,
)

logger = logging.getLogger(__name__)

NO_CREDENTIAL_NOTICE = "No API key configured; using local analysis"

SYSTEM_PROMPT = (
    "You are an email analysis expert. Analyze the provided email and extract detailed information.\n"
    "Return a single JSON object with exactly these keys:\n"
    "- contextualType: the specific type of email (e.g. Order Confirmation, Shipping Notification, "
    "Marketing, Newsletter)\n"
    "- keyInsights: 3-5 detailed facts from the email (20-30 words each). For shipping emails include "
    "origin, destination, carrier, tracking number and estimated delivery date; for order confirmations "
    "include order number, items, total cost and payment method; for marketing include the main offer, "
    "expiration date, discount and target audience\n"
    "- sentimentAnalysis: one of Positive, Negative, Neutral, Urgent\n"
    "- urgencyLevel: one of High, Medium, Low\n"
    "- suggestedActions: 2-3 specific next steps based on the email content\n"
    "- entityRecognition: an object with the lists people, organizations, locations, dates\n"
    "Extract actual data from the email, not placeholders. If a detail is missing, write "
    "\"Not found in email\" instead of leaving it blank.\n"
    "Do not use markdown decoration (such as ** or code fences) in keys or values."
)

_CODE_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def has_usable_credential(credential: Optional[str], prefix: str) -> bool:
    return bool(credential) and credential.strip().startswith(prefix)


def build_client(credential: str, settings: Settings) -> OpenAI:
    # One request per analysis: SDK retries would multiply outbound calls.
    return OpenAI(
        api_key=credential.strip(),
        base_url=settings.base_url,
        timeout=settings.timeout_seconds,
        max_retries=0,
    )


def analyze(
    text: str,
    credential: Optional[str],
    *,
    settings: Optional[Settings] = None,
    client: Any = None,
) -> AnalysisResult:
    """Analyze email text; never raises, see analyze_with_path."""
    return analyze_with_path(text, credential, settings=settings, client=client).result


def analyze_with_path(
    text: str,
    credential: Optional[str],
    *,
    settings: Optional[Settings] = None,
    client: Any = None,
) -> AnalysisOutcome:
    """
    Run the AI analysis with its fallback chain.

    - no credential, or one without the expected prefix: local heuristics, no network
    - backend request fails: local heuristics on the original text
    - backend answers with something that is not a JSON object: text extraction on the answer
    - otherwise: the structured answer, with defaults for missing or ill-typed fields

    Args:
        client: optional pre-built OpenAI-compatible client (must expose
            chat.completions.create); built from the credential if omitted.
    """
    settings = settings or load_settings()
    credential = (credential or "").strip()

    if not has_usable_credential(credential, settings.credential_prefix):
        if credential:
            logger.warning("Credential does not start with %r; using local analysis", settings.credential_prefix)
            notice = None
        else:
            logger.info(NO_CREDENTIAL_NOTICE)
            notice = NO_CREDENTIAL_NOTICE
        return AnalysisOutcome(AnalysisPath.HEURISTIC_FALLBACK, simulate(text), notice)

    if client is None:
        client = build_client(credential, settings)

    try:
        content = request_completion(client, text, settings)
    except (APIError, BackendUnavailable) as exc:
        logger.warning("AI backend unavailable (%s: %s); using local analysis", type(exc).__name__, exc)
        return AnalysisOutcome(AnalysisPath.HEURISTIC_FALLBACK, simulate(text))

    try:
        payload = decode_structured(content)
    except AnalysisParseFailure as exc:
        logger.warning("AI response is not structured (%s); extracting fields from text", exc)
        return AnalysisOutcome(AnalysisPath.TEXT_FALLBACK, extract_from_text(content))

    return AnalysisOutcome(AnalysisPath.STRUCTURED, result_from_payload(payload))


def request_completion(client: Any, text: str, settings: Settings) -> str:
    resp = client.chat.completions.create(
        model=settings.model,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": text},
        ],
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
    )

    choices = getattr(resp, "choices", None) or []
    if not choices:
        raise BackendUnavailable("Backend returned no choices.")

    content = getattr(choices[0].message, "content", None)
    if not isinstance(content, str) or not content.strip():
        raise BackendUnavailable("Backend returned an empty message.")
    return content


def _json_candidate(text: str) -> str:
    t = text.strip()

    # Prefer fenced JSON if present.
    m = _CODE_FENCE_RE.search(t)
    if m:
        return m.group(1).strip()

    # Otherwise, try the outermost object-looking substring.
    start = t.find("{")
    end = t.rfind("}")
    if 0 <= start < end:
        return t[start : end + 1]

    return t


def decode_structured(content: str) -> Dict[str, Any]:
    try:
        data = json.loads(_json_candidate(content))
    except json.JSONDecodeError as exc:
        raise AnalysisParseFailure(f"invalid JSON: {exc.msg}") from exc

    if not isinstance(data, dict):
        raise AnalysisParseFailure(f"expected a JSON object, got {type(data).__name__}")
    return data


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if str(item).strip()]


def result_from_payload(payload: Dict[str, Any]) -> AnalysisResult:
    """Map a structured answer onto AnalysisResult; partial answers are kept."""
    contextual_type = payload.get("contextualType")
    if not isinstance(contextual_type, str) or not contextual_type.strip():
        contextual_type = "Unknown"

    return AnalysisResult(
        contextual_type=contextual_type.strip(),
        key_insights=_string_list(payload.get("keyInsights")),
        sentiment_analysis=normalize_sentiment(payload.get("sentimentAnalysis")),
        urgency_level=normalize_urgency(payload.get("urgencyLevel")),
        suggested_actions=_string_list(payload.get("suggestedActions")),
        entity_recognition=normalize_entities(payload.get("entityRecognition")),
    )

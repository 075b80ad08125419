from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from mail_insight.analysis.client import analyze_with_path
from mail_insight.config.settings import Settings, load_settings
from mail_insight.models import AnalysisOutcome, BasicParseResult, ConnectedEmail
from mail_insight.parsing.parser import parse


@dataclass(frozen=True)
class ProcessedEmail:
    basic: BasicParseResult
    outcome: Optional[AnalysisOutcome] = None
    email: Optional[ConnectedEmail] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"basic": self.basic.to_dict()}
        if self.outcome is not None:
            data["analysis"] = self.outcome.result.to_dict()
            data["path"] = self.outcome.path.value
            data["notice"] = self.outcome.notice
        if self.email is not None:
            data["email"] = self.email.to_dict()
        return data


def process_text(
    text: str,
    *,
    advanced: bool = False,
    credential: Optional[str] = None,
    settings: Optional[Settings] = None,
    client: Any = None,
) -> ProcessedEmail:
    """
    Basic parse, then the AI analysis when `advanced` is set.
    EmptyInputError from the parse stops the pipeline before any analysis.
    """
    basic = parse(text)
    if not advanced:
        return ProcessedEmail(basic=basic)

    settings = settings or load_settings()
    if credential is None:
        credential = settings.api_key
    outcome = analyze_with_path(text, credential, settings=settings, client=client)
    return ProcessedEmail(basic=basic, outcome=outcome)


def process_connected_email(
    email: ConnectedEmail,
    *,
    credential: Optional[str] = None,
    settings: Optional[Settings] = None,
    client: Any = None,
) -> ProcessedEmail:
    # Only the body feeds the pipeline; the returned copy is flagged as analyzed.
    processed = process_text(
        email.body,
        advanced=True,
        credential=credential,
        settings=settings,
        client=client,
    )
    return replace(processed, email=replace(email, analyzed=True, analyzing=False))

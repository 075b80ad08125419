from __future__ import annotations

import pytest

from mail_insight.analysis.client import NO_CREDENTIAL_NOTICE
from mail_insight.config.settings import Settings
from mail_insight.errors import EmptyInputError
from mail_insight.fixtures.samples import FACEBOOK_SECURITY_EMAIL
from mail_insight.mailbox.mock import MockMailbox
from mail_insight.models import AnalysisPath
from mail_insight.pipeline.orchestrator import process_connected_email, process_text


class ExplodingClient:
    def __getattr__(self, name: str):
        raise AssertionError("backend should not be contacted")


def test_basic_mode_skips_analysis() -> None:
    processed = process_text(FACEBOOK_SECURITY_EMAIL)

    assert processed.outcome is None
    assert processed.to_dict() == {"basic": processed.basic.to_dict()}
    assert processed.basic.verification_code == "123456"


def test_advanced_mode_without_key_uses_local_analysis() -> None:
    processed = process_text(FACEBOOK_SECURITY_EMAIL, advanced=True, settings=Settings(api_key=None))

    data = processed.to_dict()
    assert data["path"] == AnalysisPath.HEURISTIC_FALLBACK.value
    assert data["notice"] == NO_CREDENTIAL_NOTICE
    assert len(data["analysis"]["keyInsights"]) == 3


def test_empty_input_stops_before_analysis() -> None:
    with pytest.raises(EmptyInputError):
        process_text("  ", advanced=True, credential="gsk_key", settings=Settings(), client=ExplodingClient())


def test_explicit_credential_overrides_settings() -> None:
    settings = Settings(api_key="gsk_from_settings")

    processed = process_text("hello", advanced=True, credential="", settings=settings, client=ExplodingClient())

    assert processed.outcome is not None
    assert processed.outcome.path is AnalysisPath.HEURISTIC_FALLBACK


def test_connected_email_is_analyzed_from_body() -> None:
    email = MockMailbox().fetch_recent(2)[1]

    processed = process_connected_email(email, settings=Settings(api_key=None))

    assert processed.email is not None
    assert processed.email.analyzed is True
    assert processed.email.analyzing is False
    assert processed.email.id == email.id
    assert processed.basic.verification_code == "847291"
    assert processed.outcome is not None
    assert processed.outcome.result.sentiment_analysis == "Urgent"
    assert email.analyzed is False

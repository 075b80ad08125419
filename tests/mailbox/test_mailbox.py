from __future__ import annotations

from datetime import datetime, timezone
from typing import List

import pytest

from mail_insight.errors import FetchFailure
from mail_insight.mailbox.mock import MockMailbox
from mail_insight.mailbox.service import fetch_recent
from mail_insight.mailbox.session import MailboxSession
from mail_insight.models import ConnectedEmail


class BrokenMailbox:
    def fetch_recent(self, count: int = 10) -> List[ConnectedEmail]:
        raise ConnectionError("IMAP server went away")


def test_fetch_requires_connected_session() -> None:
    with pytest.raises(FetchFailure, match="No email provider connected"):
        fetch_recent(MailboxSession())


def test_fetch_rejects_unknown_provider() -> None:
    session = MailboxSession(provider="aol", provider_name="AOL", connected=True)

    with pytest.raises(FetchFailure, match="Unsupported"):
        fetch_recent(session)


def test_provider_errors_become_fetch_failures() -> None:
    session = MailboxSession.for_provider("mock")

    with pytest.raises(FetchFailure) as excinfo:
        fetch_recent(session, factories={"mock": BrokenMailbox})

    assert isinstance(excinfo.value.__cause__, ConnectionError)
    assert "MockMail" in str(excinfo.value)


def test_fetch_from_mock_provider() -> None:
    emails = fetch_recent(MailboxSession.for_provider("mock"), 3)

    assert [e.id for e in emails] == ["mock-email-1", "mock-email-2", "mock-email-3"]
    assert all(not e.analyzed and not e.analyzing for e in emails)


def test_mock_mailbox_dates_are_relative_to_now() -> None:
    now = datetime(2025, 4, 25, 12, 0, tzinfo=timezone.utc)

    emails = MockMailbox(now=now).fetch_recent(2)

    assert emails[0].date == "2025-04-24T12:00:00+00:00"
    assert emails[1].date == "2025-04-25T11:00:00+00:00"
    assert MockMailbox(now=now).fetch_recent(0) == []


def test_for_provider_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        MailboxSession.for_provider("outlook")

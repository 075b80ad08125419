from __future__ import annotations

import logging
from typing import Callable, Dict, List, Protocol

from mail_insight.errors import FetchFailure
from mail_insight.mailbox.session import GMAIL, MOCK, MailboxSession
from mail_insight.models import ConnectedEmail

logger = logging.getLogger(__name__)


class Mailbox(Protocol):
    def fetch_recent(self, count: int = 10) -> List[ConnectedEmail]: ...


def _gmail_mailbox() -> Mailbox:
    # Imported lazily so the Google client stack is only loaded when Gmail is used.
    from mail_insight.mailbox.gmail import GmailMailbox, load_gmail_config

    return GmailMailbox(load_gmail_config())


def _mock_mailbox() -> Mailbox:
    from mail_insight.mailbox.mock import MockMailbox

    return MockMailbox()


DEFAULT_FACTORIES: Dict[str, Callable[[], Mailbox]] = {
    GMAIL: _gmail_mailbox,
    MOCK: _mock_mailbox,
}


def fetch_recent(
    session: MailboxSession,
    count: int = 10,
    *,
    factories: Dict[str, Callable[[], Mailbox]] | None = None,
) -> List[ConnectedEmail]:
    """
    Fetch the latest messages from the session's provider.

    Raises:
        FetchFailure: no provider connected, or the provider failed. Not retried.
    """
    if not session.connected or not session.provider:
        raise FetchFailure("No email provider connected. Please connect to an email provider first.")

    factory = (factories or DEFAULT_FACTORIES).get(session.provider)
    if factory is None:
        raise FetchFailure(f"Unsupported email provider: {session.provider}")

    try:
        emails = factory().fetch_recent(count)
    except FetchFailure:
        raise
    except Exception as exc:
        logger.error("Fetching emails from %s failed: %s: %s", session.provider_name, type(exc).__name__, exc)
        raise FetchFailure(f"Failed to fetch emails from {session.provider_name or session.provider}: {exc}") from exc

    logger.info("Fetched %d emails from %s", len(emails), session.provider_name)
    return emails

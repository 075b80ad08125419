from __future__ import annotations

from dataclasses import dataclass

GMAIL = "gmail"
MOCK = "mock"

PROVIDER_NAMES = {
    GMAIL: "Gmail",
    MOCK: "MockMail",
}


@dataclass
class MailboxSession:
    """
    Connection context for the mailbox collaborator.
    Passed explicitly to whatever needs it; analysis code never sees it.
    """
    provider: str = ""
    provider_name: str = ""
    connected: bool = False

    @classmethod
    def for_provider(cls, provider: str) -> "MailboxSession":
        if provider not in PROVIDER_NAMES:
            raise ValueError(f"Unknown mailbox provider: {provider!r}")
        return cls(provider=provider, provider_name=PROVIDER_NAMES[provider], connected=True)

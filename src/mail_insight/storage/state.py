from __future__ import annotations
import json
from dataclasses import asdict
from pathlib import Path

from mail_insight.mailbox.session import PROVIDER_NAMES, MailboxSession

# Only the connection context is persisted; parsed emails never are.

def load_session(path: Path) -> MailboxSession:
    if not path.exists():
        return MailboxSession()
    data = json.loads(path.read_text(encoding="utf-8"))
    # Keep load resilient to legacy/extra fields.
    provider = str(data.get("provider") or data.get("email_provider") or "")
    # Legacy files stored "icloud" for the offline demo mailbox.
    if provider == "icloud":
        provider = "mock"
    connected = data.get("connected", data.get("email_connected", False))
    if isinstance(connected, str):
        connected = connected.strip().lower() == "true"
    return MailboxSession(
        provider=provider,
        provider_name=str(
            data.get("provider_name") or data.get("email_provider_name") or PROVIDER_NAMES.get(provider, "")
        ),
        connected=bool(connected) and bool(provider),
    )

def save_session(path: Path, session: MailboxSession) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(session), indent=2), encoding="utf-8")

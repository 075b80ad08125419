from __future__ import annotations

import json
from pathlib import Path

from mail_insight.mailbox.session import MailboxSession
from mail_insight.storage.state import load_session, save_session


def test_missing_file_means_disconnected(tmp_path: Path) -> None:
    session = load_session(tmp_path / "session.json")

    assert session == MailboxSession()
    assert not session.connected


def test_load_session_supports_legacy_keys(tmp_path: Path) -> None:
    session_path = tmp_path / "session.json"
    session_path.write_text(
        json.dumps(
            {
                "email_provider": "icloud",
                "email_connected": "true",
                "email_provider_name": "MockMail",
            }
        ),
        encoding="utf-8",
    )

    session = load_session(session_path)

    assert session.provider == "mock"
    assert session.provider_name == "MockMail"
    assert session.connected is True


def test_connected_flag_requires_provider(tmp_path: Path) -> None:
    session_path = tmp_path / "session.json"
    session_path.write_text(json.dumps({"connected": True}), encoding="utf-8")

    assert load_session(session_path).connected is False


def test_save_session_writes_normalized_keys(tmp_path: Path) -> None:
    session_path = tmp_path / "nested" / "session.json"

    save_session(session_path, MailboxSession.for_provider("gmail"))
    payload = json.loads(session_path.read_text(encoding="utf-8"))

    assert payload == {"provider": "gmail", "provider_name": "Gmail", "connected": True}
    assert "email_provider" not in payload
    assert load_session(session_path) == MailboxSession("gmail", "Gmail", True)

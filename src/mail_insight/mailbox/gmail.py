from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from mail_insight.config.paths import SECRETS_DIR
from mail_insight.models import ConnectedEmail
from mail_insight.parsing.payload import extract_body_from_payload, headers_from_payload


# Readonly is enough for fetching messages to analyze.
SCOPES = ["https://www.googleapis.com/auth/gmail.readonly"]


@dataclass(frozen=True)
class GmailClientConfig:
    # Path to OAuth client credentials downloaded from Google Cloud Console.
    credentials_path: Path
    # Token cache will be created here after first login.
    token_path: Path
    # Gmail userId, "me" refers to the authenticated user.
    user_id: str = "me"


def load_gmail_config() -> GmailClientConfig:
    credentials_path = SECRETS_DIR / "credentials.json"
    token_path = SECRETS_DIR / "gmail_token.json"
    if not credentials_path.exists() and not token_path.exists():
        raise RuntimeError(
            f"Missing Gmail credentials at {credentials_path}. "
            "Did you configure MAIL_INSIGHT_SECRETS_DIR?"
        )
    return GmailClientConfig(
        credentials_path=credentials_path,
        token_path=token_path,
        user_id="me",
    )


def message_to_email(msg: Dict[str, Any]) -> ConnectedEmail:
    payload = msg.get("payload", {}) or {}
    headers = headers_from_payload(payload)
    return ConnectedEmail(
        id=str(msg.get("id", "")),
        subject=headers.get("Subject") or "No Subject",
        from_addr=headers.get("From") or "Unknown Sender",
        date=headers.get("Date", ""),
        preview=msg.get("snippet", ""),
        body=extract_body_from_payload(payload),
        important="IMPORTANT" in (msg.get("labelIds") or []),
    )


class GmailMailbox:
    def __init__(self, cfg: GmailClientConfig):
        self._cfg = cfg
        self._creds: Optional[Credentials] = None
        self._service = None

    def connect(self) -> None:
        """
        Create an authenticated Gmail API service client.
        Credential acquisition is delegated to Google's installed-app flow.
        """
        creds = None

        if self._cfg.token_path.exists():
            creds = Credentials.from_authorized_user_file(str(self._cfg.token_path), SCOPES)

        # If there are no (valid) credentials available, let the user log in.
        if not creds or not creds.valid:
            if creds and creds.expired and creds.refresh_token:
                creds.refresh(Request())
            else:
                flow = InstalledAppFlow.from_client_secrets_file(
                    str(self._cfg.credentials_path),
                    SCOPES,
                )
                creds = flow.run_local_server(port=0)

            # Save the credentials for the next run.
            self._cfg.token_path.parent.mkdir(parents=True, exist_ok=True)
            self._cfg.token_path.write_text(creds.to_json(), encoding="utf-8")

        self._creds = creds
        self._service = build("gmail", "v1", credentials=creds)

    @property
    def service(self):
        if self._service is None:
            raise RuntimeError("GmailMailbox is not connected. Call connect() first.")
        return self._service

    def list_messages(self, query: str = "", max_results: int = 10) -> List[str]:
        resp = (
            self.service.users()
            .messages()
            .list(userId=self._cfg.user_id, q=query, maxResults=max_results)
            .execute()
        )
        msgs = resp.get("messages", [])
        return [m["id"] for m in msgs]

    def get_message(self, message_id: str, fmt: str = "full") -> Dict[str, Any]:
        """
        Fetch a full message resource.
        fmt: 'full' | 'metadata' | 'minimal' | 'raw'
        """
        return (
            self.service.users()
            .messages()
            .get(userId=self._cfg.user_id, id=message_id, format=fmt)
            .execute()
        )

    def fetch_recent(self, count: int = 10) -> List[ConnectedEmail]:
        if self._service is None:
            self.connect()
        return [message_to_email(self.get_message(mid)) for mid in self.list_messages(max_results=count)]

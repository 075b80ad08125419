from __future__ import annotations

import base64

from mail_insight.mailbox.gmail import message_to_email
from mail_insight.parsing.payload import decode_part_data, extract_body_from_payload


def _b64(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def test_decode_part_data_tolerates_missing_padding() -> None:
    assert decode_part_data(_b64("hi!!")) == "hi!!"
    assert decode_part_data(_b64("hello")) == "hello"


def test_multipart_prefers_plain_text() -> None:
    payload = {
        "mimeType": "multipart/alternative",
        "parts": [
            {"mimeType": "text/html", "body": {"data": _b64("<p>html</p>")}},
            {"mimeType": "text/plain", "body": {"data": _b64("plain")}},
        ],
    }

    assert extract_body_from_payload(payload) == "plain"


def test_message_to_email_maps_fields() -> None:
    msg = {
        "id": "18c2",
        "snippet": "Your code is: 4471",
        "labelIds": ["INBOX", "IMPORTANT"],
        "payload": {
            "mimeType": "text/plain",
            "headers": [
                {"name": "Subject", "value": "Sign-in code"},
                {"name": "From", "value": "Acme <no-reply@acme.test>"},
                {"name": "Date", "value": "Fri, 25 Apr 2025 10:00:00 +0000"},
            ],
            "body": {"data": _b64("Your code is: 4471")},
        },
    }

    email = message_to_email(msg)

    assert email.id == "18c2"
    assert email.subject == "Sign-in code"
    assert email.from_addr == "Acme <no-reply@acme.test>"
    assert email.body == "Your code is: 4471"
    assert email.important is True
    assert email.analyzed is False


def test_message_to_email_defaults() -> None:
    email = message_to_email({"id": "x", "payload": {}})

    assert email.subject == "No Subject"
    assert email.from_addr == "Unknown Sender"
    assert email.body == ""
    assert email.important is False

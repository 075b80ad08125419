from __future__ import annotations

from typing import Dict, Optional

from mail_insight.errors import EmptyInputError
from mail_insight.extractors.patterns import (
    BODY_SEPARATOR_RE,
    EMAIL_ADDRESS_RE,
    HEADER_PATTERNS,
    URL_RE,
    VERIFICATION_CODE_RE,
    find_all,
    first_group,
    unique,
)
from mail_insight.models import NO_ADDRESSES, NO_URLS, NOT_FOUND, BasicParseResult
from mail_insight.rules.classification import classify_email_type, has_verification_trigger


def parse(text: str) -> BasicParseResult:
    """
    Extract header fields, addresses, URLs, a coarse type and an optional
    verification code from raw email text.

    Works on any text: headers are looked up by label anywhere in the input,
    and missing ones are reported as "Not found".

    Raises:
        EmptyInputError: if the text is empty or whitespace only.
    """
    if not text or not text.strip():
        raise EmptyInputError()

    headers = extract_headers(text)

    urls = find_all(URL_RE, text)
    addresses = unique(find_all(EMAIL_ADDRESS_RE, text))

    return BasicParseResult(
        subject=headers["subject"],
        from_addr=headers["from"],
        to=headers["to"],
        date=headers["date"],
        cc=headers["cc"],
        bcc=headers["bcc"],
        reply_to=headers["replyTo"],
        message_id=headers["messageId"],
        urls=", ".join(urls) if urls else NO_URLS,
        email_addresses=", ".join(addresses) if addresses else NO_ADDRESSES,
        type=classify_email_type(text),
        verification_code=extract_verification_code(text),
        body=extract_body(text),
    )


def extract_headers(text: str) -> Dict[str, str]:
    # Each label is matched on its own; first occurrence wins.
    headers: Dict[str, str] = {}
    for key, pattern in HEADER_PATTERNS.items():
        headers[key] = first_group(pattern, text) or NOT_FOUND
    return headers


def extract_body(text: str) -> str:
    """Everything after the first blank line, trimmed; the whole text if there is none."""
    parts = BODY_SEPARATOR_RE.split(text, maxsplit=1)
    if len(parts) == 2:
        return parts[1].strip()
    return text


def extract_verification_code(text: str) -> Optional[str]:
    if not has_verification_trigger(text):
        return None
    return first_group(VERIFICATION_CODE_RE, text)

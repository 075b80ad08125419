from __future__ import annotations

import re
from typing import Dict, List, Optional

# --- Basic parse ---

HEADER_LABELS: Dict[str, str] = {
    "subject": "Subject",
    "from": "From",
    "to": "To",
    "date": "Date",
    "cc": "Cc",
    "bcc": "Bcc",
    "replyTo": "Reply-To",
    "messageId": "Message-ID",
}

HEADER_PATTERNS: Dict[str, re.Pattern[str]] = {
    key: re.compile(rf"{re.escape(label)}:(.+?)(?:\r?\n)", re.IGNORECASE)
    for key, label in HEADER_LABELS.items()
}

EMAIL_ADDRESS_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
URL_RE = re.compile(r"https?://\S+", re.IGNORECASE)
BODY_SEPARATOR_RE = re.compile(r"\r?\n\r?\n")

# Same line only: "Security Code\nDate: ..." must not yield "Date".
VERIFICATION_CODE_RE = re.compile(
    r"\bcode(?:[ \t]+is)?[ \t]*:?[ \t]*([a-zA-Z0-9]{4,8})\b",
    re.IGNORECASE,
)

# --- Heuristic analysis ---

# Labelled form first, then a bare token. Only the label ignores case: the
# number itself must be upper case with a digit, so words like "shipping" or
# "information" are never taken for tracking numbers.
TRACKING_LABELLED_RE = re.compile(
    r"(?i:\btracking(?:\s+(?:number|#))?(?:\s+is)?)\s*:?\s*#?\s*(?=[A-Z0-9]*\d)([A-Z0-9]{8,22})\b"
)
TRACKING_BARE_RE = re.compile(r"\b(?=[A-Z0-9]*\d)([A-Z0-9]{8,22})\b")

DELIVERY_DATE_RE = re.compile(
    r"\b(?:delivery|delivered|arrive|arrival|expected)(?:\s+(?:date|on|by))?\s*:?\s*"
    r"([A-Za-z]+\s+\d{1,2}(?:st|nd|rd|th)?,?\s*\d{4}|\d{1,2}/\d{1,2}/\d{2,4}|\d{1,2}-\d{1,2}-\d{2,4})",
    re.IGNORECASE,
)
ORDER_NUMBER_RE = re.compile(r"\border\s*(?:number|#)?\s*:?\s*#?\s*([A-Z0-9-]{5,20})", re.IGNORECASE)
PRICE_RE = re.compile(r"\$\d+\.\d{2}|\$\d+(?:\.\d{2})?|\d+\.\d{2}\s*(?:USD|EUR|GBP)", re.IGNORECASE)
# Items stay on one line and at most eight words may precede the keyword,
# which keeps matching linear on long unpunctuated text.
ITEM_RE = re.compile(
    r"(\b\d+[ \t]*x[ \t]*[A-Za-z0-9 \t-]+)"
    r"|\b((?:[A-Za-z0-9-]+[ \t]+){0,8}[A-Za-z0-9-]*"
    r"(?:headphone|cable|charger|phone|laptop|watch|camera)[A-Za-z0-9 \t-]*)",
    re.IGNORECASE,
)
PAYMENT_METHOD_RE = re.compile(r"\b(visa|mastercard|amex|paypal|credit card|debit card)\b", re.IGNORECASE)

DATE_RE = re.compile(
    r"\b\d{1,2}[-/]\d{1,2}[-/]\d{2,4}\b"
    r"|\b(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]* \d{1,2}(?:st|nd|rd|th)?,? \d{2,4}\b",
    re.IGNORECASE,
)
MONEY_RE = re.compile(r"\$\d+(?:\.\d{2})?|\d+(?:\.\d{2})?\s*(?:usd|eur|gbp)", re.IGNORECASE)

ORGANIZATION_RE = re.compile(
    r"[A-Z][a-z]*(?:\s[A-Z][a-z]+){1,5}\s(?:Inc\.|Corp\.|LLC|Ltd\.)"
    r"|(?:Amazon|UPS|FedEx|USPS|DHL|Apple|Microsoft|Google)"
)


def first_group(pattern: re.Pattern[str], text: str, group: int = 1) -> Optional[str]:
    match = pattern.search(text)
    if not match:
        return None
    value = match.group(group)
    return value.strip() if value else None


def find_all(pattern: re.Pattern[str], text: str) -> List[str]:
    # Whole matches, never capture groups.
    return [m.group(0) for m in pattern.finditer(text)]


def unique(values: List[str]) -> List[str]:
    """Drop duplicates, keeping first-occurrence order."""
    return list(dict.fromkeys(values))

from __future__ import annotations

import base64
from typing import Dict, List, Optional


def decode_part_data(data: str) -> str:
    # Gmail uses URL-safe base64 and may drop the padding.
    padded = data + "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(padded).decode("utf-8", errors="replace")


def extract_body_from_payload(payload: dict) -> str:
    """
    Extract plain text body from Gmail message payload.
    Falls back to HTML if plain text is unavailable.
    """
    def find_part(part: dict, mime_type: str) -> Optional[str]:
        # Depth-first search through multipart payloads.
        if part.get("mimeType") == mime_type and part.get("body", {}).get("data"):
            return decode_part_data(part["body"]["data"])
        for child in part.get("parts", []) or []:
            found = find_part(child, mime_type)
            if found:
                return found
        return None

    if payload.get("body", {}).get("data"):
        return decode_part_data(payload["body"]["data"])

    text = find_part(payload, "text/plain")
    if text:
        return text

    html = find_part(payload, "text/html")
    if html:
        return html

    return ""


def headers_from_payload(payload: dict) -> Dict[str, str]:
    headers: List[dict] = payload.get("headers", []) or []
    return {h.get("name", ""): h.get("value", "") for h in headers}

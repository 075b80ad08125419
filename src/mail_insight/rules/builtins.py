from __future__ import annotations

import re
from typing import List, Tuple

from mail_insight.rules.BaseRule import BaseRule, KeywordRule, PatternRule

# --- Coarse email type (basic parse) ---

GENERAL_CORRESPONDENCE = "General Correspondence"

EMAIL_TYPE_RULES: List[BaseRule[str]] = [
    KeywordRule("newsletter", ["unsubscribe", "newsletter", "subscription"], "Newsletter/Promotional"),
    KeywordRule("transaction", ["invoice", "payment", "receipt"], "Transaction/Receipt"),
    KeywordRule("verification", ["confirm", "verification", "activate"], "Account Verification"),
    KeywordRule("password_reset", ["password", "reset"], "Password Reset"),
]

# Verification codes are only looked for when one of these phrases is present.
VERIFICATION_TRIGGER_RULES: List[BaseRule[bool]] = [
    PatternRule("code_label", re.compile(r"code(?:\s+is)?:", re.IGNORECASE), True),
    KeywordRule("confirmation_code", ["confirmation code"], True),
]

# --- Heuristic analysis ---

SHIPPING = "Shipping Notification"
ORDER = "Order Confirmation"
GENERAL = "General Communication"

CATEGORY_RULES: List[BaseRule[str]] = [
    KeywordRule("shipping", ["ship", "track", "package", "delivery", "ups", "fedex", "usps"], SHIPPING),
    KeywordRule("order", ["order", "purchase", "confirmation", "receipt", "invoice"], ORDER),
]

UNKNOWN_CARRIER = "Unknown"

CARRIER_RULES: List[BaseRule[str]] = [
    KeywordRule("ups", ["ups"], "UPS"),
    KeywordRule("fedex", ["fedex"], "FedEx"),
    KeywordRule("usps", ["usps"], "USPS"),
    KeywordRule("dhl", ["dhl"], "DHL"),
]

# (sentiment, urgency)
Tone = Tuple[str, str]
DEFAULT_TONE: Tone = ("Neutral", "Low")

TONE_RULES: List[BaseRule[Tone]] = [
    KeywordRule("urgent", ["urgent", "immediately", "asap"], ("Urgent", "High")),
    KeywordRule("problem", ["problem", "issue", "concern", "sorry"], ("Negative", "Medium")),
    KeywordRule("gratitude", ["thank", "appreciate", "happy", "pleased"], ("Positive", "Low")),
]

SUGGESTED_ACTIONS = {
    SHIPPING: [
        "Track your package using the provided tracking number",
        "Mark your calendar for the estimated delivery date",
        "Ensure someone will be available to receive the package",
    ],
    ORDER: [
        "Review your order details to ensure everything is correct",
        "Save the order confirmation for your records",
        "Contact customer service if any items are missing or incorrect",
    ],
    GENERAL: [
        "Read the email carefully and note any important information",
        "Respond if a reply is requested or needed",
        "Archive for future reference",
    ],
}

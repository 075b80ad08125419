"""Deterministic analysis used when no AI backend is configured or reachable."""

from __future__ import annotations

from typing import Dict, List

from mail_insight.extractors.patterns import (
    DATE_RE,
    DELIVERY_DATE_RE,
    ITEM_RE,
    MONEY_RE,
    ORDER_NUMBER_RE,
    ORGANIZATION_RE,
    PAYMENT_METHOD_RE,
    PRICE_RE,
    TRACKING_BARE_RE,
    TRACKING_LABELLED_RE,
    URL_RE,
    find_all,
    first_group,
    unique,
)
from mail_insight.models import NOT_FOUND, AnalysisResult, empty_entities
from mail_insight.rules.builtins import ORDER, SHIPPING, SUGGESTED_ACTIONS
from mail_insight.rules.classification import assess_tone, classify_category, detect_carrier

NOT_SPECIFIED = "Not specified"
NO_ITEMS = "Items not specified"
NO_PAYMENT_METHOD = "Payment method not specified"


def simulate(text: str) -> AnalysisResult:
    """
    Build an analysis from keyword and pattern heuristics.

    This is the fallback of last resort, so it accepts any string and
    always returns a complete result with exactly three insights.
    """
    text = text or ""
    category = classify_category(text)

    if category == SHIPPING:
        insights = _shipping_insights(text)
    elif category == ORDER:
        insights = _order_insights(text)
    else:
        insights = _general_insights(text)

    sentiment, urgency = assess_tone(text)

    return AnalysisResult(
        contextual_type=category,
        key_insights=insights,
        sentiment_analysis=sentiment,
        urgency_level=urgency,
        suggested_actions=list(SUGGESTED_ACTIONS[category]),
        entity_recognition=recognize_entities(text),
    )


def extract_tracking_number(text: str) -> str:
    return (
        first_group(TRACKING_LABELLED_RE, text)
        or first_group(TRACKING_BARE_RE, text)
        or NOT_FOUND
    )


def extract_item(text: str) -> str:
    match = ITEM_RE.search(text)
    if not match:
        return NO_ITEMS
    # The character class spans whitespace and dashes, so trim the tail.
    item = " ".join(match.group(0).split()).strip(" -")
    return item or NO_ITEMS


def _shipping_insights(text: str) -> List[str]:
    carrier = detect_carrier(text)
    tracking_number = extract_tracking_number(text)
    delivery_date = first_group(DELIVERY_DATE_RE, text) or NOT_SPECIFIED
    order_number = first_group(ORDER_NUMBER_RE, text) or NOT_FOUND
    price = first_group(PRICE_RE, text, group=0) or NOT_SPECIFIED
    item = extract_item(text)

    return [
        f"Your package is being shipped by {carrier} with tracking number {tracking_number}. "
        f"Estimated delivery date: {delivery_date}.",
        f"Order #{order_number} includes {item}. Total order value: {price}.",
        "The package is currently in transit from the warehouse to your delivery address. "
        "You will receive a notification when it's out for delivery.",
    ]


def _order_insights(text: str) -> List[str]:
    order_number = first_group(ORDER_NUMBER_RE, text) or NOT_FOUND
    price = first_group(PRICE_RE, text, group=0) or NOT_SPECIFIED
    item = extract_item(text)
    payment_method = first_group(PAYMENT_METHOD_RE, text, group=0) or NO_PAYMENT_METHOD

    return [
        f"Order #{order_number} has been confirmed and is being processed. Your order includes {item}.",
        f"Total order amount: {price}, paid via {payment_method}. "
        "A receipt has been sent to your email address.",
        "Your order will be processed within 1-2 business days and you'll receive "
        "a shipping confirmation when it ships.",
    ]


def _general_insights(text: str) -> List[str]:
    dates = find_all(DATE_RE, text)
    amounts = find_all(MONEY_RE, text)
    urls = find_all(URL_RE, text)

    date_part = f"dates mentioned: {dates[0]}" if dates else "no specific dates mentioned"
    money_part = (
        f"Financial amounts mentioned: {', '.join(amounts)}" if amounts else "No financial amounts mentioned"
    )
    link_part = f"Contains links: {urls[0]}" if urls else "No links found"

    return [
        f"This appears to be a general communication email with {date_part}.",
        f"{money_part} in this communication.",
        f"{link_part} in the email content.",
    ]


def recognize_entities(text: str) -> Dict[str, List[str]]:
    # People and locations need real NLP; this path leaves them empty.
    entities = empty_entities()
    entities["organizations"] = unique([m.strip() for m in find_all(ORGANIZATION_RE, text)])
    entities["dates"] = find_all(DATE_RE, text)
    return entities

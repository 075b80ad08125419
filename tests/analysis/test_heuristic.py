from __future__ import annotations

import time

import pytest

from mail_insight.analysis.heuristic import extract_item, extract_tracking_number, recognize_entities, simulate
from mail_insight.fixtures.samples import AMAZON_SHIPPING_EMAIL, FACEBOOK_SECURITY_EMAIL, STANDARD_EMAIL
from mail_insight.models import ENTITY_CATEGORIES, SENTIMENTS, URGENCY_LEVELS


def test_amazon_shipping_email() -> None:
    result = simulate(AMAZON_SHIPPING_EMAIL)

    assert result.contextual_type == "Shipping Notification"
    assert result.key_insights[0] == (
        "Your package is being shipped by Unknown with tracking number 1Z999AA10123456789. "
        "Estimated delivery date: April 26, 2025."
    )
    assert result.key_insights[1] == (
        "Order #123-4567890-1234567 includes 1x Wireless Headphones. Total order value: $149.99."
    )
    assert result.sentiment_analysis == "Positive"
    assert result.urgency_level == "Low"
    assert result.suggested_actions[0] == "Track your package using the provided tracking number"


def test_amazon_entities() -> None:
    entities = recognize_entities(AMAZON_SHIPPING_EMAIL)

    assert entities["organizations"] == ["Amazon"]
    assert entities["dates"] == ["April 26, 2025"]
    assert entities["people"] == []
    assert entities["locations"] == []


def test_order_confirmation() -> None:
    result = simulate("Thanks for your purchase! Order number: AB12345 total $59.99 paid with Visa.")

    assert result.contextual_type == "Order Confirmation"
    assert "Order #AB12345 has been confirmed" in result.key_insights[0]
    assert "Items not specified" in result.key_insights[0]
    assert "$59.99" in result.key_insights[1]
    assert "Visa" in result.key_insights[1]
    assert result.sentiment_analysis == "Positive"


def test_general_communication_mentions_dates_money_and_links() -> None:
    result = simulate("Lunch on 12/05/2024 costs $25.00, details at https://example.org/menu")

    assert result.contextual_type == "General Communication"
    assert result.key_insights == [
        "This appears to be a general communication email with dates mentioned: 12/05/2024.",
        "Financial amounts mentioned: $25.00 in this communication.",
        "Contains links: https://example.org/menu in the email content.",
    ]
    assert result.sentiment_analysis == "Neutral"
    assert result.urgency_level == "Low"


def test_general_communication_without_details() -> None:
    result = simulate("See you soon")

    assert result.key_insights == [
        "This appears to be a general communication email with no specific dates mentioned.",
        "No financial amounts mentioned in this communication.",
        "No links found in the email content.",
    ]


def test_urgent_tone() -> None:
    result = simulate("URGENT: please respond asap")

    assert result.sentiment_analysis == "Urgent"
    assert result.urgency_level == "High"


@pytest.mark.parametrize(
    "text",
    ["", "x", STANDARD_EMAIL, FACEBOOK_SECURITY_EMAIL, AMAZON_SHIPPING_EMAIL, "order placed", "ups"],
)
def test_simulate_shape_is_always_complete(text: str) -> None:
    result = simulate(text)

    assert len(result.key_insights) == 3
    assert len(result.suggested_actions) == 3
    assert result.sentiment_analysis in SENTIMENTS
    assert result.urgency_level in URGENCY_LEVELS
    assert set(ENTITY_CATEGORIES) <= set(result.entity_recognition)


def test_simulate_is_deterministic() -> None:
    assert simulate(AMAZON_SHIPPING_EMAIL) == simulate(AMAZON_SHIPPING_EMAIL)


def test_tracking_number_labelled_and_bare() -> None:
    assert extract_tracking_number("Tracking #: 9400111899223100012345") == "9400111899223100012345"
    assert extract_tracking_number("Shipment 1Z999AA10123456789 left the depot") == "1Z999AA10123456789"
    assert extract_tracking_number("shipping update for our customer") == "Not found"


def test_item_extraction() -> None:
    assert extract_item("2 x USB Cable - $9.99") == "2 x USB Cable"
    assert extract_item("Your new laptop is on the way") == "Your new laptop is on the way"
    assert extract_item("nothing listed") == "Items not specified"


def test_organizations_are_deduplicated() -> None:
    entities = recognize_entities("Apple and Amazon and Apple again, plus Acme Widgets Inc. today")

    assert entities["organizations"] == ["Apple", "Amazon", "Acme Widgets Inc."]


def test_tracking_number_skips_words_after_label() -> None:
    text = "Click for tracking purposes. Tracking number: 1Z999AA10123456789"

    assert extract_tracking_number(text) == "1Z999AA10123456789"


def test_shipping_insight_ignores_tracking_information_phrase() -> None:
    result = simulate("Your package has shipped. See tracking information below.\nTracking number: 1Z999AA10123456789")

    assert "with tracking number 1Z999AA10123456789." in result.key_insights[0]


def test_item_stays_on_one_line() -> None:
    assert extract_item("Order summary\n\n1x USB Cable\nShipped today") == "1x USB Cable"


def test_long_unpunctuated_text_is_handled_quickly() -> None:
    texts = [
        "Your order " + " ".join(["word"] * 6000),
        "Shipping " + " ".join(["Word"] * 6000),
    ]

    for text in texts:
        started = time.perf_counter()
        result = simulate(text)
        elapsed = time.perf_counter() - started

        assert len(result.key_insights) == 3
        assert elapsed < 2.0

from __future__ import annotations

from mail_insight.analysis.text_extractor import extract_from_text, split_list

FREE_TEXT_ANSWER = """Contextual Type: Newsletter
Key Insights:
- Weekly digest of product news
- Contains a 20% discount code
Sentiment Analysis: Positive
Urgency Level: Medium - reply this week
Suggested Actions:
1. Read the digest
2. Archive the email
"""


def test_extracts_labelled_fields() -> None:
    result = extract_from_text(FREE_TEXT_ANSWER)

    assert result.contextual_type == "Newsletter"
    assert result.key_insights == ["Weekly digest of product news", "Contains a 20% discount code"]
    assert result.sentiment_analysis == "Positive"
    assert result.urgency_level == "Medium"
    assert result.suggested_actions == ["Read the digest", "Archive the email"]


def test_missing_labels_keep_defaults() -> None:
    result = extract_from_text("I could not analyze this email.")

    assert result.contextual_type == "General Communication"
    assert result.key_insights == []
    assert result.sentiment_analysis == "Neutral"
    assert result.urgency_level == "Low"
    assert result.suggested_actions == []
    assert result.entity_recognition == {"people": [], "organizations": [], "locations": [], "dates": []}


def test_entities_are_not_recovered_from_text() -> None:
    result = extract_from_text("Entity Recognition: Amazon, UPS")

    assert result.entity_recognition["organizations"] == []


def test_first_label_occurrence_wins() -> None:
    result = extract_from_text("Sentiment Analysis: Negative\nSentiment Analysis: Positive")

    assert result.sentiment_analysis == "Negative"


def test_split_list_handles_bullets_and_numbers() -> None:
    assert split_list("• one\n• two") == ["one", "two"]
    assert split_list("\n1. first\n2. second\n") == ["first", "second"]
    assert split_list("- only") == ["only"]
    assert split_list("   ") == []

"""Tests for sentiment scoring and both urgency models."""

import pytest

from src.analysis import SentimentScorer, keyword_urgency, score_urgency


def test_neutral_text(scorer):
    result = scorer.analyze("Hello there")
    assert result.score == 0
    assert result.magnitude == 0
    assert result.urgency == "low"


def test_single_negative_word(scorer):
    result = scorer.analyze("There is an issue with the tap")
    assert result.score == pytest.approx(-0.1)
    assert result.magnitude == pytest.approx(0.2)
    assert result.urgency == "medium"


def test_six_negative_words_is_high(scorer):
    result = scorer.analyze("urgent emergency dangerous unsafe critical broken")
    assert result.score == pytest.approx(-0.6)
    assert result.urgency == "high"


def test_five_negative_words_sits_on_boundary(scorer):
    """A score of exactly -0.5 is medium; high needs a score below -0.5."""
    result = scorer.analyze("issue problem broken terrible bad")
    assert result.score == pytest.approx(-0.5)
    assert result.urgency == "medium"


def test_score_is_clamped(scorer):
    result = scorer.analyze(" ".join(["bad"] * 12))
    assert result.score == -1.0
    assert result.magnitude == 2.0
    assert result.urgency == "high"


def test_tokens_match_exactly(scorer):
    """Punctuation attached to a word prevents a match."""
    assert scorer.analyze("big problem.").score == 0
    assert scorer.analyze("URGENT repair").score == pytest.approx(-0.1)


def test_failure_returns_default(scorer):
    outcome = scorer.run(None)
    assert not outcome.ok
    assert outcome.value.score == 0
    assert outcome.value.urgency == "low"


def test_custom_negative_words():
    scorer = SentimentScorer(negative_words={"Leaking"})
    assert scorer.analyze("pipe leaking").score == pytest.approx(-0.1)
    assert scorer.analyze("pipe broken").score == 0


@pytest.mark.parametrize(
    "score, expected",
    [(-1.0, "high"), (-0.51, "high"), (-0.5, "medium"), (-0.01, "medium"), (0.0, "low"), (0.4, "low")],
)
def test_score_urgency_thresholds(score, expected):
    assert score_urgency(score) == expected


def test_keyword_urgency_two_urgent_keywords_is_high():
    result = keyword_urgency("this is urgent and an emergency")
    assert result.urgency_score == pytest.approx(0.4)
    assert result.urgency == "high"


def test_keyword_urgency_single_urgent_keyword_is_medium():
    assert keyword_urgency("The water pipe near my house is leaking badly, this is urgent").urgency == "medium"


def test_keyword_urgency_matches_substrings():
    """'danger' is found inside 'dangerous'."""
    result = keyword_urgency("dangerous wiring")
    assert result.urgency_score == pytest.approx(0.2)


def test_keyword_urgency_low_without_urgent_words():
    result = keyword_urgency("the road is bad")
    assert result.score == pytest.approx(-0.1)
    assert result.urgency == "low"


def test_keyword_urgency_medium_for_repeated_complaints():
    result = keyword_urgency("bad and broken road")
    assert result.score == pytest.approx(-0.2)
    assert result.urgency == "medium"


def test_keyword_urgency_failure_is_medium():
    result = keyword_urgency(None)
    assert result.urgency == "medium"
    assert result.urgency_score == 0

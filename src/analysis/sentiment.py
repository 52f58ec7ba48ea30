"""Keyword-based sentiment scoring and urgency models"""
from __future__ import annotations

from typing import AbstractSet, Sequence

from config import logger
from src.core import KeywordUrgencyResult, SentimentResult, StageOutcome, Urgency
from src.analysis.lexicon import COMPLAINT_KEYWORDS, NEGATIVE_WORDS, URGENT_KEYWORDS

FALLBACK = SentimentResult(score=0.0, magnitude=0.0, urgency="low")
KEYWORD_URGENCY_FALLBACK = KeywordUrgencyResult(score=0.0, urgency_score=0.0, urgency="medium")

URGENT_KEYWORD_WEIGHT = 0.2
COMPLAINT_KEYWORD_PENALTY = 0.1


def score_urgency(score: float) -> Urgency:
    """
    Map a sentiment score to an urgency level

    Args:
        score: Sentiment score in [-1, 1]

    Returns:
        'high' below -0.5, 'medium' below 0, otherwise 'low'
    """
    if score < -0.5:
        return "high"
    if score < 0:
        return "medium"
    return "low"


def keyword_urgency(
    text: str,
    urgent_keywords: Sequence[str] = URGENT_KEYWORDS,
    complaint_keywords: Sequence[str] = COMPLAINT_KEYWORDS,
) -> KeywordUrgencyResult:
    """
    Urgency from urgent-keyword increments

    Each urgent keyword contained in the lower-cased text adds 0.2 to the
    urgency score and each complaint keyword subtracts 0.1 from the
    sentiment score. Matching is by substring, so 'danger' also matches
    'dangerous'.

    Args:
        text: Complaint text
        urgent_keywords: Keywords that raise urgency
        complaint_keywords: Keywords that lower the sentiment score

    Returns:
        KeywordUrgencyResult; 'high' from an urgency score of 0.4, 'low' when
        no urgent keyword matched and the sentiment score is above -0.2,
        'medium' otherwise. Returns a medium-urgency default on failure
    """
    try:
        lowered = text.lower()
        urgent_hits = sum(1 for keyword in urgent_keywords if keyword in lowered)
        complaint_hits = sum(1 for keyword in complaint_keywords if keyword in lowered)

        urgency_score = urgent_hits * URGENT_KEYWORD_WEIGHT
        score = -complaint_hits * COMPLAINT_KEYWORD_PENALTY

        urgency: Urgency = "medium"
        if urgency_score >= 0.4:
            urgency = "high"
        elif urgency_score < 0.1 and score > -0.2:
            urgency = "low"

        return KeywordUrgencyResult(score=score, urgency_score=urgency_score, urgency=urgency)
    except Exception:
        logger.exception("Keyword urgency scoring failed")
        return KEYWORD_URGENCY_FALLBACK


class SentimentScorer:
    """Scores negativity by counting negative words among whitespace tokens"""

    def __init__(self, negative_words: AbstractSet[str] = NEGATIVE_WORDS) -> None:
        self.negative_words = frozenset(word.lower() for word in negative_words)

    def run(self, text: str) -> StageOutcome[SentimentResult]:
        """
        Score text, reporting failures instead of raising

        Tokens are compared whole, so 'problem.' with trailing punctuation
        does not count as 'problem'.
        """
        try:
            negative_count = sum(1 for token in text.lower().split() if token in self.negative_words)
            score = max(-1.0, min(1.0, -negative_count / 10))
            return StageOutcome[SentimentResult](
                value=SentimentResult(
                    score=score,
                    magnitude=abs(score) * 2,
                    urgency=score_urgency(score),
                )
            )
        except Exception as e:
            logger.exception("Sentiment analysis failed")
            return StageOutcome[SentimentResult](value=FALLBACK, error=repr(e))

    def analyze(self, text: str) -> SentimentResult:
        return self.run(text).value

"""Duplicate complaint detection by word overlap"""
from __future__ import annotations

from typing import FrozenSet, Sequence

from config import logger
from src.core import ComplaintSummary, SimilarityResult, StageOutcome

DEFAULT_THRESHOLD = 0.3
DEFAULT_MIN_WORD_LENGTH = 3


def jaccard(left: FrozenSet[str], right: FrozenSet[str]) -> float:
    """Size of the intersection over size of the union, 0 for two empty sets"""
    union = left | right
    if not union:
        return 0.0
    return len(left & right) / len(union)


class SimilarityFinder:
    """
    Finds prior complaints sharing enough significant words with a new one

    Attributes:
        threshold: Similarity a complaint must strictly exceed to be reported
        min_word_length: Words this long or shorter are ignored
    """

    def __init__(
        self,
        threshold: float = DEFAULT_THRESHOLD,
        min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
    ) -> None:
        self.threshold = threshold
        self.min_word_length = min_word_length

    def word_set(self, text: str) -> FrozenSet[str]:
        return frozenset(word for word in text.lower().split() if len(word) > self.min_word_length)

    def run(self, text: str, corpus: Sequence[ComplaintSummary]) -> StageOutcome[SimilarityResult]:
        """
        Compare text with each prior complaint, reporting failures instead of raising

        Args:
            text: Complaint text (already translated to the working language)
            corpus: Prior complaints to compare against

        Returns:
            StageOutcome with matching complaints sorted by created_at,
            newest first, and the highest similarity among them
        """
        try:
            words = self.word_set(text)
            matches: list[ComplaintSummary] = []
            highest = 0.0

            for complaint in corpus:
                similarity = jaccard(words, self.word_set(complaint.text))
                if similarity > self.threshold:
                    matches.append(complaint)
                    highest = max(highest, similarity)

            matches.sort(key=lambda c: c.created_at, reverse=True)
            if matches:
                logger.info(f"Found {len(matches)} similar complaints (highest={highest:.2f})")
            return StageOutcome[SimilarityResult](
                value=SimilarityResult(similar_complaints=tuple(matches), highest_similarity_score=highest)
            )
        except Exception as e:
            logger.exception("Similarity detection failed")
            return StageOutcome[SimilarityResult](value=SimilarityResult(), error=repr(e))

    def find_similar(self, text: str, corpus: Sequence[ComplaintSummary]) -> SimilarityResult:
        return self.run(text, corpus).value

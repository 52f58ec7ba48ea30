"""Keyword-based department classification"""
from __future__ import annotations

from typing import Sequence, Tuple

from config import logger
from src.core import ClassificationResult, Department, StageOutcome
from src.analysis.lexicon import DEPARTMENT_KEYWORDS

NO_MATCH_CONFIDENCE = 0.3
FULL_CONFIDENCE_HITS = 5
FALLBACK = ClassificationResult(department=Department.GENERAL, confidence=0.0, tags=())


class DepartmentClassifier:
    """
    Routes complaint text to the department whose keywords it mentions most

    Departments are evaluated in the order of the keyword table; a later
    department only wins with a strictly higher count. Keywords are matched
    as substrings of the lower-cased text, so 'watering' matches 'water'.

    Attributes:
        keywords: Ordered (department, keywords) pairs
    """

    def __init__(
        self,
        keywords: Sequence[Tuple[Department, Sequence[str]]] = DEPARTMENT_KEYWORDS,
    ) -> None:
        self.keywords = tuple((Department(dept), tuple(words)) for dept, words in keywords)

    def run(self, text: str) -> StageOutcome[ClassificationResult]:
        """
        Classify text, reporting failures instead of raising

        Returns:
            StageOutcome with the classification. Tags list every matched
            keyword in first-seen order across all departments
        """
        try:
            lowered = text.lower()
            best = Department.GENERAL
            highest = 0
            tags: list[str] = []

            for department, words in self.keywords:
                count = 0
                for word in words:
                    if word in lowered:
                        count += 1
                        if word not in tags:
                            tags.append(word)
                if count > highest:
                    highest = count
                    best = department

            confidence = min(1.0, highest / FULL_CONFIDENCE_HITS) if highest > 0 else NO_MATCH_CONFIDENCE
            logger.debug(f"Classified as {best.value} ({highest} keyword hits)")
            return StageOutcome[ClassificationResult](
                value=ClassificationResult(department=best, confidence=confidence, tags=tuple(tags))
            )
        except Exception as e:
            logger.exception("Department classification failed")
            return StageOutcome[ClassificationResult](value=FALLBACK, error=repr(e))

    def classify(self, text: str) -> ClassificationResult:
        return self.run(text).value

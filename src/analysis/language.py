"""Script-based language detection"""
from __future__ import annotations

import re
from typing import Sequence

from config import logger
from src.core import DEFAULT_LANGUAGE, LanguageDetectionResult, StageOutcome
from src.analysis.lexicon import SCRIPT_RANGES, ScriptRange

SCRIPT_MATCH_CONFIDENCE = 0.9
DEFAULT_LANGUAGE_CONFIDENCE = 0.8
FALLBACK = LanguageDetectionResult(detected_language=DEFAULT_LANGUAGE, confidence=0.5)


class LanguageDetector:
    """
    Detects Hindi, Tamil or English from the Unicode blocks present in text

    Script rules are evaluated in order and the first block with any matching
    character decides the language. Text with no matching block is English.
    """

    def __init__(self, script_ranges: Sequence[ScriptRange] = SCRIPT_RANGES) -> None:
        self._rules = tuple(
            (rng.language, re.compile(f"[{rng.first}-{rng.last}]"))
            for rng in script_ranges
        )

    def run(self, text: str) -> StageOutcome[LanguageDetectionResult]:
        """
        Detect the language of text, reporting failures instead of raising

        Returns:
            StageOutcome whose value is the detection, or (en, 0.5) with
            the error message when detection failed
        """
        try:
            for language, pattern in self._rules:
                if pattern.search(text):
                    return StageOutcome[LanguageDetectionResult](
                        value=LanguageDetectionResult(
                            detected_language=language,
                            confidence=SCRIPT_MATCH_CONFIDENCE,
                        )
                    )
            return StageOutcome[LanguageDetectionResult](
                value=LanguageDetectionResult(
                    detected_language=DEFAULT_LANGUAGE,
                    confidence=DEFAULT_LANGUAGE_CONFIDENCE,
                )
            )
        except Exception as e:
            logger.exception("Language detection failed")
            return StageOutcome[LanguageDetectionResult](value=FALLBACK, error=repr(e))

    def detect(self, text: str) -> LanguageDetectionResult:
        return self.run(text).value

"""Ports (interfaces) for the complaint analysis stages"""
from typing import Optional, Protocol, Sequence

from src.core.models import (
    AnalysisResult,
    ClassificationResult,
    ComplaintSummary,
    LanguageDetectionResult,
    SentimentResult,
    SimilarityResult,
    StageOutcome,
    SupportedLanguage,
    TranslationResult,
)


class ILanguageDetector(Protocol):
    """Interface for language detection"""

    def run(self, text: str) -> StageOutcome[LanguageDetectionResult]:
        ...

    def detect(self, text: str) -> LanguageDetectionResult:
        """
        Detect the language of a complaint

        Args:
            text (str): Raw complaint text

        Returns:
            LanguageDetectionResult: Language code and confidence, never raises
        """
        ...


class ITranslationProvider(Protocol):
    """Interface for translation backends (phrase table, remote service, ...)"""

    def run(
        self,
        text: str,
        target_language: SupportedLanguage = "en",
        source_language: Optional[SupportedLanguage] = None,
    ) -> StageOutcome[TranslationResult]:
        ...

    def translate(
        self,
        text: str,
        target_language: SupportedLanguage = "en",
        source_language: Optional[SupportedLanguage] = None,
    ) -> TranslationResult:
        """
        Translate text into the target language

        Args:
            text (str): Text to translate
            target_language (SupportedLanguage): Language to translate into
            source_language (Optional[SupportedLanguage]): Detected when omitted

        Returns:
            TranslationResult: Original and translated text, never raises
        """
        ...


class ISentimentScorer(Protocol):
    """Interface for sentiment and urgency scoring"""

    def run(self, text: str) -> StageOutcome[SentimentResult]:
        ...

    def analyze(self, text: str) -> SentimentResult:
        ...


class IDepartmentClassifier(Protocol):
    """Interface for department classification"""

    def run(self, text: str) -> StageOutcome[ClassificationResult]:
        ...

    def classify(self, text: str) -> ClassificationResult:
        ...


class ISimilarityFinder(Protocol):
    """Interface for duplicate complaint detection"""

    def run(self, text: str, corpus: Sequence[ComplaintSummary]) -> StageOutcome[SimilarityResult]:
        ...

    def find_similar(self, text: str, corpus: Sequence[ComplaintSummary]) -> SimilarityResult:
        ...


class IAnalysisPipeline(Protocol):
    """Interface for the full complaint analysis"""

    def analyze(
        self,
        text: str,
        existing_complaints: Optional[Sequence[ComplaintSummary]] = None,
    ) -> AnalysisResult:
        """
        Analyze a complaint

        Args:
            text (str): Raw complaint text
            existing_complaints (Optional[Sequence[ComplaintSummary]]): Prior complaints to compare against

        Returns:
            AnalysisResult: Language, translation, sentiment, department and similar complaints
        """
        ...

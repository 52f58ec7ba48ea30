"""Complaint analysis pipeline"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from config import logger
from src.core import (
    DEFAULT_LANGUAGE,
    AnalysisResult,
    ComplaintSummary,
    SimilarityResult,
    StageOutcome,
    SupportedLanguage,
    TranslationResult,
)
from src.core.ports.analysis import (
    IDepartmentClassifier,
    ILanguageDetector,
    ISentimentScorer,
    ISimilarityFinder,
    ITranslationProvider,
)
from src.analysis.classifier import FALLBACK as CLASSIFICATION_FALLBACK, DepartmentClassifier
from src.analysis.language import FALLBACK as LANGUAGE_FALLBACK, LanguageDetector
from src.analysis.sentiment import FALLBACK as SENTIMENT_FALLBACK, SentimentScorer
from src.analysis.similarity import SimilarityFinder
from src.analysis.translation import ReferenceTranslator


class AnalysisPipeline:
    """
    Runs the analysis stages over a complaint and assembles the result

    Order of stages:
    1. Detect the language of the raw text
    2. Translate to English when another language was detected
    3. Score sentiment, classify the department and find similar complaints
       on the (translated) text; these three are independent and run on a
       thread pool when parallel is enabled

    Each stage is called through its own guard: a reported failure or a
    raised exception is replaced by that stage's default and recorded in
    AnalysisResult.stage_errors, so the other stages keep their results.
    A failed translation falls back to the untranslated text. Faults outside
    the stages (e.g. an unreadable existing_complaints) are caught once and
    reported in AnalysisResult.error with the results gathered so far.
    """

    def __init__(
        self,
        detector: Optional[ILanguageDetector] = None,
        translator: Optional[ITranslationProvider] = None,
        sentiment_scorer: Optional[ISentimentScorer] = None,
        department_classifier: Optional[IDepartmentClassifier] = None,
        similarity_finder: Optional[ISimilarityFinder] = None,
        parallel: bool = True,
        max_workers: int = 3,
    ) -> None:
        self.detector = detector or LanguageDetector()
        self.translator = translator or ReferenceTranslator(detector=self.detector)
        self.sentiment_scorer = sentiment_scorer or SentimentScorer()
        self.department_classifier = department_classifier or DepartmentClassifier()
        self.similarity_finder = similarity_finder or SimilarityFinder()
        self.parallel = parallel
        self.max_workers = max_workers

    def analyze(
        self,
        text: str,
        existing_complaints: Optional[Sequence[ComplaintSummary]] = None,
    ) -> AnalysisResult:
        """
        Analyze a complaint

        Args:
            text: Raw complaint text, in any supported language
            existing_complaints: Prior complaints to check for duplicates

        Returns:
            AnalysisResult; never raises
        """
        stage_errors: Dict[str, str] = {}

        detection = LANGUAGE_FALLBACK
        translation: Optional[TranslationResult] = None
        sentiment_result = SENTIMENT_FALLBACK
        classification = CLASSIFICATION_FALLBACK
        similarity = SimilarityResult()

        try:
            corpus = list(existing_complaints or [])
            detection = self._guarded(
                "language_detection",
                lambda: self.detector.run(text),
                lambda: LANGUAGE_FALLBACK,
                stage_errors,
            )

            analyzed_text = text
            if detection.detected_language != DEFAULT_LANGUAGE:
                source = detection.detected_language
                translation = self._guarded(
                    "translation",
                    lambda: self.translator.run(text, DEFAULT_LANGUAGE, source),
                    lambda: identity_translation(text, source),
                    stage_errors,
                )
                analyzed_text = translation.translated_text

            results = self._run_independent(
                {
                    "sentiment": (
                        lambda: self.sentiment_scorer.run(analyzed_text),
                        lambda: SENTIMENT_FALLBACK,
                    ),
                    "classification": (
                        lambda: self.department_classifier.run(analyzed_text),
                        lambda: CLASSIFICATION_FALLBACK,
                    ),
                    "similarity": (
                        lambda: self.similarity_finder.run(analyzed_text, corpus),
                        SimilarityResult,
                    ),
                },
                stage_errors,
            )
            sentiment_result = results["sentiment"]
            classification = results["classification"]
            similarity = results["similarity"]

            logger.info(
                f"Analyzed complaint: language={detection.detected_language}, "
                f"department={classification.department.value}, urgency={sentiment_result.urgency}, "
                f"similar={len(similarity.similar_complaints)}"
            )
            return AnalysisResult(
                language_detection=detection,
                translation=translation,
                sentiment=sentiment_result,
                classification=classification,
                similarity=similarity,
                stage_errors=stage_errors,
            )
        except Exception as e:
            logger.exception("Analysis pipeline failed, returning partial result")
            return AnalysisResult(
                language_detection=detection,
                translation=translation,
                sentiment=sentiment_result,
                classification=classification,
                similarity=similarity,
                stage_errors=stage_errors,
                error=str(e) or e.__class__.__name__,
            )

    def _run_independent(
        self,
        stages: Dict[str, Tuple[Callable[[], StageOutcome], Callable[[], Any]]],
        stage_errors: Dict[str, str],
    ) -> Dict[str, Any]:
        if not self.parallel:
            return {
                name: self._guarded(name, call, default, stage_errors)
                for name, (call, default) in stages.items()
            }

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="analysis") as pool:
            futures = {name: pool.submit(call) for name, (call, _) in stages.items()}
            # Each future is read on its own so one failing stage keeps the others
            return {
                name: self._guarded(name, futures[name].result, default, stage_errors)
                for name, (_, default) in stages.items()
            }

    @staticmethod
    def _guarded(
        name: str,
        call: Callable[[], StageOutcome],
        default: Callable[[], Any],
        stage_errors: Dict[str, str],
    ) -> Any:
        try:
            outcome = call()
        except Exception as e:
            logger.exception(f"Stage '{name}' raised, using its default")
            stage_errors[name] = str(e) or e.__class__.__name__
            return default()

        if not outcome.ok:
            logger.warning(f"Stage '{name}' fell back to its default: {outcome.error}")
            stage_errors[name] = outcome.error
        return outcome.value


def identity_translation(text: str, source_language: SupportedLanguage) -> TranslationResult:
    """Untranslated result used when the translation provider fails"""
    return TranslationResult(
        original_text=text,
        translated_text=text,
        source_language=source_language,
        target_language=DEFAULT_LANGUAGE,
    )

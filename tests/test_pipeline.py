"""Tests for the end-to-end analysis pipeline."""

import pytest

from src.analysis import AnalysisPipeline
from src.analysis.classifier import FALLBACK as CLASSIFICATION_FALLBACK
from src.core import AnalysisResult, ClassificationResult, Department, StageOutcome


class ExplodingClassifier:
    """Classifier that raises instead of reporting its failure."""

    def run(self, text):
        raise RuntimeError("boom")

    def classify(self, text):
        raise RuntimeError("boom")


class FailingClassifier:
    """Classifier that reports its own failure."""

    def run(self, text):
        return StageOutcome[ClassificationResult](value=CLASSIFICATION_FALLBACK, error="model offline")

    def classify(self, text):
        return CLASSIFICATION_FALLBACK


class RaisingTranslator:
    def run(self, text, target_language="en", source_language=None):
        raise ConnectionError("translator unavailable")


class CountingTranslator:
    def __init__(self):
        self.calls = 0

    def run(self, text, target_language="en", source_language=None):
        self.calls += 1
        raise AssertionError("English text must not be translated")


def test_english_complaint():
    pipeline = AnalysisPipeline(parallel=False)
    result = pipeline.analyze("The water pipe near my house is leaking badly, this is urgent")

    assert result.language_detection.detected_language == "en"
    assert result.translation is None
    assert result.classification.department == Department.WATER
    assert result.classification.tags == ("water", "pipe", "leak", "house")
    assert result.sentiment.score == pytest.approx(-0.1)
    assert result.sentiment.urgency == "medium"
    assert result.stage_errors == {}
    assert result.error is None


def test_hindi_complaint_is_translated(pipeline):
    result = pipeline.analyze("पानी की समस्या है, पाइप टूट गया")

    assert result.language_detection.detected_language == "hi"
    assert result.translation is not None
    assert result.translation.translated_text == "water problem है, पाइप टूट गया"
    assert result.classification.department == Department.WATER
    assert result.sentiment.urgency == "medium"


def test_tamil_complaint_is_translated(pipeline):
    result = pipeline.analyze("சாலை பராமரிப்பு தேவை")

    assert result.language_detection.detected_language == "ta"
    assert result.translation.translated_text == "road maintenance தேவை"
    assert result.classification.department == Department.ROADS


def test_english_skips_translator():
    translator = CountingTranslator()
    pipeline = AnalysisPipeline(translator=translator, parallel=False)
    pipeline.analyze("Streetlight not working")
    assert translator.calls == 0


def test_similar_complaints_reported(pipeline, corpus):
    result = pipeline.analyze("Water pipe leaking near market street", corpus)
    assert [c.id for c in result.similarity.similar_complaints] == ["c3", "c1"]


@pytest.mark.parametrize(
    "text",
    ["", "   \n\t  ", "x" * 10_001, "water " * 3_000, "🙂 ✓ ∑"],
)
def test_never_raises(pipeline, text):
    result = pipeline.analyze(text)
    assert isinstance(result, AnalysisResult)
    assert result.error is None


def test_empty_text_yields_defaults(pipeline):
    result = pipeline.analyze("")
    assert result.language_detection.detected_language == "en"
    assert result.classification.department == Department.GENERAL
    assert result.classification.confidence == 0.3
    assert result.sentiment.urgency == "low"
    assert result.similarity.similar_complaints == ()


def test_unusable_input_degrades_every_stage(pipeline):
    result = pipeline.analyze(None)
    assert isinstance(result, AnalysisResult)
    assert set(result.stage_errors) == {"language_detection", "sentiment", "classification", "similarity"}
    assert result.language_detection.confidence == 0.5
    assert result.error is None


def test_stage_failure_is_recorded():
    pipeline = AnalysisPipeline(department_classifier=FailingClassifier(), parallel=False)
    result = pipeline.analyze("water leak")
    assert result.stage_errors == {"classification": "model offline"}
    assert result.classification == CLASSIFICATION_FALLBACK
    assert result.error is None


@pytest.mark.parametrize("parallel", [False, True])
def test_raising_classifier_keeps_sibling_stages(parallel, corpus):
    """A classifier exception only defaults the classification."""
    pipeline = AnalysisPipeline(department_classifier=ExplodingClassifier(), parallel=parallel)
    result = pipeline.analyze("urgent problem with water", corpus)

    assert result.stage_errors == {"classification": "boom"}
    assert result.error is None
    assert result.classification == CLASSIFICATION_FALLBACK
    assert result.language_detection.detected_language == "en"
    assert result.sentiment.score == pytest.approx(-0.2)
    assert result.sentiment.urgency == "medium"
    assert result.degraded
    assert result.failure_summary() == "classification: boom"


@pytest.mark.parametrize("parallel", [False, True])
def test_raising_translator_falls_back_to_original_text(parallel):
    """A translator exception leaves the text untranslated and the rest runs on it."""
    text = "पानी की समस्या urgent problem"
    pipeline = AnalysisPipeline(translator=RaisingTranslator(), parallel=parallel)
    result = pipeline.analyze(text)

    assert result.stage_errors == {"translation": "translator unavailable"}
    assert result.error is None
    assert result.language_detection.detected_language == "hi"
    assert result.translation.original_text == text
    assert result.translation.translated_text == text
    assert result.translation.source_language == "hi"
    assert result.translation.target_language == "en"
    assert result.sentiment.score == pytest.approx(-0.2)
    assert result.sentiment.urgency == "medium"


def test_fault_outside_stages_returns_partial_result():
    pipeline = AnalysisPipeline(parallel=False)
    result = pipeline.analyze("water leak", existing_complaints=42)

    assert result.error is not None
    assert result.degraded
    assert result.classification == CLASSIFICATION_FALLBACK
    assert result.similarity.similar_complaints == ()


def test_clean_result_is_not_degraded(pipeline):
    result = pipeline.analyze("Streetlight not working")
    assert not result.degraded
    assert result.failure_summary() is None


def test_parallel_and_sequential_agree(corpus):
    text = "Water pipe leaking near market street, urgent problem"
    sequential = AnalysisPipeline(parallel=False).analyze(text, corpus)
    parallel = AnalysisPipeline(parallel=True).analyze(text, corpus)
    assert sequential == parallel

"""
Core domain layer
"""
from .models import (
    DEFAULT_LANGUAGE,
    AnalysisResult,
    ClassificationResult,
    ComplaintSummary,
    Department,
    KeywordUrgencyResult,
    LanguageDetectionResult,
    SentimentResult,
    SimilarityResult,
    StageOutcome,
    SupportedLanguage,
    TranslationResult,
    Urgency,
)
from .exceptions import (
    AppError,
    InvalidInputError,
    AnalysisFailedError,
    PermissionDeniedError,
    InvalidStatusTransitionError,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "AnalysisResult",
    "ClassificationResult",
    "ComplaintSummary",
    "Department",
    "KeywordUrgencyResult",
    "LanguageDetectionResult",
    "SentimentResult",
    "SimilarityResult",
    "StageOutcome",
    "SupportedLanguage",
    "TranslationResult",
    "Urgency",
    "AppError",
    "InvalidInputError",
    "AnalysisFailedError",
    "PermissionDeniedError",
    "InvalidStatusTransitionError",
]

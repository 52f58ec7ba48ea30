"""Core data models for the complaint analysis pipeline"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, Generic, Literal, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

SupportedLanguage = Literal["en", "hi", "ta"]
Urgency = Literal["low", "medium", "high"]

DEFAULT_LANGUAGE: SupportedLanguage = "en"

T = TypeVar("T")


class Department(str, Enum):
    """
    Departments a grievance can be routed to

    Member order is the classifier's evaluation order and decides ties
    between departments with the same keyword count.
    """
    WATER = "water"
    ELECTRICITY = "electricity"
    ROADS = "roads"
    SANITATION = "sanitation"
    PUBLIC_HEALTH = "public_health"
    EDUCATION = "education"
    TRANSPORT = "transport"
    HOUSING = "housing"
    LAND = "land"
    GENERAL = "general"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class LanguageDetectionResult(_Frozen):
    """Language guessed from the script of the complaint text"""
    detected_language: SupportedLanguage = Field(
        ...,
        description="Detected language code: 'en', 'hi' or 'ta'"
    )
    confidence: float = Field(..., ge=0.0, le=1.0)


class TranslationResult(_Frozen):
    """Complaint text normalized to the working language"""
    original_text: str
    translated_text: str
    source_language: SupportedLanguage
    target_language: SupportedLanguage

    @model_validator(mode="after")
    def _identity_when_same_language(self) -> "TranslationResult":
        if self.source_language == self.target_language and self.translated_text != self.original_text:
            raise ValueError("translated_text must equal original_text when source and target languages match")
        return self


class SentimentResult(_Frozen):
    """Negativity score and the urgency derived from it"""
    score: float = Field(
        ...,
        ge=-1.0,
        le=1.0,
        description="Sentiment score, negative values mean more negative sentiment"
    )
    magnitude: float = Field(..., ge=0.0, description="Strength of the sentiment")
    urgency: Urgency


class KeywordUrgencyResult(_Frozen):
    """Urgency from urgent-keyword increments (server-side grievance model)"""
    score: float = Field(..., le=0.0, description="Negative keyword penalty, 0.1 per keyword")
    urgency_score: float = Field(..., ge=0.0, description="Urgent keyword weight, 0.2 per keyword")
    urgency: Urgency


class ClassificationResult(_Frozen):
    """Department chosen for a complaint with the keywords that matched"""
    department: Department
    confidence: float = Field(..., ge=0.0, le=1.0)
    tags: Tuple[str, ...] = Field(
        default_factory=tuple,
        description="Matched keywords in first-seen order, without duplicates"
    )


class ComplaintSummary(_Frozen):
    """A prior complaint supplied by the caller for duplicate detection"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    text: str
    department: str
    status: str
    created_at: datetime = Field(..., alias="createdAt")


class SimilarityResult(_Frozen):
    """Prior complaints that overlap with the new one, most recent first"""
    similar_complaints: Tuple[ComplaintSummary, ...] = Field(default_factory=tuple)
    highest_similarity_score: float = Field(default=0.0, ge=0.0, le=1.0)


class StageOutcome(BaseModel, Generic[T]):
    """
    Result of a single pipeline stage

    value always holds a usable result; when the stage failed it is the
    stage's documented default and error carries the failure message.
    """
    model_config = ConfigDict(frozen=True)

    value: T
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AnalysisResult(_Frozen):
    """Composite output of the complaint analysis pipeline"""
    language_detection: LanguageDetectionResult
    translation: Optional[TranslationResult] = Field(
        None,
        description="Present only when the complaint was not written in English"
    )
    sentiment: SentimentResult
    classification: ClassificationResult
    similarity: SimilarityResult

    stage_errors: Dict[str, str] = Field(
        default_factory=dict,
        description="Failure messages of stages that fell back to their defaults, keyed by stage name"
    )
    error: Optional[str] = Field(
        None,
        description="Set when the pipeline itself failed and returned a partial result"
    )

    @property
    def degraded(self) -> bool:
        """True when any stage fell back to its default or the pipeline failed"""
        return self.error is not None or bool(self.stage_errors)

    def failure_summary(self) -> Optional[str]:
        """One-line description of every failure, None when nothing failed"""
        parts = [f"{stage}: {message}" for stage, message in self.stage_errors.items()]
        if self.error is not None:
            parts.append(f"pipeline: {self.error}")
        return "; ".join(parts) or None

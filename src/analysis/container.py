"""Container for the analysis pipeline and grievance service with dependency injection"""
from functools import lru_cache

from config import settings
from src.analysis import (
    LanguageDetector,
    ReferenceTranslator,
    SentimentScorer,
    DepartmentClassifier,
    SimilarityFinder,
    AnalysisPipeline,
    GrievanceService,
)

@lru_cache(maxsize=1)
def get_language_detector() -> LanguageDetector:
    """Get singleton LanguageDetector using the built-in script ranges"""
    return LanguageDetector()

@lru_cache(maxsize=1)
def get_translator() -> ReferenceTranslator:
    """
    Get singleton translation provider

    Returns:
        ReferenceTranslator sharing the singleton LanguageDetector
    """
    return ReferenceTranslator(detector=get_language_detector())

@lru_cache(maxsize=1)
def get_sentiment_scorer() -> SentimentScorer:
    return SentimentScorer()

@lru_cache(maxsize=1)
def get_department_classifier() -> DepartmentClassifier:
    return DepartmentClassifier()

@lru_cache(maxsize=1)
def get_similarity_finder() -> SimilarityFinder:
    """
    Get singleton SimilarityFinder

    Returns:
        SimilarityFinder configured with settings.similarity_threshold
        and settings.similarity_min_word_length
    """
    return SimilarityFinder(
        threshold=settings.similarity_threshold,
        min_word_length=settings.similarity_min_word_length,
    )

@lru_cache(maxsize=1)
def get_analysis_pipeline() -> AnalysisPipeline:
    """
    Get singleton AnalysisPipeline with all stages wired

    Returns:
        AnalysisPipeline running independent stages in parallel when
        settings.parallel_stages is enabled
    """
    return AnalysisPipeline(
        detector=get_language_detector(),
        translator=get_translator(),
        sentiment_scorer=get_sentiment_scorer(),
        department_classifier=get_department_classifier(),
        similarity_finder=get_similarity_finder(),
        parallel=settings.parallel_stages,
        max_workers=settings.stage_workers,
    )

@lru_cache(maxsize=1)
def get_grievance_service() -> GrievanceService:
    """
    Get singleton GrievanceService

    Returns:
        GrievanceService using the singleton pipeline and the urgency model,
        error policy and tracking ID prefix from settings
    """
    return GrievanceService(
        pipeline=get_analysis_pipeline(),
        urgency_model=settings.urgency_model,
        block_on_analysis_error=settings.block_on_analysis_error,
        tracking_id_prefix=settings.tracking_id_prefix,
    )

"""
Analysis module
"""

from .language import LanguageDetector
from .translation import ReferenceTranslator
from .sentiment import SentimentScorer, keyword_urgency, score_urgency
from .classifier import DepartmentClassifier
from .similarity import SimilarityFinder, jaccard
from .pipeline import AnalysisPipeline
from .service import GrievanceService
from .container import (
    get_language_detector,
    get_translator,
    get_sentiment_scorer,
    get_department_classifier,
    get_similarity_finder,
    get_analysis_pipeline,
    get_grievance_service,
)

__all__ = [
    "LanguageDetector",
    "ReferenceTranslator",
    "SentimentScorer",
    "keyword_urgency",
    "score_urgency",
    "DepartmentClassifier",
    "SimilarityFinder",
    "jaccard",
    "AnalysisPipeline",
    "GrievanceService",
    "get_language_detector",
    "get_translator",
    "get_sentiment_scorer",
    "get_department_classifier",
    "get_similarity_finder",
    "get_analysis_pipeline",
    "get_grievance_service",
]

"""Shared fixtures for the analysis tests"""
from datetime import datetime, timezone

import pytest

from src.analysis import (
    AnalysisPipeline,
    DepartmentClassifier,
    GrievanceService,
    LanguageDetector,
    ReferenceTranslator,
    SentimentScorer,
    SimilarityFinder,
)
from src.core import ComplaintSummary


@pytest.fixture
def detector():
    return LanguageDetector()


@pytest.fixture
def translator(detector):
    return ReferenceTranslator(detector=detector)


@pytest.fixture
def scorer():
    return SentimentScorer()


@pytest.fixture
def classifier():
    return DepartmentClassifier()


@pytest.fixture
def finder():
    return SimilarityFinder()


@pytest.fixture
def pipeline():
    return AnalysisPipeline(parallel=False)


@pytest.fixture
def service(pipeline):
    return GrievanceService(pipeline=pipeline)


def make_complaint(id, text, day, department="water", status="pending"):
    return ComplaintSummary(
        id=id,
        text=text,
        department=department,
        status=status,
        created_at=datetime(2024, 3, day, tzinfo=timezone.utc),
    )


@pytest.fixture
def corpus():
    return [
        make_complaint("c1", "Water pipe leaking near market street since Monday", 1),
        make_complaint("c2", "Garbage collection missed for three weeks", 2, department="sanitation"),
        make_complaint("c3", "Water pipe leaking near market street again", 5),
    ]


@pytest.fixture
def complaint():
    return make_complaint

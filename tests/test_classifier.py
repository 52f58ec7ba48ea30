"""Tests for keyword-based department classification."""

import pytest

from src.analysis import DepartmentClassifier
from src.analysis.lexicon import DEPARTMENT_DIRECTORY, DEPARTMENT_KEYWORDS, department_info
from src.core import Department


def test_water_complaint(classifier):
    result = classifier.classify("My tap has a water leak and the pipe is broken")
    assert result.department == Department.WATER
    assert result.confidence == pytest.approx(0.8)
    assert result.tags == ("water", "pipe", "leak", "tap")


def test_no_match_falls_back_to_general(classifier):
    result = classifier.classify("Hello there")
    assert result.department == Department.GENERAL
    assert result.confidence == 0.3
    assert result.tags == ()


def test_substring_matching(classifier):
    """'watering' contains 'water'."""
    result = classifier.classify("Watering schedule")
    assert result.department == Department.WATER
    assert result.tags == ("water", "schedule")


def test_tie_keeps_earlier_department(classifier):
    """'construction' belongs to roads and housing; roads is evaluated first."""
    result = classifier.classify("construction")
    assert result.department == Department.ROADS
    assert result.tags == ("construction",)


def test_later_department_needs_strictly_more_hits(classifier):
    result = classifier.classify("the bus and train are late, water")
    assert result.department == Department.TRANSPORT
    assert result.confidence == pytest.approx(0.4)
    assert result.tags == ("water", "bus", "train")


def test_confidence_is_capped(classifier):
    result = classifier.classify("water pipe leak tap supply drainage")
    assert result.department == Department.WATER
    assert result.confidence == 1.0


def test_general_keywords(classifier):
    result = classifier.classify("corruption by a government official")
    assert result.department == Department.GENERAL
    assert result.confidence == pytest.approx(0.6)


def test_classification_is_deterministic(classifier):
    text = "Streetlight outage near the school and a pothole on the road"
    assert classifier.classify(text) == classifier.classify(text)


def test_failure_returns_default(classifier):
    outcome = classifier.run(None)
    assert not outcome.ok
    assert outcome.value.department == Department.GENERAL
    assert outcome.value.confidence == 0
    assert outcome.value.tags == ()


def test_custom_keyword_table():
    classifier = DepartmentClassifier(keywords=[(Department.LAND, ["plot"])])
    result = classifier.classify("Dispute over my plot")
    assert result.department == Department.LAND
    assert result.confidence == pytest.approx(0.2)


def test_keyword_table_follows_department_order():
    assert [dept for dept, _ in DEPARTMENT_KEYWORDS] == list(Department)


def test_department_directory_covers_every_department():
    assert set(DEPARTMENT_DIRECTORY) == set(Department)
    assert department_info(Department.ELECTRICITY).code == "ELEC"
    assert department_info("general").name == "General Administration"


def test_fallback_results_do_not_share_mutable_state(classifier):
    first = classifier.classify(None)
    with pytest.raises(AttributeError):
        first.tags.append("water")

    second = classifier.classify(None)
    assert second.tags == ()
    assert isinstance(second.tags, tuple)

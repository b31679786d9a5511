"""Tests for the AnalysisResult value object."""

import dataclasses

import pytest

from fixit.domain.entities.analysis_result import UNAVAILABLE_REASONING, AnalysisResult
from fixit.domain.value_objects.enums import Category, Priority, Provenance


def test_department_and_resolution_are_derived():
    result = AnalysisResult.local(Category.HOUSEKEEPING, Priority.HIGH, 75)
    assert result.department == "Housekeeping & Sanitation"
    assert result.estimated_resolution == "1-2 days"


def test_department_cannot_be_passed_in():
    with pytest.raises(TypeError):
        AnalysisResult(
            category=Category.CIVIL,
            priority=Priority.LOW,
            risk_score=33,
            provenance=Provenance.LOCAL,
            department="Somebody else",
        )


def test_result_is_frozen():
    result = AnalysisResult.local(Category.CIVIL, Priority.LOW, 33)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.risk_score = 99


@pytest.mark.parametrize("raw, expected", [(140, 100), (-12, 0), (0, 0), (100, 100), (64, 64)])
def test_risk_score_is_clamped(raw, expected):
    result = AnalysisResult(
        category=Category.OTHERS,
        priority=Priority.MEDIUM,
        risk_score=raw,
        provenance=Provenance.REMOTE,
        reasoning="remote says so",
        raw_remote_response={},
    )
    assert result.risk_score == expected


def test_empty_reasoning_falls_back_to_template():
    result = AnalysisResult.local(Category.FURNITURE, Priority.LOW, 28)
    assert result.reasoning
    assert "LOW priority Furniture complaint with a risk score of 28/100" in result.reasoning


def test_local_result_rejects_raw_payload():
    with pytest.raises(ValueError):
        AnalysisResult(
            category=Category.OTHERS,
            priority=Priority.MEDIUM,
            risk_score=50,
            provenance=Provenance.LOCAL,
            raw_remote_response={"category": "Others"},
        )


def test_unavailable_defaults():
    result = AnalysisResult.unavailable()
    assert result.category == Category.OTHERS
    assert result.priority == Priority.MEDIUM
    assert result.department == "General Maintenance Dept."
    assert result.estimated_resolution == "3-5 days"
    assert result.risk_score == 50
    assert result.reasoning == UNAVAILABLE_REASONING
    assert result.provenance == Provenance.LOCAL


def test_to_dict_uses_backend_field_names():
    data = AnalysisResult.local(Category.PLUMBING, Priority.CRITICAL, 100).to_dict()
    assert data == {
        "category": "Plumbing",
        "priority": "Critical",
        "department": "Plumbing & Sanitation Dept.",
        "estimatedResolution": "Same day (< 4 hours)",
        "reasoning": data["reasoning"],
        "riskScore": 100,
        "aiAnalysisRaw": None,
        "source": "local",
    }
    assert data["reasoning"].startswith("This complaint has been classified as CRITICAL")

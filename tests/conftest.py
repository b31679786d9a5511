"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def plumbing_description():
    return "Water is leaking from the pipe under the bathroom sink"


@pytest.fixture
def remote_payload():
    return {
        "category": "Electrical",
        "priority": "High",
        "department": "Electrical Maintenance Dept.",
        "estimatedResolution": "1-2 days",
        "reasoning": "Exposed wiring near the corridor socket.",
        "riskScore": 85,
        "model": "complaint-analyzer-v2",
    }

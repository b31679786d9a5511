"""Normalization of remote analysis payloads into AnalysisResult."""

from __future__ import annotations

import math
from typing import Any

from fixit.domain.entities.analysis_result import AnalysisResult
from fixit.domain.value_objects.enums import Category, Priority, Provenance

REQUIRED_FIELDS = (
    "category",
    "priority",
    "department",
    "estimatedResolution",
    "reasoning",
    "riskScore",
)

CATEGORY_MAP: dict[str, Category] = {c.value: c for c in Category}
PRIORITY_MAP: dict[str, Priority] = {p.value: p for p in Priority}


class MalformedRemoteResponse(ValueError):
    """Remote payload is missing fields or carries values of the wrong type."""


def parse_remote_payload(payload: Any) -> AnalysisResult:
    """Map a remote JSON payload to a remote-provenance AnalysisResult.

    Department and resolution window are derived from the parsed category
    and priority; the service's own strings stay in the raw payload.

    Raises:
        MalformedRemoteResponse: if any expected field is missing or invalid.
    """
    if not isinstance(payload, dict):
        raise MalformedRemoteResponse(f"expected JSON object, got {type(payload).__name__}")

    missing = [f for f in REQUIRED_FIELDS if f not in payload]
    if missing:
        raise MalformedRemoteResponse(f"missing fields: {', '.join(missing)}")

    category = CATEGORY_MAP.get(payload["category"]) if isinstance(payload["category"], str) else None
    if category is None:
        raise MalformedRemoteResponse(f"unknown category: {payload['category']!r}")

    priority = PRIORITY_MAP.get(payload["priority"]) if isinstance(payload["priority"], str) else None
    if priority is None:
        raise MalformedRemoteResponse(f"unknown priority: {payload['priority']!r}")

    for name in ("department", "estimatedResolution"):
        if not isinstance(payload[name], str):
            raise MalformedRemoteResponse(f"{name} must be a string")

    reasoning = payload["reasoning"]
    if not isinstance(reasoning, str) or not reasoning.strip():
        raise MalformedRemoteResponse("reasoning must be a non-empty string")

    risk_score = payload["riskScore"]
    # bool is an int subclass; reject it explicitly
    if isinstance(risk_score, bool) or not isinstance(risk_score, (int, float)):
        raise MalformedRemoteResponse(f"riskScore must be a number, got {risk_score!r}")
    if not math.isfinite(risk_score):
        raise MalformedRemoteResponse(f"riskScore must be finite, got {risk_score!r}")

    return AnalysisResult(
        category=category,
        priority=priority,
        risk_score=round(risk_score),
        provenance=Provenance.REMOTE,
        reasoning=reasoning,
        raw_remote_response=payload,
    )

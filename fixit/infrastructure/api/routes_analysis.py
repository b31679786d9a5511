"""Analysis endpoint — classify a complaint description."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from fixit.application.use_cases.analyze_complaint import AnalyzeComplaintUseCase
from fixit.config import settings
from fixit.domain.entities.analysis_result import AnalysisResult
from fixit.domain.policies.heuristic_classifier import explain_match
from fixit.infrastructure.api.dependencies import get_analyze_complaint_uc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])

# ── Request / Response schemas ──────────────────────────────────────


class AnalyzeRequest(BaseModel):
    description: str
    image_url: str | None = Field(default=None, alias="imageUrl")

    model_config = {"populate_by_name": True}


class KeywordHits(BaseModel):
    categories: dict[str, list[str]]
    priority: list[str]


class AnalyzeResponse(BaseModel):
    success: bool = True
    analysis: dict
    aiSource: str
    keywords: KeywordHits | None = None


# ── Routes ──────────────────────────────────────────────────────────


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_complaint(
    body: AnalyzeRequest,
    explain: bool = False,
    use_case: AnalyzeComplaintUseCase = Depends(get_analyze_complaint_uc),
):
    """Run AI analysis on a complaint description."""
    # surrounding whitespace does not count towards the minimum length
    description = body.description.strip()
    if len(description) < settings.min_description_length:
        raise HTTPException(
            status_code=400,
            detail=f"Description must be at least {settings.min_description_length} characters long",
        )

    try:
        result = await use_case.execute(description, body.image_url)
    except Exception:
        logger.exception("Complaint analysis failed, returning manual-review default")
        result = AnalysisResult.unavailable()

    response = AnalyzeResponse(analysis=result.to_dict(), aiSource=result.provenance.value)
    if explain:
        match = explain_match(description)
        response.keywords = KeywordHits(
            categories={c.value: list(hits) for c, hits in match.category_hits.items()},
            priority=list(match.priority_hits),
        )
    return response

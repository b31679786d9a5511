"""AnalyzeComplaintUseCase — remote AI service first, local heuristics on failure."""

from __future__ import annotations

import logging
import time

from fixit.application.ports.remote_analyzer_port import RemoteAnalyzerPort
from fixit.domain.entities.analysis_result import AnalysisResult
from fixit.domain.policies.heuristic_classifier import classify_locally
from fixit.domain.value_objects.enums import RemoteFailureReason
from fixit.domain.value_objects.remote_outcome import RemoteFailure, RemoteSuccess

logger = logging.getLogger(__name__)


class AnalyzeComplaintUseCase:
    """Orchestrates classification of a single complaint.

    Exactly one remote attempt is made; any failure degrades to the local
    classifier and is never raised to the caller.
    """

    def __init__(self, remote: RemoteAnalyzerPort):
        self._remote = remote

    async def execute(self, description: str, image_url: str | None = None) -> AnalysisResult:
        """Classify a complaint description.

        Args:
            description: complaint text.
            image_url: optional reference to an attached image.

        Returns:
            AnalysisResult with provenance REMOTE on success, LOCAL otherwise.
        """
        started = time.perf_counter()
        try:
            outcome = await self._remote.analyze(description, image_url)
        except Exception as e:
            logger.exception("AI service adapter raised instead of returning a failure")
            outcome = RemoteFailure(
                RemoteFailureReason.UNEXPECTED,
                str(e) or type(e).__name__,
                time.perf_counter() - started,
            )

        if isinstance(outcome, RemoteSuccess):
            return outcome.result

        if isinstance(outcome, RemoteFailure):
            if outcome.reason == RemoteFailureReason.DISABLED:
                logger.info("AI service disabled (%s), using built-in analyzer", outcome.detail)
            else:
                logger.warning(
                    "AI service unavailable, using built-in analyzer: reason=%s detail=%s elapsed=%.3fs",
                    outcome.reason.value, outcome.detail, outcome.elapsed,
                )
        else:
            logger.warning("AI service returned unexpected outcome %r, using built-in analyzer", outcome)

        return classify_locally(description, has_image=bool(image_url))


async def classify(
    description: str,
    image_ref: str | None = None,
    remote: RemoteAnalyzerPort | None = None,
) -> AnalysisResult:
    """Caller-facing entry point; uses the configured HTTP service by default."""
    if remote is None:
        from fixit.adapters.ai_service.http_adapter import HttpRemoteAnalyzer

        remote = HttpRemoteAnalyzer()
    return await AnalyzeComplaintUseCase(remote=remote).execute(description, image_ref)

"""AnalysisResult — structured output of a complaint classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fixit.domain.policies.routing import compose_reasoning, department_for, resolution_for
from fixit.domain.value_objects.enums import Category, Priority, Provenance

RISK_SCORE_MIN = 0
RISK_SCORE_MAX = 100

UNAVAILABLE_REASONING = "AI analysis temporarily unavailable. Manual review required."


def clamp_risk_score(value: int) -> int:
    return max(RISK_SCORE_MIN, min(RISK_SCORE_MAX, int(value)))


@dataclass(frozen=True)
class AnalysisResult:
    """Immutable classification result.

    ``department`` and ``estimated_resolution`` are derived from
    ``category`` / ``priority`` and cannot be passed in. ``risk_score`` is
    clamped to [0, 100] and an empty ``reasoning`` is replaced by the
    priority template.
    """

    category: Category
    priority: Priority
    risk_score: int
    provenance: Provenance
    reasoning: str = ""
    raw_remote_response: Any = None
    department: str = field(init=False)
    estimated_resolution: str = field(init=False)

    def __post_init__(self) -> None:
        if self.provenance != Provenance.REMOTE and self.raw_remote_response is not None:
            raise ValueError("raw_remote_response is only kept for remote results")

        risk_score = clamp_risk_score(self.risk_score)
        object.__setattr__(self, "risk_score", risk_score)
        object.__setattr__(self, "department", department_for(self.category))
        object.__setattr__(self, "estimated_resolution", resolution_for(self.priority))
        if not (self.reasoning or "").strip():
            object.__setattr__(
                self, "reasoning", compose_reasoning(self.category, self.priority, risk_score)
            )

    @classmethod
    def local(cls, category: Category, priority: Priority, risk_score: int) -> AnalysisResult:
        return cls(
            category=category,
            priority=priority,
            risk_score=risk_score,
            provenance=Provenance.LOCAL,
        )

    @classmethod
    def unavailable(cls) -> AnalysisResult:
        """Safe default used when analysis could not run at all."""
        return cls(
            category=Category.OTHERS,
            priority=Priority.MEDIUM,
            risk_score=50,
            provenance=Provenance.LOCAL,
            reasoning=UNAVAILABLE_REASONING,
        )

    def to_dict(self) -> dict:
        """Serialize using the field names the complaint backend stores."""
        return {
            "category": self.category.value,
            "priority": self.priority.value,
            "department": self.department,
            "estimatedResolution": self.estimated_resolution,
            "reasoning": self.reasoning,
            "riskScore": self.risk_score,
            "aiAnalysisRaw": self.raw_remote_response,
            "source": self.provenance.value,
        }

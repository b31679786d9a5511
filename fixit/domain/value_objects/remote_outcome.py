"""Outcome of a single remote analysis attempt — success or tagged failure."""

from dataclasses import dataclass
from typing import Union

from fixit.domain.entities.analysis_result import AnalysisResult
from fixit.domain.value_objects.enums import RemoteFailureReason


@dataclass(frozen=True)
class RemoteSuccess:
    result: AnalysisResult
    elapsed: float = 0.0


@dataclass(frozen=True)
class RemoteFailure:
    reason: RemoteFailureReason
    detail: str = ""
    elapsed: float = 0.0


RemoteOutcome = Union[RemoteSuccess, RemoteFailure]

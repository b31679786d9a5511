"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends

from fixit.adapters.ai_service.http_adapter import HttpRemoteAnalyzer
from fixit.application.ports.remote_analyzer_port import RemoteAnalyzerPort
from fixit.application.use_cases.analyze_complaint import AnalyzeComplaintUseCase

# Singleton adapter (stateless, one client per call)
_remote_analyzer = HttpRemoteAnalyzer()


def get_remote_analyzer() -> RemoteAnalyzerPort:
    return _remote_analyzer


def get_analyze_complaint_uc(
    remote: RemoteAnalyzerPort = Depends(get_remote_analyzer),
) -> AnalyzeComplaintUseCase:
    return AnalyzeComplaintUseCase(remote=remote)

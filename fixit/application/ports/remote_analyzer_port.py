"""Port interface for the remote complaint analysis service."""

from abc import ABC, abstractmethod

from fixit.domain.value_objects.remote_outcome import RemoteOutcome


class RemoteAnalyzerPort(ABC):
    @abstractmethod
    async def analyze(self, description: str, image_url: str | None) -> RemoteOutcome:
        """Make exactly one attempt against the remote service.

        Must not raise for remote problems: timeouts, transport errors and
        bad responses are returned as RemoteFailure.
        """
        ...

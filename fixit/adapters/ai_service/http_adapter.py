"""HTTP adapter for the remote AI analysis service — implements RemoteAnalyzerPort."""

from __future__ import annotations

import asyncio
import logging
import time

import httpx

from fixit.adapters.ai_service.payload import parse_remote_payload
from fixit.application.ports.remote_analyzer_port import RemoteAnalyzerPort
from fixit.config import settings
from fixit.domain.value_objects.enums import RemoteFailureReason
from fixit.domain.value_objects.remote_outcome import RemoteFailure, RemoteOutcome, RemoteSuccess

logger = logging.getLogger(__name__)


class HttpRemoteAnalyzer(RemoteAnalyzerPort):
    """POSTs ``{description, imageUrl}`` to the AI service, one attempt per call."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = settings.ai_service_url if url is None else url
        self._timeout = settings.ai_service_timeout if timeout is None else timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def analyze(self, description: str, image_url: str | None) -> RemoteOutcome:
        if not self._url.strip():
            return RemoteFailure(RemoteFailureReason.DISABLED, "AI_SERVICE_URL is not set")

        started = time.perf_counter()
        try:
            # wait_for bounds the whole exchange; httpx's timeout is per operation
            payload = await asyncio.wait_for(
                self._post(description, image_url), timeout=self._timeout
            )
            result = parse_remote_payload(payload)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            return self._failure(RemoteFailureReason.TIMEOUT, e, started)
        except httpx.HTTPStatusError as e:
            return RemoteFailure(
                RemoteFailureReason.HTTP_STATUS,
                f"HTTP {e.response.status_code}",
                time.perf_counter() - started,
            )
        except httpx.TransportError as e:
            return self._failure(RemoteFailureReason.CONNECTION, e, started)
        except ValueError as e:
            # MalformedRemoteResponse or a non-JSON body
            return self._failure(RemoteFailureReason.MALFORMED, e, started)
        except Exception as e:
            logger.exception("Unexpected error calling AI service at %s", self._url)
            return self._failure(RemoteFailureReason.UNEXPECTED, e, started)

        elapsed = time.perf_counter() - started
        logger.info(
            "AI service classified complaint as %s/%s in %.3fs",
            result.category.value, result.priority.value, elapsed,
        )
        return RemoteSuccess(result=result, elapsed=elapsed)

    async def _post(self, description: str, image_url: str | None):
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(
                self._url,
                json={"description": description, "imageUrl": image_url},
                timeout=self._timeout,
            )
            response.raise_for_status()
            return response.json()

    @staticmethod
    def _failure(reason: RemoteFailureReason, error: BaseException, started: float) -> RemoteFailure:
        detail = str(error) or type(error).__name__
        return RemoteFailure(reason, detail, time.perf_counter() - started)

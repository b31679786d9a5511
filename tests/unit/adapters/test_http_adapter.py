"""Tests for HttpRemoteAnalyzer — all traffic goes through httpx.MockTransport."""

import asyncio
import json

import httpx
import pytest

from fixit.adapters.ai_service.http_adapter import HttpRemoteAnalyzer
from fixit.domain.value_objects.enums import Category, Provenance, RemoteFailureReason
from fixit.domain.value_objects.remote_outcome import RemoteFailure, RemoteSuccess

AI_URL = "http://ai.test/ai/analyze"


def _adapter(handler, timeout: float = 5.0) -> HttpRemoteAnalyzer:
    return HttpRemoteAnalyzer(url=AI_URL, timeout=timeout, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_success_posts_description_and_image(remote_payload):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=remote_payload)

    outcome = await _adapter(handler).analyze("Exposed wiring", "http://x/img.png")

    assert isinstance(outcome, RemoteSuccess)
    assert outcome.result.provenance == Provenance.REMOTE
    assert outcome.result.category == Category.ELECTRICAL
    assert outcome.result.raw_remote_response == remote_payload
    assert outcome.elapsed >= 0
    assert seen == {
        "method": "POST",
        "url": AI_URL,
        "body": {"description": "Exposed wiring", "imageUrl": "http://x/img.png"},
    }


@pytest.mark.asyncio
async def test_missing_image_is_sent_as_null(remote_payload):
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json=remote_payload)

    await _adapter(handler).analyze("Exposed wiring", None)
    assert bodies == [{"description": "Exposed wiring", "imageUrl": None}]


@pytest.mark.asyncio
async def test_http_error_status():
    outcome = await _adapter(lambda request: httpx.Response(503, text="down")).analyze("x", None)
    assert isinstance(outcome, RemoteFailure)
    assert outcome.reason == RemoteFailureReason.HTTP_STATUS
    assert outcome.detail == "HTTP 503"


@pytest.mark.asyncio
async def test_non_json_body_is_malformed():
    outcome = await _adapter(lambda request: httpx.Response(200, text="<html>ok</html>")).analyze("x", None)
    assert isinstance(outcome, RemoteFailure)
    assert outcome.reason == RemoteFailureReason.MALFORMED


@pytest.mark.asyncio
async def test_missing_fields_is_malformed():
    outcome = await _adapter(
        lambda request: httpx.Response(200, json={"category": "Civil"})
    ).analyze("x", None)
    assert isinstance(outcome, RemoteFailure)
    assert outcome.reason == RemoteFailureReason.MALFORMED
    assert "missing fields" in outcome.detail


@pytest.mark.asyncio
async def test_connection_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    outcome = await _adapter(handler).analyze("x", None)
    assert isinstance(outcome, RemoteFailure)
    assert outcome.reason == RemoteFailureReason.CONNECTION
    assert "Connection refused" in outcome.detail


@pytest.mark.asyncio
async def test_httpx_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("read timed out", request=request)

    outcome = await _adapter(handler).analyze("x", None)
    assert isinstance(outcome, RemoteFailure)
    assert outcome.reason == RemoteFailureReason.TIMEOUT


@pytest.mark.asyncio
async def test_total_timeout_bounds_slow_service(remote_payload):
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200, json=remote_payload)

    outcome = await _adapter(handler, timeout=0.05).analyze("x", None)
    assert isinstance(outcome, RemoteFailure)
    assert outcome.reason == RemoteFailureReason.TIMEOUT
    assert outcome.elapsed < 5


@pytest.mark.asyncio
async def test_empty_url_disables_remote():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    adapter = HttpRemoteAnalyzer(url="", transport=httpx.MockTransport(handler))
    outcome = await adapter.analyze("x", None)
    assert isinstance(outcome, RemoteFailure)
    assert outcome.reason == RemoteFailureReason.DISABLED

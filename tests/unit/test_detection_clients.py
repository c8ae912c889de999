"""
Unit tests for the detection clients (HTTP service and Gemini).
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from fieldvue.core.exceptions import DetectionServiceError, MalformedDetectionError
from fieldvue.domain.constants.enums import SceneType
from fieldvue.infrastructure.external.gemini_detection_client import GeminiDetectionClient, extract_json_object
from fieldvue.infrastructure.external.http_detection_client import HttpDetectionClient
from fieldvue.infrastructure.external.prompts import build_detection_prompt


class TestExtractJsonObject:
    def test_bare_json(self):
        assert extract_json_object('{"objects": []}') == {"objects": []}

    def test_fenced_json(self):
        text = 'Here you go:\n```json\n{"objects": [{"type": "door"}]}\n```'
        assert extract_json_object(text)["objects"][0]["type"] == "door"

    @pytest.mark.parametrize("text", [None, "", "no json here", "{broken", "{'single': 'quotes'}"])
    def test_malformed(self, text):
        with pytest.raises(MalformedDetectionError):
            extract_json_object(text)


class TestPrompts:
    def test_scene_specific(self):
        interior = build_detection_prompt(SceneType.INTERIOR, 1.0)
        exterior = build_detection_prompt(SceneType.EXTERIOR, 2.0)
        assert interior != exterior
        assert "siding" in exterior.lower()


class TestHttpDetectionClient:
    @pytest.mark.asyncio
    async def test_unwraps_analysis_envelope(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            return httpx.Response(200, json={"success": True, "analysis": {"objects": []}})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            client = HttpDetectionClient(base_url="http://detector.test/", timeout=5, http_client=http_client)
            payload = await client.detect(b"img", "image/png", SceneType.EXTERIOR, zoom=1.5)

        assert payload == {"objects": []}
        assert seen["url"].startswith("http://detector.test/api/object-detection?")
        assert "type=exterior" in seen["url"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status, retryable", [(500, True), (429, True), (400, False)])
    async def test_http_errors(self, status, retryable):
        async with httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(status))) as http_client:
            client = HttpDetectionClient(base_url="http://detector.test", timeout=5, http_client=http_client)
            with pytest.raises(DetectionServiceError) as exc_info:
                await client.detect(b"img", "image/png", SceneType.INTERIOR)
        assert exc_info.value.retryable is retryable

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(lambda r: httpx.Response(200, text="<html>"))
        ) as http_client:
            client = HttpDetectionClient(base_url="http://detector.test", timeout=5, http_client=http_client)
            with pytest.raises(MalformedDetectionError):
                await client.detect(b"img", "image/png", SceneType.INTERIOR)


class TestGeminiDetectionClient:
    @pytest.mark.asyncio
    async def test_parses_model_text(self):
        genai_client = MagicMock()
        genai_client.aio.models.generate_content = AsyncMock(
            return_value=SimpleNamespace(text='{"objects": [{"type": "window", "confidence": "high"}]}')
        )
        client = GeminiDetectionClient(client=genai_client, model_name="test-model")

        payload = await client.detect(b"img", "image/jpeg", SceneType.INTERIOR)

        assert payload["objects"][0]["type"] == "window"
        assert genai_client.aio.models.generate_content.await_args.kwargs["model"] == "test-model"

    @pytest.mark.asyncio
    async def test_call_failure_wrapped(self):
        genai_client = MagicMock()
        genai_client.aio.models.generate_content = AsyncMock(side_effect=RuntimeError("network down"))
        client = GeminiDetectionClient(client=genai_client, model_name="test-model")

        with pytest.raises(DetectionServiceError):
            await client.detect(b"img", "image/jpeg", SceneType.INTERIOR)

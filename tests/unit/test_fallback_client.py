"""
Unit tests for the HTTP fallback translator, using httpx's mock transport.
"""
import json

import httpx
import pytest

from lexibridge.config.settings import FallbackSettings
from lexibridge.core.exceptions import ErrorCode, FallbackFailureError
from lexibridge.services.fallback_client import HttpFallbackTranslator


def translator_for(handler, **kwargs) -> HttpFallbackTranslator:
    return HttpFallbackTranslator(
        base_url="http://fallback.test/",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_successful_translation():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json={
            "translatedText": "hola mundo",
            "isTranslated": True,
            "detectedLanguage": "english",
        })

    translator = translator_for(handler, api_key="secret")
    result = await translator.translate("hello world", "english", "spanish")

    assert result.translated_text == "hola mundo"
    assert result.detected_language == "english"
    assert seen["url"] == "http://fallback.test/translate"
    assert seen["body"]["sourceLanguage"] == "english"
    assert seen["body"]["targetLanguage"] == "spanish"
    assert seen["auth"] == "Bearer secret"


@pytest.mark.asyncio
async def test_snake_case_response_is_accepted():
    def handler(request):
        return httpx.Response(200, json={"translated_text": "bonjour"})

    result = await translator_for(handler).translate("hello", "english", "french")
    assert result.translated_text == "bonjour"


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [
    httpx.Response(500, json={"error": "boom"}),
    httpx.Response(200, json={"translatedText": "", "isTranslated": True}),
    httpx.Response(200, json={"translatedText": "hello", "isTranslated": False}),
    httpx.Response(200, json=["not", "an", "object"]),
    httpx.Response(200, content=b"<html>"),
])
async def test_unusable_responses_raise_fallback_failure(response):
    def handler(request):
        return response

    with pytest.raises(FallbackFailureError) as exc_info:
        await translator_for(handler).translate("hello", "english", "spanish")
    assert exc_info.value.error_code == ErrorCode.FALLBACK_FAILED


@pytest.mark.asyncio
async def test_transport_errors_raise_fallback_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FallbackFailureError):
        await translator_for(handler).translate("hello", "english", "spanish")


@pytest.mark.asyncio
async def test_timeouts_raise_fallback_failure():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(FallbackFailureError) as exc_info:
        await translator_for(handler).translate("hello", "english", "spanish")
    assert "timed out" in exc_info.value.message


def test_from_settings():
    settings = FallbackSettings(base_url="http://fallback.test/", timeout_seconds=3)
    translator = HttpFallbackTranslator.from_settings(settings)
    assert translator.base_url == "http://fallback.test"
    assert translator.timeout == 3

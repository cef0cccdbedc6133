"""
Remote fallback translation client.

Used only when the dictionary pipeline's confidence falls below the
configured threshold. Every failure surfaces as FallbackFailureError so the
engine can keep its own result.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from lexibridge.config.settings import FallbackSettings
from lexibridge.core.exceptions import FallbackFailureError

logger = logging.getLogger(__name__)


@dataclass
class FallbackTranslation:
    translated_text: str
    is_translated: bool = True
    detected_language: Optional[str] = None


class BaseFallbackTranslator(ABC):
    """Abstract base class for remote translators"""

    @abstractmethod
    async def translate(
        self,
        text: str,
        source_language: str,
        target_language: str
    ) -> FallbackTranslation:
        """Translate text or raise FallbackFailureError"""
        pass


class HttpFallbackTranslator(BaseFallbackTranslator):
    """Posts JSON to ``{base_url}/translate`` on a translation service."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout_seconds
        self.api_key = api_key
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: FallbackSettings) -> "HttpFallbackTranslator":
        return cls(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            api_key=settings.api_key,
        )

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def translate(
        self,
        text: str,
        source_language: str,
        target_language: str
    ) -> FallbackTranslation:
        """
        Translate text with the remote service.

        Args:
            text: Original input text
            source_language: Normalized source language name
            target_language: Normalized target language name

        Returns:
            FallbackTranslation with non-empty text

        Raises:
            FallbackFailureError: on timeout, transport error, non-200
                status, malformed body or an untranslated response
        """
        url = f"{self.base_url}/translate"
        payload = {
            "text": text,
            "sourceLanguage": source_language,
            "targetLanguage": target_language,
            "mode": "translate",
        }
        details = {"url": url, "source_language": source_language, "target_language": target_language}

        try:
            async with httpx.AsyncClient(
                headers=self._get_headers(),
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(url, json=payload)
        except httpx.TimeoutException as e:
            raise FallbackFailureError("Fallback translation timed out", details) from e
        except httpx.HTTPError as e:
            raise FallbackFailureError(f"Fallback translation request failed: {e}", details) from e

        if response.status_code != 200:
            raise FallbackFailureError(
                f"Fallback service returned {response.status_code}",
                {**details, "status_code": response.status_code},
            )

        try:
            data = response.json()
        except ValueError as e:
            raise FallbackFailureError("Fallback service returned invalid JSON", details) from e

        if not isinstance(data, dict):
            raise FallbackFailureError("Fallback service returned an unexpected body", details)

        translated = data.get("translatedText") or data.get("translated_text") or ""
        is_translated = data.get("isTranslated", data.get("is_translated", True))
        if not translated.strip() or is_translated is False:
            raise FallbackFailureError("Fallback service returned no translation", details)

        logger.info(f"Fallback translated {len(text)} chars {source_language} -> {target_language}")
        return FallbackTranslation(
            translated_text=translated,
            is_translated=True,
            detected_language=data.get("detectedLanguage") or data.get("detected_language"),
        )

from enum import Enum
from pydantic import BaseModel, Field
from typing import Any, Optional

from lexibridge.models.internal_models import ChatTranslationResult, TranslationResult


class TextTranslationRequest(BaseModel):
    text: str = Field(..., max_length=5000)
    target_language: str = Field(..., min_length=1)
    source_language: str = "english"
    domain: Optional[str] = Field(None, description="Conversation domain, e.g. sports or finance")


class CorrectionRead(BaseModel):
    type: str
    original: str
    corrected: str
    reason: str


class TextTranslationResponse(BaseModel):
    original_text: str
    translated_text: str
    source_language: str
    target_language: str
    method: str
    confidence: float
    corrections: list[CorrectionRead] = []
    was_reordered: bool = False
    was_disambiguated: bool = False
    idioms_found: list[str] = []
    unknown_words: list[str] = []
    fallback_used: bool = False
    is_translated: bool = False
    english_pivot: Optional[str] = None
    stages: list[str] = []

    @classmethod
    def from_result(cls, result: TranslationResult) -> "TextTranslationResponse":
        return cls(
            original_text=result.original_text,
            translated_text=result.text,
            source_language=result.source_language,
            target_language=result.target_language,
            method=result.method.value,
            confidence=result.confidence,
            corrections=[CorrectionRead(**c.to_dict()) for c in result.corrections],
            was_reordered=result.was_reordered,
            was_disambiguated=result.was_disambiguated,
            idioms_found=result.idioms_found,
            unknown_words=result.unknown_words,
            fallback_used=result.fallback_used,
            is_translated=result.is_translated,
            english_pivot=result.english_pivot,
            stages=result.stages,
        )


class ChatTranslationRequest(BaseModel):
    text: str = Field(..., max_length=5000)
    sender_language: str = Field(..., min_length=1)
    receiver_language: str = Field(..., min_length=1)


class ChatTranslationResponse(BaseModel):
    original_text: str
    sender_view: str
    receiver_view: str
    english_core: str
    method: str
    confidence: float
    corrections: list[CorrectionRead] = []

    @classmethod
    def from_result(cls, result: ChatTranslationResult) -> "ChatTranslationResponse":
        return cls(
            original_text=result.original_text,
            sender_view=result.sender_view,
            receiver_view=result.receiver_view,
            english_core=result.english_core,
            method=result.method.value,
            confidence=result.confidence,
            corrections=[CorrectionRead(**c.to_dict()) for c in result.corrections],
        )


class TransliterationDirection(str, Enum):
    TO_NATIVE = "to_native"
    TO_LATIN = "to_latin"


class TransliterationRequest(BaseModel):
    text: str = Field(..., max_length=5000)
    language: str = Field(..., min_length=1)
    direction: TransliterationDirection = TransliterationDirection.TO_NATIVE


class TransliterationResponse(BaseModel):
    original_text: str
    transliterated_text: str
    language: str
    script: str
    direction: TransliterationDirection


class LanguageRead(BaseModel):
    code: str
    name: str
    native_name: str
    script: str
    rtl: bool
    has_transliteration: bool


class LanguageListResponse(BaseModel):
    count: int
    languages: list[LanguageRead]


class DictionaryStatusResponse(BaseModel):
    ready: bool
    ttl_seconds: float
    tables: dict[str, dict[str, Any]]
    cache: dict[str, Any]

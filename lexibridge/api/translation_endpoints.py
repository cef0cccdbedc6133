"""Translation endpoints: text, chat, transliteration and the language list."""
from fastapi import APIRouter, Depends
import time
import logging

from lexibridge.core.dependencies import get_engine
from lexibridge.core.exceptions import UnsupportedLanguageError
from lexibridge.schemas.base import Envelope, ok
from lexibridge.schemas.translation import (
    ChatTranslationRequest,
    ChatTranslationResponse,
    LanguageListResponse,
    LanguageRead,
    TextTranslationRequest,
    TextTranslationResponse,
    TransliterationDirection,
    TransliterationRequest,
    TransliterationResponse,
)
from lexibridge.services.language_registry import (
    get_all_languages,
    get_language_info,
    get_script,
    normalize_language,
)
from lexibridge.services.translation_engine import DictionaryTranslationEngine
from lexibridge.services.transliterator import (
    has_transliteration,
    reverse_transliterate,
    transliterate_to_native,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/translation", tags=["translation"])


def _require_language(language: str, operation: str) -> str:
    if get_language_info(language) is None:
        raise UnsupportedLanguageError(language, operation)
    return normalize_language(language)


@router.post("/text", response_model=Envelope[TextTranslationResponse])
async def translate_text(
    request: TextTranslationRequest,
    engine: DictionaryTranslationEngine = Depends(get_engine),
):
    """
    Translate text through the dictionary pipeline.
    Falls back to the remote service when confidence is low and one is configured.
    """
    source = _require_language(request.source_language, "translation")
    target = _require_language(request.target_language, "translation")

    start = time.perf_counter()
    result = await engine.translate_with_dictionary(request.text, source, target, domain=request.domain)
    latency_ms = (time.perf_counter() - start) * 1000.0
    logger.info(
        f"Text translation completed in {latency_ms:.2f}ms",
        extra={"method": result.method.value, "confidence": result.confidence},
    )

    return ok(TextTranslationResponse.from_result(result))


@router.post("/chat", response_model=Envelope[ChatTranslationResponse])
async def translate_chat(
    request: ChatTranslationRequest,
    engine: DictionaryTranslationEngine = Depends(get_engine),
):
    """Produce the sender's and the receiver's view of a chat message."""
    sender = _require_language(request.sender_language, "chat")
    receiver = _require_language(request.receiver_language, "chat")
    result = await engine.translate_for_chat(request.text, sender, receiver)
    return ok(ChatTranslationResponse.from_result(result))


@router.get("/languages", response_model=Envelope[LanguageListResponse])
async def list_languages():
    languages = [
        LanguageRead(
            code=info.code,
            name=info.name,
            native_name=info.native_name,
            script=info.script,
            rtl=info.rtl,
            has_transliteration=has_transliteration(info.name),
        )
        for info in get_all_languages()
    ]
    return ok(LanguageListResponse(count=len(languages), languages=languages))


@router.post("/transliterate", response_model=Envelope[TransliterationResponse])
async def transliterate(request: TransliterationRequest):
    """Convert between romanized input and a language's native script."""
    language = _require_language(request.language, "transliteration")
    script = get_script(language)
    if script != "Latin" and not has_transliteration(language):
        raise UnsupportedLanguageError(language, "transliteration")

    if request.direction == TransliterationDirection.TO_NATIVE:
        converted = transliterate_to_native(request.text, language)
    else:
        converted = reverse_transliterate(request.text, language)

    return ok(TransliterationResponse(
        original_text=request.text,
        transliterated_text=converted,
        language=language,
        script=script,
        direction=request.direction,
    ))

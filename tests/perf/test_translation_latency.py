import time

import pytest

from lexibridge.services.dictionary_store import DictionaryStore, StaticDictionarySource
from lexibridge.services.translation_engine import DictionaryTranslationEngine

TEXT = "I sat by the bank and watched the river. It is a piece of cake! Good morning my friend."


@pytest.mark.asyncio
async def test_translation_latency_smoke():
    engine = DictionaryTranslationEngine(DictionaryStore(StaticDictionarySource()))
    await engine.init()
    start = time.time()
    result = await engine.translate_with_dictionary(TEXT, "english", "hindi")
    elapsed_ms = (time.time() - start) * 1000
    assert result.text
    # Loose budget for the in-memory store
    assert elapsed_ms < 1500


@pytest.mark.asyncio
async def test_cached_translation_is_faster_smoke():
    engine = DictionaryTranslationEngine(DictionaryStore(StaticDictionarySource()))
    await engine.init()
    await engine.translate_with_dictionary(TEXT, "english", "spanish")
    start = time.time()
    for _ in range(100):
        await engine.translate_with_dictionary(TEXT, "english", "spanish")
    elapsed_ms = (time.time() - start) * 1000
    assert elapsed_ms < 1000

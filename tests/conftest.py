"""
Shared fixtures: a loaded starter-dictionary store, engines and fallback stubs.
"""
import logging
from typing import List, Optional

import pytest
import pytest_asyncio

from lexibridge.config.settings import EngineSettings
from lexibridge.core.exceptions import FallbackFailureError
from lexibridge.core.result_cache import ResultCache
from lexibridge.services.dictionary_store import DictionaryStore, StaticDictionarySource
from lexibridge.services.fallback_client import BaseFallbackTranslator, FallbackTranslation
from lexibridge.services.translation_engine import DictionaryTranslationEngine

logging.basicConfig(level=logging.INFO)


class FakeClock:
    """Manually advanced time source"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubFallback(BaseFallbackTranslator):
    """Records calls and returns a canned translation, or raises when told to"""

    def __init__(self, translated_text: str = "texto traducido", fail: bool = False):
        self.translated_text = translated_text
        self.fail = fail
        self.calls: List[tuple] = []

    async def translate(self, text: str, source_language: str, target_language: str) -> FallbackTranslation:
        self.calls.append((text, source_language, target_language))
        if self.fail:
            raise FallbackFailureError("service down", {"reason": "stub"})
        return FallbackTranslation(translated_text=self.translated_text)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest_asyncio.fixture
async def store() -> DictionaryStore:
    store = DictionaryStore(StaticDictionarySource())
    await store.init()
    return store


def build_engine(
    store: DictionaryStore,
    fallback: Optional[BaseFallbackTranslator] = None,
    cache: Optional[ResultCache] = None,
    **overrides,
) -> DictionaryTranslationEngine:
    settings = EngineSettings(**overrides)
    return DictionaryTranslationEngine(store, settings=settings, fallback=fallback, cache=cache)


@pytest.fixture
def engine(store) -> DictionaryTranslationEngine:
    return build_engine(store)


@pytest.fixture
def make_engine(store):
    """Factory for engines over the shared store with settings overrides"""
    def _make(fallback=None, cache=None, **overrides) -> DictionaryTranslationEngine:
        return build_engine(store, fallback=fallback, cache=cache, **overrides)
    return _make


@pytest.fixture
def make_fallback():
    def _make(translated_text: str = "texto traducido", fail: bool = False) -> StubFallback:
        return StubFallback(translated_text=translated_text, fail=fail)
    return _make

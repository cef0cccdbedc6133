# Translation pipeline services

from .dictionary_store import (
    DictionaryStore,
    DictionarySource,
    StaticDictionarySource,
    SQLAlchemyDictionarySource,
)
from .fallback_client import BaseFallbackTranslator, HttpFallbackTranslator, FallbackTranslation
from .translation_engine import DictionaryTranslationEngine, PipelineState

__all__ = [
    "DictionaryStore",
    "DictionarySource",
    "StaticDictionarySource",
    "SQLAlchemyDictionarySource",
    "BaseFallbackTranslator",
    "HttpFallbackTranslator",
    "FallbackTranslation",
    "DictionaryTranslationEngine",
    "PipelineState",
]

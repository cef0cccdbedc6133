"""
Models package for the translation service.

Internal dataclasses passed between pipeline stages, and the SQLAlchemy
tables backing the persistent dictionary.
"""

# Internal Models
from .internal_models import (
    WordOrder,
    PartOfSpeech,
    Tense,
    TranslationMethod,
    CorrectionType,
    LanguageProfile,
    LanguageInfo,
    ScriptDetection,
    PhraseEntry,
    IdiomEntry,
    WordSense,
    Token,
    MorphologicalFeatures,
    CorrectionApplied,
    DisambiguationContext,
    TranslationResult,
    ChatTranslationResult,
    CacheEntry,
    TableStatus,
)

# Dictionary tables
from .dictionary import (
    CommonPhrase,
    TranslationIdiom,
    TranslationGrammarRule,
    TranslationWordSense,
)

__all__ = [
    "WordOrder",
    "PartOfSpeech",
    "Tense",
    "TranslationMethod",
    "CorrectionType",
    "LanguageProfile",
    "LanguageInfo",
    "ScriptDetection",
    "PhraseEntry",
    "IdiomEntry",
    "WordSense",
    "Token",
    "MorphologicalFeatures",
    "CorrectionApplied",
    "DisambiguationContext",
    "TranslationResult",
    "ChatTranslationResult",
    "CacheEntry",
    "TableStatus",
    "CommonPhrase",
    "TranslationIdiom",
    "TranslationGrammarRule",
    "TranslationWordSense",
]

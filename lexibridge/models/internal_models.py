"""
Internal data models for the dictionary translation pipeline.

These records flow between pipeline stages and are never serialized
directly; the HTTP layer converts them into the pydantic schemas.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Generic, TypeVar
from enum import Enum

T = TypeVar("T")


class WordOrder(str, Enum):
    """Basic constituent order of a language"""
    SVO = "SVO"
    SOV = "SOV"
    VSO = "VSO"
    VOS = "VOS"
    OVS = "OVS"
    OSV = "OSV"


class PartOfSpeech(str, Enum):
    """Coarse word classes used by the English-pivot heuristics"""
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    DETERMINER = "determiner"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"


class Tense(str, Enum):
    """Verb forms handled by conjugation"""
    PRESENT = "present"
    PAST = "past"
    PERFECT = "perfect"
    PROGRESSIVE = "progressive"


class TranslationMethod(str, Enum):
    """How the final text of a translation was produced"""
    PASSTHROUGH = "passthrough"
    DICTIONARY_LOOKUP = "dictionary-lookup"
    IDIOM_REPLACEMENT = "idiom-replacement"
    REORDERED = "reordered"
    CONTEXT_DISAMBIGUATED = "context-disambiguated"
    POST_PROCESSED = "post-processed"
    FALLBACK = "fallback"


class CorrectionType(str, Enum):
    """Kinds of audit entries a stage can record"""
    IDIOM = "idiom"
    WORD_ORDER = "word-order"
    WORD_SENSE = "word-sense"
    GRAMMAR = "grammar"
    MORPHOLOGY = "morphology"


@dataclass(frozen=True)
class LanguageProfile:
    """Grammar profile of a language, immutable once loaded"""
    code: str
    name: str
    script: str = "Latin"
    word_order: WordOrder = WordOrder.SVO
    has_gender: bool = False
    has_articles: bool = False
    adjective_position: str = "before"
    uses_postpositions: bool = False
    subject_dropping: bool = False
    has_cases: bool = False
    has_honorific: bool = False
    sentence_end_particle: Optional[str] = None


@dataclass(frozen=True)
class LanguageInfo:
    """Registry metadata for one language"""
    code: str
    name: str
    native_name: str
    script: str
    rtl: bool = False


@dataclass(frozen=True)
class ScriptDetection:
    """Outcome of script detection over a piece of text"""
    script: str
    language: str
    is_latin: bool
    confidence: float


@dataclass
class PhraseEntry:
    """Common phrase keyed by its English form"""
    english: str
    translations: Dict[str, str]
    phrase_key: Optional[str] = None
    category: str = "general"


@dataclass
class IdiomEntry:
    """Non-compositional phrase translated as a unit"""
    phrase: str
    normalized_phrase: str
    meaning: str
    translations: Dict[str, str]
    category: str = "idiom"
    register: str = "neutral"


@dataclass
class WordSense:
    """One meaning of an ambiguous word"""
    sense_id: str
    meaning: str
    context_clues: List[str]
    translations: Dict[str, str]


@dataclass
class Token:
    """A word or non-word run of the input text"""
    text: str
    is_word: bool
    pos: Optional[PartOfSpeech] = None
    normalized: str = ""
    lemma: Optional[str] = None
    index: int = 0
    start: int = 0


@dataclass
class MorphologicalFeatures:
    """Number and tense read off an English word form"""
    is_plural: bool = False
    number: Optional[str] = None
    tense: Optional[Tense] = None


@dataclass
class CorrectionApplied:
    """Audit record for a change made by a pipeline stage"""
    type: CorrectionType
    original: str
    corrected: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "type": self.type.value,
            "original": self.original,
            "corrected": self.corrected,
            "reason": self.reason,
        }


@dataclass
class DisambiguationContext:
    """Words and sentences surrounding an ambiguous word"""
    surrounding_words: List[str] = field(default_factory=list)
    sentence: str = ""
    previous_sentence: Optional[str] = None
    domain: Optional[str] = None


@dataclass
class TranslationResult:
    """Outcome of one dictionary translation request"""
    text: str
    original_text: str
    source_language: str
    target_language: str
    method: TranslationMethod = TranslationMethod.PASSTHROUGH
    confidence: float = 0.0
    corrections: List[CorrectionApplied] = field(default_factory=list)
    tokens: List[Token] = field(default_factory=list)
    was_reordered: bool = False
    was_disambiguated: bool = False
    idioms_found: List[str] = field(default_factory=list)
    unknown_words: List[str] = field(default_factory=list)
    fallback_used: bool = False
    is_translated: bool = False
    english_pivot: Optional[str] = None
    stages: List[str] = field(default_factory=list)


@dataclass
class ChatTranslationResult:
    """Sender view, English core and receiver view of a chat message"""
    original_text: str
    sender_view: str
    receiver_view: str
    english_core: str
    corrections: List[CorrectionApplied] = field(default_factory=list)
    confidence: float = 0.0
    method: TranslationMethod = TranslationMethod.PASSTHROUGH


@dataclass
class CacheEntry(Generic[T]):
    """Cached value with its insertion time"""
    data: T
    timestamp: float

    def is_valid(self, now: float, ttl_seconds: float) -> bool:
        return now - self.timestamp < ttl_seconds


@dataclass
class TableStatus:
    """Load bookkeeping for one dictionary table"""
    loaded: bool = False
    loading: bool = False
    last_update: Optional[float] = None
    row_count: int = 0
    last_error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "loaded": self.loaded,
            "loading": self.loading,
            "last_update": self.last_update,
            "row_count": self.row_count,
            "last_error": self.last_error,
        }

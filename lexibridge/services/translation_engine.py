"""
Dictionary translation engine.

Runs the translation pipeline as an explicit state machine:

    INIT -> SAME_LANGUAGE_FAST_PATH | EMPTY_INPUT | CACHE_HIT   (terminal)
         -> PIVOT_SETUP -> PREPROCESS -> IDIOM_LOOKUP -> DICTIONARY_LOOKUP
         -> MORPHOLOGY -> REORDERING -> DISAMBIGUATION -> POST_PROCESS
         -> CONFIDENCE_GATE -> [FALLBACK] -> FINAL_SCRIPT_CONVERSION
         -> CACHE_WRITE -> DONE

Non-English input is first mapped to an English pivot; every later stage
works from English towards the target. The states a request visits are
recorded on the result. No exception escapes the public entry points.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Tuple

from lexibridge.config.settings import EngineSettings
from lexibridge.core.exceptions import FallbackFailureError, NoTranslationFoundError
from lexibridge.core.metrics import record_latency
from lexibridge.core.result_cache import ResultCache, make_cache_key
from lexibridge.models.internal_models import (
    ChatTranslationResult,
    CorrectionApplied,
    CorrectionType,
    DisambiguationContext,
    Token,
    TranslationMethod,
    TranslationResult,
)
from lexibridge.services.dictionary_store import DictionaryStore
from lexibridge.services.disambiguation import Disambiguator
from lexibridge.services.fallback_client import BaseFallbackTranslator
from lexibridge.services.idiom_matcher import IdiomMatcher
from lexibridge.services.language_registry import (
    is_english,
    is_latin_script_language,
    is_latin_text,
    is_same_language,
    normalize_language,
)
from lexibridge.services.morphology import apply_morphology, extract_features, get_lemma
from lexibridge.services.post_processor import post_process
from lexibridge.services.reordering import WordOrderReorderer
from lexibridge.services.tokenizer import (
    reconstruct_from_chunks,
    split_sentences,
    tokenize,
    tokens_to_string,
)
from lexibridge.services.transliterator import reverse_transliterate, transliterate_to_native

logger = logging.getLogger(__name__)

PHRASE_MATCH_CONFIDENCE = 0.95
WORD_LOOKUP_WEIGHT = 0.8
IDIOM_BONUS = 0.3
FALLBACK_CONFIDENCE = 0.85
CONTEXT_WINDOW = 5
PIVOT_LANGUAGE = "english"


class PipelineState(str, Enum):
    """States of one translation request"""
    INIT = "init"
    SAME_LANGUAGE_FAST_PATH = "same_language_fast_path"
    EMPTY_INPUT = "empty_input"
    CACHE_HIT = "cache_hit"
    PIVOT_SETUP = "pivot_setup"
    PREPROCESS = "preprocess"
    IDIOM_LOOKUP = "idiom_lookup"
    DICTIONARY_LOOKUP = "dictionary_lookup"
    MORPHOLOGY = "morphology"
    REORDERING = "reordering"
    DISAMBIGUATION = "disambiguation"
    POST_PROCESS = "post_process"
    CONFIDENCE_GATE = "confidence_gate"
    FALLBACK = "fallback"
    FINAL_SCRIPT_CONVERSION = "final_script_conversion"
    CACHE_WRITE = "cache_write"
    DONE = "done"


@dataclass
class _ChunkWork:
    """Per-sentence working state"""
    source_text: str
    tokens: List[Token] = field(default_factory=list)
    pending: Set[int] = field(default_factory=set)
    deferred: Set[int] = field(default_factory=set)
    total_words: int = 0
    translated_words: int = 0
    idiom_replaced: bool = False
    phrase_match: bool = False
    output: str = ""

    @property
    def confidence(self) -> float:
        if self.phrase_match:
            return PHRASE_MATCH_CONFIDENCE
        score = 0.0
        if self.total_words:
            score = (self.translated_words / self.total_words) * WORD_LOOKUP_WEIGHT
        if self.idiom_replaced:
            score += IDIOM_BONUS
        return min(1.0, max(0.0, score))

    @property
    def weight(self) -> int:
        return max(1, self.total_words)


def _match_case(source: str, translation: str) -> str:
    if source[:1].isupper() and translation[:1].islower():
        return translation[:1].upper() + translation[1:]
    return translation


def _trailing_punctuation(text: str) -> str:
    end = len(text)
    while end > 0 and text[end - 1] in ".!?。！？।":
        end -= 1
    return text[end:]


def _merge_spans(tokens: List[Token], spans: List[Tuple[int, int]]) -> List[Token]:
    """Collapse the tokens of each replaced idiom into one opaque word token"""
    if not spans:
        return tokens
    merged: List[Token] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        span = next((s for s in spans if s[0] <= token.start < s[1]), None)
        if span is None:
            merged.append(token)
            i += 1
            continue
        parts = []
        while i < len(tokens) and tokens[i].start < span[1]:
            parts.append(tokens[i].text)
            i += 1
        text = "".join(parts)
        merged.append(Token(text=text, is_word=True, pos=None, normalized=text.lower(), start=span[0]))
    for index, token in enumerate(merged):
        token.index = index
    return merged


class DictionaryTranslationEngine:
    """
    Dictionary-based translation with an optional remote fallback.

    Args:
        store: Dictionary tables
        settings: Pipeline toggles and thresholds
        fallback: Remote translator used when confidence is too low
        cache: Result cache; one sized from settings is created when omitted
    """

    def __init__(
        self,
        store: DictionaryStore,
        settings: Optional[EngineSettings] = None,
        fallback: Optional[BaseFallbackTranslator] = None,
        cache: Optional[ResultCache] = None,
    ):
        self.store = store
        self.settings = settings or EngineSettings()
        self.fallback = fallback
        self.cache = cache if cache is not None else ResultCache(
            ttl_seconds=self.settings.cache_ttl_seconds,
            max_size=self.settings.max_cache_size,
        )
        self.idioms = IdiomMatcher(store)
        self.reorderer = WordOrderReorderer(store)
        self.disambiguator = Disambiguator(store)

    # Engine management

    async def init(self) -> None:
        await self.store.init()
        logger.info("Dictionary translation engine initialized")

    async def refresh(self) -> None:
        await self.store.refresh()
        self.cache.clear()

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("Translation result cache cleared")

    def is_ready(self) -> bool:
        return self.store.is_ready()

    def get_cache_stats(self) -> dict:
        return {
            "results": len(self.cache),
            "phrases": self.store.phrase_count(),
            "ready": self.is_ready(),
            **self.cache.stats(),
        }

    # Public entry points

    async def translate_with_dictionary(
        self,
        text: str,
        source_language: str,
        target_language: str,
        domain: Optional[str] = None,
    ) -> TranslationResult:
        """
        Translate text between two languages.

        Args:
            text: Input text
            source_language: Source language name, alias or code
            target_language: Target language name, alias or code
            domain: Optional conversation domain used for disambiguation

        Returns:
            TranslationResult; on an unexpected failure the original text
            with confidence 0 and every word listed as unknown
        """
        stages: List[str] = []
        try:
            with record_latency("translate_with_dictionary"):
                return await self._run(text or "", source_language, target_language, domain, stages)
        except Exception as e:
            logger.error(
                f"Translation pipeline failed: {e}",
                exc_info=True,
                extra={"stages": list(stages)},
            )
            return self._failure_result(text or "", source_language, target_language, stages)

    async def translate_for_chat(
        self,
        text: str,
        sender_language: str,
        receiver_language: str
    ) -> ChatTranslationResult:
        """
        Produce both sides of a chat message.

        The sender sees their text in their native script, the receiver
        sees the translation of the English core.
        """
        trimmed = (text or "").strip()
        if not trimmed:
            return ChatTranslationResult(original_text="", sender_view="", receiver_view="", english_core="")

        try:
            sender = normalize_language(sender_language)
            receiver = normalize_language(receiver_language)

            sender_view = trimmed
            if is_latin_text(trimmed) and not is_latin_script_language(sender):
                sender_view = transliterate_to_native(trimmed, sender)

            if is_same_language(sender, receiver):
                english_core = trimmed if is_english(sender) else reverse_transliterate(trimmed, sender)
                return ChatTranslationResult(
                    original_text=trimmed,
                    sender_view=sender_view,
                    receiver_view=sender_view,
                    english_core=english_core,
                    confidence=1.0,
                    method=TranslationMethod.PASSTHROUGH,
                )

            if is_english(sender):
                english_core = trimmed
            else:
                await self.store.ensure_fresh()
                english_core = self._to_english(trimmed, sender)

            result = await self.translate_with_dictionary(english_core, PIVOT_LANGUAGE, receiver)
            return ChatTranslationResult(
                original_text=trimmed,
                sender_view=sender_view,
                receiver_view=result.text,
                english_core=english_core,
                corrections=result.corrections,
                confidence=result.confidence,
                method=result.method,
            )
        except Exception as e:
            logger.error(f"Chat translation failed: {e}", exc_info=True)
            return ChatTranslationResult(
                original_text=trimmed,
                sender_view=trimmed,
                receiver_view=trimmed,
                english_core=trimmed,
                confidence=0.0,
                method=TranslationMethod.PASSTHROUGH,
            )

    # Pipeline

    @staticmethod
    def _enter(stages: List[str], state: PipelineState) -> None:
        if state.value not in stages:
            stages.append(state.value)
            logger.debug(f"Pipeline stage {state.value}")

    def _failure_result(self, text: str, source: str, target: str, stages: List[str]) -> TranslationResult:
        original = text.strip()
        return TranslationResult(
            text=original or text,
            original_text=original,
            source_language=normalize_language(source),
            target_language=normalize_language(target),
            method=TranslationMethod.PASSTHROUGH,
            confidence=0.0,
            unknown_words=[token.text for token in tokenize(original) if token.is_word],
            is_translated=False,
            stages=list(stages),
        )

    @staticmethod
    def _convert_script(text: str, source: str, target: str) -> str:
        input_is_latin = is_latin_text(text)
        target_is_latin = is_latin_script_language(target)
        if input_is_latin and not target_is_latin:
            return transliterate_to_native(text, target)
        if not input_is_latin and target_is_latin:
            return reverse_transliterate(text, source)
        return text

    async def _run(
        self,
        text: str,
        source_language: str,
        target_language: str,
        domain: Optional[str],
        stages: List[str],
    ) -> TranslationResult:
        self._enter(stages, PipelineState.INIT)
        source = normalize_language(source_language)
        target = normalize_language(target_language)
        trimmed = text.strip()

        if is_same_language(source, target):
            self._enter(stages, PipelineState.SAME_LANGUAGE_FAST_PATH)
            converted = self._convert_script(trimmed, source, target) if trimmed else trimmed
            return TranslationResult(
                text=converted,
                original_text=trimmed,
                source_language=source,
                target_language=target,
                method=TranslationMethod.PASSTHROUGH,
                confidence=1.0,
                is_translated=converted != trimmed,
                stages=list(stages),
            )

        if not trimmed:
            self._enter(stages, PipelineState.EMPTY_INPUT)
            return TranslationResult(
                text="",
                original_text="",
                source_language=source,
                target_language=target,
                method=TranslationMethod.PASSTHROUGH,
                confidence=0.0,
                is_translated=False,
                stages=list(stages),
            )

        cache_key = make_cache_key(trimmed, source, target)
        cached = self.cache.get(cache_key)
        if cached is not None:
            self._enter(stages, PipelineState.CACHE_HIT)
            cached.stages = list(stages)
            return cached

        await self.store.ensure_fresh()

        self._enter(stages, PipelineState.PIVOT_SETUP)
        working = trimmed
        english_pivot = None
        if not is_english(source):
            working = self._to_english(trimmed, source)
            english_pivot = working

        self._enter(stages, PipelineState.PREPROCESS)
        chunk_texts, separators = split_sentences(working, self.settings.max_sentence_length)
        works = [_ChunkWork(source_text=chunk.strip()) for chunk in chunk_texts]

        corrections: List[CorrectionApplied] = []
        idioms_found: List[str] = []
        was_reordered = False
        was_disambiguated = False
        target_profile = self.store.get_grammar(target)

        previous_sentence = None
        for work in works:
            if not work.source_text:
                continue
            self._translate_chunk(work, target, corrections, idioms_found, stages)

            if not work.phrase_match and self.settings.enable_reordering:
                self._enter(stages, PipelineState.REORDERING)
                was_reordered = self._reorder(work, target, corrections) or was_reordered

            if self.settings.enable_disambiguation:
                self._enter(stages, PipelineState.DISAMBIGUATION)
                was_disambiguated = self._disambiguate(
                    work, target, previous_sentence, domain, corrections
                ) or was_disambiguated

            work.output = work.output or tokens_to_string(work.tokens)
            if self.settings.enable_post_processing:
                self._enter(stages, PipelineState.POST_PROCESS)
                processed, correction = post_process(work.output, target_profile)
                if correction:
                    corrections.append(correction)
                    work.output = processed
            previous_sentence = work.source_text

        output_chunks = [work.output if work.source_text else chunk for work, chunk in zip(works, chunk_texts)]
        translated_text = reconstruct_from_chunks(output_chunks, separators).strip()

        counted = [work for work in works if work.source_text]
        total_weight = sum(work.weight for work in counted)
        confidence = sum(work.confidence * work.weight for work in counted) / total_weight if total_weight else 0.0
        confidence = min(1.0, max(0.0, confidence))

        any_translated = any(work.translated_words or work.phrase_match or work.idiom_replaced for work in counted)
        method = TranslationMethod.DICTIONARY_LOOKUP
        if idioms_found and any(work.idiom_replaced for work in counted):
            method = TranslationMethod.IDIOM_REPLACEMENT
        if was_reordered:
            method = TranslationMethod.REORDERED
        if was_disambiguated:
            method = TranslationMethod.CONTEXT_DISAMBIGUATED
        if not any_translated and any(c.type == CorrectionType.GRAMMAR for c in corrections):
            method = TranslationMethod.POST_PROCESSED

        unknown_words: List[str] = []
        for work in counted:
            for token in work.tokens:
                if id(token) in work.pending or id(token) in work.deferred:
                    unknown_words.append(token.text)

        result = TranslationResult(
            text=translated_text or trimmed,
            original_text=trimmed,
            source_language=source,
            target_language=target,
            method=method,
            confidence=confidence,
            corrections=corrections,
            was_reordered=was_reordered,
            was_disambiguated=was_disambiguated,
            idioms_found=idioms_found,
            unknown_words=unknown_words,
            is_translated=any_translated,
            english_pivot=english_pivot,
        )

        self._enter(stages, PipelineState.CONFIDENCE_GATE)
        if (
            result.confidence < self.settings.fallback_confidence_threshold
            and self.settings.enable_fallback
            and self.fallback is not None
        ):
            self._enter(stages, PipelineState.FALLBACK)
            await self._apply_fallback(result, trimmed, source, target)

        self._enter(stages, PipelineState.FINAL_SCRIPT_CONVERSION)
        if not is_latin_script_language(target) and is_latin_text(result.text):
            result.text = transliterate_to_native(result.text, target)

        result.tokens = tokenize(result.text)
        self._enter(stages, PipelineState.CACHE_WRITE)
        self._enter(stages, PipelineState.DONE)
        result.stages = list(stages)
        self.cache.set(cache_key, result)
        return result

    def _to_english(self, text: str, source: str) -> str:
        """Map source-language text to English through the reverse phrase index"""
        chunks, separators = split_sentences(text)
        english_chunks = []
        for chunk in chunks:
            stripped = chunk.strip()
            whole = self.store.lookup_english(stripped, source) if stripped else None
            if whole:
                english_chunks.append(whole + _trailing_punctuation(stripped))
                continue

            parts = []
            for token in tokenize(chunk):
                if not token.is_word:
                    parts.append(token.text)
                    continue
                english = self.store.lookup_english(token.text, source)
                if english:
                    parts.append(english)
                elif not is_latin_text(token.text):
                    parts.append(reverse_transliterate(token.text, source))
                else:
                    parts.append(token.text)
            english_chunks.append("".join(parts))
        return reconstruct_from_chunks(english_chunks, separators)

    def _translate_chunk(
        self,
        work: _ChunkWork,
        target: str,
        corrections: List[CorrectionApplied],
        idioms_found: List[str],
        stages: List[str],
    ) -> None:
        text = work.source_text
        spans: List[Tuple[int, int]] = []

        if self.settings.enable_idioms_lookup:
            self._enter(stages, PipelineState.IDIOM_LOOKUP)
            replacement = self.idioms.replace_idioms_in_text(text, target)
            idioms_found.extend(replacement.idioms_found)
            if replacement.spans:
                corrections.extend(replacement.corrections)
                text = replacement.text
                spans = replacement.spans
                work.idiom_replaced = True

        self._enter(stages, PipelineState.DICTIONARY_LOOKUP)
        if not work.idiom_replaced:
            phrase = self.store.lookup_phrase(text, target)
            if phrase:
                punctuation = _trailing_punctuation(text)
                if punctuation and not _trailing_punctuation(phrase):
                    phrase += punctuation
                work.output = _match_case(text, phrase)
                work.phrase_match = True
                work.total_words = sum(1 for token in tokenize(text) if token.is_word)
                work.translated_words = work.total_words
                return

        tokens = _merge_spans(tokenize(text), spans)
        span_starts = {start for start, _ in spans}
        first_word = True
        for position, token in enumerate(tokens):
            if not token.is_word:
                continue
            work.total_words += 1
            if token.start in span_starts and token.pos is None:
                work.translated_words += 1
                first_word = False
                continue

            if self.settings.enable_disambiguation and self.store.is_ambiguous(token.normalized):
                work.deferred.add(id(token))
                first_word = False
                continue

            try:
                translation = self.store.translate_word(token.text, target)
            except NoTranslationFoundError:
                work.pending.add(id(token))
            else:
                if first_word:
                    translation = _match_case(token.text, translation)
                tokens[position] = self._translated_token(token, translation)
                work.translated_words += 1
            first_word = False

        work.tokens = tokens
        if self.settings.enable_morphology:
            self._enter(stages, PipelineState.MORPHOLOGY)
            self._apply_morphology(work, target, corrections)

    @staticmethod
    def _translated_token(token: Token, translation: str) -> Token:
        return Token(
            text=translation,
            is_word=True,
            pos=token.pos,
            normalized=token.normalized,
            lemma=token.lemma,
            index=token.index,
            start=token.start,
        )

    def _apply_morphology(self, work: _ChunkWork, target: str, corrections: List[CorrectionApplied]) -> None:
        """Retry untranslated words through their lemma"""
        for position, token in enumerate(work.tokens):
            if id(token) not in work.pending:
                continue
            lemma = token.lemma or get_lemma(token.normalized, token.pos)
            if not lemma or lemma == token.normalized:
                continue
            try:
                translation = self.store.translate_word(lemma, target)
            except NoTranslationFoundError:
                continue

            if token.pos is not None:
                translation = apply_morphology(translation, extract_features(token.normalized, token.pos), target)
            work.pending.discard(id(token))
            work.tokens[position] = self._translated_token(token, translation)
            work.translated_words += 1
            corrections.append(CorrectionApplied(
                type=CorrectionType.MORPHOLOGY,
                original=token.text,
                corrected=translation,
                reason=f"Translated through lemma '{lemma}'",
            ))

    def _reorder(self, work: _ChunkWork, target: str, corrections: List[CorrectionApplied]) -> bool:
        reordered, reason = self.reorderer.reorder_tokens(work.tokens, PIVOT_LANGUAGE, target)
        if reason is None:
            return False
        original = tokens_to_string(work.tokens)
        work.tokens = reordered
        corrections.append(CorrectionApplied(
            type=CorrectionType.WORD_ORDER,
            original=original,
            corrected=tokens_to_string(reordered),
            reason=reason,
        ))
        return True

    def _disambiguate(
        self,
        work: _ChunkWork,
        target: str,
        previous_sentence: Optional[str],
        domain: Optional[str],
        corrections: List[CorrectionApplied],
    ) -> bool:
        if not work.deferred:
            return False

        word_positions = [i for i, token in enumerate(work.tokens) if token.is_word]
        changed = False
        for rank, position in enumerate(word_positions):
            token = work.tokens[position]
            if id(token) not in work.deferred:
                continue

            neighbours = word_positions[max(0, rank - CONTEXT_WINDOW):rank] + word_positions[rank + 1:rank + 1 + CONTEXT_WINDOW]
            context = DisambiguationContext(
                surrounding_words=[work.tokens[i].normalized for i in neighbours],
                sentence=work.source_text,
                previous_sentence=previous_sentence,
                domain=domain,
            )
            choice = self.disambiguator.disambiguate_and_translate(token.normalized, context, target)
            if choice is None:
                continue

            work.deferred.discard(id(token))
            work.tokens[position] = self._translated_token(token, choice.translation)
            work.translated_words += 1
            changed = True
            corrections.append(CorrectionApplied(
                type=CorrectionType.WORD_SENSE,
                original=token.text,
                corrected=choice.translation,
                reason=f"Chose sense '{choice.sense_id}' from context (confidence {choice.confidence:.2f})",
            ))
        return changed

    async def _apply_fallback(self, result: TranslationResult, text: str, source: str, target: str) -> None:
        try:
            translation = await self.fallback.translate(text, source, target)
        except FallbackFailureError as e:
            logger.warning(f"Fallback translation failed: {e.message}", extra={"details": e.details})
            return
        except Exception as e:
            logger.error(f"Fallback translator raised unexpectedly: {e}")
            return

        result.text = translation.translated_text
        result.method = TranslationMethod.FALLBACK
        result.confidence = FALLBACK_CONFIDENCE
        result.fallback_used = True
        result.is_translated = True
        result.unknown_words = []

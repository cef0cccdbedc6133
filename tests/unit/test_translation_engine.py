"""
Unit tests for the dictionary translation engine state machine.
"""
import pytest

from lexibridge.core.result_cache import ResultCache
from lexibridge.models.internal_models import CorrectionType, TranslationMethod
from lexibridge.services.language_registry import is_latin_text
from lexibridge.services.translation_engine import PipelineState


def correction_types(result):
    return [c.type for c in result.corrections]


@pytest.mark.asyncio
async def test_exact_phrase_match(engine):
    result = await engine.translate_with_dictionary("good morning", "english", "spanish")
    assert result.text == "buenos días"
    assert result.confidence == pytest.approx(0.95)
    assert result.method == TranslationMethod.DICTIONARY_LOOKUP
    assert result.is_translated
    assert result.unknown_words == []
    assert result.stages[-1] == PipelineState.DONE.value


@pytest.mark.asyncio
async def test_phrase_match_keeps_case_and_terminal_punctuation(engine):
    result = await engine.translate_with_dictionary("Good morning. Good night.", "en", "es")
    assert result.text == "Buenos días. Buenas noches."
    assert result.confidence == pytest.approx(0.95)


@pytest.mark.asyncio
async def test_empty_input_is_passthrough(engine):
    result = await engine.translate_with_dictionary("", "english", "spanish")
    assert result.text == ""
    assert result.is_translated is False
    assert result.method == TranslationMethod.PASSTHROUGH
    assert result.stages == [PipelineState.INIT.value, PipelineState.EMPTY_INPUT.value]


@pytest.mark.asyncio
async def test_whitespace_only_input_is_passthrough(engine):
    result = await engine.translate_with_dictionary("   ", "english", "spanish")
    assert result.text == ""
    assert result.method == TranslationMethod.PASSTHROUGH


@pytest.mark.asyncio
async def test_same_language_only_converts_script(engine):
    result = await engine.translate_with_dictionary("namaste", "hindi", "hindi")
    assert result.text == "नमस्ते"
    assert not is_latin_text(result.text)
    assert result.source_language == result.target_language == "hindi"
    assert result.confidence == 1.0
    assert result.method == TranslationMethod.PASSTHROUGH
    assert result.stages == [PipelineState.INIT.value, PipelineState.SAME_LANGUAGE_FAST_PATH.value]


@pytest.mark.asyncio
async def test_same_language_spelled_differently(engine):
    """Codes and names of one language take the fast path without touching the text."""
    result = await engine.translate_with_dictionary("good morning", "en", "English")
    assert result.text == "good morning"
    assert result.confidence == 1.0
    assert result.is_translated is False
    assert PipelineState.DICTIONARY_LOOKUP.value not in result.stages


@pytest.mark.asyncio
async def test_idiom_is_replaced_before_word_lookup(make_engine):
    engine = make_engine(enable_reordering=False)
    result = await engine.translate_with_dictionary("it is a piece of cake", "english", "spanish")
    assert "pan comido" in result.text
    assert result.idioms_found == ["piece of cake"]
    assert CorrectionType.IDIOM in correction_types(result)
    assert result.method == TranslationMethod.IDIOM_REPLACEMENT
    # one of four words translated plus the idiom bonus
    assert result.confidence == pytest.approx(0.25 * 0.8 + 0.3)


@pytest.mark.asyncio
async def test_idioms_can_be_disabled(make_engine):
    engine = make_engine(enable_idioms_lookup=False, enable_reordering=False)
    result = await engine.translate_with_dictionary("it is a piece of cake", "english", "spanish")
    assert "pan comido" not in result.text
    assert result.idioms_found == []
    assert PipelineState.IDIOM_LOOKUP.value not in result.stages


@pytest.mark.asyncio
async def test_ambiguous_word_uses_context(engine):
    result = await engine.translate_with_dictionary(
        "I sat by the bank and watched the river", "english", "spanish"
    )
    assert "orilla" in result.text
    assert "banco" not in result.text
    assert "río" in result.text
    assert result.was_disambiguated
    assert result.method == TranslationMethod.CONTEXT_DISAMBIGUATED
    assert CorrectionType.WORD_SENSE in correction_types(result)


@pytest.mark.asyncio
async def test_financial_context_picks_other_sense(engine):
    result = await engine.translate_with_dictionary("the bank has my money", "english", "spanish")
    assert "banco" in result.text


@pytest.mark.asyncio
async def test_disabled_disambiguation_leaves_word_to_lookup(make_engine):
    engine = make_engine(enable_disambiguation=False)
    result = await engine.translate_with_dictionary("the bank and the river", "english", "spanish")
    assert not result.was_disambiguated
    assert "bank" in result.unknown_words


@pytest.mark.asyncio
async def test_unknown_words_are_kept_and_reported(engine):
    result = await engine.translate_with_dictionary("the zebra", "english", "spanish")
    assert "zebra" in result.text
    assert "zebra" in result.unknown_words
    assert result.confidence == pytest.approx(0.5 * 0.8)


@pytest.mark.asyncio
async def test_morphology_retries_with_lemma(engine):
    result = await engine.translate_with_dictionary("cats", "english", "spanish")
    assert "gato" in result.text
    assert result.unknown_words == []
    assert CorrectionType.MORPHOLOGY in correction_types(result)


@pytest.mark.asyncio
async def test_morphology_can_be_disabled(make_engine):
    engine = make_engine(enable_morphology=False)
    result = await engine.translate_with_dictionary("cats", "english", "spanish")
    assert result.unknown_words == ["cats"]
    assert PipelineState.MORPHOLOGY.value not in result.stages


@pytest.mark.asyncio
async def test_sov_target_is_reordered(engine):
    result = await engine.translate_with_dictionary("I eat food", "english", "hindi")
    assert result.was_reordered
    assert CorrectionType.WORD_ORDER in correction_types(result)
    words = result.text.split()
    assert words[0] == "मैं"
    assert words[1] == "खाना"
    assert not is_latin_text(result.text)


@pytest.mark.asyncio
async def test_non_english_source_goes_through_english_pivot(engine):
    result = await engine.translate_with_dictionary("muchas gracias", "spanish", "french")
    assert result.english_pivot == "thank you very much"
    assert result.text == "merci beaucoup"
    assert result.confidence == pytest.approx(0.95)


@pytest.mark.asyncio
async def test_native_script_source_to_english(engine):
    result = await engine.translate_with_dictionary("सुप्रभात", "hindi", "english")
    assert result.text == "good morning"


@pytest.mark.asyncio
async def test_latin_output_is_transliterated_for_native_target(engine):
    """Words with no Hindi entry still come out in Devanagari."""
    result = await engine.translate_with_dictionary("namaste", "english", "hindi")
    assert not is_latin_text(result.text)
    assert PipelineState.FINAL_SCRIPT_CONVERSION.value in result.stages


@pytest.mark.asyncio
async def test_low_confidence_uses_fallback(make_engine, make_fallback):
    fallback = make_fallback("xilófono de cuarzo")
    engine = make_engine(fallback=fallback)
    result = await engine.translate_with_dictionary("xylophone quartz", "english", "spanish")
    assert fallback.calls == [("xylophone quartz", "english", "spanish")]
    assert result.text == "xilófono de cuarzo"
    assert result.method == TranslationMethod.FALLBACK
    assert result.confidence == pytest.approx(0.85)
    assert result.fallback_used
    assert PipelineState.FALLBACK.value in result.stages


@pytest.mark.asyncio
async def test_fallback_failure_keeps_dictionary_result(make_engine, make_fallback):
    fallback = make_fallback(fail=True)
    engine = make_engine(fallback=fallback)
    result = await engine.translate_with_dictionary("xylophone quartz", "english", "spanish")
    assert len(fallback.calls) == 1
    assert result.text == "xylophone quartz"
    assert result.method != TranslationMethod.FALLBACK
    assert not result.fallback_used
    assert result.confidence == 0.0
    assert result.unknown_words == ["xylophone", "quartz"]


@pytest.mark.asyncio
async def test_fallback_not_called_when_disabled_or_confident(make_engine, make_fallback):
    fallback = make_fallback()
    disabled = make_engine(fallback=fallback, enable_fallback=False)
    await disabled.translate_with_dictionary("xylophone quartz", "english", "spanish")

    confident = make_engine(fallback=fallback)
    await confident.translate_with_dictionary("good morning", "english", "spanish")
    assert fallback.calls == []


@pytest.mark.asyncio
async def test_repeat_request_is_served_from_cache(make_engine, clock):
    engine = make_engine(cache=ResultCache(ttl_seconds=60, clock=clock))
    first = await engine.translate_with_dictionary("I eat food", "english", "spanish")
    second = await engine.translate_with_dictionary("I eat food", "english", "spanish")

    assert second.stages == [PipelineState.INIT.value, PipelineState.CACHE_HIT.value]
    second.stages = first.stages
    assert second == first

    clock.advance(60)
    third = await engine.translate_with_dictionary("I eat food", "english", "spanish")
    assert PipelineState.CACHE_HIT.value not in third.stages
    assert third.stages[-1] == PipelineState.DONE.value


def test_injected_empty_cache_is_kept(make_engine, clock):
    cache = ResultCache(ttl_seconds=60, max_size=5, clock=clock)
    engine = make_engine(cache=cache)
    assert engine.cache is cache
    assert engine.get_cache_stats()["ttl_seconds"] == 60


@pytest.mark.asyncio
async def test_cached_result_cannot_be_mutated_by_caller(engine):
    first = await engine.translate_with_dictionary("good night", "english", "spanish")
    first.text = "changed"
    second = await engine.translate_with_dictionary("good night", "english", "spanish")
    assert second.text == "buenas noches"


@pytest.mark.asyncio
async def test_unexpected_stage_error_echoes_input(engine, monkeypatch):
    def broken_lookup(text, target_language):
        raise RuntimeError("table corrupted")

    monkeypatch.setattr(engine.store, "lookup_phrase", broken_lookup)
    result = await engine.translate_with_dictionary("good morning", "english", "spanish")
    assert result.text == "good morning"
    assert result.confidence == 0.0
    assert result.method == TranslationMethod.PASSTHROUGH
    assert result.unknown_words == ["good", "morning"]


@pytest.mark.asyncio
@pytest.mark.parametrize("text, source, target", [
    ("good morning", "english", "spanish"),
    ("it is a piece of cake and I love you", "english", "hindi"),
    ("hola amigo. ¿cómo estás?", "spanish", "german"),
    ("qwerty asdf", "english", "japanese"),
    ("the big red car!!", "english", "french"),
    ("नमस्ते दोस्त", "hindi", "english"),
])
async def test_confidence_is_bounded_and_output_never_empty(engine, text, source, target):
    result = await engine.translate_with_dictionary(text, source, target)
    assert 0.0 <= result.confidence <= 1.0
    assert result.text


@pytest.mark.asyncio
async def test_long_input_is_chunked(make_engine):
    engine = make_engine(max_sentence_length=20)
    text = "good morning my friend and good night my friend"
    result = await engine.translate_with_dictionary(text, "english", "spanish")
    assert "amigo" in result.text
    assert 0.0 <= result.confidence <= 1.0


@pytest.mark.asyncio
async def test_chat_same_language(engine):
    result = await engine.translate_for_chat("namaste", "hindi", "hindi")
    assert result.sender_view == "नमस्ते"
    assert result.receiver_view == result.sender_view
    assert result.english_core == "namaste"
    assert result.confidence == 1.0
    assert result.method == TranslationMethod.PASSTHROUGH


@pytest.mark.asyncio
async def test_chat_english_sender(engine):
    result = await engine.translate_for_chat("good morning", "english", "spanish")
    assert result.sender_view == "good morning"
    assert result.english_core == "good morning"
    assert result.receiver_view == "buenos días"
    assert result.confidence == pytest.approx(0.95)


@pytest.mark.asyncio
async def test_chat_native_sender_uses_english_core(engine):
    result = await engine.translate_for_chat("सुप्रभात", "hindi", "spanish")
    assert result.sender_view == "सुप्रभात"
    assert result.english_core == "good morning"
    assert result.receiver_view == "buenos días"


@pytest.mark.asyncio
async def test_chat_romanized_sender_sees_native_script(engine):
    result = await engine.translate_for_chat("namaste", "hindi", "english")
    assert result.sender_view == "नमस्ते"
    assert result.receiver_view


@pytest.mark.asyncio
async def test_chat_empty_message(engine):
    result = await engine.translate_for_chat("  ", "english", "spanish")
    assert result.sender_view == result.receiver_view == result.english_core == ""


@pytest.mark.asyncio
async def test_engine_management(engine):
    assert engine.is_ready()
    await engine.translate_with_dictionary("good morning", "english", "spanish")
    assert engine.get_cache_stats()["results"] == 1

    await engine.refresh()
    assert engine.get_cache_stats()["results"] == 0
    assert engine.get_cache_stats()["phrases"] > 0

    await engine.translate_with_dictionary("good night", "english", "spanish")
    engine.clear_cache()
    assert len(engine.cache) == 0

"""
Unit tests for the cached dictionary store.
"""
import asyncio

import pytest

from lexibridge.core.exceptions import ErrorCode, NoTranslationFoundError
from lexibridge.models.internal_models import WordOrder
from lexibridge.services.dictionary_store import (
    GRAMMAR,
    IDIOMS,
    PHRASES,
    TABLES,
    WORD_SENSES,
    DictionarySource,
    DictionaryStore,
    StaticDictionarySource,
    normalize_lookup_key,
)


class CountingSource(StaticDictionarySource):
    """Static source that counts fetches and can be switched to fail"""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.fetches = {table: 0 for table in TABLES}
        self.fail = False

    def _take(self, table, limit):
        self.fetches[table] += 1
        if self.fail:
            raise ConnectionError("database unreachable")
        return super()._take(table, limit)


class SlowSource(CountingSource):
    """Counting source whose fetches yield to the event loop before returning"""

    async def _slow(self, table, limit):
        self.fetches[table] += 1
        await asyncio.sleep(0.01)
        return StaticDictionarySource._take(self, table, limit)

    async def fetch_phrases(self, limit):
        return await self._slow(PHRASES, limit)

    async def fetch_idioms(self, limit):
        return await self._slow(IDIOMS, limit)

    async def fetch_grammar_rules(self, limit):
        return await self._slow(GRAMMAR, limit)

    async def fetch_word_senses(self, limit):
        return await self._slow(WORD_SENSES, limit)


class BrokenSource(DictionarySource):
    async def fetch_phrases(self, limit):
        raise RuntimeError("boom")

    async def fetch_idioms(self, limit):
        raise RuntimeError("boom")

    async def fetch_grammar_rules(self, limit):
        raise RuntimeError("boom")

    async def fetch_word_senses(self, limit):
        raise RuntimeError("boom")


def test_normalize_lookup_key():
    assert normalize_lookup_key("  Hello,   World!! ") == "hello, world"
    assert normalize_lookup_key("¿Cómo estás?") == "cómo estás"
    assert normalize_lookup_key("") == ""
    assert normalize_lookup_key(None) == ""


@pytest.mark.asyncio
async def test_phrase_lookup_by_text_and_key(store):
    assert store.lookup_phrase("Hello!", "es") == "hola"
    assert store.lookup_phrase("how are you", "spanish") == "¿cómo estás?"
    assert store.lookup_phrase("how_are_you", "french") == "comment allez-vous?"
    assert store.lookup_phrase("hello", "english") == "hello"


@pytest.mark.asyncio
async def test_phrase_lookup_misses(store):
    assert store.lookup_phrase("completely unknown phrase", "spanish") is None
    assert store.lookup_phrase("the", "hindi") is None
    assert store.lookup_phrase("   ", "spanish") is None


@pytest.mark.asyncio
async def test_translate_word_raises_on_miss(store):
    assert store.translate_word("Hello", "es") == "hola"
    with pytest.raises(NoTranslationFoundError) as exc_info:
        store.translate_word("zebra", "spanish")
    assert exc_info.value.error_code == ErrorCode.NO_TRANSLATION_FOUND
    assert exc_info.value.details == {"text": "zebra", "target_language": "spanish"}


@pytest.mark.asyncio
async def test_reverse_lookup(store):
    assert store.lookup_english("Gracias", "spanish") == "thank you"
    assert store.lookup_english("hola", "es") == "hello"
    assert store.lookup_english("hello", "english") == "hello"
    assert store.lookup_english("xyzzy", "spanish") is None


@pytest.mark.asyncio
async def test_idioms_and_word_senses(store):
    idiom = store.get_idiom("Kick the bucket")
    assert idiom is not None
    assert idiom.translations["spanish"] == "estirar la pata"
    assert store.is_ambiguous("bank")
    assert not store.is_ambiguous("cat")
    assert {sense.sense_id for sense in store.get_word_senses("BANK")} == {"bank_financial", "bank_river"}
    assert "bank" in store.get_ambiguous_words()


@pytest.mark.asyncio
async def test_grammar_profiles(store):
    assert store.get_grammar("ja").word_order == WordOrder.SOV
    assert store.get_grammar("spanish").adjective_position == "after"
    generic = store.get_grammar("klingon")
    assert generic.word_order == WordOrder.SVO
    assert generic.name == "klingon"


@pytest.mark.asyncio
async def test_grammar_falls_back_to_defaults_when_table_empty():
    store = DictionaryStore(StaticDictionarySource(grammar_rules=[]))
    await store.init()
    assert store.get_grammar("hindi").word_order == WordOrder.SOV


@pytest.mark.asyncio
async def test_tables_reload_only_after_ttl(clock):
    source = CountingSource()
    store = DictionaryStore(source, ttl_seconds=300, clock=clock)
    await store.init()
    assert all(count == 1 for count in source.fetches.values())

    clock.advance(100)
    await store.ensure_fresh()
    assert source.fetches[PHRASES] == 1

    clock.advance(200)
    await store.ensure_fresh()
    assert all(count == 2 for count in source.fetches.values())


@pytest.mark.asyncio
async def test_concurrent_requests_share_one_fetch_per_table(clock):
    source = SlowSource()
    store = DictionaryStore(source, clock=clock)

    await asyncio.gather(*(store.ensure_fresh() for _ in range(5)))
    assert source.fetches == {table: 1 for table in TABLES}
    assert store.is_ready()
    assert not any(state["loading"] for state in store.status()["tables"].values())

    clock.advance(300)
    await asyncio.gather(store.init(), store.ensure_fresh(), store.refresh())
    assert source.fetches == {table: 2 for table in TABLES}

@pytest.mark.asyncio
async def test_failed_reload_keeps_cached_rows(clock):
    source = CountingSource()
    store = DictionaryStore(source, ttl_seconds=10, clock=clock)
    await store.init()

    source.fail = True
    clock.advance(20)
    await store.ensure_fresh()

    assert store.lookup_phrase("hello", "spanish") == "hola"
    status = store.status()["tables"][PHRASES]
    assert "database unreachable" in status["last_error"]
    assert status["row_count"] > 0


@pytest.mark.asyncio
async def test_broken_source_leaves_store_empty_but_usable():
    store = DictionaryStore(BrokenSource())
    await store.init()
    assert not store.is_ready()
    assert store.lookup_phrase("hello", "spanish") is None
    assert store.get_word_senses("bank") == []
    # Grammar still resolves from the bundled defaults
    assert store.get_grammar("japanese").word_order == WordOrder.SOV


@pytest.mark.asyncio
async def test_invalidate_forces_reload(clock):
    source = CountingSource()
    store = DictionaryStore(source, clock=clock)
    await store.init()

    store.invalidate(IDIOMS)
    assert store.is_stale(IDIOMS)
    assert not store.is_stale(GRAMMAR)
    await store.ensure_fresh()
    assert source.fetches[IDIOMS] == 2
    assert source.fetches[WORD_SENSES] == 1


def test_invalidate_unknown_table():
    store = DictionaryStore(StaticDictionarySource())
    with pytest.raises(ValueError):
        store.invalidate("verbs")


@pytest.mark.asyncio
async def test_row_limits_are_applied():
    store = DictionaryStore(StaticDictionarySource(), phrase_row_limit=3)
    await store.init()
    assert store.phrase_count() == 3
    assert store.status()["tables"][PHRASES]["row_count"] == 3


@pytest.mark.asyncio
async def test_status_reports_every_table(store):
    status = store.status()
    assert set(status["tables"]) == set(TABLES)
    assert all(table["loaded"] for table in status["tables"].values())
    assert store.is_ready()

"""
Persistent dictionary store tests on a file-backed SQLite database.
"""
import pytest

from lexibridge.core.db import Base, create_db_engine, create_session_factory, db_session
from lexibridge.models import dictionary  # noqa: F401  registers the tables
from lexibridge.models.dictionary import CommonPhrase
from lexibridge.models.internal_models import WordOrder
from lexibridge.services.dictionary_seeder import DictionarySeeder
from lexibridge.services.dictionary_store import DictionaryStore, SQLAlchemyDictionarySource
from lexibridge.services.translation_engine import DictionaryTranslationEngine

pytestmark = pytest.mark.integration


@pytest.fixture
def session_factory(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'dictionary.db'}")
    Base.metadata.create_all(engine)
    try:
        yield create_session_factory(engine)
    finally:
        engine.dispose()


@pytest.fixture
def seeded(session_factory):
    DictionarySeeder(session_factory).seed()
    return session_factory


def test_seeding_is_idempotent(session_factory):
    first = DictionarySeeder(session_factory).seed()
    assert first["common_phrases"] > 0
    assert first["translation_idioms"] > 0
    assert first["translation_grammar_rules"] > 0
    assert first["translation_word_senses"] > 0

    second = DictionarySeeder(session_factory).seed()
    assert set(second.values()) == {0}


@pytest.mark.asyncio
async def test_store_loads_from_database(seeded):
    store = DictionaryStore(SQLAlchemyDictionarySource(seeded))
    await store.init()

    assert store.is_ready()
    assert store.lookup_phrase("good morning", "spanish") == "buenos días"
    assert store.get_idiom("piece of cake").translations["spanish"] == "pan comido"
    assert store.get_grammar("hindi").word_order == WordOrder.SOV
    assert store.is_ambiguous("bank")


@pytest.mark.asyncio
async def test_row_limit_applies_to_queries(seeded):
    store = DictionaryStore(SQLAlchemyDictionarySource(seeded), phrase_row_limit=3)
    await store.init()
    assert store.status()["tables"]["phrases"]["row_count"] == 3


@pytest.mark.asyncio
async def test_new_rows_appear_after_refresh(seeded):
    store = DictionaryStore(SQLAlchemyDictionarySource(seeded))
    engine = DictionaryTranslationEngine(store)
    await engine.init()

    with db_session(seeded) as session:
        session.add(CommonPhrase(
            phrase_key="see_you_soon",
            english="see you soon",
            translations={"spanish": "hasta pronto"},
            category="greeting",
        ))

    assert store.lookup_phrase("see you soon", "spanish") is None
    await engine.refresh()
    result = await engine.translate_with_dictionary("see you soon", "english", "spanish")
    assert result.text == "hasta pronto"


@pytest.mark.asyncio
async def test_missing_tables_degrade_to_empty_store(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    try:
        store = DictionaryStore(SQLAlchemyDictionarySource(create_session_factory(engine)))
        await store.init()
        assert not store.is_ready()
        assert store.lookup_phrase("good morning", "spanish") is None
        assert store.status()["tables"]["phrases"]["last_error"]

        translator = DictionaryTranslationEngine(store)
        result = await translator.translate_with_dictionary("good morning", "english", "spanish")
        assert result.text == "good morning"
        assert result.unknown_words == ["good", "morning"]
    finally:
        engine.dispose()

"""
Dictionary store: cached phrase, idiom, grammar and word-sense tables.

The store owns four independently loaded tables fetched from a
``DictionarySource``. Loads are skipped while a table is fresh or already
loading, failures keep whatever was cached before, and lookups never wait
for a load in flight.
"""

import asyncio
import copy
import logging
import time
import unicodedata
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from lexibridge.core.db import db_session
from lexibridge.core.exceptions import DataUnavailableError, NoTranslationFoundError
from lexibridge.data.grammar_rules import GRAMMAR_RULE_ROWS, DEFAULT_GRAMMAR_ROW
from lexibridge.data.seed_data import PHRASE_ROWS, IDIOM_ROWS, WORD_SENSE_ROWS
from lexibridge.models.dictionary import (
    CommonPhrase,
    TranslationIdiom,
    TranslationGrammarRule,
    TranslationWordSense,
)
from lexibridge.models.internal_models import (
    IdiomEntry,
    LanguageProfile,
    PhraseEntry,
    TableStatus,
    WordOrder,
    WordSense,
)
from lexibridge.services.language_registry import (
    get_language_code,
    get_language_column,
    get_script,
    normalize_language,
)

logger = logging.getLogger(__name__)

PHRASES = "phrases"
IDIOMS = "idioms"
GRAMMAR = "grammar"
WORD_SENSES = "word_senses"
TABLES = (PHRASES, IDIOMS, GRAMMAR, WORD_SENSES)

Row = Dict[str, Any]


def normalize_lookup_key(text: str) -> str:
    """Lowercase, collapse whitespace and trim surrounding punctuation"""
    key = " ".join((text or "").lower().split())
    start, end = 0, len(key)
    while start < end and unicodedata.category(key[start]).startswith("P"):
        start += 1
    while end > start and unicodedata.category(key[end - 1]).startswith("P"):
        end -= 1
    return key[start:end].strip()


class DictionarySource(ABC):
    """Backend the store loads its tables from; any exception means no data"""

    @abstractmethod
    async def fetch_phrases(self, limit: int) -> List[Row]:
        pass

    @abstractmethod
    async def fetch_idioms(self, limit: int) -> List[Row]:
        pass

    @abstractmethod
    async def fetch_grammar_rules(self, limit: int) -> List[Row]:
        pass

    @abstractmethod
    async def fetch_word_senses(self, limit: int) -> List[Row]:
        pass


class StaticDictionarySource(DictionarySource):
    """In-memory rows; defaults to the bundled starter dictionary"""

    def __init__(
        self,
        phrases: Optional[List[Row]] = None,
        idioms: Optional[List[Row]] = None,
        grammar_rules: Optional[List[Row]] = None,
        word_senses: Optional[List[Row]] = None,
    ):
        self._rows = {
            PHRASES: PHRASE_ROWS if phrases is None else phrases,
            IDIOMS: IDIOM_ROWS if idioms is None else idioms,
            GRAMMAR: GRAMMAR_RULE_ROWS if grammar_rules is None else grammar_rules,
            WORD_SENSES: WORD_SENSE_ROWS if word_senses is None else word_senses,
        }

    def _take(self, table: str, limit: int) -> List[Row]:
        return copy.deepcopy(self._rows[table][:limit])

    async def fetch_phrases(self, limit: int) -> List[Row]:
        return self._take(PHRASES, limit)

    async def fetch_idioms(self, limit: int) -> List[Row]:
        return self._take(IDIOMS, limit)

    async def fetch_grammar_rules(self, limit: int) -> List[Row]:
        return self._take(GRAMMAR, limit)

    async def fetch_word_senses(self, limit: int) -> List[Row]:
        return self._take(WORD_SENSES, limit)


class SQLAlchemyDictionarySource(DictionarySource):
    """Reads the dictionary tables through a sync session factory in a thread executor"""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _query(self, model, limit: int) -> List[Row]:
        columns = [column.name for column in model.__table__.columns]
        with db_session(self._session_factory) as session:
            records = session.execute(
                select(model).order_by(model.id).limit(limit)
            ).scalars().all()
            return [{name: getattr(record, name) for name in columns} for record in records]

    async def _fetch(self, model, limit: int) -> List[Row]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._query, model, limit)

    async def fetch_phrases(self, limit: int) -> List[Row]:
        return await self._fetch(CommonPhrase, limit)

    async def fetch_idioms(self, limit: int) -> List[Row]:
        return await self._fetch(TranslationIdiom, limit)

    async def fetch_grammar_rules(self, limit: int) -> List[Row]:
        return await self._fetch(TranslationGrammarRule, limit)

    async def fetch_word_senses(self, limit: int) -> List[Row]:
        return await self._fetch(TranslationWordSense, limit)


def profile_from_row(row: Row) -> LanguageProfile:
    name = (row.get("language_name") or "").lower()
    try:
        word_order = WordOrder((row.get("word_order") or "SVO").upper())
    except ValueError:
        word_order = WordOrder.SVO
    return LanguageProfile(
        code=(row.get("language_code") or "").lower(),
        name=name,
        script=get_script(name) if name else "Latin",
        word_order=word_order,
        has_gender=bool(row.get("has_gender")),
        has_articles=bool(row.get("has_articles")),
        adjective_position=row.get("adjective_position") or "before",
        uses_postpositions=bool(row.get("uses_postpositions")),
        subject_dropping=bool(row.get("subject_dropping")),
        has_cases=bool(row.get("has_cases")),
        has_honorific=bool(row.get("has_honorific")),
        sentence_end_particle=row.get("sentence_end_particle"),
    )


def _index_profiles(rows: List[Row]) -> Dict[str, LanguageProfile]:
    index: Dict[str, LanguageProfile] = {}
    for row in rows:
        profile = profile_from_row(row)
        if profile.code:
            index[profile.code] = profile
        if profile.name:
            index[profile.name] = profile
    return index


_DEFAULT_PROFILES = _index_profiles(GRAMMAR_RULE_ROWS)


class DictionaryStore:
    """
    Cached dictionary tables with TTL-based refresh.

    Args:
        source: Backend to fetch rows from
        ttl_seconds: Age after which a table is reloaded on the next request
        phrase_row_limit: Row cap for the phrase table
        table_row_limit: Row cap for the other tables
        clock: Monotonic time source, injectable for tests
    """

    def __init__(
        self,
        source: DictionarySource,
        ttl_seconds: float = 300,
        phrase_row_limit: int = 2000,
        table_row_limit: int = 5000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.source = source
        self.ttl_seconds = ttl_seconds
        self.phrase_row_limit = phrase_row_limit
        self.table_row_limit = table_row_limit
        self._clock = clock
        self._status: Dict[str, TableStatus] = {table: TableStatus() for table in TABLES}

        self._phrases: Dict[str, PhraseEntry] = {}
        self._phrase_keys: Dict[str, PhraseEntry] = {}
        self._reverse_phrases: Dict[str, Dict[str, str]] = {}
        self._idioms: Dict[str, IdiomEntry] = {}
        self._grammar: Dict[str, LanguageProfile] = {}
        self._word_senses: Dict[str, List[WordSense]] = {}

    # Lifecycle

    async def init(self) -> None:
        """Load all four tables concurrently"""
        await asyncio.gather(*(self._load(table) for table in TABLES))

    async def refresh(self) -> None:
        """Mark every table stale and reload"""
        self.invalidate()
        await self.init()

    def invalidate(self, table: Optional[str] = None) -> None:
        """Mark one table (or all) stale; cached rows stay until the reload succeeds"""
        tables = TABLES if table is None else (table,)
        for name in tables:
            if name not in self._status:
                raise ValueError(f"Unknown dictionary table '{name}'")
            self._status[name].loaded = False

    async def ensure_fresh(self) -> None:
        stale = [table for table in TABLES if self.is_stale(table)]
        if stale:
            await asyncio.gather(*(self._load(table) for table in stale))

    def is_stale(self, table: str) -> bool:
        state = self._status[table]
        if not state.loaded or state.last_update is None:
            return True
        return self._clock() - state.last_update >= self.ttl_seconds

    def is_ready(self) -> bool:
        return any(state.loaded for state in self._status.values())

    def status(self) -> Dict[str, Any]:
        return {
            "ttl_seconds": self.ttl_seconds,
            "tables": {table: state.to_dict() for table, state in self._status.items()},
        }

    async def _fetch(self, table: str) -> List[Row]:
        if table == PHRASES:
            return await self.source.fetch_phrases(self.phrase_row_limit)
        if table == IDIOMS:
            return await self.source.fetch_idioms(self.table_row_limit)
        if table == GRAMMAR:
            return await self.source.fetch_grammar_rules(self.table_row_limit)
        return await self.source.fetch_word_senses(self.table_row_limit)

    async def _load(self, table: str) -> None:
        state = self._status[table]
        if state.loading or not self.is_stale(table):
            return

        state.loading = True
        try:
            rows = await self._fetch(table)
            self._apply(table, rows or [])
        except Exception as e:
            error = DataUnavailableError(table, {"reason": str(e)})
            state.last_error = f"{error.message}: {e}"
            logger.warning(state.last_error, extra={"table": table})
            return
        finally:
            state.loading = False

        state.loaded = True
        state.last_update = self._clock()
        state.row_count = len(rows or [])
        state.last_error = None
        logger.info(f"Loaded {state.row_count} rows into dictionary table '{table}'")

    def _apply(self, table: str, rows: List[Row]) -> None:
        # Build complete replacements first so readers never see a half-built table
        if table == PHRASES:
            self._apply_phrases(rows)
        elif table == IDIOMS:
            self._idioms = {
                normalize_lookup_key(row["normalized_phrase"]): IdiomEntry(
                    phrase=row["phrase"],
                    normalized_phrase=normalize_lookup_key(row["normalized_phrase"]),
                    meaning=row.get("meaning") or "",
                    translations=dict(row.get("translations") or {}),
                    category=row.get("category") or "idiom",
                    register=row.get("register") or "neutral",
                )
                for row in rows
                if row.get("normalized_phrase")
            }
        elif table == GRAMMAR:
            self._grammar = _index_profiles(rows)
        else:
            senses: Dict[str, List[WordSense]] = {}
            for row in rows:
                word = (row.get("word") or "").strip().lower()
                if not word:
                    continue
                senses.setdefault(word, []).append(WordSense(
                    sense_id=row["sense_id"],
                    meaning=row.get("meaning") or "",
                    context_clues=list(row.get("context_clues") or []),
                    translations=dict(row.get("translations") or {}),
                ))
            self._word_senses = senses

    def _apply_phrases(self, rows: List[Row]) -> None:
        phrases: Dict[str, PhraseEntry] = {}
        phrase_keys: Dict[str, PhraseEntry] = {}
        reverse: Dict[str, Dict[str, str]] = {}

        for row in rows:
            english = row.get("english")
            if not english:
                continue
            entry = PhraseEntry(
                english=english,
                translations=dict(row.get("translations") or {}),
                phrase_key=row.get("phrase_key"),
                category=row.get("category") or "general",
            )
            phrases.setdefault(normalize_lookup_key(english), entry)
            if entry.phrase_key:
                phrase_keys.setdefault(entry.phrase_key.lower(), entry)
            for column, value in entry.translations.items():
                if value:
                    reverse.setdefault(column, {}).setdefault(normalize_lookup_key(value), english)

        self._phrases = phrases
        self._phrase_keys = phrase_keys
        self._reverse_phrases = reverse

    # Lookups

    def lookup_phrase(self, text: str, target_language: str) -> Optional[str]:
        """
        Exact phrase lookup by English text or phrase key.

        Returns:
            The target-language value, or None when the phrase or its
            column is missing
        """
        key = normalize_lookup_key(text)
        if not key:
            return None
        entry = (
            self._phrases.get(key)
            or self._phrase_keys.get(key)
            or self._phrase_keys.get(key.replace(" ", "_"))
        )
        if entry is None:
            return None

        column = get_language_column(target_language)
        if column == "english":
            return entry.translations.get("english") or entry.english
        return entry.translations.get(column) or None

    def translate_word(self, text: str, target_language: str) -> str:
        """
        Strict variant of lookup_phrase.

        Raises:
            NoTranslationFoundError: when the text has no value for the target
        """
        translation = self.lookup_phrase(text, target_language)
        if not translation:
            raise NoTranslationFoundError(text, target_language)
        return translation

    def lookup_english(self, text: str, source_language: str) -> Optional[str]:
        """Reverse lookup: source-language phrase to its English key"""
        key = normalize_lookup_key(text)
        if not key:
            return None
        column = get_language_column(source_language)
        if column == "english":
            entry = self._phrases.get(key)
            return entry.english if entry else None
        return self._reverse_phrases.get(column, {}).get(key)

    def phrase_count(self) -> int:
        return len(self._phrases)

    def get_idiom(self, phrase: str) -> Optional[IdiomEntry]:
        return self._idioms.get(normalize_lookup_key(phrase))

    def get_all_idioms(self) -> List[IdiomEntry]:
        return list(self._idioms.values())

    def get_grammar(self, language: str) -> LanguageProfile:
        """
        Grammar profile for a language.

        Store rows win over the bundled defaults; languages found in
        neither get a generic SVO profile.
        """
        name = normalize_language(language)
        code = get_language_code(language).lower()
        for index in (self._grammar, _DEFAULT_PROFILES):
            profile = index.get(name) or index.get(code)
            if profile is not None:
                return profile

        generic = profile_from_row(DEFAULT_GRAMMAR_ROW)
        return LanguageProfile(
            code=code,
            name=name,
            script=get_script(name),
            word_order=generic.word_order,
            adjective_position=generic.adjective_position,
        )

    def get_word_senses(self, word: str) -> List[WordSense]:
        return list(self._word_senses.get((word or "").strip().lower(), []))

    def is_ambiguous(self, word: str) -> bool:
        return len(self._word_senses.get((word or "").strip().lower(), [])) >= 2

    def get_ambiguous_words(self) -> List[str]:
        return [word for word, senses in self._word_senses.items() if len(senses) >= 2]

"""Populates the persistent dictionary tables with the bundled starter rows."""
import logging
from typing import Dict, List

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from lexibridge.core.db import db_session
from lexibridge.data.grammar_rules import GRAMMAR_RULE_ROWS
from lexibridge.data.seed_data import IDIOM_ROWS, PHRASE_ROWS, WORD_SENSE_ROWS
from lexibridge.models.dictionary import (
    CommonPhrase,
    TranslationGrammarRule,
    TranslationIdiom,
    TranslationWordSense,
)

logger = logging.getLogger(__name__)

# (model, natural key column, rows)
_SEED_TABLES = (
    (CommonPhrase, "english", PHRASE_ROWS),
    (TranslationIdiom, "normalized_phrase", IDIOM_ROWS),
    (TranslationGrammarRule, "language_code", GRAMMAR_RULE_ROWS),
    (TranslationWordSense, "sense_id", WORD_SENSE_ROWS),
)


class DictionarySeeder:
    """Inserts starter rows that are not present yet; existing rows are left alone."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _seed_table(self, model, key: str, rows: List[dict]) -> int:
        columns = {column.name for column in model.__table__.columns}
        with db_session(self._session_factory) as session:
            existing = set(session.execute(select(getattr(model, key))).scalars())
            inserted = 0
            for row in rows:
                if row[key] in existing:
                    continue
                session.add(model(**{k: v for k, v in row.items() if k in columns}))
                existing.add(row[key])
                inserted += 1
            return inserted

    def seed(self) -> Dict[str, int]:
        """Returns the number of inserted rows per table."""
        counts = {}
        for model, key, rows in _SEED_TABLES:
            counts[model.__tablename__] = self._seed_table(model, key, rows)
        logger.info(f"Seeded dictionary tables: {counts}")
        return counts

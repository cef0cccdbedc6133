from sqlalchemy import Boolean, Column, Integer, JSON, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from lexibridge.core.db import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JsonType = JSON().with_variant(JSONB, "postgresql")


class CommonPhrase(Base):
    __tablename__ = "common_phrases"
    id = Column(Integer, primary_key=True)
    phrase_key = Column(String(128), nullable=True, unique=True)
    english = Column(Text, nullable=False, index=True)
    translations = Column(JsonType, nullable=False)  # {"spanish": "...", "hindi": "..."}
    category = Column(String(64), nullable=False, default="general")


class TranslationIdiom(Base):
    __tablename__ = "translation_idioms"
    id = Column(Integer, primary_key=True)
    phrase = Column(Text, nullable=False)
    normalized_phrase = Column(String(255), nullable=False, unique=True)
    meaning = Column(Text, nullable=False)
    translations = Column(JsonType, nullable=False)
    category = Column(String(32), nullable=False, default="idiom")  # idiom, proverb, slang, colloquial
    register = Column(String(32), nullable=False, default="neutral")  # formal, informal, neutral


class TranslationGrammarRule(Base):
    __tablename__ = "translation_grammar_rules"
    id = Column(Integer, primary_key=True)
    language_code = Column(String(16), nullable=False, unique=True)
    language_name = Column(String(64), nullable=False)
    word_order = Column(String(3), nullable=False, default="SVO")
    has_gender = Column(Boolean, nullable=False, default=False)
    has_articles = Column(Boolean, nullable=False, default=False)
    adjective_position = Column(String(8), nullable=False, default="before")
    uses_postpositions = Column(Boolean, nullable=False, default=False)
    subject_dropping = Column(Boolean, nullable=False, default=False)
    has_cases = Column(Boolean, nullable=False, default=False)
    has_honorific = Column(Boolean, nullable=False, default=False)
    sentence_end_particle = Column(String(64), nullable=True)


class TranslationWordSense(Base):
    __tablename__ = "translation_word_senses"
    id = Column(Integer, primary_key=True)
    word = Column(String(64), nullable=False, index=True)
    sense_id = Column(String(128), nullable=False, unique=True)
    meaning = Column(Text, nullable=False)
    context_clues = Column(JsonType, nullable=False)  # ["money", "account", ...]
    translations = Column(JsonType, nullable=False)

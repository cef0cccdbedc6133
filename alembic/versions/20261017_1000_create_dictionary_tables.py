"""create dictionary tables

Revision ID: 20261017_1000_create_dictionary_tables
Revises:
Create Date: 2026-10-17 10:00:00
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = '20261017_1000_create_dictionary_tables'
down_revision = None
branch_labels = None
depends_on = None

JSON_TYPE = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), 'postgresql')


def upgrade() -> None:
    op.create_table(
        'common_phrases',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('phrase_key', sa.String(128), nullable=True, unique=True),
        sa.Column('english', sa.Text(), nullable=False, index=True),
        sa.Column('translations', JSON_TYPE, nullable=False),
        sa.Column('category', sa.String(64), nullable=False, server_default='general'),
    )
    op.create_table(
        'translation_idioms',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('phrase', sa.Text(), nullable=False),
        sa.Column('normalized_phrase', sa.String(255), nullable=False, unique=True),
        sa.Column('meaning', sa.Text(), nullable=False),
        sa.Column('translations', JSON_TYPE, nullable=False),
        sa.Column('category', sa.String(32), nullable=False, server_default='idiom'),
        sa.Column('register', sa.String(32), nullable=False, server_default='neutral'),
    )
    op.create_table(
        'translation_grammar_rules',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('language_code', sa.String(16), nullable=False, unique=True),
        sa.Column('language_name', sa.String(64), nullable=False),
        sa.Column('word_order', sa.String(3), nullable=False, server_default='SVO'),
        sa.Column('has_gender', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('has_articles', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('adjective_position', sa.String(8), nullable=False, server_default='before'),
        sa.Column('uses_postpositions', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('subject_dropping', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('has_cases', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('has_honorific', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('sentence_end_particle', sa.String(64), nullable=True),
    )
    op.create_table(
        'translation_word_senses',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('word', sa.String(64), nullable=False, index=True),
        sa.Column('sense_id', sa.String(128), nullable=False, unique=True),
        sa.Column('meaning', sa.Text(), nullable=False),
        sa.Column('context_clues', JSON_TYPE, nullable=False),
        sa.Column('translations', JSON_TYPE, nullable=False),
    )


def downgrade() -> None:
    op.drop_table('translation_word_senses')
    op.drop_table('translation_grammar_rules')
    op.drop_table('translation_idioms')
    op.drop_table('common_phrases')

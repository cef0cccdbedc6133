"""
Unit tests for word-order and adjective-position reordering.
"""
import pytest

from lexibridge.models.internal_models import CorrectionType
from lexibridge.services.reordering import (
    WordOrderReorderer,
    move_adjectives_after_nouns,
    reorder_sov_to_svo,
    reorder_svo_to_sov,
    reorder_svo_to_vso,
)
from lexibridge.services.tokenizer import tokenize, tokens_to_string


@pytest.fixture
def reorderer(store) -> WordOrderReorderer:
    return WordOrderReorderer(store)


def test_svo_to_sov_moves_verb_after_object():
    assert tokens_to_string(reorder_svo_to_sov(tokenize("I eat food"))) == "I food eat"


def test_svo_to_sov_keeps_punctuation_in_place():
    assert tokens_to_string(reorder_svo_to_sov(tokenize("I eat food."))) == "I food eat."


def test_sov_to_svo():
    assert tokens_to_string(reorder_sov_to_svo(tokenize("I food eat"))) == "I eat food"


def test_svo_to_vso():
    assert tokens_to_string(reorder_svo_to_vso(tokenize("I eat food"))) == "eat I food"


def test_no_subject_leaves_order_unchanged():
    tokens = tokenize("the dog")
    assert reorder_svo_to_sov(tokens) is tokens


def test_adjectives_move_after_nouns():
    tokens = tokenize("the beautiful house")
    assert tokens_to_string(move_adjectives_after_nouns(tokens)) == "the house beautiful"


@pytest.mark.asyncio
async def test_needs_reordering(reorderer):
    assert reorderer.needs_reordering("english", "japanese")
    assert not reorderer.needs_reordering("english", "spanish")
    assert reorderer.needs_adjective_relocation("english", "spanish")


@pytest.mark.asyncio
async def test_reorder_text_for_sov_target(reorderer):
    result = reorderer.reorder_text("I eat food", "english", "hindi")
    assert result.was_reordered
    assert result.text == "I food eat"
    assert result.corrections[0].type == CorrectionType.WORD_ORDER
    assert "SOV" in result.corrections[0].reason


@pytest.mark.asyncio
async def test_reorder_text_unchanged_when_nothing_moves(reorderer):
    result = reorderer.reorder_text("I eat food", "english", "spanish")
    assert not result.was_reordered
    assert result.text == "I eat food"
    assert result.corrections == []


@pytest.mark.asyncio
async def test_reorder_tokens_reports_no_reason_for_same_structure(reorderer):
    tokens = tokenize("I eat food")
    reordered, reason = reorderer.reorder_tokens(tokens, "english", "german")
    assert reordered is tokens
    assert reason is None

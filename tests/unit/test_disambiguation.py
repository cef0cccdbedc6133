"""
Unit tests for context-based word-sense disambiguation.
"""
import pytest

from lexibridge.models.internal_models import DisambiguationContext
from lexibridge.services.disambiguation import Disambiguator


@pytest.fixture
def disambiguator(store) -> Disambiguator:
    return Disambiguator(store)


def context(sentence: str, domain: str = None) -> DisambiguationContext:
    return DisambiguationContext(surrounding_words=sentence.split(), sentence=sentence, domain=domain)


@pytest.mark.asyncio
async def test_river_context_picks_river_sense(disambiguator):
    """One matching clue yields confidence 0.6."""
    choice = disambiguator.disambiguate_word("bank", context("I sat by the river bank"))
    assert choice.sense_id == "bank_river"
    assert choice.score == 1
    assert choice.confidence == pytest.approx(0.6)


@pytest.mark.asyncio
async def test_money_context_picks_financial_sense(disambiguator):
    choice = disambiguator.disambiguate_word("bank", context("deposit money at the bank"))
    assert choice.sense_id == "bank_financial"
    assert choice.score == 2


@pytest.mark.asyncio
async def test_no_clue_defaults_to_first_sense(disambiguator):
    choice = disambiguator.disambiguate_word("bank", context("the bank"))
    assert choice.sense_id == "bank_financial"
    assert choice.confidence == 0.5
    assert choice.score == 0


@pytest.mark.asyncio
async def test_domain_bonus(disambiguator):
    choice = disambiguator.disambiguate_word("bat", context("a new bat", domain="sports"))
    assert choice.sense_id == "bat_sports"
    assert choice.score == 2


@pytest.mark.asyncio
async def test_confidence_is_capped(disambiguator):
    sentence = "money account deposit withdraw loan credit atm savings interest mortgage"
    choice = disambiguator.disambiguate_word("bank", context(sentence))
    assert choice.confidence == 0.95


@pytest.mark.asyncio
async def test_previous_sentence_counts_as_context(disambiguator):
    ctx = DisambiguationContext(sentence="It was beautiful.", previous_sentence="We walked along the river.")
    assert disambiguator.disambiguate_word("bank", ctx).sense_id == "bank_river"


@pytest.mark.asyncio
async def test_unknown_word_has_no_choice(disambiguator):
    assert disambiguator.disambiguate_word("cat", context("the cat")) is None
    assert not disambiguator.is_ambiguous_word("cat")
    assert "hot" in disambiguator.get_all_ambiguous_words()


@pytest.mark.asyncio
async def test_disambiguate_and_translate(disambiguator):
    choice = disambiguator.disambiguate_and_translate("bank", context("by the river bank"), "spanish")
    assert choice.translation == "orilla"
    assert disambiguator.get_translation_for_sense("bank", "bank_financial", "fr") == "banque"


@pytest.mark.asyncio
async def test_disambiguate_and_translate_without_target_column(disambiguator):
    assert disambiguator.disambiguate_and_translate("bank", context("river bank"), "korean") is None

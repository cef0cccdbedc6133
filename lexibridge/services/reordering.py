"""
Word-order and adjective-position reordering.

Only word tokens move: whitespace and punctuation keep their slots, so a
sentence-final period stays final and spacing is preserved. Token parts of
speech drive the heuristics, so target-language tokens must carry the
part of speech of the source word they translate.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from lexibridge.models.internal_models import (
    CorrectionApplied,
    CorrectionType,
    LanguageProfile,
    PartOfSpeech,
    Token,
    WordOrder,
)
from lexibridge.services.dictionary_store import DictionaryStore
from lexibridge.services.tokenizer import identify_svo, tokenize, tokens_to_string

logger = logging.getLogger(__name__)

_NOMINAL = (PartOfSpeech.NOUN, PartOfSpeech.PRONOUN)


@dataclass
class ReorderResult:
    text: str
    was_reordered: bool = False
    corrections: List[CorrectionApplied] = field(default_factory=list)


def _word_positions(tokens: List[Token]) -> List[int]:
    return [i for i, token in enumerate(tokens) if token.is_word]


def _fill_word_slots(tokens: List[Token], ordered_words: List[Token]) -> List[Token]:
    """Put words back into the word slots of tokens, in the given order"""
    words = iter(ordered_words)
    return [next(words) if token.is_word else token for token in tokens]


def reorder_svo_to_sov(tokens: List[Token]) -> List[Token]:
    """Move the verb after its object, or to the end when there is none"""
    roles = identify_svo(tokens)
    subject, verb, obj = roles["subject"], roles["verb"], roles["object"]
    if subject is None or verb is None:
        return tokens

    order: List[int] = []
    inserted = False
    for position in _word_positions(tokens):
        if position == verb:
            continue
        order.append(position)
        if position == obj:
            order.append(verb)
            inserted = True
    if not inserted:
        order.append(verb)

    return _fill_word_slots(tokens, [tokens[i] for i in order])


def reorder_sov_to_svo(tokens: List[Token]) -> List[Token]:
    """Move the last verb right after the subject and its adjectives"""
    positions = _word_positions(tokens)
    verb = next((i for i in reversed(positions) if tokens[i].pos == PartOfSpeech.VERB), None)
    subject = next((i for i in positions if tokens[i].pos in _NOMINAL), None)
    if verb is None or subject is None or subject >= verb:
        return tokens

    order = [i for i in positions if i != verb]
    insert_at = order.index(subject) + 1
    while insert_at < len(order) and tokens[order[insert_at]].pos == PartOfSpeech.ADJECTIVE:
        insert_at += 1
    order.insert(insert_at, verb)

    return _fill_word_slots(tokens, [tokens[i] for i in order])


def reorder_svo_to_vso(tokens: List[Token]) -> List[Token]:
    """Move the verb to the front of the sentence"""
    verb = identify_svo(tokens)["verb"]
    if verb is None:
        return tokens
    order = [verb] + [i for i in _word_positions(tokens) if i != verb]
    return _fill_word_slots(tokens, [tokens[i] for i in order])


def _swap_adjacent(tokens: List[Token], first: PartOfSpeech, second: PartOfSpeech) -> List[Token]:
    words = [tokens[i] for i in _word_positions(tokens)]
    i = 0
    while i + 1 < len(words):
        if words[i].pos == first and words[i + 1].pos == second:
            words[i], words[i + 1] = words[i + 1], words[i]
            i += 2
        else:
            i += 1
    return _fill_word_slots(tokens, words)


def move_adjectives_after_nouns(tokens: List[Token]) -> List[Token]:
    return _swap_adjacent(tokens, PartOfSpeech.ADJECTIVE, PartOfSpeech.NOUN)


def move_adjectives_before_nouns(tokens: List[Token]) -> List[Token]:
    return _swap_adjacent(tokens, PartOfSpeech.NOUN, PartOfSpeech.ADJECTIVE)


_ORDER_TRANSFORMS = {
    (WordOrder.SVO, WordOrder.SOV): reorder_svo_to_sov,
    (WordOrder.SOV, WordOrder.SVO): reorder_sov_to_svo,
    (WordOrder.SVO, WordOrder.VSO): reorder_svo_to_vso,
}


class WordOrderReorderer:
    """Reorders sentences between languages using grammar profiles from the store"""

    def __init__(self, store: DictionaryStore):
        self.store = store

    def _profiles(self, source: str, target: str) -> Tuple[LanguageProfile, LanguageProfile]:
        return self.store.get_grammar(source), self.store.get_grammar(target)

    def needs_reordering(self, source_language: str, target_language: str) -> bool:
        source, target = self._profiles(source_language, target_language)
        return source.word_order != target.word_order

    def needs_adjective_relocation(self, source_language: str, target_language: str) -> bool:
        source, target = self._profiles(source_language, target_language)
        return source.adjective_position != target.adjective_position

    def reorder_tokens(
        self,
        tokens: List[Token],
        source_language: str,
        target_language: str
    ) -> Tuple[List[Token], Optional[str]]:
        """
        Reorder tokens from the source structure to the target structure.

        Returns:
            (tokens, reason) where reason describes the change, or None
            when the order is unchanged
        """
        source, target = self._profiles(source_language, target_language)
        result = tokens
        reasons = []

        transform = _ORDER_TRANSFORMS.get((source.word_order, target.word_order))
        if transform is not None:
            result = transform(result)
            reasons.append(f"{source.word_order.value} to {target.word_order.value} word order")

        if source.adjective_position != target.adjective_position:
            if target.adjective_position == "after":
                result = move_adjectives_after_nouns(result)
            else:
                result = move_adjectives_before_nouns(result)
            reasons.append(f"adjectives {target.adjective_position} nouns")

        if tokens_to_string(result) == tokens_to_string(tokens):
            return tokens, None
        return result, "; ".join(reasons)

    def reorder_text(self, text: str, source_language: str, target_language: str) -> ReorderResult:
        """Reorder a sentence whose words are tagged with English parts of speech"""
        if not (
            self.needs_reordering(source_language, target_language)
            or self.needs_adjective_relocation(source_language, target_language)
        ):
            return ReorderResult(text=text)

        tokens = tokenize(text)
        reordered, reason = self.reorder_tokens(tokens, source_language, target_language)
        if reason is None:
            return ReorderResult(text=text)

        new_text = tokens_to_string(reordered)
        logger.debug(f"Reordered '{text}' to '{new_text}'")
        return ReorderResult(
            text=new_text,
            was_reordered=True,
            corrections=[CorrectionApplied(
                type=CorrectionType.WORD_ORDER,
                original=text,
                corrected=new_text,
                reason=reason,
            )],
        )

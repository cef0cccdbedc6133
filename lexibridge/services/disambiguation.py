"""
Context-based word-sense disambiguation.

Each sense of an ambiguous word scores one point per context clue found in
the surrounding text, plus a bonus when the conversation domain matches
the sense. The score is a raw count and is not normalized across senses.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from lexibridge.models.internal_models import DisambiguationContext, WordSense
from lexibridge.services.dictionary_store import DictionaryStore
from lexibridge.services.language_registry import get_language_column

logger = logging.getLogger(__name__)

DOMAIN_KEYWORDS: Dict[str, List[str]] = {
    "sports": ["game", "player", "team", "score", "win", "lose"],
    "finance": ["money", "account", "payment", "bank", "credit"],
    "casual": ["friend", "chat", "fun", "like", "love"],
}

DOMAIN_BONUS = 2
DEFAULT_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.95
CONFIDENCE_PER_CLUE = 0.1


@dataclass
class SenseChoice:
    word: str
    sense_id: str
    confidence: float
    score: int
    translation: Optional[str] = None


class Disambiguator:
    """Chooses word senses using the store's word-sense table"""

    def __init__(self, store: DictionaryStore):
        self.store = store

    def is_ambiguous_word(self, word: str) -> bool:
        return self.store.is_ambiguous(word)

    def get_all_ambiguous_words(self) -> List[str]:
        return self.store.get_ambiguous_words()

    @staticmethod
    def _score(sense: WordSense, context_text: str, domain: Optional[str]) -> int:
        score = sum(1 for clue in sense.context_clues if clue.lower() in context_text)
        if domain:
            keywords = DOMAIN_KEYWORDS.get(domain.lower(), [])
            clues = {clue.lower() for clue in sense.context_clues}
            if clues.intersection(keywords):
                score += DOMAIN_BONUS
        return score

    def disambiguate_word(self, word: str, context: DisambiguationContext) -> Optional[SenseChoice]:
        """
        Pick the most likely sense of a word.

        Args:
            word: Word to disambiguate
            context: Surrounding words, sentence, previous sentence and domain

        Returns:
            SenseChoice, or None when the word has no registered senses.
            Ties go to the sense registered first; with no matching clue
            the first sense is chosen at confidence 0.5.
        """
        senses = self.store.get_word_senses(word)
        if not senses:
            return None

        context_text = " ".join(
            list(context.surrounding_words)
            + [context.sentence or "", context.previous_sentence or ""]
        ).lower()

        best_sense = senses[0]
        best_score = 0
        for sense in senses:
            score = self._score(sense, context_text, context.domain)
            if score > best_score:
                best_sense, best_score = sense, score

        if best_score == 0:
            return SenseChoice(word=word, sense_id=senses[0].sense_id, confidence=DEFAULT_CONFIDENCE, score=0)

        confidence = min(MAX_CONFIDENCE, DEFAULT_CONFIDENCE + CONFIDENCE_PER_CLUE * best_score)
        return SenseChoice(word=word, sense_id=best_sense.sense_id, confidence=confidence, score=best_score)

    def get_translation_for_sense(self, word: str, sense_id: str, target_language: str) -> Optional[str]:
        column = get_language_column(target_language)
        for sense in self.store.get_word_senses(word):
            if sense.sense_id == sense_id:
                return sense.translations.get(column) or None
        return None

    def disambiguate_and_translate(
        self,
        word: str,
        context: DisambiguationContext,
        target_language: str
    ) -> Optional[SenseChoice]:
        """Disambiguate and attach the chosen sense's translation; None if it has none"""
        choice = self.disambiguate_word(word, context)
        if choice is None:
            return None
        choice.translation = self.get_translation_for_sense(word, choice.sense_id, target_language)
        if choice.translation is None:
            logger.debug(f"Sense {choice.sense_id} has no {target_language} translation")
            return None
        return choice

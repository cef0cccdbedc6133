"""
Idiom detection and replacement.

Idioms are matched on word boundaries against the lowercased text. When
matches overlap, the longest wins and then the leftmost; shorter
overlapping matches are dropped.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Pattern, Tuple

from lexibridge.models.internal_models import CorrectionApplied, CorrectionType, IdiomEntry
from lexibridge.services.dictionary_store import DictionaryStore
from lexibridge.services.language_registry import get_language_column


@dataclass
class IdiomMatch:
    phrase: str
    entry: IdiomEntry
    start: int
    end: int


@dataclass
class IdiomReplacement:
    """Text after idiom replacement, with the replaced spans in output offsets"""
    text: str
    corrections: List[CorrectionApplied] = field(default_factory=list)
    spans: List[Tuple[int, int]] = field(default_factory=list)
    idioms_found: List[str] = field(default_factory=list)


def _lower_same_length(text: str) -> str:
    # str.lower() can lengthen a few characters, which would shift offsets
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


class IdiomMatcher:
    """Finds and replaces idioms using the store's idiom table"""

    def __init__(self, store: DictionaryStore):
        self.store = store
        self._patterns: Dict[str, Pattern] = {}

    def _pattern(self, normalized: str) -> Pattern:
        pattern = self._patterns.get(normalized)
        if pattern is None:
            body = r"\s+".join(re.escape(part) for part in normalized.split())
            pattern = re.compile(r"(?<!\w)" + body + r"(?!\w)")
            self._patterns[normalized] = pattern
        return pattern

    def find_idioms_in_text(self, text: str, target_language: Optional[str] = None) -> List[IdiomMatch]:
        """
        Locate non-overlapping idioms in text.

        Args:
            text: English source text
            target_language: When given, only idioms translated into this
                language compete for a span

        Returns:
            Matches ordered by start offset
        """
        if not text:
            return []

        column = get_language_column(target_language) if target_language else None
        lowered = _lower_same_length(text)
        candidates: List[IdiomMatch] = []
        for entry in self.store.get_all_idioms():
            if not entry.normalized_phrase:
                continue
            if column is not None and not entry.translations.get(column):
                continue
            for match in self._pattern(entry.normalized_phrase).finditer(lowered):
                candidates.append(IdiomMatch(
                    phrase=entry.phrase, entry=entry, start=match.start(), end=match.end()
                ))

        candidates.sort(key=lambda m: (-(m.end - m.start), m.start))
        selected: List[IdiomMatch] = []
        for candidate in candidates:
            if all(candidate.end <= kept.start or candidate.start >= kept.end for kept in selected):
                selected.append(candidate)

        return sorted(selected, key=lambda m: m.start)

    def replace_idioms_in_text(self, text: str, target_language: str) -> IdiomReplacement:
        """
        Replace every idiom that has a translation for the target language.

        Args:
            text: English source text
            target_language: Language to translate idioms into

        Returns:
            IdiomReplacement with the new text, one correction per
            replacement and the replaced spans as offsets in the new text
        """
        matches = self.find_idioms_in_text(text, target_language)
        result = IdiomReplacement(text=text)
        if not matches:
            return result

        column = get_language_column(target_language)
        parts: List[str] = []
        cursor = 0
        output_length = 0

        for match in matches:
            result.idioms_found.append(match.phrase)
            translation = match.entry.translations[column]

            before = text[cursor:match.start]
            parts.append(before)
            output_length += len(before)

            parts.append(translation)
            result.spans.append((output_length, output_length + len(translation)))
            output_length += len(translation)

            original = text[match.start:match.end]
            result.corrections.append(CorrectionApplied(
                type=CorrectionType.IDIOM,
                original=original,
                corrected=translation,
                reason=f"Idiom '{match.phrase}' means '{match.entry.meaning}'",
            ))
            cursor = match.end

        parts.append(text[cursor:])
        result.text = "".join(parts)
        return result

    def lookup_idiom(self, phrase: str) -> Optional[IdiomEntry]:
        return self.store.get_idiom(phrase)

    def get_idiom_translation(self, phrase: str, target_language: str) -> Optional[str]:
        entry = self.store.get_idiom(phrase)
        if entry is None:
            return None
        return entry.translations.get(get_language_column(target_language))

    def get_idioms_for_language(self, language: str) -> List[IdiomEntry]:
        column = get_language_column(language)
        return [entry for entry in self.store.get_all_idioms() if entry.translations.get(column)]

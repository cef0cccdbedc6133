"""Whitespace, punctuation spacing and sentence capitalization cleanup."""

import re
from typing import Optional, Tuple

from lexibridge.models.internal_models import CorrectionApplied, CorrectionType, LanguageProfile

_WHITESPACE_RUN = re.compile(r"\s+")
_SPACE_BEFORE_PUNCT = re.compile(r"\s+([.,!?;:])")
_MISSING_SPACE_AFTER_PUNCT = re.compile(r"([.,!?;:])(?=[^\W\d_])")
_SENTENCE_START = re.compile(r"([.!?]\s+)(\w)")


def normalize_spacing(text: str) -> str:
    text = _WHITESPACE_RUN.sub(" ", text)
    text = _SPACE_BEFORE_PUNCT.sub(r"\1", text)
    return _MISSING_SPACE_AFTER_PUNCT.sub(r"\1 ", text)


def capitalize_sentences(text: str) -> str:
    return _SENTENCE_START.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def apply_sentence_end_particle(text: str, profile: Optional[LanguageProfile]) -> str:
    """Hook for languages that close sentences with a politeness particle; currently unchanged"""
    return text


def post_process(text: str, profile: Optional[LanguageProfile] = None) -> Tuple[str, Optional[CorrectionApplied]]:
    """
    Clean up assembled translation text. Running it twice changes nothing.

    Returns:
        (text, correction) where correction is None when nothing changed
    """
    if not text:
        return text, None

    cleaned = normalize_spacing(text)
    cleaned = capitalize_sentences(cleaned)
    cleaned = apply_sentence_end_particle(cleaned, profile)

    if cleaned == text:
        return text, None
    return cleaned, CorrectionApplied(
        type=CorrectionType.GRAMMAR,
        original=text,
        corrected=cleaned,
        reason="Normalized spacing, punctuation and capitalization",
    )

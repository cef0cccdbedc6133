"""
Language registry and Unicode script detection.

Resolves the many ways a caller can name a language (aliases, ISO codes,
English names, ASCII native names) to a single lowercase English name, and
answers script questions about languages and about text.
"""

import logging
import unicodedata
from typing import Dict, List, Optional, Tuple

from lexibridge.data.languages import (
    LANGUAGES,
    LANGUAGE_ALIASES,
    LANGUAGE_TO_COLUMN,
    RTL_SCRIPTS,
    SCRIPT_FALLBACK,
    SCRIPT_PATTERNS,
    SUPPORTED_PHRASE_LANGUAGES,
)
from lexibridge.models.internal_models import LanguageInfo, ScriptDetection

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "english"
LATIN_TEXT_THRESHOLD = 0.7

_LATIN_MAX = 0x024F


def _is_latin_char(char: str) -> bool:
    return ord(char) <= _LATIN_MAX


def _latin_ratio(text: str) -> Optional[float]:
    """Share of letters in the Latin blocks, or None when text has no letters"""
    letters = [c for c in text if unicodedata.category(c).startswith("L")]
    if not letters:
        return None
    latin = sum(1 for c in letters if _is_latin_char(c))
    return latin / len(letters)


def _in_ranges(char: str, ranges: List[Tuple[int, int]]) -> bool:
    code_point = ord(char)
    for low, high in ranges:
        if low <= code_point <= high:
            return True
    return False


def detect_script(text: str) -> ScriptDetection:
    """
    Detect the writing system of a piece of text.

    Scripts are tested in a fixed order and the first one with at least one
    matching character wins.

    Args:
        text: Text to inspect

    Returns:
        ScriptDetection with the script, its default language and a
        confidence equal to the share of non-whitespace characters matched
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return ScriptDetection(script="Latin", language=DEFAULT_LANGUAGE, is_latin=True, confidence=1.0)

    visible = [c for c in trimmed if not c.isspace()]
    for script, language, ranges in SCRIPT_PATTERNS:
        matched = sum(1 for c in visible if _in_ranges(c, ranges))
        if matched:
            confidence = min(1.0, matched / len(visible))
            return ScriptDetection(script=script, language=language, is_latin=False, confidence=confidence)

    ratio = _latin_ratio(trimmed)
    confidence = ratio if ratio is not None and ratio > 0.5 else 0.5
    return ScriptDetection(script="Latin", language=DEFAULT_LANGUAGE, is_latin=True, confidence=confidence)


def is_latin_text(text: str) -> bool:
    """True when more than 70% of the letters in text are Latin"""
    ratio = _latin_ratio(text or "")
    if ratio is None:
        return True
    return ratio > LATIN_TEXT_THRESHOLD


def _infer_script(native_name: str) -> str:
    detection = detect_script(native_name)
    if detection.is_latin and not is_latin_text(native_name):
        return "Other"
    return detection.script


def _build_indexes() -> Tuple[List[LanguageInfo], Dict[str, LanguageInfo], Dict[str, LanguageInfo], Dict[str, LanguageInfo]]:
    languages: List[LanguageInfo] = []
    by_name: Dict[str, LanguageInfo] = {}
    by_code: Dict[str, LanguageInfo] = {}
    by_native: Dict[str, LanguageInfo] = {}

    for code, name, native_name, script in LANGUAGES:
        script = script or _infer_script(native_name)
        info = LanguageInfo(
            code=code,
            name=name.lower(),
            native_name=native_name,
            script=script,
            rtl=script in RTL_SCRIPTS,
        )
        if info.name in by_name:
            continue
        languages.append(info)
        by_name[info.name] = info
        by_code.setdefault(code.lower(), info)
        if native_name.isascii():
            by_native.setdefault(native_name.lower(), info)

    return languages, by_name, by_code, by_native


_LANGUAGES, _BY_NAME, _BY_CODE, _BY_NATIVE = _build_indexes()


def normalize_language(language: Optional[str]) -> str:
    """
    Resolve a language name, alias or code to its canonical lowercase name.

    Empty input resolves to English; unknown names pass through lowercased.
    """
    if not language or not isinstance(language, str):
        return DEFAULT_LANGUAGE

    normalized = language.strip().lower()
    if not normalized:
        return DEFAULT_LANGUAGE

    if normalized in LANGUAGE_ALIASES:
        return LANGUAGE_ALIASES[normalized]
    if normalized in _BY_NAME:
        return normalized
    if normalized in _BY_CODE:
        return _BY_CODE[normalized].name
    if normalized in _BY_NATIVE:
        return _BY_NATIVE[normalized].name

    logger.debug(f"Unknown language '{language}', using as-is")
    return normalized


def get_language_info(language: str) -> Optional[LanguageInfo]:
    normalized = normalize_language(language)
    info = _BY_NAME.get(normalized)
    if info is None and language:
        info = _BY_CODE.get(language.strip().lower())
    return info


def get_language_code(language: str) -> str:
    """Registered ISO code, else the first two letters of the normalized name"""
    info = get_language_info(language)
    if info:
        return info.code
    return normalize_language(language)[:2]


def get_script(language: str) -> str:
    info = get_language_info(language)
    return info.script if info else "Latin"


def is_latin_script_language(language: str) -> bool:
    return normalize_language(language) == DEFAULT_LANGUAGE or get_script(language) == "Latin"


def is_english(language: str) -> bool:
    if language and language.strip().lower() == "en":
        return True
    return normalize_language(language) == DEFAULT_LANGUAGE


def is_rtl(language: str) -> bool:
    info = get_language_info(language)
    return bool(info and info.rtl)


def get_effective_language(language: str) -> str:
    """
    Nearest language with phrase-table coverage.

    Dialects without their own column fall back to the main language of
    their script.
    """
    normalized = normalize_language(language)
    if normalized in SUPPORTED_PHRASE_LANGUAGES:
        return normalized
    return SCRIPT_FALLBACK.get(get_script(normalized), normalized)


def get_language_column(language: str) -> str:
    return LANGUAGE_TO_COLUMN.get(get_effective_language(language), DEFAULT_LANGUAGE)


def is_same_language(first: str, second: str) -> bool:
    return normalize_language(first) == normalize_language(second)


def get_all_languages() -> List[LanguageInfo]:
    return list(_LANGUAGES)


def get_language_count() -> int:
    return len(_LANGUAGES)

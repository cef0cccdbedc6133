"""
Phonetic transliteration between Latin input and native scripts.

Forward conversion is a greedy longest-match over the per-script tables in
``lexibridge.data.script_blocks``; reverse conversion maps each native
character back through the first Latin key registered for it. Neither
direction raises: anything unmapped passes through unchanged.
"""

import logging
import unicodedata
from functools import lru_cache
from typing import Dict, Optional, Tuple

from lexibridge.data.script_blocks import SCRIPT_BLOCKS, LANGUAGE_SCRIPT_MAP, ScriptBlock
from lexibridge.services.language_registry import (
    normalize_language,
    is_latin_script_language,
    is_latin_text,
)

logger = logging.getLogger(__name__)

MAX_CHUNK_LENGTH = 4
MAX_MODIFIER_LENGTH = 2


def _get_script_name(language: str) -> Optional[str]:
    return LANGUAGE_SCRIPT_MAP.get(normalize_language(language))


def _get_script_block(language: str) -> Optional[ScriptBlock]:
    script_name = _get_script_name(language)
    return SCRIPT_BLOCKS.get(script_name) if script_name else None


def _is_passthrough(char: str) -> bool:
    if char.isspace() or char.isdigit():
        return True
    return unicodedata.category(char)[0] in ("P", "S")


def _is_base_letter(value: str) -> bool:
    """Consonant letters, as opposed to signs such as anusvara or visarga"""
    return bool(value) and unicodedata.category(value[0]) == "Lo"


def _lookup(table: Dict[str, str], chunk: str) -> Optional[str]:
    value = table.get(chunk)
    if value is None and chunk.lower() != chunk:
        value = table.get(chunk.lower())
    return value


def _forward(text: str, block: ScriptBlock) -> str:
    output = []
    i = 0
    # Last emitted consonant carries no vowel sign yet
    bare_consonant = False

    while i < len(text):
        char = text[i]
        if _is_passthrough(char):
            output.append(char)
            bare_consonant = False
            i += 1
            continue

        matched = False
        for length in range(MAX_CHUNK_LENGTH, 0, -1):
            chunk = text[i:i + length]
            if len(chunk) < length:
                continue

            consonant = _lookup(block.consonants, chunk)
            if consonant is not None:
                is_letter = _is_base_letter(consonant)
                if bare_consonant and is_letter and block.virama:
                    output.append(block.virama)
                output.append(consonant)
                i += length
                bare_consonant = is_letter

                for vowel_length in range(MAX_MODIFIER_LENGTH, 0, -1):
                    vowel_chunk = text[i:i + vowel_length]
                    if len(vowel_chunk) < vowel_length:
                        continue
                    modifier = _lookup(block.modifiers, vowel_chunk)
                    if modifier is not None:
                        output.append(modifier)
                        i += vowel_length
                        bare_consonant = False
                        break
                    if vowel_chunk == "a" and block.inherent_vowel:
                        i += 1
                        bare_consonant = False
                        break

                matched = True
                break

            vowel = _lookup(block.vowels, chunk)
            if vowel is not None:
                output.append(vowel)
                i += length
                bare_consonant = False
                matched = True
                break

        if not matched:
            output.append(char)
            bare_consonant = False
            i += 1

    return "".join(output)


@lru_cache(maxsize=None)
def _reverse_maps(script_name: str) -> Tuple[Dict[str, str], Dict[str, str], Dict[str, str]]:
    block = SCRIPT_BLOCKS[script_name]
    consonants: Dict[str, str] = {}
    vowels: Dict[str, str] = {}
    modifiers: Dict[str, str] = {}
    for latin, native in block.consonants.items():
        consonants.setdefault(native, latin)
    for latin, native in block.vowels.items():
        vowels.setdefault(native, latin)
    for latin, native in block.modifiers.items():
        if native:
            modifiers.setdefault(native, latin)
    return consonants, vowels, modifiers


def _reverse(text: str, script_name: str) -> str:
    block = SCRIPT_BLOCKS[script_name]
    consonants, vowels, modifiers = _reverse_maps(script_name)
    restore_inherent = block.virama is not None and block.inherent_vowel
    output = []
    bare_consonant = False

    for char in text:
        if char in consonants:
            if bare_consonant and restore_inherent:
                output.append("a")
            output.append(consonants[char])
            bare_consonant = _is_base_letter(char)
        elif char in vowels:
            if bare_consonant and restore_inherent:
                output.append("a")
            output.append(vowels[char])
            bare_consonant = False
        elif char in modifiers:
            output.append(modifiers[char])
            bare_consonant = False
        elif char == block.virama:
            bare_consonant = False
        else:
            output.append(char)
            bare_consonant = False

    return "".join(output)


def transliterate_to_native(text: str, target_language: str) -> str:
    """
    Convert Latin input into the native script of the target language.

    Args:
        text: Latin text, typically typed phonetically
        target_language: Language whose script to produce

    Returns:
        Native-script text, or the input unchanged when the target is
        written in Latin script, the input is already non-Latin, or no
        table exists for the target
    """
    if not text or not text.strip():
        return text
    if is_latin_script_language(target_language):
        return text
    if not is_latin_text(text):
        return text

    block = _get_script_block(target_language)
    if block is None:
        return text

    try:
        return _forward(text, block) or text
    except Exception as e:
        logger.error(f"Transliteration to {target_language} failed: {e}")
        return text


def reverse_transliterate(text: str, source_language: str) -> str:
    """
    Best-effort conversion of native-script text back to Latin letters.

    Args:
        text: Native-script text
        source_language: Language the text is written in

    Returns:
        Latin rendering, or the input unchanged when no table applies
    """
    if not text or not text.strip():
        return text
    if is_latin_text(text):
        return text

    script_name = _get_script_name(source_language)
    if script_name is None or script_name not in SCRIPT_BLOCKS:
        return text

    try:
        return _reverse(text, script_name) or text
    except Exception as e:
        logger.error(f"Reverse transliteration from {source_language} failed: {e}")
        return text


def get_live_preview(text: str, target_language: str) -> str:
    """Instant native-script preview while the user types"""
    if not text or not text.strip():
        return ""
    return transliterate_to_native(text, target_language)


def has_transliteration(language: str) -> bool:
    return _get_script_block(language) is not None

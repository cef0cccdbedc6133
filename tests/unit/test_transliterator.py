"""
Unit tests for phonetic transliteration.
"""
from lexibridge.services.transliterator import (
    get_live_preview,
    has_transliteration,
    reverse_transliterate,
    transliterate_to_native,
)


def test_devanagari_conjunct_gets_virama():
    """Consecutive bare consonants are joined with a virama."""
    assert transliterate_to_native("namaste", "hindi") == "नमस्ते"


def test_devanagari_reverse_restores_inherent_vowel():
    assert reverse_transliterate("नमस्ते", "hindi") == "namaste"


def test_cyrillic_has_no_inherent_vowel():
    assert transliterate_to_native("privet", "russian") == "привет"
    assert transliterate_to_native("mama", "russian") == "мама"


def test_punctuation_digits_and_spaces_pass_through():
    assert transliterate_to_native("namaste, 2!", "hindi") == "नमस्ते, 2!"


def test_latin_target_is_unchanged():
    assert transliterate_to_native("hola amigo", "spanish") == "hola amigo"


def test_non_latin_input_is_unchanged():
    assert transliterate_to_native("नमस्ते", "hindi") == "नमस्ते"


def test_reverse_of_latin_text_is_unchanged():
    assert reverse_transliterate("hello", "hindi") == "hello"


def test_unknown_language_is_unchanged():
    assert transliterate_to_native("namaste", "klingon") == "namaste"
    assert not has_transliteration("klingon")


def test_empty_input():
    assert transliterate_to_native("", "hindi") == ""
    assert get_live_preview("   ", "hindi") == ""


def test_live_preview_matches_forward_conversion():
    assert get_live_preview("namaste", "hindi") == transliterate_to_native("namaste", "hindi")


def test_has_transliteration():
    assert has_transliteration("hindi")
    assert has_transliteration("marathi")
    assert has_transliteration("ru")

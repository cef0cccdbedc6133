"""
Unit tests for language name resolution and script detection.
"""
from lexibridge.services.language_registry import (
    detect_script,
    get_all_languages,
    get_effective_language,
    get_language_code,
    get_language_column,
    get_language_count,
    get_script,
    is_english,
    is_latin_script_language,
    is_latin_text,
    is_rtl,
    is_same_language,
    normalize_language,
)


def test_normalize_codes_aliases_and_native_names():
    """Codes, aliases and native names all resolve to the English name."""
    assert normalize_language("es") == "spanish"
    assert normalize_language("Spanish") == "spanish"
    assert normalize_language("  HI ") == "hindi"
    assert normalize_language("farsi") == "persian"
    assert normalize_language("Mandarin") == "chinese"
    assert normalize_language("Deutsch") == "german"


def test_normalize_empty_defaults_to_english():
    assert normalize_language(None) == "english"
    assert normalize_language("") == "english"
    assert normalize_language("   ") == "english"


def test_normalize_unknown_passes_through_lowercased():
    assert normalize_language("Klingon") == "klingon"


def test_is_english_accepts_code_and_name():
    assert is_english("en")
    assert is_english("English")
    assert not is_english("spanish")


def test_language_scripts():
    assert get_script("hindi") == "Devanagari"
    assert get_script("ru") == "Cyrillic"
    assert get_script("unknown-language") == "Latin"
    assert is_latin_script_language("french")
    assert not is_latin_script_language("arabic")


def test_rtl_languages():
    assert is_rtl("arabic")
    assert not is_rtl("hindi")


def test_language_code_fallback():
    assert get_language_code("hindi") == "hi"
    assert get_language_code("klingon") == "kl"


def test_is_same_language_across_spellings():
    assert is_same_language("es", "Spanish")
    assert not is_same_language("es", "pt")


def test_effective_language_and_column():
    """Dialects without their own column fall back to their script's main language."""
    assert get_effective_language("spanish") == "spanish"
    assert get_effective_language("nepali") == "hindi"
    assert get_language_column("es") == "spanish"


def test_detect_script_devanagari():
    detection = detect_script("नमस्ते")
    assert detection.script == "Devanagari"
    assert detection.language == "hindi"
    assert not detection.is_latin
    assert detection.confidence == 1.0


def test_detect_script_latin_and_empty():
    assert detect_script("hello world").is_latin
    empty = detect_script("   ")
    assert empty.script == "Latin"
    assert empty.confidence == 1.0


def test_is_latin_text_threshold():
    assert is_latin_text("hello")
    assert not is_latin_text("नमस्ते")
    # No letters at all counts as Latin
    assert is_latin_text("123 !!")
    # 2 Latin letters out of 6 is below the threshold
    assert not is_latin_text("ab नमस्ते")


def test_registry_listing():
    languages = get_all_languages()
    assert len(languages) == get_language_count()
    assert len(languages) > 200
    names = {info.name for info in languages}
    assert {"english", "hindi", "spanish"} <= names

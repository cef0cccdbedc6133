"""
Unit tests for tokenization, sentence chunking and SVO detection.
"""
import pytest

from lexibridge.models.internal_models import PartOfSpeech
from lexibridge.services.tokenizer import (
    chunk_sentence,
    identify_svo,
    reconstruct_from_chunks,
    split_sentences,
    tokenize,
    tokens_to_string,
)


@pytest.mark.parametrize("text", [
    "Hello, world!",
    "  I don't like well-known  cats.  ",
    "नमस्ते दोस्त। आप कैसे हैं?",
    "Price: 42 dollars\n\tnext line",
    "",
])
def test_tokenize_is_lossless(text):
    """Joining token texts gives back the input exactly."""
    assert tokens_to_string(tokenize(text)) == text


def test_word_tokens_keep_apostrophes_and_hyphens():
    words = [t.text for t in tokenize("I don't like well-known cats") if t.is_word]
    assert words == ["I", "don't", "like", "well-known", "cats"]


def test_whitespace_and_digit_runs_are_single_tokens():
    tokens = tokenize("a   123 b")
    assert [t.text for t in tokens] == ["a", "   ", "123", " ", "b"]
    assert [t.is_word for t in tokens] == [True, False, False, False, True]


def test_tokens_carry_offsets_and_indexes():
    tokens = tokenize("the cat")
    assert [(t.index, t.start) for t in tokens] == [(0, 0), (1, 3), (2, 4)]


def test_tokens_get_part_of_speech_and_lemma():
    tokens = [t for t in tokenize("I love cats") if t.is_word]
    assert tokens[0].pos == PartOfSpeech.PRONOUN
    assert tokens[1].pos == PartOfSpeech.VERB
    assert tokens[2].pos == PartOfSpeech.NOUN
    assert tokens[2].lemma == "cat"
    assert tokens[0].normalized == "i"


def test_split_sentences_keeps_separators():
    chunks, separators = split_sentences("Hi there. How are you?  Fine!")
    assert chunks == ["Hi there.", "How are you?", "Fine!"]
    assert separators == [" ", "  "]


def test_split_sentences_round_trip_with_edge_whitespace():
    text = "  One. Two!\n"
    chunks, separators = split_sentences(text)
    assert len(separators) == len(chunks) - 1
    assert reconstruct_from_chunks(chunks, separators) == text


def test_split_sentences_danda():
    chunks, _ = split_sentences("नमस्ते। धन्यवाद।")
    assert chunks == ["नमस्ते।", "धन्यवाद।"]


def test_split_sentences_caps_long_sentences_at_whitespace():
    text = "one two three four five"
    chunks, separators = split_sentences(text, max_length=10)
    assert all(len(chunk) <= 10 for chunk in chunks)
    assert reconstruct_from_chunks(chunks, separators) == text


def test_split_sentences_empty():
    assert split_sentences("") == ([], [])


def test_chunk_sentence_strips_whitespace():
    assert chunk_sentence("  One.   Two.  ") == ["One.", "Two."]


def test_reconstruct_with_single_separator():
    assert reconstruct_from_chunks(["a", "b", "c"], " | ") == "a | b | c"


def test_identify_svo():
    tokens = tokenize("I eat food")
    roles = identify_svo(tokens)
    assert tokens[roles["subject"]].text == "I"
    assert tokens[roles["verb"]].text == "eat"
    assert tokens[roles["object"]].text == "food"


def test_identify_svo_without_verb():
    roles = identify_svo(tokenize("the dog"))
    assert roles["verb"] is None
    assert roles["object"] is None

"""
Lossless tokenization and sentence chunking.

Every function here preserves the input exactly: joining token texts, or
re-interleaving sentence chunks with their separators, gives back the
original string.
"""

import re
import unicodedata
from typing import Dict, List, Optional, Sequence, Tuple, Union

from lexibridge.models.internal_models import PartOfSpeech, Token
from lexibridge.services.morphology import detect_pos, get_lemma

# Characters that stay inside a word when letters follow them
WORD_JOINERS = {"'", "’", "-", "‌", "‍"}

SENTENCE_TERMINATORS = ".!?。！？।॥"

_SENTENCE_BOUNDARY = re.compile(r"(?<=[" + re.escape(SENTENCE_TERMINATORS) + r"])\s+")


def _is_word_char(char: str) -> bool:
    return unicodedata.category(char)[0] in ("L", "M")


def _char_class(char: str) -> str:
    if char.isspace():
        return "space"
    if char.isdigit():
        return "digit"
    return "other"


def tokenize(text: str) -> List[Token]:
    """
    Split text into word and non-word tokens.

    Words are runs of letters and combining marks of any script, with
    apostrophes and hyphens kept when they sit between letters. Whitespace
    and digit runs form single tokens; every other character is its own
    token. Words get a part of speech guessed from their neighbours.
    """
    if not text:
        return []

    tokens: List[Token] = []
    i = 0
    length = len(text)

    while i < length:
        start = i
        if _is_word_char(text[i]):
            i += 1
            while i < length:
                if _is_word_char(text[i]):
                    i += 1
                elif text[i] in WORD_JOINERS and i + 1 < length and _is_word_char(text[i + 1]):
                    i += 1
                else:
                    break
            is_word = True
        else:
            kind = _char_class(text[i])
            i += 1
            if kind != "other":
                while i < length and not _is_word_char(text[i]) and _char_class(text[i]) == kind:
                    i += 1
            is_word = False

        piece = text[start:i]
        tokens.append(Token(
            text=piece,
            is_word=is_word,
            normalized=piece.lower() if is_word else piece,
            index=len(tokens),
            start=start,
        ))

    words = [token for token in tokens if token.is_word]
    for position, token in enumerate(words):
        previous = words[position - 1].normalized if position > 0 else None
        following = words[position + 1].normalized if position + 1 < len(words) else None
        token.pos = detect_pos(token.normalized, previous, following)
        token.lemma = get_lemma(token.normalized, token.pos)

    return tokens


def tokens_to_string(tokens: Sequence[Token]) -> str:
    return "".join(token.text for token in tokens)


def _split_long(chunk: str, max_length: int) -> Tuple[List[str], List[str]]:
    pieces: List[str] = []
    separators: List[str] = []
    remaining = chunk

    while len(remaining) > max_length:
        cut = None
        for match in re.finditer(r"\s+", remaining[:max_length + 1]):
            if match.start() > 0:
                cut = match
        if cut is None:
            break
        pieces.append(remaining[:cut.start()])
        separators.append(cut.group())
        remaining = remaining[cut.end():]

    pieces.append(remaining)
    return pieces, separators


def split_sentences(text: str, max_length: Optional[int] = None) -> Tuple[List[str], List[str]]:
    """
    Split text into sentence chunks and the exact separators between them.

    Terminal punctuation stays with its sentence. Leading whitespace stays
    in the first chunk and trailing whitespace in the last one, so
    ``reconstruct_from_chunks(*split_sentences(text)) == text``.

    Args:
        text: Input text
        max_length: Optional cap; longer sentences are split at whitespace

    Returns:
        (chunks, separators) with ``len(separators) == len(chunks) - 1``
    """
    if not text:
        return [], []

    chunks: List[str] = []
    separators: List[str] = []
    position = 0

    for match in _SENTENCE_BOUNDARY.finditer(text):
        if match.start() == 0:
            continue
        chunks.append(text[position:match.start()])
        separators.append(match.group())
        position = match.end()

    remainder = text[position:]
    if remainder:
        chunks.append(remainder)
    elif separators:
        chunks[-1] += separators.pop()

    if max_length:
        bounded_chunks: List[str] = []
        bounded_separators: List[str] = []
        for index, chunk in enumerate(chunks):
            pieces, inner = _split_long(chunk, max_length)
            if index > 0:
                bounded_separators.append(separators[index - 1])
            bounded_chunks.extend(pieces)
            bounded_separators.extend(inner)
        return bounded_chunks, bounded_separators

    return chunks, separators


def chunk_sentence(text: str, max_length: Optional[int] = None) -> List[str]:
    """Sentence units of text with surrounding whitespace removed"""
    chunks, _ = split_sentences(text, max_length)
    return [chunk.strip() for chunk in chunks if chunk.strip()]


def reconstruct_from_chunks(chunks: Sequence[str], separator: Union[str, Sequence[str]] = " ") -> str:
    """
    Rejoin sentence chunks.

    Args:
        chunks: Chunk texts
        separator: One string used at every boundary, or the per-boundary
            list returned by ``split_sentences``
    """
    if isinstance(separator, str):
        return separator.join(chunks)

    parts: List[str] = []
    for index, chunk in enumerate(chunks):
        if index > 0:
            parts.append(separator[index - 1] if index - 1 < len(separator) else " ")
        parts.append(chunk)
    return "".join(parts)


def identify_svo(tokens: Sequence[Token]) -> Dict[str, Optional[int]]:
    """
    Locate subject, verb and object among word tokens.

    The subject is the first noun or pronoun, the verb the first verb after
    it, and the object the first noun or pronoun after the verb. Values are
    positions in ``tokens``.
    """
    roles: Dict[str, Optional[int]] = {"subject": None, "verb": None, "object": None}
    nominal = (PartOfSpeech.NOUN, PartOfSpeech.PRONOUN)

    for position, token in enumerate(tokens):
        if not token.is_word:
            continue
        if roles["subject"] is None:
            if token.pos in nominal:
                roles["subject"] = position
        elif roles["verb"] is None:
            if token.pos == PartOfSpeech.VERB:
                roles["verb"] = position
        elif token.pos in nominal:
            roles["object"] = position
            break

    return roles

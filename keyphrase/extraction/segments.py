"""Sentence and word segmentation primitives."""
from __future__ import annotations

from typing import List

import regex

__all__ = ["split_sentences", "split_word_bounds", "is_url"]

_CONTROL_CHARACTERS = ("\n", "\t", "\r")

# Break after a terminator (and any closing quotes or brackets) when the next
# visible character does not continue the sentence in lowercase. Without
# intervening whitespace, break only between a lowercase word and an
# uppercase one, as in "competitions.With".
_SENTENCE_BOUNDARY_PATTERN = regex.compile(
    r"""(?<=[.!?…]["'’”)\]]*)\s+(?=[^\p{Ll}\s])"""
    r"""|(?<=\p{Ll}[.!?…]["'’”)\]]*)(?=\p{Lu})"""
)

_URL_BODY = r"""(?:[a-z][a-z0-9+.\-]*://|www\.)[^\s<>"']*[^\s<>"'.,;:!?)\]]"""

_URL_PATTERN = regex.compile(_URL_BODY, regex.IGNORECASE)

_WORD_BOUND_PATTERN = regex.compile(
    r"(?P<url>" + _URL_BODY + r")"
    r"|(?P<word>[\p{L}\p{M}\p{N}_]+"
    r"(?:(?:['’.]|(?<=\p{N}),(?=\p{N})|(?<=\p{L}):(?=\p{L}))[\p{L}\p{M}\p{N}_]+)*)"
    r"|(?P<other>\S)",
    regex.IGNORECASE,
)


def split_sentences(text: str) -> List[str]:
    """Split text into sentences after removing embedded control characters."""

    cleaned = text.strip()
    for character in _CONTROL_CHARACTERS:
        cleaned = cleaned.replace(character, "")
    if not cleaned:
        return []
    sentences: List[str] = []
    start = 0
    for boundary in _SENTENCE_BOUNDARY_PATTERN.finditer(cleaned):
        sentences.append(cleaned[start : boundary.start()])
        start = boundary.end()
    sentences.append(cleaned[start:])
    return [sentence for sentence in sentences if sentence.strip()]


def split_word_bounds(sentence: str) -> List[str]:
    """Return the non-whitespace word-boundary segments of a sentence.

    Letter and digit runs joined by apostrophes or periods stay together
    (``Kaggle's``, ``12.75``), as do digit groups joined by commas
    (``100,000``) and letters joined by a colon (``a:b``). URLs are kept whole. Any other visible character is a
    segment of its own.
    """

    return [match.group(0) for match in _WORD_BOUND_PATTERN.finditer(sentence)]


def is_url(token: str) -> bool:
    return _URL_PATTERN.fullmatch(token) is not None

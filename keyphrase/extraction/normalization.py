"""Text normalization: raw text into sentences of word tokens."""
from __future__ import annotations

import logging
from typing import List

import regex

from . import Sentence
from .segments import is_url, split_sentences, split_word_bounds

__all__ = ["build_sentences", "normalize_token", "expand_english_contractions"]

logger = logging.getLogger(__name__)

_CONTRACTION_PATTERN = regex.compile(r"\b(\p{L}+)['’](t|re|ve|ll|d|m|s)\b", regex.IGNORECASE)

_IRREGULAR_CONTRACTIONS: dict[str, str] = {
    "can't": "can not",
    "won't": "will not",
    "shan't": "shall not",
    "ain't": "is not",
    "let's": "let us",
}

# Only these take "'s" as "is"; any other "'s" is treated as possessive.
_IS_CONTRACTION_STEMS = {
    "he",
    "here",
    "how",
    "it",
    "she",
    "that",
    "there",
    "what",
    "where",
    "who",
}

_SUFFIX_EXPANSIONS: dict[str, str] = {
    "re": "are",
    "ve": "have",
    "ll": "will",
    "d": "would",
    "m": "am",
}


def _match_case(replacement: str, original: str) -> str:
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def _expand_contraction(match: regex.Match) -> str:
    original = match.group(0)
    stem = match.group(1)
    suffix = match.group(2).lower()
    key = f"{stem.lower()}'{suffix}"

    irregular = _IRREGULAR_CONTRACTIONS.get(key)
    if irregular is not None:
        return _match_case(irregular, original)
    if suffix == "t":
        if len(stem) > 1 and stem.lower().endswith("n"):
            return f"{stem[:-1]} not"
        return original
    if suffix == "s":
        if stem.lower() in _IS_CONTRACTION_STEMS:
            return f"{stem} is"
        return original
    return f"{stem} {_SUFFIX_EXPANSIONS[suffix]}"


def expand_english_contractions(text: str) -> str:
    """Expand common English contractions, keeping the leading letter's case."""

    return _CONTRACTION_PATTERN.sub(_expand_contraction, text)


def normalize_token(token: str) -> str:
    return token.strip().replace("'s", "").replace(",", "")


def build_sentences(
    text: str,
    *,
    ignore_urls: bool = True,
    expand_contractions: bool = True,
) -> List[Sentence]:
    """Split text into sentences of normalized word tokens.

    Tokens that are empty once trimmed are dropped. A token emptied by the
    possessive and comma stripping stays in place, so no phrase spans a
    comma. With ``ignore_urls`` URL tokens are skipped entirely.
    """

    if expand_contractions:
        text = expand_english_contractions(text)

    sentences: List[Sentence] = []
    skipped_urls = 0
    for raw_sentence in split_sentences(text):
        words: list[str] = []
        for segment in split_word_bounds(raw_sentence):
            if not segment.strip():
                continue
            if ignore_urls and is_url(segment):
                skipped_urls += 1
                continue
            words.append(normalize_token(segment))
        if words:
            sentences.append(Sentence.from_words(words))

    if skipped_urls:
        logger.debug("Skipped %d URL tokens", skipped_urls)
    return sentences

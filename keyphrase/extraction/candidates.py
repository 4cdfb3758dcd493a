"""N-gram candidate generation and filtering."""
from __future__ import annotations

from typing import AbstractSet, Dict, Sequence

from . import Candidate, Sentence

__all__ = [
    "select_ngrams",
    "filter_candidates",
    "filter_boundary_stopwords",
    "is_alphanumeric",
    "is_number",
]

Candidates = Dict[str, Candidate]


def select_ngrams(sentences: Sequence[Sentence], ngram_size: int) -> Candidates:
    """Group every contiguous span of up to ``ngram_size`` words by lexical form.

    Spans never cross sentence boundaries. Candidates keep first-seen order.
    """

    candidates: Candidates = {}
    shift = 0
    for sentence_id, sentence in enumerate(sentences):
        for start in range(sentence.length):
            stop_limit = min(start + ngram_size, sentence.length)
            for stop in range(start + 1, stop_limit + 1):
                stems = sentence.stems[start:stop]
                key = " ".join(stems)
                candidate = candidates.get(key)
                if candidate is None:
                    candidate = Candidate(lexical_form=stems)
                    candidates[key] = candidate
                candidate.add(sentence.words[start:stop], sentence_id, shift + start)
        shift += sentence.length
    return candidates


def is_alphanumeric(word: str, valid_punctuation: str = "-") -> bool:
    """True when ``word`` is letters and digits once ``valid_punctuation`` is removed."""

    for mark in valid_punctuation:
        word = word.replace(mark, "")
    return all(character.isalnum() for character in word)


def is_number(word: str) -> bool:
    try:
        float(word)
    except ValueError:
        return False
    return True


def filter_candidates(
    candidates: Candidates,
    *,
    stopwords: AbstractSet[str],
    punctuation: AbstractSet[str],
    minimum_length: int = 3,
    minimum_word_size: int = 2,
    valid_punctuation: str = "-",
    maximum_word_number: int = 5,
    only_alphanumeric: bool = False,
) -> Candidates:
    """Drop candidates whose first surface form is structurally unusable."""

    kept: Candidates = {}
    for key, candidate in candidates.items():
        words = {word.lower() for word in candidate.surface_forms[0]}

        if words & stopwords:
            continue
        if any(is_number(word) for word in words):
            continue
        if any(word in punctuation for word in words):
            continue
        if sum(len(word) for word in words) < minimum_length:
            continue
        if min(len(word) for word in words) < minimum_word_size:
            continue
        if len(candidate.lexical_form) > maximum_word_number:
            continue
        if only_alphanumeric and not all(is_alphanumeric(word, valid_punctuation) for word in words):
            continue
        kept[key] = candidate
    return kept


def filter_boundary_stopwords(candidates: Candidates, *, stopwords: AbstractSet[str]) -> Candidates:
    """Drop candidates that start or end with a stopword or a word shorter than 3."""

    kept: Candidates = {}
    for key, candidate in candidates.items():
        surface = candidate.surface_forms[0]
        first, last = surface[0], surface[-1]
        if first.lower() in stopwords or last.lower() in stopwords:
            continue
        if len(first) < 3 or len(last) < 3:
            continue
        kept[key] = candidate
    return kept

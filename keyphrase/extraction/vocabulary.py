"""Vocabulary index and co-occurrence contexts."""
from __future__ import annotations

from collections import deque
from typing import AbstractSet, Dict, List, Sequence

from . import ContextEntry, Occurrence, Sentence
from .candidates import is_alphanumeric

__all__ = ["build_vocabulary", "build_contexts"]

Vocabulary = Dict[str, List[Occurrence]]
Contexts = Dict[str, ContextEntry]


def build_vocabulary(
    sentences: Sequence[Sentence],
    *,
    punctuation: AbstractSet[str],
    valid_punctuation: str = "-",
) -> Vocabulary:
    """Map each normalized word to all of its occurrences.

    A token is indexed only when it is alphanumeric apart from
    ``valid_punctuation`` and shares no character with ``punctuation``.
    """

    vocabulary: Vocabulary = {}
    shift = 0
    for sentence_index, sentence in enumerate(sentences):
        for position, word in enumerate(sentence.words):
            if not is_alphanumeric(word, valid_punctuation):
                continue
            if set(word) & punctuation:
                continue
            occurrence = Occurrence(
                sentence_index=sentence_index,
                offset=shift + position,
                sentence_offset=shift,
                word=word,
            )
            vocabulary.setdefault(word.lower(), []).append(occurrence)
        shift += sentence.length
    return vocabulary


def build_contexts(sentences: Sequence[Sentence], *, window_size: int = 2) -> Contexts:
    """Collect left/right neighbours within ``window_size`` words, per sentence.

    Every token of the sentence takes part, punctuation included. The window
    slides over the sentence and is never reset before the sentence ends.
    """

    contexts: Contexts = {}
    for sentence in sentences:
        window: deque[str] = deque(maxlen=window_size)
        for word in sentence.stems:
            for neighbour in window:
                contexts.setdefault(word, ContextEntry()).left.append(neighbour)
                contexts.setdefault(neighbour, ContextEntry()).right.append(word)
            window.append(word)
    return contexts

"""Per-term statistical features."""
from __future__ import annotations

import math
import statistics
from typing import AbstractSet, Dict, Mapping, Sequence

from . import ContextEntry, Occurrence, Sentence, TermFeature

__all__ = ["extract_features"]

Features = Dict[str, TermFeature]

_EMPTY_CONTEXT = ContextEntry()


def _safe_div(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


def _is_acronym(word: str) -> bool:
    return len(word) > 1 and all(character.isupper() for character in word)


def extract_features(
    sentences: Sequence[Sentence],
    vocabulary: Mapping[str, Sequence[Occurrence]],
    contexts: Mapping[str, ContextEntry],
    *,
    stopwords: AbstractSet[str],
) -> Features:
    """Compute casing, position, frequency, relatedness and dispersion per term.

    Lower ``weight`` marks a more significant term. An empty vocabulary
    yields no features.
    """

    if not vocabulary:
        return {}

    tf_nonstop = [len(occurrences) for term, occurrences in vocabulary.items() if term not in stopwords]
    mean_tf = statistics.fmean(tf_nonstop) if tf_nonstop else 0.0
    std_tf = statistics.pstdev(tf_nonstop) if tf_nonstop else 0.0
    max_tf = float(max(len(occurrences) for occurrences in vocabulary.values()))
    sentence_count = len(sentences)

    features: Features = {}
    for term, occurrences in vocabulary.items():
        tf = float(len(occurrences))
        tf_a = float(sum(1 for occurrence in occurrences if _is_acronym(occurrence.word)))
        tf_u = float(
            sum(
                1
                for occurrence in occurrences
                if occurrence.word[:1].isupper() and not occurrence.is_sentence_initial
            )
        )

        casing = max(tf_a, tf_u) / (1.0 + math.log1p(tf))

        sentence_ids = sorted({occurrence.sentence_index for occurrence in occurrences})
        position = math.log(math.log(3.0 + statistics.median(sentence_ids)))

        frequency = _safe_div(tf, mean_tf + std_tf)

        context = contexts.get(term, _EMPTY_CONTEXT)
        distinct_left = len(set(context.left))
        distinct_right = len(set(context.right))
        wl = _safe_div(distinct_left, len(context.left))
        wr = _safe_div(distinct_right, len(context.right))
        pl = _safe_div(distinct_left, max_tf)
        pr = _safe_div(distinct_right, max_tf)

        relatedness = 1.0 + (wl + wr) * (tf / max_tf)
        different = _safe_div(len(sentence_ids), sentence_count)
        weight = _safe_div(
            relatedness * position,
            casing + frequency / relatedness + different / relatedness,
        )

        features[term] = TermFeature(
            is_stopword=term in stopwords or len(term) < 3,
            tf=tf,
            tf_a=tf_a,
            tf_u=tf_u,
            casing=casing,
            position=position,
            frequency=frequency,
            wl=wl,
            wr=wr,
            pl=pl,
            pr=pr,
            relatedness=relatedness,
            different=different,
            weight=weight,
        )
    return features

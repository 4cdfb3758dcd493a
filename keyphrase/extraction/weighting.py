"""Phrase scoring from per-term features."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Mapping, Sequence

from . import Candidate, ContextEntry, TermFeature

__all__ = ["WeightedPhrases", "weight_candidates", "stopword_glue"]

# Keeps the final factor (1 + sum) away from zero.
_NEGATIVE_ONE_CLAMP = 0.999999999

_EMPTY_CONTEXT = ContextEntry()


@dataclass(slots=True)
class WeightedPhrases:
    """Scores keyed by lowercase phrase, with lexical and display forms."""

    scores: Dict[str, float] = field(default_factory=dict)
    lexical_forms: Dict[str, str] = field(default_factory=dict)
    display_forms: Dict[str, str] = field(default_factory=dict)


def stopword_glue(
    tokens: Sequence[str],
    index: int,
    features: Mapping[str, TermFeature],
    contexts: Mapping[str, ContextEntry],
) -> float:
    """Probability that the stopword at ``index`` binds its two neighbours.

    The left neighbour is consulted only from the third token onward.
    """

    stopword = tokens[index]

    prob_left = 0.0
    if index - 1 > 0:
        term_left = tokens[index - 1]
        left_feature = features.get(term_left)
        if left_feature is not None and left_feature.tf:
            right_of_left = contexts.get(term_left, _EMPTY_CONTEXT).right
            prob_left = right_of_left.count(stopword) / left_feature.tf

    prob_right = 0.0
    if index + 1 < len(tokens):
        term_right = tokens[index + 1]
        right_feature = features.get(term_right)
        if right_feature is not None and right_feature.tf:
            left_of_stopword = contexts.get(stopword, _EMPTY_CONTEXT).left
            prob_right = left_of_stopword.count(term_right) / right_feature.tf

    return prob_left * prob_right


def _score_tokens(
    tokens: Sequence[str],
    phrase_frequency: int,
    features: Mapping[str, TermFeature],
    contexts: Mapping[str, ContextEntry],
) -> float:
    product = 1.0
    total = 0.0
    for index, token in enumerate(tokens):
        feature = features.get(token)
        if feature is None:
            continue
        if feature.is_stopword:
            prob = stopword_glue(tokens, index, features, contexts)
            product *= 1.0 + (1.0 - prob)
            total -= 1.0 - prob
        else:
            product *= feature.weight
            total += feature.weight

    if total == -1.0:
        total = _NEGATIVE_ONE_CLAMP
    return product / phrase_frequency * (1.0 + total)


def weight_candidates(
    candidates: Mapping[str, Candidate],
    features: Mapping[str, TermFeature],
    contexts: Mapping[str, ContextEntry],
) -> WeightedPhrases:
    """Score every surface form of every candidate.

    Candidates are visited in their mapping order and surface forms in the
    order they were recorded; when two produce the same lowercase phrase the
    later one wins. The display form is the most common original casing.
    """

    weighted = WeightedPhrases()
    for candidate in candidates.values():
        phrase_frequency = len(candidate.surface_forms)
        casings: Dict[str, Counter[str]] = {}
        for surface in candidate.surface_forms:
            tokens = [word.lower() for word in surface]
            phrase = " ".join(tokens)
            casings.setdefault(phrase, Counter())[" ".join(surface)] += 1
            weighted.scores[phrase] = _score_tokens(tokens, phrase_frequency, features, contexts)
            weighted.lexical_forms[phrase] = candidate.key
        for phrase, counter in casings.items():
            weighted.display_forms[phrase] = counter.most_common(1)[0][0]
    return weighted

"""Ranking and near-duplicate suppression."""
from __future__ import annotations

from typing import List

from . import ResultItem
from .similarity import is_redundant
from .weighting import WeightedPhrases

__all__ = ["rank_phrases"]


def rank_phrases(
    weighted: WeightedPhrases,
    *,
    top_n: int = 10,
    remove_duplicates: bool = True,
    dedupe_lim: float = 0.8,
) -> List[ResultItem]:
    """Return up to ``top_n`` phrases, best (lowest score) first.

    Equal scores keep the order in which phrases were scored. ``keyword`` is
    the lexical form recorded for each phrase and is what deduplication
    compares.
    """

    items = [
        ResultItem(
            raw=weighted.display_forms.get(phrase, phrase),
            keyword=weighted.lexical_forms.get(phrase, phrase),
            score=score,
        )
        for phrase, score in weighted.scores.items()
    ]
    items.sort(key=lambda item: item.score)

    if not remove_duplicates:
        return items[:top_n]

    accepted: List[ResultItem] = []
    for item in items:
        if len(accepted) >= top_n:
            break
        if is_redundant(item.keyword, (previous.keyword for previous in accepted), dedupe_lim):
            continue
        accepted.append(item)
    return accepted

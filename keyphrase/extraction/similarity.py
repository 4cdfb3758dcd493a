"""String similarity used when removing near-duplicate keywords."""
from __future__ import annotations

from typing import Iterable

from rapidfuzz.distance import Levenshtein

__all__ = ["levenshtein_ratio", "is_redundant"]


def levenshtein_ratio(first: str, second: str) -> float:
    """Return ``1 - distance / longest`` where lengths are UTF-8 byte counts."""

    length = max(len(first.encode("utf-8")), len(second.encode("utf-8")))
    if length == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(first, second) / length


def is_redundant(candidate: str, accepted: Iterable[str], threshold: float) -> bool:
    return any(levenshtein_ratio(candidate, previous) > threshold for previous in accepted)

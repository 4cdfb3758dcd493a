"""Core data models for the keyword extraction pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

__all__ = [
    "Sentence",
    "Occurrence",
    "Candidate",
    "ContextEntry",
    "TermFeature",
    "ResultItem",
]


@dataclass(frozen=True, slots=True)
class Sentence:
    """A tokenized sentence with the lowercase stem of every word."""

    words: tuple[str, ...]
    stems: tuple[str, ...]

    @classmethod
    def from_words(cls, words: Sequence[str]) -> "Sentence":
        return cls(words=tuple(words), stems=tuple(word.lower() for word in words))

    @property
    def length(self) -> int:
        return len(self.words)


@dataclass(frozen=True, slots=True)
class Occurrence:
    """One appearance of a normalized word inside the document."""

    sentence_index: int
    offset: int
    sentence_offset: int
    word: str

    @property
    def is_sentence_initial(self) -> bool:
        return self.offset == self.sentence_offset


@dataclass(slots=True)
class Candidate:
    """Every surface realization seen for one lexical form."""

    lexical_form: tuple[str, ...]
    surface_forms: list[tuple[str, ...]] = field(default_factory=list)
    sentence_ids: list[int] = field(default_factory=list)
    offsets: list[int] = field(default_factory=list)

    @property
    def key(self) -> str:
        return " ".join(self.lexical_form)

    def add(self, words: Sequence[str], sentence_id: int, offset: int) -> None:
        self.surface_forms.append(tuple(words))
        self.sentence_ids.append(sentence_id)
        self.offsets.append(offset)


@dataclass(slots=True)
class ContextEntry:
    """Left and right co-occurrence neighbours of a word (with repeats)."""

    left: list[str] = field(default_factory=list)
    right: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class TermFeature:
    """Statistical features of a single normalized term."""

    is_stopword: bool
    tf: float
    tf_a: float
    tf_u: float
    casing: float
    position: float
    frequency: float
    wl: float
    wr: float
    pl: float
    pr: float
    relatedness: float
    different: float
    weight: float


@dataclass(frozen=True, slots=True)
class ResultItem:
    """A ranked keyword. Lower scores are more significant."""

    raw: str
    keyword: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {"raw": self.raw, "keyword": self.keyword, "score": self.score}

"""Keyword extraction pipeline."""
from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, List

from . import ResultItem
from .candidates import filter_boundary_stopwords, filter_candidates, select_ngrams
from .config import ExtractorConfig
from .features import extract_features
from .normalization import build_sentences
from .ranking import rank_phrases
from .stopwords import DEFAULT_PUNCTUATION, DEFAULT_STOPWORDS, load_stopwords
from .vocabulary import build_contexts, build_vocabulary
from .weighting import weight_candidates

__all__ = ["KeywordExtractor", "extract_keywords"]

logger = logging.getLogger(__name__)


class KeywordExtractor:
    """Unsupervised statistical keyword extractor.

    Instances only hold immutable configuration, so one extractor can serve
    concurrent ``extract`` calls.
    """

    def __init__(
        self,
        ngram_size: int | None = None,
        remove_duplicates: bool | None = None,
        *,
        stopwords: Iterable[str] | None = None,
        punctuation: Iterable[str] | None = None,
        config: ExtractorConfig | None = None,
    ) -> None:
        base = config or ExtractorConfig()
        self._config = base.with_overrides(
            ngram_size=ngram_size,
            remove_duplicates=remove_duplicates,
        )

        if stopwords is not None:
            self._stopwords: frozenset[str] = frozenset(word.lower() for word in stopwords)
        elif self._config.stopwords_path is not None:
            self._stopwords = load_stopwords(self._config.stopwords_path)
        else:
            self._stopwords = DEFAULT_STOPWORDS

        if punctuation is not None:
            self._punctuation: frozenset[str] = frozenset(punctuation)
        else:
            self._punctuation = DEFAULT_PUNCTUATION

    @property
    def config(self) -> ExtractorConfig:
        return self._config

    @property
    def stopwords(self) -> AbstractSet[str]:
        return self._stopwords

    @property
    def punctuation(self) -> AbstractSet[str]:
        return self._punctuation

    def extract(self, text: str, top_n: int | None = None) -> List[ResultItem]:
        """Return the ``top_n`` most significant keywords, best first."""

        config = self._config
        limit = config.top_n if top_n is None else top_n
        if limit < 0:
            raise ValueError(f"top_n must not be negative, got {limit}")

        sentences = build_sentences(
            text,
            ignore_urls=config.ignore_urls,
            expand_contractions=config.expand_contractions,
        )
        logger.debug("Split text into %d sentences", len(sentences))

        candidates = select_ngrams(sentences, config.ngram_size)
        filtered = filter_candidates(
            candidates,
            stopwords=self._stopwords,
            punctuation=self._punctuation,
            minimum_length=config.minimum_length,
            minimum_word_size=config.minimum_word_size,
            valid_punctuation=config.valid_punctuation,
            maximum_word_number=config.maximum_word_number,
            only_alphanumeric=config.only_alphanumeric,
        )
        selected = filter_boundary_stopwords(filtered, stopwords=self._stopwords)
        logger.debug(
            "Candidates: %d generated, %d after structural filter, %d after boundary filter",
            len(candidates),
            len(filtered),
            len(selected),
        )
        if not selected:
            return []

        vocabulary = build_vocabulary(
            sentences,
            punctuation=self._punctuation,
            valid_punctuation=config.valid_punctuation,
        )
        contexts = build_contexts(sentences, window_size=config.window_size)
        features = extract_features(sentences, vocabulary, contexts, stopwords=self._stopwords)
        logger.debug("Computed features for %d terms", len(features))

        weighted = weight_candidates(selected, features, contexts)
        results = rank_phrases(
            weighted,
            top_n=limit,
            remove_duplicates=config.remove_duplicates,
            dedupe_lim=config.dedupe_lim,
        )
        logger.debug("Returning %d keywords", len(results))
        return results


def extract_keywords(
    text: str,
    top_n: int | None = None,
    *,
    config: ExtractorConfig | None = None,
) -> List[ResultItem]:
    """Convenience wrapper around :class:`KeywordExtractor`."""

    return KeywordExtractor(config=config).extract(text, top_n)

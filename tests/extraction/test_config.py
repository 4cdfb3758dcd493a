"""Tests for keyword extraction configuration helpers."""
from __future__ import annotations

from pathlib import Path

import pytest

from keyphrase.extraction.config import (
    ExtractorConfig,
    load_extractor_config,
)
from keyphrase.extraction.extractor import KeywordExtractor
from keyphrase.extraction.stopwords import DEFAULT_STOPWORDS, load_stopwords


def test_load_extractor_config_accepts_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "keywords.yaml"
    config_path.write_text(
        "keywords:\n  ngram_size: 2\n  remove_duplicates: 'no'\n  dedupe_lim: 0.9\n",
        encoding="utf-8",
    )

    config = load_extractor_config(config_path)

    assert config.ngram_size == 2
    assert config.remove_duplicates is False
    assert config.dedupe_lim == pytest.approx(0.9)
    assert config.top_n == 10


def test_load_extractor_config_accepts_flat_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "keywords.yaml"
    config_path.write_text("top_n: '5'\nonly_alphanumeric: true\n", encoding="utf-8")

    config = load_extractor_config(config_path)

    assert config.top_n == 5
    assert config.only_alphanumeric is True


def test_load_extractor_config_rejects_non_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "invalid.yaml"
    config_path.write_text("- not a mapping\n- another entry\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must be a mapping"):
        load_extractor_config(config_path)


def test_load_extractor_config_rejects_unknown_keys(tmp_path: Path) -> None:
    config_path = tmp_path / "keywords.yaml"
    config_path.write_text("ngram: 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Unknown keyword extraction settings: ngram"):
        load_extractor_config(config_path)


def test_load_extractor_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_extractor_config(tmp_path / "missing.yaml")


def test_default_config_used_when_no_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KEYPHRASE_DATA_DIR", str(tmp_path))

    assert load_extractor_config(None) == ExtractorConfig()

    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "keywords.yaml").write_text("window_size: 3\n", encoding="utf-8")
    assert load_extractor_config(None).window_size == 3

    (tmp_path / "config" / "keywords.yaml").write_text("window_size: zero\n", encoding="utf-8")
    with pytest.raises(ValueError, match="window_size"):
        load_extractor_config(None)


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"ngram_size": 0}, "ngram_size"),
        ({"window_size": 0}, "window_size"),
        ({"top_n": -1}, "top_n"),
        ({"dedupe_lim": 1.5}, "dedupe_lim"),
    ],
)
def test_extractor_config_validation(overrides: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        ExtractorConfig(**overrides)


def test_stopwords_path_is_resolved_and_loaded(tmp_path: Path) -> None:
    (tmp_path / "stop.txt").write_text("# custom list\nKaggle\n\ngoogle\n", encoding="utf-8")
    config_path = tmp_path / "keywords.yaml"
    config_path.write_text("stopwords_path: stop.txt\n", encoding="utf-8")

    config = load_extractor_config(config_path)
    extractor = KeywordExtractor(config=config)

    assert config.stopwords_path == tmp_path / "stop.txt"
    assert extractor.stopwords == frozenset({"kaggle", "google"})
    assert load_stopwords(tmp_path / "stop.txt") == frozenset({"kaggle", "google"})


def test_default_stopwords_are_lowercase() -> None:
    assert "the" in DEFAULT_STOPWORDS
    assert all(word == word.lower() for word in DEFAULT_STOPWORDS)

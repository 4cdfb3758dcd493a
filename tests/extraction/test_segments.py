"""Tests for sentence and word segmentation."""
from __future__ import annotations

from keyphrase.extraction.segments import is_url, split_sentences, split_word_bounds


def test_split_sentences_breaks_before_capitalized_sentences() -> None:
    text = "Google buys Kaggle. The deal closed! it was quick."

    sentences = split_sentences(text)

    assert sentences == ["Google buys Kaggle.", "The deal closed! it was quick."]


def test_split_sentences_breaks_at_line_joined_sentences() -> None:
    text = "Kaggle hosts competitions.\nWith Kaggle Google grows."

    assert split_sentences(text) == ["Kaggle hosts competitions.", "With Kaggle Google grows."]
    assert split_sentences("Version 2.Next release") == ["Version 2.Next release"]


def test_split_sentences_removes_control_characters() -> None:
    text = "  Line one\ncontinues\there.\r\n  "

    assert split_sentences(text) == ["Line onecontinueshere."]


def test_split_sentences_empty_and_whitespace() -> None:
    assert split_sentences("") == []
    assert split_sentences(" \n\t ") == []


def test_split_word_bounds_keeps_mid_word_punctuation() -> None:
    tokens = split_word_bounds("Kaggle's $100,000 deal, valued at 12.75 (co-founder) a:b.")

    assert tokens == [
        "Kaggle's",
        "$",
        "100,000",
        "deal",
        ",",
        "valued",
        "at",
        "12.75",
        "(",
        "co",
        "-",
        "founder",
        ")",
        "a:b",
        ".",
    ]


def test_split_word_bounds_keeps_urls_whole() -> None:
    tokens = split_word_bounds("See https://example.com/path today.")

    assert tokens == ["See", "https://example.com/path", "today", "."]
    assert is_url("https://example.com/path")
    assert is_url("www.example.org")
    assert not is_url("example")

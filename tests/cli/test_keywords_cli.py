"""Tests for the keyword extraction command line."""
from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from main import build_extract_parser, extract_cli, main

TEXT = (
    "Google is acquiring data science community Kaggle. "
    "Sources tell us that Google is acquiring Kaggle, a platform that hosts "
    "data science and machine learning competitions."
)


def test_extract_cli_outputs_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    input_path = tmp_path / "article.txt"
    input_path.write_text(TEXT, encoding="utf-8")

    exit_code = main(["extract", "--input", str(input_path), "--top", "3", "--output-format", "json"])

    assert exit_code == 0
    out, _ = capsys.readouterr()
    payload = json.loads(out)
    assert payload["metadata"]["source"] == str(input_path)
    assert payload["metadata"]["count"] == len(payload["keywords"]) == 3
    assert set(payload["keywords"][0]) == {"raw", "keyword", "score"}


def test_extract_cli_text_output(capsys: pytest.CaptureFixture[str]) -> None:
    parser = build_extract_parser()
    args = parser.parse_args(["--text", TEXT, "--top", "2", "--no-dedupe"])

    assert extract_cli(args) == 0

    out, _ = capsys.readouterr()
    lines = out.strip().splitlines()
    assert len(lines) == 2
    score, raw = lines[0].split("\t")
    assert float(score) >= 0.0
    assert raw


def test_extract_cli_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert main([]) == 0

    out, _ = capsys.readouterr()
    assert "No keywords found." in out


def test_extract_cli_rejects_invalid_ngram(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--text", TEXT, "--ngram", "0"]) == 1

    _, err = capsys.readouterr()
    assert err.startswith("error: ")
    assert "ngram_size" in err


def test_extract_cli_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--input", str(tmp_path / "missing.txt")]) == 1

    _, err = capsys.readouterr()
    assert "does not exist" in err


def test_extract_cli_custom_stopwords(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    stopwords = tmp_path / "stop.txt"
    stopwords.write_text("kaggle\n", encoding="utf-8")

    assert main(["--text", TEXT, "--stopwords", str(stopwords), "--output-format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert all("kaggle" not in item["keyword"] for item in payload["keywords"])

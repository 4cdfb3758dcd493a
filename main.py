#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from keyphrase.extraction.config import load_extractor_config
from keyphrase.extraction.extractor import KeywordExtractor
from keyphrase.extraction.stopwords import load_stopwords

OUTPUT_TEXT = "text"
OUTPUT_JSON = "json"


def build_extract_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract the most significant keywords from a block of text.",
        prog="python -m main extract",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--input",
        type=Path,
        help="Read text from this file (defaults to stdin).",
    )
    source.add_argument(
        "--text",
        help="Text to analyse, given inline.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Number of keywords to return (default controlled by configuration).",
    )
    parser.add_argument(
        "--ngram",
        type=int,
        default=None,
        help="Maximum number of words per keyword.",
    )
    parser.add_argument(
        "--dedupe",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Drop near-duplicate keywords (default controlled by configuration).",
    )
    parser.add_argument(
        "--stopwords",
        type=Path,
        help="File with one stopword per line, replacing the built-in list.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a keyword YAML config (default: config/keywords.yaml when present).",
    )
    parser.add_argument(
        "--output-format",
        choices=(OUTPUT_TEXT, OUTPUT_JSON),
        default=OUTPUT_TEXT,
        help="Output format for the results.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log pipeline progress to stderr.",
    )
    return parser


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.input is not None:
        resolved = args.input.expanduser()
        if not resolved.exists():
            raise FileNotFoundError(f"Input file '{resolved}' does not exist")
        return resolved.read_text(encoding="utf-8")
    return sys.stdin.read()


def extract_cli(args: argparse.Namespace) -> int:
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_extractor_config(args.config)
        stopwords = load_stopwords(args.stopwords) if args.stopwords else None
        extractor = KeywordExtractor(
            args.ngram,
            args.dedupe,
            stopwords=stopwords,
            config=config,
        )
        text = _read_text(args)
        results = extractor.extract(text, args.top)
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output_format == OUTPUT_JSON:
        payload = {
            "keywords": [item.to_dict() for item in results],
            "metadata": {
                "source": str(args.input) if args.input else ("<text>" if args.text is not None else "<stdin>"),
                "ngram_size": extractor.config.ngram_size,
                "remove_duplicates": extractor.config.remove_duplicates,
                "count": len(results),
            },
        }
        print(json.dumps(payload, indent=2))
        return 0

    if not results:
        print("No keywords found.")
        return 0
    for item in results:
        print(f"{item.score:.6f}\t{item.raw}")
    return 0


def main(argv: list[str] | None = None) -> int:
    raw_args = sys.argv[1:] if argv is None else argv

    if raw_args and raw_args[0] == "extract":
        raw_args = raw_args[1:]

    parser = build_extract_parser()
    try:
        args = parser.parse_args(raw_args)
    except argparse.ArgumentError as exc:
        parser.error(str(exc))

    return extract_cli(args)


if __name__ == "__main__":
    raise SystemExit(main())

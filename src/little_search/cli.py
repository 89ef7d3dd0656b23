"""Command-line entry point: build a keyword index and run top-5 queries.

Examples:
  little-search --docs-file docs.txt --noise-words-file noisewords.txt --query deep world
  little-search --docs-file docs.txt --noise-words-file noisewords.txt -q cat dog -q rain sun --json
"""

# ruff: noqa: T201  # CLI intentionally prints results

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path
import sys
import textwrap

import orjson
from pydantic import ValidationError

from little_search.config import Settings
from little_search.engine import LittleSearchEngine
from little_search.errors import SourceNotFoundError
from little_search.observability.logging import configure_logging
from little_search.observability.metrics import get_metrics
from little_search.observability.tracing import init_tracing


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="little-search",
        description="Index a document corpus and answer two-keyword OR queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(
            """
            Settings fall back to LITTLE_SEARCH_* environment variables, e.g.
              LITTLE_SEARCH_DOCS_FILE=docs.txt LITTLE_SEARCH_NOISE_WORDS_FILE=noisewords.txt \\
                little-search -q cat dog
            """
        ).strip(),
    )
    parser.add_argument("--docs-file", type=Path, help="File listing the document names to index")
    parser.add_argument("--noise-words-file", type=Path, help="File listing noise words")
    parser.add_argument(
        "--docs-root",
        type=Path,
        help="Directory the document names are resolved against (default: directory of --docs-file)",
    )
    parser.add_argument(
        "-q",
        "--query",
        dest="queries",
        nargs=2,
        action="append",
        metavar=("KEYWORD1", "KEYWORD2"),
        default=None,
        help="Keyword pair to search for. Pass multiple times for several queries",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--metrics", action="store_true", help="Print Prometheus metrics after the queries")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--log-json", action="store_true", default=None, help="Emit structured JSON logs")
    parser.add_argument("--trace", action="store_true", default=None, help="Write finished spans to stderr")
    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    overrides = {
        "docs_file": args.docs_file,
        "noise_words_file": args.noise_words_file,
        "docs_root": args.docs_root,
        "log_level": args.log_level,
        "log_json": args.log_json,
        "tracing_enabled": args.trace,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = _load_settings(args)
    except ValidationError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 2

    if settings.docs_file is None or settings.noise_words_file is None:
        parser.error("--docs-file and --noise-words-file are required (or set LITTLE_SEARCH_* variables)")

    configure_logging(settings.log_level, json_output=settings.log_json)
    if settings.tracing_enabled:
        init_tracing(console_export=True)

    engine = LittleSearchEngine(settings.resolve_docs_root())
    try:
        engine.make_index(settings.docs_file, settings.noise_words_file)
    except SourceNotFoundError as exc:
        print(f"Index build failed: {exc}", file=sys.stderr)
        return 1

    responses = []
    for keyword1, keyword2 in args.queries or []:
        keyword1, keyword2 = keyword1.lower(), keyword2.lower()
        responses.append({"keywords": [keyword1, keyword2], "documents": engine.search(keyword1, keyword2)})

    if args.json:
        print(orjson.dumps(responses, option=orjson.OPT_INDENT_2).decode("utf-8"))
    else:
        for response in responses:
            keyword1, keyword2 = response["keywords"]
            documents = response["documents"]
            print(f"{keyword1} OR {keyword2}: {', '.join(documents) if documents else '(no matches)'}")

    if args.metrics:
        print(get_metrics().decode("utf-8"), end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())

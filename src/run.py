from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence

from namechain.codec import load_chain
from namechain.corpus import iter_stream
from namechain.loader import load_model
from namechain.scoring import score_words
from namechain.settings import load_settings
from namechain.trie import MalformedTrie, MarkovChain

from log_helpers import attach_library_logging, log, log_verbose

DEFAULT_THRESHOLD = 0.05

DIAGNOSTIC_WORDS: tuple[str, ...] = (
    "url",
    "json",
    "my_property",
    "ordinary",
    "different",
    "189512",
    "2BTZIqw0ntH9MvilQ3ewNY",
    "0uBTNdNGb2OY5lou41iYL52LcDq2",
    "-KpqHmWuDOUnr1hmAhxp",
    "granularity",
    "coverage",
    "postingFrequency",
    "dataFrequency",
    "units",
    "datasetOwner",
    "organization",
    "timePeriod",
    "contactInformation",
    "\U0001F6BE \U0001F192 \U0001F193 \U0001F195 \U0001F196 \U0001F197 \U0001F199 \U0001F3E7",
)


def build_parser(default_threshold: float) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score how natural identifiers look under a trained n-gram chain."
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Words to score. Without words (and without --stdin) a built-in diagnostic list is used.",
    )
    parser.add_argument(
        "--model",
        help="Encoded chain file produced by train.py --output (default: NAMECHAIN_MODEL_PATH or the embedded chain).",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=default_threshold,
        help="Scores below this value are flagged as implausible (default: %(default)s).",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read additional words from STDIN, one per line.",
    )
    return parser


def format_score_line(word: str, score: float, threshold: float) -> str:
    marker = "  <- implausible" if score < threshold else ""
    return f'"{word}": {score}{marker}'


def report_scores(chain: MarkovChain, words: Iterable[str], threshold: float) -> list[tuple[str, float]]:
    scored = score_words(chain, words)
    for word, score in scored:
        log(format_score_line(word, score, threshold), prefix=False)
    return scored


def main(argv: Sequence[str] | None = None) -> None:
    try:
        settings = load_settings()
    except (OSError, ValueError) as exc:
        build_parser(DEFAULT_THRESHOLD).error(f"Invalid settings: {exc}")
    parser = build_parser(settings.threshold)
    args = parser.parse_args(argv)
    attach_library_logging()
    log_verbose(3, f"[run:v3] Parsed CLI arguments: {vars(args)}")
    if not 0.0 <= args.threshold <= 1.0:
        parser.error(f"--threshold must be within [0, 1] (got {args.threshold})")

    try:
        chain = load_chain(args.model) if args.model else load_model(settings)
    except (OSError, ValueError) as exc:
        parser.error(f"Unable to load chain: {exc}")
    log_verbose(2, f"[run:v2] Loaded depth={chain.depth} chain ({chain.root.count} observation(s))")

    words = list(args.words)
    if args.stdin:
        words.extend(iter_stream(sys.stdin))
    if not words:
        words = list(DIAGNOSTIC_WORDS)

    try:
        report_scores(chain, words, args.threshold)
    except MalformedTrie as exc:
        parser.error(f"Chain is corrupt: {exc}")


if __name__ == "__main__":
    main()

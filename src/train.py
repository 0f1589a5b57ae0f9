from __future__ import annotations

import argparse
import itertools
import sys
import time
from pathlib import Path
from typing import Callable, Iterable, TypeVar

from namechain.codec import encode, render_module, save_chain
from namechain.corpus import collect_files, iter_lines, iter_stream
from namechain.settings import load_settings
from namechain.trainer import train
from namechain.trie import MarkovChain

from helpers.resource_monitor import ResourceMonitor
from log_helpers import attach_library_logging, log, log_verbose

EMBEDDED_MODULE_PATH = Path(__file__).resolve().parent / "namechain" / "embedded_model.py"

DEFAULT_DEPTH = 3
DEFAULT_ENCODING = "utf-8"

T = TypeVar("T")


def build_parser(default_depth: int, default_encoding: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Train a character n-gram chain from identifier corpora and export it."
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        help="Corpus files (one token per line) or directories of *.txt files.",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=default_depth,
        help="N-gram order of the chain (default: %(default)s).",
    )
    parser.add_argument(
        "--encoding",
        default=default_encoding,
        help="File encoding used while reading corpora (default: %(default)s).",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read an additional corpus from STDIN.",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        help="When a directory is provided, recursively collect *.txt files.",
    )
    parser.add_argument(
        "--output",
        help="Write the encoded chain to this file.",
    )
    parser.add_argument(
        "--emit-module",
        nargs="?",
        const=str(EMBEDDED_MODULE_PATH),
        help=(
            "Regenerate the embedded model module. Without a value the packaged "
            "namechain/embedded_model.py is overwritten."
        ),
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Log CPU/RSS telemetry for the training pass.",
    )
    return parser


class TrainingProfiler:
    """Optional profiler that logs training latency together with resource telemetry."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled
        self.monitor = ResourceMonitor() if enabled else None

    def measure(self, label: str, fn: Callable[[], T]) -> T:
        if not self.monitor:
            return fn()
        before = self.monitor.snapshot()
        result = fn()
        after = self.monitor.snapshot()
        delta = self.monitor.delta(before, after)
        log(f"[profile] {label}: {delta.duration_sec:.2f}s {self.monitor.describe(delta)}")
        return result


def gather_lines(inputs: Iterable[str], recursive: bool, encoding: str, use_stdin: bool) -> Iterable[str]:
    files = collect_files(list(inputs), recursive)
    for path in files:
        log_verbose(3, f"[train:v3] Queued corpus file {path}")
    sources: list[Iterable[str]] = [iter_lines(files, encoding)]
    if use_stdin:
        sources.append(iter_stream(sys.stdin))
    return itertools.chain.from_iterable(sources)


def export_chain(chain: MarkovChain, output: str | None, module_path: str | None) -> None:
    if output:
        target = save_chain(chain, output)
        log(f"[train] Wrote encoded chain to {target}")
    if module_path:
        target = Path(module_path).expanduser()
        target.write_text(render_module(encode(chain)), encoding="utf-8")
        log(f"[train] Regenerated embedded model module {target}")
    if not output and not module_path:
        print(encode(chain))


def main(argv: list[str] | None = None) -> None:
    try:
        settings = load_settings()
    except (OSError, ValueError) as exc:
        build_parser(DEFAULT_DEPTH, DEFAULT_ENCODING).error(f"Invalid settings: {exc}")
    parser = build_parser(settings.depth, settings.corpus_encoding)
    args = parser.parse_args(argv)
    attach_library_logging()
    log_verbose(3, f"[train:v3] Parsed CLI arguments: {vars(args)}")

    if not args.inputs and not args.stdin:
        parser.error("Provide at least one input path or enable --stdin")
    if args.depth < 1:
        parser.error(f"--depth must be >= 1 (got {args.depth})")

    profiler = TrainingProfiler(args.profile)
    start = time.perf_counter()
    try:
        lines = gather_lines(args.inputs, args.recursive, args.encoding, args.stdin)
        # Corpus files are read lazily, so decoding errors surface while training.
        chain = profiler.measure("train", lambda: train(lines, args.depth))
    except (OSError, ValueError, LookupError) as exc:
        parser.error(f"Unable to read corpus: {exc}")
    log_verbose(
        1,
        f"[train] depth={chain.depth} chain built from {chain.root.count} window(s) "
        f"in {time.perf_counter() - start:.2f}s",
    )
    try:
        profiler.measure("export", lambda: export_chain(chain, args.output, args.emit_module))
    except OSError as exc:
        parser.error(f"Unable to write chain: {exc}")


if __name__ == "__main__":
    main()

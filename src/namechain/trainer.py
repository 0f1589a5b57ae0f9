from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .trie import MarkovChain, create_empty, increment_path

logger = logging.getLogger(__name__)

__all__ = ["check_depth", "iter_windows", "train", "window_count"]


def check_depth(depth: int) -> int:
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
        raise ValueError(f"depth must be a positive integer (got {depth!r})")
    return depth


def window_count(text: str, depth: int) -> int:
    return max(0, len(text) - depth + 1)


def iter_windows(text: str, depth: int) -> Iterator[str]:
    """Yield every contiguous substring of exactly ``depth`` characters, left to right."""
    for end in range(depth, len(text) + 1):
        yield text[end - depth : end]


def train(lines: Iterable[str], depth: int) -> MarkovChain:
    """Build a chain of order ``depth``; lines shorter than ``depth`` are ignored."""
    check_depth(depth)
    root = create_empty()
    line_count = 0
    for line in lines:
        line_count += 1
        for ngram in iter_windows(line, depth):
            increment_path(root, ngram)
    logger.debug(
        "trained depth=%d chain from %d line(s), %d window(s)", depth, line_count, root.count
    )
    return MarkovChain(root=root, depth=depth)

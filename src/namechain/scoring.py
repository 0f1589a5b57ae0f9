from __future__ import annotations

import math
from typing import Iterable, List, Tuple

from .trainer import iter_windows
from .trie import MarkovChain, query_path

SMOOTHING_FLOOR = 0.0001

__all__ = ["SMOOTHING_FLOOR", "evaluate", "score_words", "window_probabilities"]


def window_probabilities(chain: MarkovChain, word: str) -> List[float]:
    """Per-window probabilities, with unseen n-grams replaced by ``SMOOTHING_FLOOR``."""
    probabilities: list[float] = []
    for ngram in iter_windows(word, chain.depth):
        probability = query_path(chain.root, ngram)
        if probability is None or probability <= 0.0:
            probability = SMOOTHING_FLOOR
        probabilities.append(probability)
    return probabilities


def evaluate(chain: MarkovChain, word: str) -> float:
    """
    Score how plausible ``word`` looks under ``chain``, in (0, 1].

    Words shorter than the chain depth carry no evidence and score 1. Otherwise
    the result is the geometric mean of the window probabilities, so the score
    does not shrink just because a word is long.
    """
    if len(word) < chain.depth:
        return 1.0
    probabilities = window_probabilities(chain, word)
    log_total = math.fsum(math.log(probability) for probability in probabilities)
    return math.exp(log_total / len(probabilities))


def score_words(chain: MarkovChain, words: Iterable[str]) -> List[Tuple[str, float]]:
    return [(word, evaluate(chain, word)) for word in words]

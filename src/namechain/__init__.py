"""
Character n-gram plausibility scoring for identifiers.

A fixed-order frequency trie is trained on real-world tokens (property and
variable names, dictionary words) and used to tell natural-looking names apart
from random or machine-generated strings:

    >>> from namechain import load, evaluate
    >>> evaluate(load(), "timePeriod") > evaluate(load(), "2BTZIqw0ntH9MvilQ3ewNY")
    True
"""

from .codec import decode, encode
from .loader import load, load_model
from .scoring import SMOOTHING_FLOOR, evaluate, score_words
from .trainer import train
from .trie import MalformedTrie, MarkovChain

__all__ = [
    "MalformedTrie",
    "MarkovChain",
    "SMOOTHING_FLOOR",
    "decode",
    "encode",
    "evaluate",
    "load",
    "load_model",
    "score_words",
    "train",
]

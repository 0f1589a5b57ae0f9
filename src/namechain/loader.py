from __future__ import annotations

import logging

from .codec import decode, load_chain
from .embedded_model import ENCODED_MARKOV_CHAIN
from .settings import NamechainSettings
from .trie import MarkovChain

logger = logging.getLogger(__name__)

__all__ = ["load", "load_model"]


def load() -> MarkovChain:
    """Decode the chain shipped with the package. Every call returns an independent trie."""
    return decode(ENCODED_MARKOV_CHAIN)


def load_model(settings: NamechainSettings) -> MarkovChain:
    path = settings.resolved_model_path()
    if path is None:
        return load()
    logger.debug("loading chain from %s", path)
    return load_chain(path)

"""
Fixed-order character frequency trie.

Every path of length ``depth`` from the root records how often that exact
character sequence was observed. Nodes hold exactly ``ALPHABET_SIZE`` slots;
a slot is empty (``None``), a leaf count (``int``) on the final level, or a
child ``TrieNode`` on every level above it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

ALPHABET_SIZE = 128
NON_ASCII_BUCKET = 0

__all__ = [
    "ALPHABET_SIZE",
    "NON_ASCII_BUCKET",
    "MalformedTrie",
    "MarkovChain",
    "TrieNode",
    "bucket_index",
    "create_empty",
    "increment_path",
    "query_path",
]


class MalformedTrie(ValueError):
    """Raised when a slot holds a variant its trie level does not allow."""


def bucket_index(char: str) -> int:
    """
    Map a character to its slot index.

    ASCII characters keep their code point. Everything else shares
    ``NON_ASCII_BUCKET``, so statistics for all non-ASCII characters are merged.
    """
    # Counts Unicode code points; an astral character such as an emoji is one
    # character here, not a UTF-16 surrogate pair.
    code = ord(char)
    if code >= ALPHABET_SIZE:
        return NON_ASCII_BUCKET
    return code


@dataclass
class TrieNode:
    count: int = 0
    slots: List["Slot"] = field(default_factory=lambda: [None] * ALPHABET_SIZE)


Slot = Union[None, int, TrieNode]


@dataclass(frozen=True)
class MarkovChain:
    root: TrieNode
    depth: int


def create_empty() -> TrieNode:
    return TrieNode()


def _is_leaf(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _check_ngram(ngram: str) -> None:
    if not ngram:
        raise ValueError("n-gram must contain at least one character")


def increment_path(root: TrieNode, ngram: str) -> None:
    """
    Record one observation of ``ngram``, creating intermediate nodes lazily.

    Counts are only updated once the whole path has been validated, so a
    ``MalformedTrie`` leaves every count untouched.
    """
    _check_ngram(ngram)
    node = root
    visited: list[TrieNode] = []
    last = len(ngram) - 1
    for level, char in enumerate(ngram):
        index = bucket_index(char)
        slot = node.slots[index]
        visited.append(node)
        if level == last:
            if slot is None:
                slot = 0
            elif not _is_leaf(slot):
                raise MalformedTrie(f"expected leaf count at level {level}, found {type(slot).__name__}")
            node.slots[index] = slot + 1
            break
        if slot is None:
            slot = create_empty()
            node.slots[index] = slot
        elif not isinstance(slot, TrieNode):
            raise MalformedTrie(f"expected child node at level {level}, found {type(slot).__name__}")
        node = slot
    for seen in visited:
        seen.count += 1


def query_path(root: TrieNode, ngram: str) -> float | None:
    """
    Return P(last char | preceding chars) for ``ngram``.

    ``None`` means the n-gram was never observed; that is not an error.
    """
    _check_ngram(ngram)
    node = root
    last = len(ngram) - 1
    for level, char in enumerate(ngram):
        slot = node.slots[bucket_index(char)]
        if slot is None:
            return None
        if level == last:
            if not _is_leaf(slot):
                raise MalformedTrie(f"expected leaf count at level {level}, found {type(slot).__name__}")
            if node.count <= 0:
                raise MalformedTrie(f"leaf populated under a node with count {node.count}")
            return slot / node.count
        if not isinstance(slot, TrieNode):
            raise MalformedTrie(f"expected child node at level {level}, found {type(slot).__name__}")
        node = slot
    return None

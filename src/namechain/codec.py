"""
Transport form of a trained chain.

The chain is written as compact JSON
``{"root": {"count": int, "arr": [null | int | {...}, ...]}, "depth": int}``,
compressed with zlib and wrapped in base64 so the result can be embedded in
source files or configuration.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import textwrap
import zlib
from pathlib import Path
from typing import Any, Dict

from .trie import ALPHABET_SIZE, MalformedTrie, MarkovChain, TrieNode

logger = logging.getLogger(__name__)

COMPRESSION_LEVEL = 9
MODULE_LINE_WIDTH = 76

__all__ = [
    "chain_from_payload",
    "chain_to_payload",
    "decode",
    "encode",
    "load_chain",
    "render_module",
    "save_chain",
]


def _node_to_payload(node: TrieNode) -> Dict[str, Any]:
    arr: list[Any] = []
    for slot in node.slots:
        if isinstance(slot, TrieNode):
            arr.append(_node_to_payload(slot))
        else:
            arr.append(slot)
    return {"count": node.count, "arr": arr}


def chain_to_payload(chain: MarkovChain) -> Dict[str, Any]:
    return {"root": _node_to_payload(chain.root), "depth": chain.depth}


def _node_from_payload(raw: Any) -> TrieNode:
    # Slot variants are checked lazily by the traversal functions; only the
    # node shape itself has to be rebuildable here.
    if not isinstance(raw, dict):
        raise MalformedTrie(f"trie node must be an object, found {type(raw).__name__}")
    count = raw.get("count")
    arr = raw.get("arr")
    if isinstance(count, bool) or not isinstance(count, int):
        raise MalformedTrie(f"trie node count must be an integer, found {count!r}")
    if not isinstance(arr, list) or len(arr) != ALPHABET_SIZE:
        raise MalformedTrie(f"trie node arr must be a list of {ALPHABET_SIZE} slots")
    slots = [_node_from_payload(entry) if isinstance(entry, dict) else entry for entry in arr]
    return TrieNode(count=count, slots=slots)


def chain_from_payload(payload: Any) -> MarkovChain:
    if not isinstance(payload, dict):
        raise MalformedTrie("encoded chain must be a JSON object")
    depth = payload.get("depth")
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
        raise MalformedTrie(f"chain depth must be a positive integer, found {depth!r}")
    # Older blobs name the root node "trie".
    raw_root = payload["root"] if "root" in payload else payload.get("trie")
    return MarkovChain(root=_node_from_payload(raw_root), depth=depth)


def encode(chain: MarkovChain) -> str:
    serialized = json.dumps(chain_to_payload(chain), separators=(",", ":"))
    compressed = zlib.compress(serialized.encode("utf-8"), COMPRESSION_LEVEL)
    encoded = base64.b64encode(compressed).decode("ascii")
    logger.debug(
        "encoded depth=%d chain: %d JSON bytes -> %d compressed -> %d chars",
        chain.depth,
        len(serialized),
        len(compressed),
        len(encoded),
    )
    return encoded


def decode(text: str) -> MarkovChain:
    cleaned = "".join(text.split())
    try:
        compressed = base64.b64decode(cleaned.encode("ascii"), validate=True)
        serialized = zlib.decompress(compressed)
        payload = json.loads(serialized.decode("utf-8"))
    except (ValueError, binascii.Error, zlib.error) as exc:
        raise MalformedTrie(f"unable to decode chain: {exc}") from exc
    chain = chain_from_payload(payload)
    logger.debug("decoded depth=%d chain with %d observation(s)", chain.depth, chain.root.count)
    return chain


def save_chain(chain: MarkovChain, path: str | Path) -> Path:
    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(encode(chain) + "\n", encoding="ascii")
    return target


def load_chain(path: str | Path) -> MarkovChain:
    target = Path(path).expanduser()
    try:
        text = target.read_text(encoding="ascii")
    except UnicodeDecodeError as exc:
        raise MalformedTrie(f"{target} does not hold an encoded chain: {exc}") from exc
    return decode(text)


def render_module(encoded: str) -> str:
    """Return the source of ``embedded_model.py`` carrying ``encoded``."""
    chunks = textwrap.wrap(encoded, MODULE_LINE_WIDTH) or [""]
    body = "\n".join(f'    "{chunk}"' for chunk in chunks)
    return (
        "# Generated by src/train.py --emit-module; do not edit by hand.\n"
        "\n"
        f"ENCODED_MARKOV_CHAIN = (\n{body}\n)\n"
    )

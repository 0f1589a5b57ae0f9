from __future__ import annotations

import unittest

from namechain.trie import (
    ALPHABET_SIZE,
    NON_ASCII_BUCKET,
    MalformedTrie,
    TrieNode,
    bucket_index,
    create_empty,
    increment_path,
    query_path,
)

from trie_checks import assert_counts_consistent


class BucketIndexTests(unittest.TestCase):
    def test_ascii_keeps_code_point(self) -> None:
        self.assertEqual(bucket_index("a"), 97)
        self.assertEqual(bucket_index("_"), 95)
        self.assertEqual(bucket_index("\x7f"), 127)
        self.assertEqual(bucket_index("\x00"), 0)

    def test_non_ascii_collapses_into_shared_bucket(self) -> None:
        self.assertEqual(bucket_index("\xe9"), NON_ASCII_BUCKET)
        self.assertEqual(bucket_index("ÿ"), NON_ASCII_BUCKET)
        self.assertEqual(bucket_index("\U0001F6BE"), NON_ASCII_BUCKET)


class TrieStoreTests(unittest.TestCase):
    def test_create_empty(self) -> None:
        node = create_empty()
        self.assertEqual(node.count, 0)
        self.assertEqual(len(node.slots), ALPHABET_SIZE)
        self.assertTrue(all(slot is None for slot in node.slots))

    def test_increment_creates_nodes_lazily(self) -> None:
        root = create_empty()
        increment_path(root, "ab")
        child = root.slots[ord("a")]
        self.assertIsInstance(child, TrieNode)
        self.assertEqual(child.slots[ord("b")], 1)
        self.assertEqual(child.count, 1)
        self.assertEqual(root.count, 1)
        populated = [index for index, slot in enumerate(root.slots) if slot is not None]
        self.assertEqual(populated, [ord("a")])

    def test_query_returns_conditional_frequency(self) -> None:
        root = create_empty()
        for ngram in ("ab", "ab", "ab", "ac", "xy"):
            increment_path(root, ngram)
        self.assertEqual(query_path(root, "ab"), 0.75)
        self.assertEqual(query_path(root, "ac"), 0.25)
        self.assertEqual(query_path(root, "xy"), 1.0)
        assert_counts_consistent(self, root, 2)

    def test_query_unobserved_is_absent(self) -> None:
        root = create_empty()
        increment_path(root, "abc")
        self.assertIsNone(query_path(root, "abd"))
        self.assertIsNone(query_path(root, "zzz"))
        self.assertIsNone(query_path(create_empty(), "abc"))

    def test_non_ascii_statistics_are_merged(self) -> None:
        root = create_empty()
        increment_path(root, "a\xe9")
        increment_path(root, "a\xfc")
        self.assertEqual(root.slots[ord("a")].slots[NON_ASCII_BUCKET], 2)
        self.assertEqual(query_path(root, "a\xf1"), 1.0)

    def test_empty_ngram_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            increment_path(create_empty(), "")
        with self.assertRaises(ValueError):
            query_path(create_empty(), "")


class MalformedTrieTests(unittest.TestCase):
    def test_leaf_on_internal_level(self) -> None:
        root = create_empty()
        root.slots[ord("a")] = 5
        root.count = 5
        with self.assertRaises(MalformedTrie):
            increment_path(root, "ab")
        with self.assertRaises(MalformedTrie):
            query_path(root, "ab")

    def test_node_on_final_level(self) -> None:
        root = create_empty()
        child = create_empty()
        child.slots[ord("b")] = create_empty()
        child.count = 1
        root.slots[ord("a")] = child
        with self.assertRaises(MalformedTrie):
            query_path(root, "ab")
        with self.assertRaises(MalformedTrie):
            increment_path(root, "ab")

    def test_failed_increment_leaves_counts_unchanged(self) -> None:
        root = create_empty()
        increment_path(root, "ab")
        child = root.slots[ord("a")]
        child.slots[ord("c")] = create_empty()
        with self.assertRaises(MalformedTrie):
            increment_path(root, "ac")
        self.assertEqual(root.count, 1)
        self.assertEqual(child.count, 1)
        self.assertEqual(child.slots[ord("b")], 1)

    def test_failed_increment_on_deep_path(self) -> None:
        root = create_empty()
        increment_path(root, "abc")
        root.slots[ord("a")].slots[ord("x")] = 7
        with self.assertRaises(MalformedTrie):
            increment_path(root, "axy")
        self.assertEqual(root.count, 1)
        self.assertEqual(root.slots[ord("a")].count, 1)

    def test_non_integer_leaf(self) -> None:
        root = create_empty()
        root.count = 1
        for bad in (True, "1", 1.5, -1):
            root.slots[ord("a")] = bad
            with self.assertRaises(MalformedTrie):
                query_path(root, "a")

    def test_leaf_under_zero_count(self) -> None:
        root = create_empty()
        root.slots[ord("a")] = 2
        with self.assertRaises(MalformedTrie):
            query_path(root, "a")


if __name__ == "__main__":
    unittest.main()

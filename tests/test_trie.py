import unittest

from product_search.trie import Trie


class TrieTests(unittest.TestCase):
    def setUp(self) -> None:
        self.trie = Trie()

    def test_insert_and_search(self) -> None:
        self.trie.insert("apple", 1)
        self.trie.insert("apple", 3)
        self.trie.insert("pie", 1)

        self.assertEqual(frozenset({1, 3}), self.trie.search("apple"))
        self.assertEqual(frozenset({1}), self.trie.search("pie"))

    def test_search_is_case_insensitive(self) -> None:
        self.trie.insert("Apple", 7)
        self.assertEqual(frozenset({7}), self.trie.search("APPLE"))
        self.assertEqual(frozenset({7}), self.trie.search("apple"))

    def test_prefix_is_not_a_match(self) -> None:
        self.trie.insert("apple", 1)
        self.assertEqual(frozenset(), self.trie.search("app"))
        self.assertEqual(frozenset(), self.trie.search("apples"))

    def test_missing_and_empty_words(self) -> None:
        self.trie.insert("apple", 1)
        self.assertEqual(frozenset(), self.trie.search("banana"))
        self.assertEqual(frozenset(), self.trie.search(""))
        self.assertFalse(self.trie.root.terminal)

    def test_insert_empty_word_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.trie.insert("", 1)

    def test_reinsert_leaves_structure_unchanged(self) -> None:
        self.trie.insert("pie", 2)
        nodes, terms = self.trie.node_count, self.trie.term_count
        self.trie.insert("PIE", 2)

        self.assertEqual(nodes, self.trie.node_count)
        self.assertEqual(terms, self.trie.term_count)
        self.assertEqual(frozenset({2}), self.trie.search("pie"))

    def test_counters_track_shared_prefixes(self) -> None:
        self.trie.insert("car", 1)
        self.trie.insert("cart", 1)
        self.trie.insert("cat", 2)

        # root + c, a, r, t, t
        self.assertEqual(6, self.trie.node_count)
        self.assertEqual(3, self.trie.term_count)

    def test_child_keys_match_edges(self) -> None:
        self.trie.insert("ab", 1)
        node_a = self.trie.root.children["a"]
        node_b = node_a.children["b"]

        self.assertEqual(["a"], list(self.trie.root.children))
        self.assertFalse(node_a.terminal)
        self.assertEqual(set(), node_a.postings)
        self.assertTrue(node_b.terminal)
        self.assertEqual({1}, node_b.postings)

    def test_search_result_cannot_mutate_postings(self) -> None:
        self.trie.insert("milk", 4)
        result = self.trie.search("milk")
        with self.assertRaises(AttributeError):
            result.add(5)  # type: ignore[attr-defined]
        self.assertEqual(frozenset({4}), self.trie.search("milk"))

    def test_search_does_not_grow_trie(self) -> None:
        self.trie.insert("milk", 4)
        before = self.trie.node_count
        self.trie.search("milkshake")
        self.trie.search("zebra")
        self.assertEqual(before, self.trie.node_count)
        self.assertNotIn("z", self.trie.root.children)

    def test_contains(self) -> None:
        self.trie.insert("&", 1)
        self.assertIn("&", self.trie)
        self.assertNotIn("and", self.trie)

    def test_non_ascii_characters_kept(self) -> None:
        self.trie.insert("Éclair", 1)
        self.assertEqual(frozenset({1}), self.trie.search("ÉCLAIR"))
        self.assertEqual(frozenset(), self.trie.search("éclair"))


if __name__ == "__main__":
    unittest.main()

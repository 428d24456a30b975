"""
Character trie mapping terms to the document ids that contain them.

Each edge consumes one character of a case-folded term. A node that ends an
inserted term is marked terminal and carries the postings for that term; inner
nodes never hold postings. The trie only grows: there is no deletion and no
enumeration, so lookups are plain walks from the root.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional, Set

from .tokenize import fold_case


class TrieNode:
    __slots__ = ("children", "terminal", "postings")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.terminal = False
        self.postings: Set[int] = set()

    def child(self, char: str) -> Optional["TrieNode"]:
        return self.children.get(char)


class Trie:
    """Exact term storage and lookup."""

    def __init__(self) -> None:
        self.root = TrieNode()
        self._term_count = 0
        self._node_count = 1

    @property
    def term_count(self) -> int:
        """Number of globally distinct terms (terminal nodes)."""
        return self._term_count

    @property
    def node_count(self) -> int:
        """Number of nodes, root included."""
        return self._node_count

    def insert(self, word: str, doc_id: int) -> None:
        """Record that ``word`` appears in document ``doc_id``.

        The word is folded to ASCII lower case before insertion. Inserting the
        same pair twice leaves the trie unchanged after the first call.
        """
        if not word:
            raise ValueError("Cannot insert an empty word into the trie")

        node = self.root
        for char in fold_case(word):
            nxt = node.children.get(char)
            if nxt is None:
                nxt = TrieNode()
                node.children[char] = nxt
                self._node_count += 1
            node = nxt

        if not node.terminal:
            node.terminal = True
            self._term_count += 1
        node.postings.add(doc_id)

    def search(self, word: str) -> FrozenSet[int]:
        """Return the ids of documents containing exactly ``word``.

        Missing paths, non-terminal end nodes and the empty string all give an
        empty set. The result is a copy; callers cannot mutate the postings.
        """
        if not word:
            return frozenset()

        node = self.root
        for char in fold_case(word):
            node = node.child(char)
            if node is None:
                return frozenset()

        if node.terminal:
            return frozenset(node.postings)
        return frozenset()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and bool(self.search(word))

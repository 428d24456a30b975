"""In-memory keyword search over a product catalog."""

from .index import IndexStats, InvertedIndex
from .records import INDEXED_FIELDS, Product
from .tokenize import fold_case, tokenize
from .trie import Trie, TrieNode

__all__ = [
    "INDEXED_FIELDS",
    "IndexStats",
    "InvertedIndex",
    "Product",
    "Trie",
    "TrieNode",
    "fold_case",
    "tokenize",
]

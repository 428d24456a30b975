"""In-memory inverted index over product records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from .records import Product
from .tokenize import unique_tokens
from .trie import Trie

logger = logging.getLogger("product_search.index")


@dataclass(frozen=True)
class IndexStats:
    documents: int = 0
    # Per-record distinct-term sum, see InvertedIndex.total_indexed_terms.
    indexed_terms: int = 0
    # Globally distinct terms stored in the trie.
    unique_terms: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "documents": self.documents,
            "indexed_terms": self.indexed_terms,
            "unique_terms": self.unique_terms,
        }


class InvertedIndex:
    """Owns the trie and the document table; answers whole-word queries."""

    def __init__(self) -> None:
        self.trie = Trie()
        self._documents: Dict[int, Product] = {}
        self._indexed_terms = 0

    # ------------------------------------------------------------------ #
    # Ingestion

    def add_document(self, doc_id: int, product: Product) -> None:
        """Store ``product`` under ``doc_id`` and index its searchable fields.

        Re-using an id replaces the stored record but keeps the postings of
        the previous one; callers are expected to hand out fresh ids.
        """
        if doc_id in self._documents:
            logger.warning("Document id %d already indexed; replacing stored record", doc_id)
        self._documents[doc_id] = product

        distinct = 0
        for term in unique_tokens(product.indexed_text()):
            self.trie.insert(term, doc_id)
            distinct += 1

        self._indexed_terms += distinct
        logger.debug("Indexed document %d with %d distinct terms", doc_id, distinct)

    def add_documents(self, products: Iterable[Product]) -> List[int]:
        """Index ``products`` in order, assigning consecutive ids.

        Ids start at 1, or right after the highest id already present.
        """
        next_id = max(self._documents, default=0) + 1
        assigned: List[int] = []
        for product in products:
            self.add_document(next_id, product)
            assigned.append(next_id)
            next_id += 1
        return assigned

    # ------------------------------------------------------------------ #
    # Queries

    def search(self, word: str) -> List[Product]:
        """Return products containing ``word``, ordered by ascending id.

        The query is matched as a single term; it is not tokenized.
        """
        results: List[Product] = []
        for doc_id in sorted(self.trie.search(word)):
            product = self._documents.get(doc_id)
            if product is None:
                continue
            results.append(product)
        return results

    def total_indexed_terms(self) -> int:
        """Sum over all added records of their distinct-term counts.

        A term shared by two records counts twice; this is not the number of
        distinct terms in the trie (see ``stats().unique_terms`` for that).
        """
        return self._indexed_terms

    def get_document(self, doc_id: int) -> Optional[Product]:
        return self._documents.get(doc_id)

    @property
    def documents(self) -> Mapping[int, Product]:
        return MappingProxyType(self._documents)

    @property
    def is_empty(self) -> bool:
        return not self._documents

    def stats(self) -> IndexStats:
        return IndexStats(
            documents=len(self._documents),
            indexed_terms=self._indexed_terms,
            unique_terms=self.trie.term_count,
        )

    def __len__(self) -> int:
        return len(self._documents)

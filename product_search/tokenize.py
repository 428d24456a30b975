"""
Tokenization helpers for the product index.

The tokenizer keeps logic simple and deterministic so tests can rely on exact
token sequences. A fixed set of punctuation characters breaks tokens, ASCII
whitespace separates them, and everything else (including ``&``, ``-`` and
``$``) is kept as part of a token. Case is preserved here; folding happens at
the trie boundary through :func:`fold_case`.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional

# Exactly these characters are replaced by a space before splitting.
BREAK_CHARACTERS = ".,!?;:()[]{}\"'"
ASCII_WHITESPACE = " \t\n\x0b\f\r"

BREAK_PATTERN = re.compile("[" + re.escape(BREAK_CHARACTERS) + "]")
SPLIT_PATTERN = re.compile("[" + re.escape(ASCII_WHITESPACE) + "]+")

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def fold_case(word: str) -> str:
    """Lower-case ASCII letters only; every other character is kept as-is."""
    return word.translate(_ASCII_LOWER)


def iter_tokens(text: Optional[str]) -> Iterator[str]:
    """
    Yield tokens from the given text in input order.

    - Characters in ``BREAK_CHARACTERS`` become spaces.
    - Runs of ASCII whitespace separate tokens; empty fragments are skipped.
    - Falsy text values are treated as empty input.

    Example:
    >>> list(iter_tokens("Snacks & Candy (Family Size), $4.79"))
    ['Snacks', '&', 'Candy', 'Family', 'Size', '$4', '79']
    """
    cleaned = BREAK_PATTERN.sub(" ", text or "")
    for fragment in SPLIT_PATTERN.split(cleaned):
        token = fragment.strip(ASCII_WHITESPACE)
        if not token:
            continue
        yield token


def tokenize(text: Optional[str]) -> List[str]:
    """Return a list of tokens from ``text``."""
    return list(iter_tokens(text))


def unique_tokens(text: Optional[str]) -> Iterator[str]:
    """Yield distinct case-folded tokens in the order of first appearance."""
    seen = set()
    for token in iter_tokens(text):
        term = fold_case(token)
        if term in seen:
            continue
        seen.add(term)
        yield term

"""
CBOWLoader Tokenizer
=====================
Turns a raw string into the lowercase alphabetic words that the vocabulary
indexes. This is deliberately simple: every letter is lowercased, every
other character (digits, punctuation, whitespace, non-ASCII) becomes a
separator, and the result is split on runs of whitespace.

Example:
    "Hello, World! 42 cats" → ["hello", "world", "cats"]

Usage:
    >>> from cbowloader.data.tokenizer import normalize_and_split
    >>> normalize_and_split("The cat-sat.")
    ['the', 'cat', 'sat']
"""

from __future__ import annotations

import string

# Every ASCII letter maps to its lowercase form; everything else is a gap.
_LETTERS = frozenset(string.ascii_letters)


def _normalize_char(ch: str) -> str:
    return ch.lower() if ch in _LETTERS else " "


def normalize_and_split(text: str) -> list[str]:
    """
    Lowercase alphabetic characters, replace everything else with a
    separator, and split into words.

    Parameters
    ----------
    text : str
        Raw input text. May be empty.

    Returns
    -------
    list[str]
        Lowercase words in input order. Empty input yields [].
    """
    normalized = "".join(_normalize_char(ch) for ch in text)
    return normalized.split()

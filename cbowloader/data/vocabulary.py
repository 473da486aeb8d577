"""
CBOWLoader Vocabulary
======================
Maps every distinct word to a dense integer index and counts how often the
word was seen.

Two classes split the lifecycle:

    1. **VocabularyBuilder** — mutable, used while ingesting text. The first
       time a word is seen it gets the next free index (0, 1, 2, ...) and a
       frequency of 1; every later sighting bumps the frequency.

    2. **Vocabulary** — an immutable snapshot produced by
       `VocabularyBuilder.freeze()`. Samplers and callers read from it
       without being able to change the builder's state.

Both keep an index-to-word list next to the word-to-entry mapping, so
reverse lookups are O(1) instead of a scan over the dictionary.

Usage:
    >>> builder = VocabularyBuilder()
    >>> builder.add("cat"), builder.add("dog"), builder.add("cat")
    (0, 1, 0)
    >>> vocab = builder.freeze()
    >>> vocab["cat"]
    VocabEntry(index=0, frequency=2)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterator, NamedTuple


class VocabEntry(NamedTuple):
    """Index and occurrence count of one vocabulary word."""

    index: int
    frequency: int


class Vocabulary(Mapping):
    """
    Read-only word → (index, frequency) mapping.

    Indices always form the dense range [0, len(vocab)).
    """

    def __init__(self, entries: dict[str, VocabEntry], words: list[str]):
        self._entries = dict(entries)
        self._words = tuple(words)

    def __getitem__(self, word: str) -> VocabEntry:
        return self._entries[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def index_of(self, word: str) -> int:
        """Index of `word`, or -1 if it is not in the vocabulary."""
        entry = self._entries.get(word)
        return entry.index if entry is not None else -1

    def word_from_index(self, index: int) -> str:
        """Word stored at `index`, or "" when no such index exists."""
        if 0 <= index < len(self._words):
            return self._words[index]
        return ""

    def frequency(self, word: str) -> int:
        entry = self._entries.get(word)
        return entry.frequency if entry is not None else 0

    @property
    def words(self) -> tuple[str, ...]:
        """Words ordered by index."""
        return self._words

    def to_dict(self) -> dict[str, list[int]]:
        """JSON-friendly {word: [index, frequency]} dictionary."""
        return {word: [e.index, e.frequency] for word, e in self._entries.items()}

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self)})"


class VocabularyBuilder:
    """
    Incrementally assigns dense indices and counts word frequencies.

    Attributes
    ----------
    _index : dict[str, int]
        word → index.
    _words : list[str]
        index → word (the position in the list IS the index).
    _counts : list[int]
        index → frequency.
    """

    def __init__(self):
        self._index: dict[str, int] = {}
        self._words: list[str] = []
        self._counts: list[int] = []
        self._snapshot: Vocabulary | None = None

    def add(self, word: str) -> int:
        """
        Record one occurrence of `word` and return its index.

        A new word gets index `len(self)`; a known word keeps its index.
        """
        index = self._index.get(word)
        if index is None:
            index = len(self._words)
            self._index[word] = index
            self._words.append(word)
            self._counts.append(0)
        self._counts[index] += 1
        self._snapshot = None
        return index

    def add_all(self, words: list[str]) -> list[int]:
        """Record every word in order and return the parallel index list."""
        return [self.add(word) for word in words]

    def word_from_index(self, index: int) -> str:
        if 0 <= index < len(self._words):
            return self._words[index]
        return ""

    def frequency_of_index(self, index: int) -> int:
        return self._counts[index]

    def freeze(self) -> Vocabulary:
        """
        Return an immutable snapshot of the current state.

        The snapshot is cached until the next `add`, so repeated reads
        between ingestions are free.
        """
        if self._snapshot is None:
            entries = {
                word: VocabEntry(index, self._counts[index])
                for index, word in enumerate(self._words)
            }
            self._snapshot = Vocabulary(entries, self._words)
        return self._snapshot

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __repr__(self) -> str:
        return f"VocabularyBuilder(size={len(self)})"

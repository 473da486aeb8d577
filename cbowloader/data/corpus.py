"""
CBOWLoader Corpus Store
========================
Holds the dataset as an ordered list of sentences, each sentence a numpy
array of vocabulary indices.

Only sentences that can produce at least one full context window are
stored: with a window of `w` words on each side, a sentence needs
`2w + 1` words (w left context, the target, w right context).

    window_size=2, min length 5:
        [the, cat, sat, on, the, mat]  → stored (2 windows)
        [the, cat, sat]                → rejected
"""

from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np


class Corpus:
    """
    Ordered collection of index sentences.

    Parameters
    ----------
    window_size : int
        Context words on each side of the target. Sets the minimum
        sentence length `2 * window_size + 1`.
    """

    def __init__(self, window_size: int):
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {window_size}")
        self.window_size = window_size
        self.sentences: list[np.ndarray] = []

    @property
    def min_sentence_length(self) -> int:
        return 2 * self.window_size + 1

    def append(self, indexes: Sequence[int]) -> bool:
        """
        Store `indexes` as a new sentence if it is long enough.

        Returns
        -------
        bool
            True if the sentence was stored, False if it was too short.
        """
        if len(indexes) < self.min_sentence_length:
            return False
        self.sentences.append(np.asarray(indexes, dtype=np.int64))
        return True

    def shuffle(self, rng: np.random.Generator) -> None:
        """Permute sentence order uniformly at random using `rng`."""
        order = rng.permutation(len(self.sentences))
        self.sentences = [self.sentences[i] for i in order]

    @property
    def n_tokens(self) -> int:
        return sum(len(s) for s in self.sentences)

    def __getitem__(self, idx: int) -> np.ndarray:
        return self.sentences[idx]

    def __len__(self) -> int:
        return len(self.sentences)

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.sentences)

    def __repr__(self) -> str:
        return (
            f"Corpus(sentences={len(self.sentences):,}, "
            f"window_size={self.window_size})"
        )

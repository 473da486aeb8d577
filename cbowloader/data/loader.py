"""
CBOWLoader
==========
Serves (context, target) training pairs for Continuous-Bag-Of-Words
word-embedding models.

How It Works:
    1. `add_data(text)` tokenizes a sentence, assigns every new word the next
       free vocabulary index, and stores the sentence as a list of indices
       (if it is long enough to hold at least one window).
    2. `get_next()` reads the window under the cursor, converts it to a
       tensor, and moves the cursor one word to the right (or on to the next
       sentence).
    3. `reset(rng)` shuffles sentence order and rewinds the cursor for a
       new epoch.

    window_size=1, add_data("a b c d")  → sentence [0, 1, 2, 3], size() == 2
        get_next() → (tensor([0., 2.]), 1)
        get_next() → (tensor([1., 3.]), 2)
        is_exhausted() → True

Parallel Workers:
    Each worker holds its own CBOWLoader (or a deep copy of one) and calls
    `set_offset` with a different value, so workers start at different
    places in the corpus without sharing a cursor. `seek_sample` lands on an
    exact sample index when the slices must not overlap. A single instance
    is not thread-safe. See `cbowloader.data.partitioner.OffsetPartitioner`.

Usage:
    >>> loader = CBOWLoader(window_size=2)
    >>> loader.add_data("the quick brown fox jumps over the lazy dog")
    True
    >>> loader.reset(np.random.default_rng(0))
    >>> while not loader.is_exhausted():
    ...     context, target = loader.get_next()
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

import numpy as np
import torch

from cbowloader.config import resolve_dtype
from cbowloader.data import sampler
from cbowloader.data.base import SampleIterator
from cbowloader.data.corpus import Corpus
from cbowloader.data.pruner import ingest, rebuild_without_infrequent
from cbowloader.data.sampler import Cursor
from cbowloader.data.vocabulary import Vocabulary, VocabularyBuilder

logger = logging.getLogger(__name__)


class CBOWLoader(SampleIterator[torch.Tensor, int]):
    """
    In-memory CBOW sample loader.

    Parameters
    ----------
    window_size : int
        Context words on EACH side of the target. A sample's context tensor
        has 2 * window_size entries.
    dtype : torch.dtype
        Element type of the emitted context tensors. Indices are stored as
        int64 and only converted when a sample is emitted.

    Attributes
    ----------
    cursor : Cursor
        Position of the next sample. Set to (0, 0) on construction and
        changed only by get_next, reset, set_offset and remove_infrequent.
    """

    def __init__(self, window_size: int, dtype: torch.dtype = torch.float32):
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {window_size}")
        if not isinstance(dtype, torch.dtype):
            raise TypeError(f"Expected torch.dtype, got {type(dtype).__name__}")

        self.window_size = window_size
        self.dtype = dtype
        self.cursor = Cursor()
        self._vocab = VocabularyBuilder()
        self._corpus = Corpus(window_size)

    # ─── Ingestion ──────────────────────────────────────────────────────

    def add_data(self, text: str) -> bool:
        """
        Tokenize and store one sentence.

        Returns False when the sentence has fewer than 2 * window_size + 1
        words. Words from a rejected sentence are STILL added to the
        vocabulary and counted; that is not rolled back.
        """
        return ingest(text, self._vocab, self._corpus)

    def add_texts(self, texts: Iterable[str]) -> int:
        """
        Ingest many sentences.

        Returns
        -------
        int
            Number of sentences that were long enough to be stored.
        """
        seen = 0
        accepted = 0
        for text in texts:
            seen += 1
            if self.add_data(text):
                accepted += 1

        if seen and not accepted:
            logger.warning(
                f"None of {seen:,} texts had the {self._corpus.min_sentence_length} "
                f"words needed for a window (window_size={self.window_size})"
            )
        else:
            logger.info(
                f"Ingested {accepted:,}/{seen:,} sentences "
                f"(vocab={self.vocabulary_size():,}, samples={self.size():,})"
            )
        return accepted

    # ─── Iterator contract ──────────────────────────────────────────────

    def size(self) -> int:
        """Number of (context, target) samples in one full pass."""
        return sampler.sample_count(self._corpus)

    def is_exhausted(self) -> bool:
        """
        True when the pass is over.

        Only the last sentence's word boundary is checked; see
        `cbowloader.data.sampler` for why that is enough for cursors moved
        by get_next and set_offset.
        """
        return sampler.is_exhausted(self._corpus, self.cursor)

    def reset(self, rng: Optional[np.random.Generator] = None) -> None:
        """
        Shuffle sentence order and rewind to the first sample.

        Parameters
        ----------
        rng : numpy.random.Generator or None
            Source of randomness for the shuffle. Pass a seeded generator
            for reproducible epochs; None uses a fresh unseeded one.
        """
        if rng is None:
            rng = np.random.default_rng()
        self._corpus.shuffle(rng)
        self.cursor = Cursor()

    def get_next(self) -> tuple[torch.Tensor, int]:
        """
        Return the sample under the cursor and advance.

        Returns
        -------
        tuple[torch.Tensor, int]
            context: shape (2 * window_size,), dtype self.dtype.
            target: vocabulary index of the center word.

        Raises
        ------
        IndexError
            If called when exhausted. Check `is_exhausted()` first.
        """
        context, target = sampler.window_at(self._corpus, self.cursor)
        self.cursor = sampler.advance(self._corpus, self.cursor)
        return torch.from_numpy(context).to(self.dtype), target

    # ─── Sharding ───────────────────────────────────────────────────────

    def set_offset(self, offset: int) -> None:
        """
        Move the cursor to a logical `offset` (wrapped modulo size()).

        Used to start several loaders at different points of the same
        corpus. Raises ZeroDivisionError on an empty corpus.
        """
        self.cursor = sampler.seek(self._corpus, offset)

    def seek_sample(self, index: int) -> None:
        """
        Move the cursor to exactly the `index`-th sample of the current
        sentence order, so that reading n samples from there covers samples
        index..index+n-1. `index == size()` leaves the loader exhausted.
        """
        self.cursor = sampler.cursor_at_sample(self._corpus, index)

    # ─── Pruning ────────────────────────────────────────────────────────

    def remove_infrequent(self, min_count: int) -> None:
        """
        Rebuild the vocabulary and corpus without words seen fewer than
        `min_count` times.

        Destructive: indices are reassigned, too-short sentences vanish, and
        the cursor is rewound to (0, 0) because the old position no longer
        means anything.
        """
        vocab, corpus = rebuild_without_infrequent(
            self._vocab, self._corpus, min_count
        )
        self._vocab, self._corpus = vocab, corpus
        self.cursor = Cursor()

    # ─── Vocabulary access ──────────────────────────────────────────────

    def vocabulary_size(self) -> int:
        return len(self._vocab)

    def vocabulary(self) -> Vocabulary:
        """Read-only word → (index, frequency) snapshot."""
        return self._vocab.freeze()

    def word_from_index(self, index: int) -> str:
        """Word with vocabulary index `index`, or "" if there is none."""
        return self._vocab.word_from_index(index)

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    def __repr__(self) -> str:
        return (
            f"CBOWLoader(window_size={self.window_size}, "
            f"sentences={len(self._corpus):,}, "
            f"vocab={self.vocabulary_size():,}, samples={self.size():,})"
        )


def build_loader(
    texts: Iterable[str],
    window_size: int,
    dtype: Union[torch.dtype, str] = torch.float32,
    min_count: int = 0,
) -> CBOWLoader:
    """
    Create a loader, ingest `texts` and optionally prune rare words.

    Parameters
    ----------
    texts : Iterable[str]
        Sentences to ingest.
    window_size : int
        Context words on each side.
    dtype : torch.dtype or str
        Context tensor dtype, e.g. torch.float32 or "float32".
    min_count : int
        Words seen fewer times are pruned. 0 or 1 keeps everything.
    """
    if isinstance(dtype, str):
        dtype = resolve_dtype(dtype)
    loader = CBOWLoader(window_size=window_size, dtype=dtype)
    loader.add_texts(texts)
    if min_count > 1:
        loader.remove_infrequent(min_count)
    return loader

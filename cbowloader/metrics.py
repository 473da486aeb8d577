"""
CBOWLoader Metrics
===================
Bookkeeping for corpus preparation runs.

1. MEMORY AND THROUGHPUT
   Peak RAM used while building a corpus, measured via tracemalloc. The
   whole corpus lives in memory, so this is the number to watch when the
   input grows. Tokens per second and bytes per token come along with it.

2. CORPUS STATISTICS
   Sentence, token, vocabulary and sample counts for a built loader.

Usage:
    >>> with MemoryTracker("Ingestion") as mem:
    ...     loader.add_texts(lines)
    ...     mem.count_tokens(loader.corpus.n_tokens)
    >>> corpus_statistics(loader)["n_samples"]
"""

from __future__ import annotations

import logging
import time
import tracemalloc

from cbowloader.data.loader import CBOWLoader

logger = logging.getLogger(__name__)


class MemoryTracker:
    """
    Context manager for tracking peak memory and token throughput during a
    block of code.

    Uses Python's tracemalloc, so only Python-level allocations (including
    numpy buffers) are counted. Tokens reported through `count_tokens` are
    turned into tokens/second and bytes of peak memory per token, the two
    numbers that decide whether a larger corpus still fits in RAM.

    Usage:
        >>> with MemoryTracker("Ingestion") as tracker:
        ...     loader.add_texts(lines)
        ...     tracker.count_tokens(loader.corpus.n_tokens)
        >>> print(f"{tracker.tokens_per_second:,.0f} tokens/s")
    """

    def __init__(self, label: str = "operation"):
        self.label = label
        self.peak_mb: float = 0.0
        self.current_mb: float = 0.0
        self.duration_seconds: float = 0.0
        self.n_tokens: int = 0
        self._start_time: float = 0.0

    def count_tokens(self, n: int) -> None:
        """Add `n` to the tokens processed inside the tracked block."""
        if n < 0:
            raise ValueError(f"Token count must be >= 0, got {n}")
        self.n_tokens += n

    @property
    def tokens_per_second(self) -> float:
        if self.duration_seconds <= 0.0:
            return 0.0
        return self.n_tokens / self.duration_seconds

    @property
    def bytes_per_token(self) -> float:
        """Peak traced memory divided by tokens counted (0 if none)."""
        if self.n_tokens == 0:
            return 0.0
        return self.peak_mb * 1024 * 1024 / self.n_tokens

    def __enter__(self):
        tracemalloc.start()
        self._start_time = time.perf_counter()
        return self

    def __exit__(self, *args):
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        self.current_mb = current / (1024 * 1024)
        self.peak_mb = peak / (1024 * 1024)
        self.duration_seconds = time.perf_counter() - self._start_time

        message = (
            f"[{self.label}] Memory: peak={self.peak_mb:.1f}MB, "
            f"time={self.duration_seconds:.2f}s"
        )
        if self.n_tokens:
            message += (
                f", tokens={self.n_tokens:,} "
                f"({self.tokens_per_second:,.0f}/s, "
                f"{self.bytes_per_token:.1f} B/token)"
            )
        logger.info(message)


def corpus_statistics(loader: CBOWLoader) -> dict:
    """
    Summarize a loader's corpus.

    Returns
    -------
    dict
        n_sentences, n_tokens, n_samples, vocab_size, mean_sentence_length
        and window_size.
    """
    corpus = loader.corpus
    n_sentences = len(corpus)
    n_tokens = corpus.n_tokens
    return {
        "window_size": loader.window_size,
        "n_sentences": n_sentences,
        "n_tokens": n_tokens,
        "n_samples": loader.size(),
        "vocab_size": loader.vocabulary_size(),
        "mean_sentence_length": n_tokens / n_sentences if n_sentences else 0.0,
    }

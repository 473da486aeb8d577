"""
CBOWLoader Window Sampler
==========================
Cursor arithmetic for walking a corpus one CBOW sample at a time.

A sample is centered on a target word and carries `window_size` words of
context on each side. The cursor `(sentence, word)` points at the FIRST
word of the window, so the target sits at `word + window_size`:

    window_size=2, sentence = [a, b, c, d, e, f]

        cursor.word=0:  [a, b] c [d, e]   → context [a, b, d, e], target c
        cursor.word=1:  [b, c] d [e, f]   → context [b, c, e, f], target d
        cursor.word=2:  no full window    → roll to (sentence + 1, 0)

Everything here is a pure function of (corpus, cursor). The `Cursor` is a
frozen value; advancing returns a new one. `CBOWLoader` owns the current
cursor and threads it through these functions.

Exhaustion quirk:
    `is_exhausted` only checks the word boundary on the LAST sentence. On
    earlier sentences it trusts `advance` to have rolled the cursor to the
    next sentence once no full window remains. A cursor built by hand that
    points past the end of a middle sentence is therefore reported as not
    exhausted. Cursors produced by `advance` and `seek` never do this.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from cbowloader.data.corpus import Corpus


class Cursor(NamedTuple):
    """Position of the next window: sentence index and first word index."""

    sentence: int = 0
    word: int = 0


def sentence_sample_count(length: int, window_size: int) -> int:
    """Number of full windows in a sentence of `length` words."""
    return max(0, length - 2 * window_size)


def sample_count(corpus: Corpus) -> int:
    """Total number of valid target positions across the corpus."""
    return sum(
        sentence_sample_count(len(s), corpus.window_size) for s in corpus
    )


def is_exhausted(corpus: Corpus, cursor: Cursor) -> bool:
    """
    True when no further sample can be read from `cursor`.

    See the module docstring: only the last sentence is boundary-checked.
    """
    if len(corpus) == 0:
        return True
    if cursor.sentence >= len(corpus):
        return True
    if cursor.sentence == len(corpus) - 1:
        last_start = len(corpus[cursor.sentence]) - (2 * corpus.window_size + 1)
        if cursor.word > last_start:
            return True
    return False


def window_at(corpus: Corpus, cursor: Cursor) -> tuple[np.ndarray, int]:
    """
    Read the context window and target at `cursor`.

    Returns
    -------
    tuple[np.ndarray, int]
        context: int64 array of length 2 * window_size, left context then
        right context.
        target: vocabulary index of the center word.

    Raises
    ------
    IndexError
        If the cursor does not point at a full window. Callers are expected
        to check `is_exhausted` first.
    """
    ws = corpus.window_size
    sentence = corpus[cursor.sentence]
    start = cursor.word
    if start + 2 * ws >= len(sentence):
        raise IndexError(
            f"No full window at {cursor} (sentence length {len(sentence)}, "
            f"window_size {ws})"
        )
    context = np.empty(2 * ws, dtype=np.int64)
    for i in range(ws):
        context[i] = sentence[start + i]
        context[ws + i] = sentence[start + ws + i + 1]
    target = int(sentence[start + ws])
    return context, target


def advance(corpus: Corpus, cursor: Cursor) -> Cursor:
    """Cursor after `cursor`, rolling to the next sentence when needed."""
    word = cursor.word + 1
    if word >= len(corpus[cursor.sentence]) - 2 * corpus.window_size:
        return Cursor(cursor.sentence + 1, 0)
    return Cursor(cursor.sentence, word)


def seek(corpus: Corpus, offset: int) -> Cursor:
    """
    Cursor for a logical `offset` into the corpus.

    The offset is first wrapped modulo `sample_count(corpus)`. Whole
    sentence lengths are then subtracted while the remaining offset is
    larger than the current sentence. If what is left is a valid window
    start in that sentence the cursor lands there, otherwise it lands at
    the beginning of the next sentence.

    The walk subtracts full sentence lengths rather than per-sentence
    sample counts, so offsets spread instances across the corpus without
    being an exact bijection onto samples.

    The landing bound is the sentence's sample count rather than the looser
    `len(sentence) - window_size`, which would admit window starts that run
    past the end of the sentence. Use `cursor_at_sample` when an exact
    position is needed.

    Raises
    ------
    ZeroDivisionError
        If the corpus holds no samples.
    """
    offset = offset % sample_count(corpus)
    sentence = 0
    while offset > len(corpus[sentence]):
        offset -= len(corpus[sentence])
        sentence += 1
    if offset < sentence_sample_count(len(corpus[sentence]), corpus.window_size):
        return Cursor(sentence, offset)
    return Cursor(sentence + 1, 0)


def cursor_at_sample(corpus: Corpus, index: int) -> Cursor:
    """
    Cursor of the `index`-th sample in corpus order.

    Unlike `seek`, this walks per-sentence sample counts, so indices
    0..sample_count-1 map one-to-one onto window positions and contiguous
    index ranges are disjoint slices of a pass. `index == sample_count`
    gives the exhausted cursor one past the last sentence.

    Raises
    ------
    IndexError
        If `index` is negative or greater than `sample_count(corpus)`.
    """
    total = sample_count(corpus)
    if not 0 <= index <= total:
        raise IndexError(f"Sample index {index} out of range [0, {total}]")
    for sentence, tokens in enumerate(corpus):
        count = sentence_sample_count(len(tokens), corpus.window_size)
        if index < count:
            return Cursor(sentence, index)
        index -= count
    return Cursor(len(corpus), 0)

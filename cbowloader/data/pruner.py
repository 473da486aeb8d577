"""
CBOWLoader Pruner
==================
Drops rare words from a corpus by rebuilding it from scratch.

Removing words in place would leave holes in the index range, and closing
those holes means renumbering every sentence. Instead every sentence is
turned back into text with the rare words left out, and that text is
re-ingested into a brand new vocabulary and corpus:

    min_count=2, frequencies: the=3 cat=2 sat=1 mat=2 on=1
        "the cat sat on the mat"  →  "the cat the mat"  →  re-ingested

Sentences that fall below the minimum length after pruning disappear, and
the new vocabulary is dense from 0 again. The old objects are left
untouched; the caller swaps the new pair in.
"""

from __future__ import annotations

import logging

from cbowloader.data.corpus import Corpus
from cbowloader.data.tokenizer import normalize_and_split
from cbowloader.data.vocabulary import VocabularyBuilder

logger = logging.getLogger(__name__)


def ingest(
    text: str,
    vocab: VocabularyBuilder,
    corpus: Corpus,
) -> bool:
    """
    Tokenize `text`, index it through `vocab` and append it to `corpus`.

    Vocabulary updates are kept even when the sentence is too short to be
    stored.

    Returns
    -------
    bool
        True if the sentence was stored.
    """
    indexes = vocab.add_all(normalize_and_split(text))
    return corpus.append(indexes)


def rebuild_without_infrequent(
    vocab: VocabularyBuilder,
    corpus: Corpus,
    min_count: int,
) -> tuple[VocabularyBuilder, Corpus]:
    """
    Build a new (vocabulary, corpus) pair without words seen fewer than
    `min_count` times.

    Parameters
    ----------
    vocab : VocabularyBuilder
        Vocabulary whose frequencies decide what is kept.
    corpus : Corpus
        Corpus to rebuild. Its window size carries over.
    min_count : int
        Minimum frequency a word needs to survive.

    Returns
    -------
    tuple[VocabularyBuilder, Corpus]
        Freshly built pair with dense indices. Frequencies in the new
        vocabulary count only the surviving occurrences.
    """
    if min_count < 0:
        raise ValueError(f"min_count must be >= 0, got {min_count}")

    # index → (word, frequency)
    reverse = [
        (vocab.word_from_index(i), vocab.frequency_of_index(i))
        for i in range(len(vocab))
    ]

    new_vocab = VocabularyBuilder()
    new_corpus = Corpus(corpus.window_size)
    kept = 0
    for sentence in corpus:
        words = [
            reverse[index][0]
            for index in sentence
            if reverse[index][1] >= min_count
        ]
        if ingest(" ".join(words), new_vocab, new_corpus):
            kept += 1

    logger.info(
        f"Pruned words with frequency < {min_count}: "
        f"vocab {len(vocab):,} → {len(new_vocab):,}, "
        f"sentences {len(corpus):,} → {kept:,}"
    )
    return new_vocab, new_corpus

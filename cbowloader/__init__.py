"""
CBOWLoader
==========
In-memory corpus sampler for Continuous-Bag-Of-Words word-embedding
training.

This package provides:
    1. Tokenizing raw sentences and indexing words into a dense vocabulary
    2. Storing the corpus as index sentences
    3. Serving (context, target) window samples with a resumable cursor
    4. Seeking to offsets so parallel workers cover different parts of the
       corpus
    5. Pruning rare words by rebuilding vocabulary and corpus

Quick Start:
    >>> from cbowloader import CBOWLoader
    >>> loader = CBOWLoader(window_size=1)
    >>> loader.add_data("a b c d")
    True
    >>> loader.get_next()
    (tensor([0., 2.]), 1)

Subpackages:
    - cbowloader.data    — Tokenizer, vocabulary, corpus, sampler, pruner,
                           partitioner and torch dataset
    - cbowloader.config  — Dataclass configuration with YAML round trip
    - cbowloader.metrics — Memory tracking and corpus statistics
"""

__version__ = "0.1.0"

from cbowloader.data.loader import CBOWLoader

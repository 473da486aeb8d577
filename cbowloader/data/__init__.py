"""
cbowloader.data — Corpus Pipeline
==================================
Everything between a raw sentence and a (context, target) sample:

    1. **Tokenizer** (`tokenizer.py`):
       Lowercases letters and splits on everything else.

    2. **Vocabulary** (`vocabulary.py`):
       Dense word → index mapping with frequencies; builder + snapshot.

    3. **Corpus** (`corpus.py`):
       Sentences stored as index arrays, filtered by minimum length.

    4. **Sampler** (`sampler.py`):
       Cursor value and the pure functions that read and move it.

    5. **Pruner** (`pruner.py`):
       Rebuilds vocabulary and corpus without rare words.

    6. **Loader** (`loader.py`):
       CBOWLoader, the stateful facade training code talks to.

    7. **Partitioner** (`partitioner.py`):
       Per-worker loader copies at evenly spaced offsets.

    8. **Dataset** (`dataset.py`):
       torch IterableDataset over a loader, worker-aware.

Information Flow:
    Raw text
        → Tokenizer (words)
        → VocabularyBuilder (indices)
        → Corpus (index sentences)
        → CBOWLoader.get_next (context tensor, target)
        → CBOWDataset / torch DataLoader (batches)
"""

from cbowloader.data.tokenizer import normalize_and_split
from cbowloader.data.vocabulary import Vocabulary, VocabularyBuilder, VocabEntry
from cbowloader.data.corpus import Corpus
from cbowloader.data.sampler import Cursor
from cbowloader.data.loader import CBOWLoader, build_loader
from cbowloader.data.partitioner import OffsetPartitioner
from cbowloader.data.dataset import CBOWDataset

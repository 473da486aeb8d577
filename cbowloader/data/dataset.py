"""
CBOWLoader Dataset
==================
PyTorch IterableDataset wrapper so a CBOWLoader can feed a standard
`torch.utils.data.DataLoader`, including with several worker processes.

Each epoch the dataset copies the loader, shuffles the copy with a seed
derived from (seed, epoch), and iterates it. When running inside a
DataLoader worker the copy seeks to exactly that worker's first sample and
reads only that worker's quota, so the workers' slices are disjoint and
together cover one full pass:

    size() == 10, num_workers=3
        worker 0: offset 0, reads 3
        worker 1: offset 3, reads 3
        worker 2: offset 6, reads 4

Items are (context, target) with target as a 0-dim long tensor, so the
default collate function stacks them into (batch, 2w) and (batch,).

Usage:
    >>> from torch.utils.data import DataLoader
    >>> dataset = CBOWDataset(loader, seed=42)
    >>> batches = DataLoader(dataset, batch_size=128, num_workers=2)
    >>> for epoch in range(3):
    ...     dataset.set_epoch(epoch)
    ...     for contexts, targets in batches:
    ...         ...
"""

from __future__ import annotations

import copy
import logging
from typing import Iterator

import numpy as np
import torch
from torch.utils.data import IterableDataset, get_worker_info

from cbowloader.data.loader import CBOWLoader
from cbowloader.data.partitioner import OffsetPartitioner

logger = logging.getLogger(__name__)


class CBOWDataset(IterableDataset):
    """
    Iterable view over a CBOWLoader.

    Parameters
    ----------
    loader : CBOWLoader
        Source loader. Never mutated; every epoch works on a copy.
    seed : int
        Base seed for the per-epoch sentence shuffle.
    """

    def __init__(self, loader: CBOWLoader, seed: int = 0):
        if loader.size() == 0:
            raise ValueError("Cannot create dataset from an empty loader.")
        self.loader = loader
        self.seed = seed
        self.epoch = 0

    def set_epoch(self, epoch: int) -> None:
        """Select the shuffle used by the next iteration."""
        self.epoch = epoch

    def __len__(self) -> int:
        return self.loader.size()

    def __iter__(self) -> Iterator[tuple[torch.Tensor, torch.Tensor]]:
        loader = copy.deepcopy(self.loader)
        loader.reset(np.random.default_rng(self.seed + self.epoch))

        info = get_worker_info()
        if info is None:
            for context, target in loader:
                yield context, torch.tensor(target, dtype=torch.long)
            return

        partitioner = OffsetPartitioner(n_shards=info.num_workers)
        size = loader.size()
        offset = partitioner.offsets(size)[info.id]
        quota = partitioner.quotas(size)[info.id]
        loader.seek_sample(offset)
        logger.debug(
            f"Worker {info.id}/{info.num_workers}: offset={offset}, quota={quota}"
        )

        for _ in range(quota):
            context, target = loader.get_next()
            yield context, torch.tensor(target, dtype=torch.long)

    def __repr__(self) -> str:
        return f"CBOWDataset(samples={len(self):,}, seed={self.seed})"

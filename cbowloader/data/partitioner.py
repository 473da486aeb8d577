"""
CBOWLoader Offset Partitioner
==============================
Splits one loader's sample space into N evenly spaced starting points so N
workers can train on different parts of the corpus at the same time.

Nothing is physically split. Every shard is an independent deep copy of the
loader (same sentences, same vocabulary) whose cursor has been moved with
`set_offset`:

    size() == 1000, n_shards=4
        offsets → [0, 250, 500, 750]
        shard k starts at offset k × 250 and owns its own cursor

Because workers never share a cursor, no locking is needed.

Usage:
    >>> partitioner = OffsetPartitioner(n_shards=4)
    >>> shards = partitioner.shard(loader)
    >>> len(shards)
    4
"""

from __future__ import annotations

import copy
import logging

from cbowloader.data.loader import CBOWLoader

logger = logging.getLogger(__name__)


class OffsetPartitioner:
    """
    Produces per-worker loader copies seeked to evenly spaced offsets.

    Parameters
    ----------
    n_shards : int
        Number of shards (= number of parallel workers).
    """

    def __init__(self, n_shards: int = 1):
        if n_shards < 1:
            raise ValueError(f"n_shards must be >= 1, got {n_shards}")
        self.n_shards = n_shards

    def offsets(self, size: int) -> list[int]:
        """
        Evenly spaced starting offsets `k * size // n_shards`.

        Raises
        ------
        ValueError
            If there are fewer samples than shards.
        """
        if size < self.n_shards:
            raise ValueError(
                f"Need at least {self.n_shards} samples for "
                f"{self.n_shards} shards, but only got {size}."
            )
        return [k * size // self.n_shards for k in range(self.n_shards)]

    def quotas(self, size: int) -> list[int]:
        """Samples each shard should read so that one pass covers `size`."""
        bounds = self.offsets(size) + [size]
        return [bounds[k + 1] - bounds[k] for k in range(self.n_shards)]

    def shard(self, loader: CBOWLoader) -> list[CBOWLoader]:
        """
        Return `n_shards` independent copies of `loader`, each positioned
        at its own offset. The source loader is not modified.
        """
        size = loader.size()
        if size == 0:
            raise ValueError("Cannot shard an empty loader.")

        shards: list[CBOWLoader] = []
        for k, offset in enumerate(self.offsets(size)):
            shard = copy.deepcopy(loader)
            shard.set_offset(offset)
            shards.append(shard)
            logger.info(f"  Shard {k}: offset {offset:,} → cursor {shard.cursor}")

        return shards

    def __repr__(self) -> str:
        return f"OffsetPartitioner(n_shards={self.n_shards})"

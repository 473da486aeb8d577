"""
Sample-iterator contract shared by CBOWLoader and any other sampler that
training code drives with a "while not exhausted: get_next()" loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

import numpy as np

DataT = TypeVar("DataT")
LabelT = TypeVar("LabelT")


class SampleIterator(ABC, Generic[DataT, LabelT]):
    """
    Cursor-style iterator over (data, label) samples.

    Subclasses implement the four contract methods; `__len__` and
    `__iter__` come for free.
    """

    @abstractmethod
    def size(self) -> int:
        """Number of samples in one full pass."""

    @abstractmethod
    def is_exhausted(self) -> bool:
        """True when the current pass has no more samples."""

    @abstractmethod
    def reset(self, rng: Optional[np.random.Generator] = None) -> None:
        """Start a new pass."""

    @abstractmethod
    def get_next(self) -> tuple[DataT, LabelT]:
        """Return the next sample and advance. Undefined when exhausted."""

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[tuple[DataT, LabelT]]:
        # Continues from the current cursor; call reset() for a fresh pass.
        while not self.is_exhausted():
            yield self.get_next()

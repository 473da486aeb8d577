"""
CBOWLoader Configuration System
================================
Centralized configuration for building and sampling a CBOW corpus, using
Python dataclasses. Every knob the preparation script and the loaders need
lives here.

Usage:
    # Load from YAML file:
    >>> config = CBOWConfig.from_yaml("configs/default.yaml")

    # Create programmatically:
    >>> config = CBOWConfig(
    ...     sampler=SamplerConfig(window_size=5),
    ...     data=DataConfig(min_count=5),
    ... )

    # Save to YAML:
    >>> config.to_yaml("configs/my_corpus.yaml")

    # Access nested values:
    >>> config.sampler.window_size  # 5
    >>> config.data.min_count       # 5
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional

import torch
import yaml

logger = logging.getLogger(__name__)

# Context tensor element types accepted by name in config files
SUPPORTED_DTYPES = ("float16", "bfloat16", "float32", "float64", "int32", "int64")


def resolve_dtype(name: str) -> torch.dtype:
    """
    Map a dtype name such as "float32" to the torch dtype.

    Raises
    ------
    ValueError
        If the name is not one of SUPPORTED_DTYPES.
    """
    if name not in SUPPORTED_DTYPES:
        raise ValueError(
            f"Unknown dtype: '{name}'. Choose from: {', '.join(SUPPORTED_DTYPES)}"
        )
    return getattr(torch, name)


# =============================================================================
# Sampler Configuration
# =============================================================================

@dataclass
class SamplerConfig:
    """
    How samples are cut out of the corpus and handed to training code.

    Parameters
    ----------
    window_size : int
        Context words on EACH side of the target word. A window_size of 2
        gives 4 context words per sample and requires sentences of at
        least 5 words.

    dtype : str
        Element type of the context tensors (see SUPPORTED_DTYPES).
        Indices are kept as int64 internally and converted on emission.

    seed : int
        Seed for the sentence shuffle performed on every reset.

    n_shards : int
        Number of independent loader copies to create for parallel
        workers. Each copy starts at a different offset.
    """
    window_size: int = 2
    dtype: str = "float32"
    seed: int = 42
    n_shards: int = 1

    def validate(self) -> None:
        """Check sampler parameters."""
        if self.window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {self.window_size}")
        if self.n_shards < 1:
            raise ValueError(f"n_shards must be >= 1, got {self.n_shards}")
        resolve_dtype(self.dtype)

    def resolve_dtype(self) -> torch.dtype:
        return resolve_dtype(self.dtype)

    @property
    def min_sentence_length(self) -> int:
        """Shortest sentence that yields at least one sample."""
        return 2 * self.window_size + 1


# =============================================================================
# Data Configuration
# =============================================================================

@dataclass
class DataConfig:
    """
    Where the corpus comes from and how it is curated.

    Parameters
    ----------
    corpus_path : str
        Plain text file, one sentence per line.

    output_dir : str
        Directory for the vocabulary and metadata written by
        scripts/prepare_data.py.

    min_count : int
        Words seen fewer times than this are pruned after ingestion.
        0 or 1 disables pruning.

    max_lines : int or None
        Read at most this many lines. None = read everything.
        Set to a small number for smoke testing.
    """
    corpus_path: str = "data/corpus.txt"
    output_dir: str = "data"
    min_count: int = 1
    max_lines: Optional[int] = None

    def validate(self) -> None:
        """Check data parameters."""
        if self.min_count < 0:
            raise ValueError(f"min_count must be >= 0, got {self.min_count}")
        if self.max_lines is not None and self.max_lines < 1:
            raise ValueError(
                f"max_lines must be None or >= 1, got {self.max_lines}"
            )


# =============================================================================
# Master Configuration
# =============================================================================

@dataclass
class CBOWConfig:
    """
    Complete configuration: sampler settings plus data settings.

    Example:
        >>> config = CBOWConfig.from_yaml("configs/default.yaml")
        >>> config.sampler.window_size
        2
    """
    sampler: SamplerConfig = field(default_factory=SamplerConfig)
    data: DataConfig = field(default_factory=DataConfig)

    def validate(self) -> None:
        """
        Validate every section.

        Raises
        ------
        ValueError
            If any parameter is invalid.
        """
        self.sampler.validate()
        self.data.validate()

        logger.info(
            f"Config validated: window_size={self.sampler.window_size}, "
            f"min_count={self.data.min_count}, n_shards={self.sampler.n_shards}"
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> CBOWConfig:
        """
        Load configuration from a YAML file.

        Parameters
        ----------
        path : str or Path
            Path to the YAML configuration file.

        Returns
        -------
        CBOWConfig
            Loaded and validated configuration.

        Raises
        ------
        FileNotFoundError
            If the YAML file does not exist.
        ValueError
            If the file is empty or holds invalid values.
        yaml.YAMLError
            If the YAML file is malformed.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(
                f"Config file not found: {path}. "
                f"Create one from configs/default.yaml as a template."
            )

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)

        if raw is None:
            raise ValueError(f"Config file is empty: {path}")

        config = cls(
            sampler=SamplerConfig(**raw.get("sampler", {})),
            data=DataConfig(**raw.get("data", {})),
        )

        config.validate()
        return config

    def to_yaml(self, path: str | Path) -> None:
        """
        Save configuration to a YAML file, creating parent directories.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                asdict(self),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )

        logger.info(f"Config saved to {path}")

    def to_dict(self) -> dict:
        """Convert to nested dictionary."""
        return asdict(self)

    @classmethod
    def for_smoke_test(cls) -> CBOWConfig:
        """
        Minimal configuration for a quick end-to-end check: small window,
        no pruning, and only the first few hundred lines of the corpus.
        """
        return cls(
            sampler=SamplerConfig(
                window_size=1,
                dtype="float32",
                seed=0,
                n_shards=2,
            ),
            data=DataConfig(
                corpus_path="data/corpus.txt",
                output_dir="data_smoke",
                min_count=1,
                max_lines=200,
            ),
        )

    def __repr__(self) -> str:
        """Pretty-print the configuration."""
        lines = [
            "CBOWConfig(",
            f"  Sampler: window_size={self.sampler.window_size}, "
            f"dtype={self.sampler.dtype}, seed={self.sampler.seed}, "
            f"n_shards={self.sampler.n_shards}",
            f"  Data:    {self.data.corpus_path} "
            f"(min_count={self.data.min_count}, max_lines={self.data.max_lines})",
            f"  Output:  {self.data.output_dir}",
            ")",
        ]
        return "\n".join(lines)

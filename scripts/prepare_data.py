#!/usr/bin/env python3
"""
CBOWLoader — Data Preparation Script
=====================================
Reads a plain text corpus (one sentence per line), builds the CBOW
vocabulary and index corpus, prunes rare words, and writes the vocabulary
and a metadata summary to disk.

Usage:
    python scripts/prepare_data.py --config configs/default.yaml
    python scripts/prepare_data.py --smoke-test --corpus data/corpus.txt
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterator, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tqdm import tqdm

from cbowloader.config import CBOWConfig
from cbowloader.data.loader import CBOWLoader
from cbowloader.data.partitioner import OffsetPartitioner
from cbowloader.metrics import MemoryTracker, corpus_statistics

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def read_lines(path: Path, max_lines: Optional[int]) -> Iterator[str]:
    """
    Yield non-empty lines from `path`, at most `max_lines` of them.

    Raises
    ------
    FileNotFoundError
        If the corpus file does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Corpus file not found: {path}")

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        count = 0
        for line in f:
            line = line.strip()
            if not line:
                continue
            yield line
            count += 1
            if max_lines is not None and count >= max_lines:
                break


def main():
    parser = argparse.ArgumentParser(
        description="CBOWLoader Data Preparation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Full preparation:
    python scripts/prepare_data.py --config configs/default.yaml

    # Quick smoke test:
    python scripts/prepare_data.py --smoke-test

    # Custom corpus and output directory:
    python scripts/prepare_data.py --corpus books.txt --output-dir data/books
        """,
    )
    parser.add_argument(
        "--config", type=str, default="configs/default.yaml",
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--smoke-test", action="store_true",
        help="Run with minimal data for quick validation",
    )
    parser.add_argument(
        "--corpus", type=str, default=None,
        help="Override corpus text file",
    )
    parser.add_argument(
        "--output-dir", type=str, default=None,
        help="Override output directory",
    )
    parser.add_argument(
        "--min-count", type=int, default=None,
        help="Override minimum word frequency",
    )
    args = parser.parse_args()

    if args.smoke_test:
        config = CBOWConfig.for_smoke_test()
        logger.info("Running in SMOKE TEST mode (minimal data)")
    else:
        config = CBOWConfig.from_yaml(args.config)

    if args.corpus:
        config.data.corpus_path = args.corpus
    if args.output_dir:
        config.data.output_dir = args.output_dir
    if args.min_count is not None:
        config.data.min_count = args.min_count
    config.validate()
    logger.info(f"\n{config}")

    output_dir = Path(config.data.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    with MemoryTracker("Data preparation") as mem:
        # Step 1: Ingest sentences
        logger.info("=" * 60)
        logger.info("Step 1: Building vocabulary and corpus")
        logger.info("=" * 60)

        loader = CBOWLoader(
            window_size=config.sampler.window_size,
            dtype=config.sampler.resolve_dtype(),
        )
        lines = read_lines(Path(config.data.corpus_path), config.data.max_lines)
        loader.add_texts(tqdm(lines, desc="Ingesting", unit=" lines"))
        raw_stats = corpus_statistics(loader)
        mem.count_tokens(raw_stats["n_tokens"])

        # Step 2: Prune rare words
        if config.data.min_count > 1:
            logger.info("=" * 60)
            logger.info(f"Step 2: Removing words seen < {config.data.min_count} times")
            logger.info("=" * 60)
            loader.remove_infrequent(config.data.min_count)

        stats = corpus_statistics(loader)
        if stats["n_samples"] == 0:
            logger.error("Corpus produced no samples; nothing to write.")
            sys.exit(1)

        # Step 3: Plan shards
        partitioner = OffsetPartitioner(n_shards=config.sampler.n_shards)
        offsets = partitioner.offsets(stats["n_samples"])

        # Save vocabulary
        vocab_path = output_dir / "vocab.json"
        with open(vocab_path, "w", encoding="utf-8") as f:
            json.dump(loader.vocabulary().to_dict(), f)
        logger.info(f"  Vocabulary: {stats['vocab_size']:,} words → {vocab_path}")

        # Save metadata
        metadata = {
            "corpus_path": config.data.corpus_path,
            "min_count": config.data.min_count,
            "before_pruning": raw_stats,
            "after_pruning": stats,
            "shard_offsets": offsets,
            "config": config.to_dict(),
        }

        meta_path = output_dir / "metadata.json"
        with open(meta_path, "w") as f:
            json.dump(metadata, f, indent=2)

    logger.info("\nData preparation complete!")
    logger.info(f"  Samples: {stats['n_samples']:,}")
    logger.info(f"  Peak memory: {mem.peak_mb:.1f} MB")
    logger.info(f"  Time: {mem.duration_seconds:.1f}s")
    logger.info(f"  Throughput: {mem.tokens_per_second:,.0f} tokens/s")
    logger.info(f"  Output: {output_dir}/")


if __name__ == "__main__":
    main()

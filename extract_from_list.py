#!/usr/bin/env python3
"""
Batch product ID extraction from a URL list.

Reads URLs from a text file (optionally tab-separated with a store ID),
analyzes them in chunks, and writes one result row per URL to Parquet or CSV.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Iterator, Optional

import polars as pl

# Ensure local package imports work when running as a script
sys.path.insert(0, str(Path(__file__).parent / "src"))

from product_ids.analysis import BATCH_SCHEMA, BatchProcessor
from product_ids.config import get_config

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = (".parquet", ".csv")


def parse_args() -> argparse.Namespace:
    """Parse CLI arguments."""
    config = get_config()
    parser = argparse.ArgumentParser(
        description="Extract product IDs from a list of URLs."
    )
    parser.add_argument(
        "--input",
        required=True,
        type=Path,
        help="Path to a file of URLs (one per line, 'url<TAB>store_id' allowed, '#' comments allowed).",
    )
    parser.add_argument(
        "--output",
        required=True,
        type=Path,
        help="Output file; format chosen by extension (.parquet or .csv).",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=1000,
        help="Number of URLs analyzed per batch (default: 1000).",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Logging level (defaults to config).",
    )
    return parser.parse_args()


def load_urls(path: Path) -> pl.DataFrame:
    """
    Read URLs from file.

    - Ignores blank lines and comments starting with '#'
    - A tab separates an optional store ID from the URL
    """
    if not path.exists():
        raise FileNotFoundError(f"URL list file not found: {path}")

    urls: list[str] = []
    store_ids: list[Optional[str]] = []
    for raw_line in path.read_text().splitlines():
        entry = raw_line.strip()
        if not entry or entry.startswith("#"):
            continue

        url, _, store_id = entry.partition("\t")
        urls.append(url.strip())
        store_ids.append(store_id.strip() or None)

    if not urls:
        raise ValueError(f"No URLs found in {path}")

    return pl.DataFrame(
        {"url": urls, "store_id": store_ids},
        schema={"url": pl.Utf8, "store_id": pl.Utf8},
    )


def iter_batches(df: pl.DataFrame, batch_size: int) -> Iterator[pl.DataFrame]:
    """Yield consecutive slices of at most batch_size rows."""
    for offset in range(0, df.height, batch_size):
        yield df.slice(offset, batch_size)


def write_output(result: pl.DataFrame, path: Path) -> None:
    """Write results as Parquet or CSV, by file extension."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".parquet":
        result.write_parquet(path)
    else:
        # CSV has no list type
        result.with_columns(pl.col("product_ids").list.join(" ")).write_csv(path)


def main() -> None:
    args = parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    if args.output.suffix not in OUTPUT_FORMATS:
        logger.error("Unsupported output format '%s' (use %s)", args.output.suffix, OUTPUT_FORMATS)
        sys.exit(2)
    if args.batch_size < 1:
        logger.error("--batch-size must be positive, got %d", args.batch_size)
        sys.exit(2)

    urls = load_urls(args.input)
    logger.info("URLs to analyze: %d", urls.height)

    processor = BatchProcessor()
    results: list[pl.DataFrame] = []
    start_time = time.time()

    for batch_num, batch_df in enumerate(iter_batches(urls, args.batch_size), start=1):
        result = processor.process_batch(batch_df)
        results.append(result)
        summary = BatchProcessor.summarize(result)
        logger.info(
            "Batch %d: %d URLs (failed=%d, with_ids=%d)",
            batch_num,
            summary["total"],
            summary["failed"],
            summary["with_ids"],
        )

    combined = pl.concat(results) if results else pl.DataFrame(schema=BATCH_SCHEMA)
    write_output(combined, args.output)

    summary = BatchProcessor.summarize(combined)
    logger.info(
        "Completed in %.2fs | total=%d | successful=%d | failed=%d | with_ids=%d | output=%s",
        time.time() - start_time,
        summary["total"],
        summary["successful"],
        summary["failed"],
        summary["with_ids"],
        args.output,
    )


if __name__ == "__main__":
    main()

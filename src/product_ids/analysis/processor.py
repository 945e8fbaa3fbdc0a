"""
URL analysis pipeline.

Runs raw URLs through normalization, key generation and ID extraction, one
at a time or as a Polars batch.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

import polars as pl

from product_ids.errors import InvalidUrlError
from product_ids.extraction import ExtractionResult, IdExtractor, get_extractor
from product_ids.normalization import (
    URLKeyGenerator,
    URLNormalizer,
    get_key_generator,
    get_normalizer,
)
from product_ids.registry import coerce_store_id

logger = logging.getLogger(__name__)

# Output schema of BatchProcessor.process_batch
BATCH_SCHEMA = {
    "url": pl.Utf8,
    "store_id": pl.Utf8,
    "domain": pl.Utf8,
    "href": pl.Utf8,
    "key": pl.Utf8,
    "product_ids": pl.List(pl.Utf8),
    "count": pl.Int32,
    "error": pl.Utf8,
}


def _error_record(url: Optional[str], store_id: Optional[str], error: str) -> dict:
    """Output row for an input row that could not be analyzed."""
    return {
        "url": url,
        "store_id": store_id,
        "domain": None,
        "href": None,
        "key": None,
        "product_ids": [],
        "count": 0,
        "error": error,
    }


@dataclass(frozen=True)
class UrlAnalysis:
    """Result of analyzing one URL."""

    url: str
    domain: str
    href: str
    key: str
    ids: ExtractionResult
    store_id: Optional[str] = None


class BatchProcessor:
    """
    Analyze URLs: normalize, key and extract product IDs.

    Usage:
        processor = BatchProcessor()
        processor.analyze("https://www.nike.com/t/shoe/AH8050-001").ids  # ('ah8050-001',)
        result = processor.process_batch(pl.DataFrame({"url": urls}))
    """

    def __init__(
        self,
        normalizer: Optional[URLNormalizer] = None,
        key_generator: Optional[URLKeyGenerator] = None,
        extractor: Optional[IdExtractor] = None,
    ):
        """
        Initialize processor.

        Args:
            normalizer: URL normalizer (global instance if None)
            key_generator: Key generator (global instance if None)
            extractor: ID extractor (global instance if None)
        """
        if key_generator is None:
            key_generator = (
                get_key_generator() if normalizer is None else URLKeyGenerator(normalizer)
            )
        self.normalizer = normalizer or get_normalizer()
        self.key_generator = key_generator
        self.extractor = extractor or get_extractor()

    def analyze(
        self, url: str, store_id: Union[str, int, None] = None
    ) -> UrlAnalysis:
        """
        Analyze a single URL.

        Raises:
            InvalidUrlError: If the URL cannot be parsed
        """
        store_id = coerce_store_id(store_id)
        components = self.normalizer.normalize(url)
        ids = self.extractor.extract(components, store_id=store_id)

        return UrlAnalysis(
            url=url,
            domain=components.domain,
            href=components.href,
            key=self.key_generator.create_key(components),
            ids=ids,
            store_id=store_id,
        )

    def process_batch(self, df: pl.DataFrame) -> pl.DataFrame:
        """
        Analyze a batch of URLs.

        Input schema:
            - url: string
            - store_id: string or integer (optional column)

        Output schema: see BATCH_SCHEMA. Rows whose URL is null or cannot be
        parsed keep their position, with null analysis fields and an ``error``
        message.

        Args:
            df: Input Polars DataFrame with a 'url' column

        Returns:
            DataFrame with one output row per input row
        """
        if "url" not in df.columns:
            raise ValueError("DataFrame missing required column: url")

        has_store_id = "store_id" in df.columns
        records = []

        for row in df.iter_rows(named=True):
            raw_url = row["url"]
            store_id = coerce_store_id(row["store_id"]) if has_store_id else None

            if raw_url is None:
                logger.warning("Skipping row with a null URL")
                records.append(_error_record(None, store_id, "Missing URL"))
                continue

            try:
                analysis = self.analyze(raw_url, store_id)
            except InvalidUrlError as e:
                logger.warning(f"Skipping URL of length {len(raw_url)} ({type(e).__name__})")
                records.append(_error_record(raw_url, store_id, str(e)))
                continue

            records.append(
                {
                    "url": raw_url,
                    "store_id": analysis.store_id,
                    "domain": analysis.domain,
                    "href": analysis.href,
                    "key": analysis.key,
                    "product_ids": list(analysis.ids),
                    "count": len(analysis.ids),
                    "error": None,
                }
            )

        if not records:
            return pl.DataFrame(schema=BATCH_SCHEMA)

        return pl.DataFrame(records, schema=BATCH_SCHEMA)

    @staticmethod
    def summarize(result: pl.DataFrame) -> dict:
        """
        Summarize a processed batch.

        Returns:
            Dictionary with total, successful and failed row counts and the
            number of rows that yielded at least one ID
        """
        failed = result.filter(pl.col("error").is_not_null()).height
        return {
            "total": result.height,
            "successful": result.height - failed,
            "failed": failed,
            "with_ids": result.filter(pl.col("count") > 0).height,
        }


def analyze_url(url: str, store_id: Union[str, int, None] = None) -> UrlAnalysis:
    """Analyze one URL with the global normalizer, key generator and extractor."""
    return BatchProcessor().analyze(url, store_id)

"""
Basic extraction example.

Demonstrates the URL normalizer, deduplication keys, the store registry and
the batch processor.
"""

import polars as pl

from product_ids.analysis import BatchProcessor
from product_ids.extraction import IdExtractor
from product_ids.normalization import URLKeyGenerator, URLNormalizer
from product_ids.registry import get_registry


def main():
    """Run basic extraction example."""
    print("=" * 60)
    print("Product IDs: Basic Extraction Example")
    print("=" * 60)

    normalizer = URLNormalizer()
    keys = URLKeyGenerator(normalizer)
    extractor = IdExtractor()

    # Example 1: Normalize a single URL
    print("\n1. Single URL Normalization")
    print("-" * 60)

    raw_url = "HTTP://WWW.Nike.COM:80/t/air-max-270-mens-shoe//AH8050-001/?utm_source=mail#reviews"
    print(f"Raw URL: {raw_url}")

    components = normalizer.normalize(raw_url)
    print(f"\nNormalized URL: {components.href}")
    print(f"Domain (eTLD+1): {components.domain}")
    print(f"Pathname: {components.pathname}")
    print(f"Key: {keys.create_key(components)}")

    # Example 2: Extract IDs
    print("\n\n2. ID Extraction")
    print("-" * 60)

    print(f"IDs: {extractor.extract(components)}")

    store = get_registry().get(components.domain)
    print(f"Store: {store.name} (id={store.id})" if store else "Store: none")

    # Example 3: Process a batch of URLs
    print("\n\n3. Batch Processing")
    print("-" * 60)

    sample_data = pl.DataFrame({
        "url": [
            "https://www.target.com/p/desk-lamp/-/A-54191097",
            "https://www.samsclub.com/ip/seort/prod24921152",
            "https://oldnavy.gap.com/browse/product.do?pid=123456",
            "https://www.kohls.com/product/prd-7692699/shirt.jsp?skuId=76565656",
            "https://example.com/item?sku=123",
            "javascript:alert(1)",
        ],
    })

    processor = BatchProcessor(normalizer=normalizer, key_generator=keys, extractor=extractor)
    result = processor.process_batch(sample_data)

    print(result.select("domain", "key", "product_ids", "error"))
    print(f"\nSummary: {BatchProcessor.summarize(result)}")


if __name__ == "__main__":
    main()

"""
URL normalization utilities.

Handles canonicalization, eTLD+1 extraction, and deduplication keys.
"""

from .keys import (
    KEY_LENGTH,
    URLKeyGenerator,
    create_url_key,
    get_key_generator,
    reset_key_generator,
)
from .url_normalizer import (
    URLNormalizer,
    UrlComponents,
    get_normalizer,
    normalize_url,
    reset_normalizer,
)

__all__ = [
    "URLNormalizer",
    "UrlComponents",
    "get_normalizer",
    "normalize_url",
    "reset_normalizer",
    "KEY_LENGTH",
    "URLKeyGenerator",
    "create_url_key",
    "get_key_generator",
    "reset_key_generator",
]

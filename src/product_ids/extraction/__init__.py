"""
Product ID extraction engine.
"""

from .extractor import (
    ExtractionResult,
    IdExtractor,
    extract_ids,
    get_extractor,
    reset_extractor,
)
from .patterns import GENERIC_PATHNAME_PATTERNS, GENERIC_QUERY_PARAM_NAMES

__all__ = [
    "ExtractionResult",
    "IdExtractor",
    "extract_ids",
    "get_extractor",
    "reset_extractor",
    "GENERIC_PATHNAME_PATTERNS",
    "GENERIC_QUERY_PARAM_NAMES",
]

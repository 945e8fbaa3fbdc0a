"""
URL analysis pipeline.

Composes normalization, key generation and ID extraction.
"""

from .processor import BATCH_SCHEMA, BatchProcessor, UrlAnalysis, analyze_url

__all__ = ["BATCH_SCHEMA", "BatchProcessor", "UrlAnalysis", "analyze_url"]

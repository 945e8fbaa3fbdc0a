"""
HTTP serving layer.

Thin FastAPI wrapper around the analysis pipeline.
"""

from product_ids.api.models import (
    BatchRequest,
    BatchResponse,
    BatchResult,
    ProductIdsResponse,
    UrlItem,
)
from product_ids.api.server import app

__all__ = [
    "BatchRequest",
    "BatchResponse",
    "BatchResult",
    "ProductIdsResponse",
    "UrlItem",
    "app",
]

"""
API request and response models.
"""

from pydantic import BaseModel, Field


class ProductIdsResponse(BaseModel):
    """Response for GET /v1/product-ids."""

    url: str = Field(..., description="URL as submitted")
    domain: str = Field(..., description="Normalized store domain")
    href: str = Field(..., description="Normalized URL")
    key: str = Field(..., description="16-character deduplication key")
    product_ids: list[str] = Field(
        default_factory=list, description="Extracted product IDs, in priority order"
    )
    count: int = Field(..., description="Number of product IDs")


class UrlItem(BaseModel):
    """A single URL to analyze."""

    url: str = Field(..., min_length=1, description="Product URL")
    store_id: str | int | None = Field(
        None, description="Store ID selecting store-specific extraction rules"
    )


class BatchRequest(BaseModel):
    """Request body for POST /v1/url-analysis/batch."""

    urls: list[UrlItem] = Field(
        ..., min_length=1, max_length=100, description="URLs to analyze (1-100)"
    )


class BatchResult(BaseModel):
    """Outcome for one URL of a batch."""

    url: str = Field(..., description="URL as submitted")
    success: bool = Field(..., description="Whether the URL could be analyzed")
    domain: str | None = Field(None, description="Normalized store domain")
    href: str | None = Field(None, description="Normalized URL")
    key: str | None = Field(None, description="16-character deduplication key")
    product_ids: list[str] = Field(
        default_factory=list, description="Extracted product IDs"
    )
    count: int = Field(0, description="Number of product IDs")
    error: str | None = Field(None, description="Error type, for failed URLs")
    message: str | None = Field(None, description="Error message, for failed URLs")


class BatchResponse(BaseModel):
    """Response for POST /v1/url-analysis/batch."""

    results: list[BatchResult] = Field(
        default_factory=list, description="Per-URL results, in request order"
    )
    total: int = Field(..., description="Number of URLs submitted")
    successful: int = Field(..., description="Number of URLs analyzed")
    failed: int = Field(..., description="Number of URLs that could not be parsed")

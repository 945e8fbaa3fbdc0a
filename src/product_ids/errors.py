"""
Exception types raised by the product-ids engine.
"""

from typing import Any


class ProductIdsError(Exception):
    """Base class for all product-ids errors."""


class InvalidUrlError(ProductIdsError, ValueError):
    """Raised when a raw string cannot be parsed as a URL."""

    def __init__(self, url: Any, message: str | None = None):
        self.url = url
        super().__init__(message or f"Invalid URL format: {url!r}")


class InvalidKeyInputError(ProductIdsError, TypeError):
    """Raised when URL key generation receives a non-string value."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"URL key input must be a string, got {type(value).__name__}"
        )


class RegistryConfigError(ProductIdsError, ValueError):
    """Raised when store definitions cannot be built into a registry."""


class ExtractionTimeoutExceeded(ProductIdsError):
    """
    Internal signal: the extraction time budget ran out.

    Never escapes IdExtractor; callers receive the partial result instead.
    """

    def __init__(self, elapsed_ms: float, budget_ms: float):
        self.elapsed_ms = elapsed_ms
        self.budget_ms = budget_ms
        super().__init__(
            f"Extraction exceeded {budget_ms:.0f}ms budget ({elapsed_ms:.1f}ms elapsed)"
        )

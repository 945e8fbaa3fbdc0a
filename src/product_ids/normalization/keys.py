"""
URL deduplication keys.

A key is 16 URL-safe base64 characters taken from the xxh3_128 digest of
``domain + lower(pathname) + lower(search)``. The hostname is already
lowercase; path and query are case-folded only here, never in the
components handed back to callers.
"""

import base64
from typing import Optional, Union

import xxhash

from product_ids.errors import InvalidKeyInputError, InvalidUrlError

from .url_normalizer import URLNormalizer, UrlComponents, get_normalizer

KEY_LENGTH = 16


class URLKeyGenerator:
    """
    Generate fixed-length deduplication keys for URLs.

    Usage:
        keys = URLKeyGenerator()
        keys.create_key("https://WWW.Example.com/Path?utm_source=x")  # 'Qm3...' (16 chars)
        keys.create_key("https://example.com/path")                   # same key
    """

    def __init__(self, normalizer: Optional[URLNormalizer] = None):
        self.normalizer = normalizer or get_normalizer()

    def create_key(self, value: Union[str, UrlComponents]) -> str:
        """
        Create a deduplication key.

        Args:
            value: Raw URL string, normalized href, or UrlComponents

        Returns:
            16-character key drawn from ``[A-Za-z0-9_-]``

        Raises:
            InvalidKeyInputError: If value is neither a string nor UrlComponents
        """
        return self.hash_base_key(self.base_key(value))

    def base_key(self, value: Union[str, UrlComponents]) -> str:
        """Build the canonical string that is hashed into a key."""
        if isinstance(value, UrlComponents):
            return self._components_base_key(value)

        if not isinstance(value, str):
            raise InvalidKeyInputError(value)

        if not value.strip():
            return ""

        try:
            components = self.normalizer.normalize(value)
        except InvalidUrlError:
            # Not a URL: still keyable, folded whole
            return value.strip().lower()

        return self._components_base_key(components)

    @staticmethod
    def _components_base_key(components: UrlComponents) -> str:
        return (
            f"{components.domain}"
            f"{components.pathname.lower()}"
            f"{components.search.lower()}"
        )

    @staticmethod
    def hash_base_key(base_key: str) -> str:
        """
        Hash a canonical string into a key using xxh3_128.

        Args:
            base_key: Canonical string

        Returns:
            First 16 characters of the URL-safe base64 digest
        """
        digest = xxhash.xxh3_128(base_key.encode("utf-8")).digest()
        return base64.urlsafe_b64encode(digest)[:KEY_LENGTH].decode("ascii")


# Global key generator instance
_key_generator: Optional[URLKeyGenerator] = None


def get_key_generator() -> URLKeyGenerator:
    """Get or create global key generator instance."""
    global _key_generator
    if _key_generator is None:
        _key_generator = URLKeyGenerator()
    return _key_generator


def reset_key_generator() -> None:
    """Reset global key generator (for testing)."""
    global _key_generator
    _key_generator = None


def create_url_key(value: Union[str, UrlComponents]) -> str:
    """Create a 16-character deduplication key with the global generator."""
    return get_key_generator().create_key(value)

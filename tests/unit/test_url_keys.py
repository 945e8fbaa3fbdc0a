"""Unit tests for URL deduplication keys."""

import re

import pytest

from product_ids.errors import InvalidKeyInputError
from product_ids.normalization import (
    KEY_LENGTH,
    URLKeyGenerator,
    URLNormalizer,
    create_url_key,
    get_key_generator,
    reset_key_generator,
)

KEY_RE = re.compile(r"^[A-Za-z0-9_-]{16}$")


class TestURLKeyGenerator:
    """Test suite for URLKeyGenerator."""

    @pytest.fixture
    def keys(self):
        """Create a fresh URLKeyGenerator instance."""
        reset_key_generator()
        return URLKeyGenerator(URLNormalizer())

    def test_key_is_deterministic(self, keys):
        """Test the same URL always produces the same key."""
        url = "https://example.com/path"

        assert keys.create_key(url) == keys.create_key(url)

    def test_key_shape(self, keys):
        """Test keys are 16 URL-safe characters."""
        for url in (
            "https://example.com/path",
            "https://www.nike.com/t/shoe/ABC123-DEF",
            "not a url at all",
            "",
        ):
            key = keys.create_key(url)
            assert len(key) == KEY_LENGTH
            assert KEY_RE.match(key)

    def test_different_urls_different_keys(self, keys):
        """Test different URLs produce different keys."""
        assert keys.create_key("https://example.com/path1") != keys.create_key(
            "https://example.com/path2"
        )

    def test_case_insensitive_path_and_query(self, keys):
        """Test keys fold path and query casing."""
        assert keys.create_key("https://example.com/Path?ID=ABC") == keys.create_key(
            "https://example.com/path?id=abc"
        )

    def test_host_case_and_www_ignored(self, keys):
        """Test host casing and www. do not change the key."""
        assert keys.create_key("https://WWW.EXAMPLE.COM/Path") == keys.create_key(
            "https://example.com/Path"
        )

    def test_equivalent_urls_share_key(self, keys):
        """Test URLs that normalize the same share a key."""
        base = keys.create_key("https://example.com/path?a=1&b=2")

        assert keys.create_key("http://www.example.com/path/?b=2&a=1") == base
        assert keys.create_key("example.com/path?a=1&b=2&utm_source=news") == base
        assert keys.create_key("https://example.com:443/path?a=1&b=2#frag") == base

    def test_subdomain_ignored_unless_preserved(self, keys):
        """Test ordinary subdomains fold into the domain but brand ones do not."""
        assert keys.create_key("https://shop.example.com/p") == keys.create_key(
            "https://example.com/p"
        )
        assert keys.create_key("https://oldnavy.gap.com/p") != keys.create_key(
            "https://gap.com/p"
        )

    def test_components_input(self, keys):
        """Test keys can be made from UrlComponents directly."""
        components = URLNormalizer().normalize("https://example.com/Path?a=1")

        assert keys.create_key(components) == keys.create_key("https://example.com/Path?a=1")
        assert components.key == keys.create_key(components)

    def test_base_key(self, keys):
        """Test the canonical string that gets hashed."""
        assert keys.base_key("https://WWW.Example.com/Path?B=2&a=1") == "example.com/path?b=2&a=1"

    def test_empty_string_key(self, keys):
        """Test empty input is keyed rather than rejected."""
        assert keys.base_key("") == ""
        assert keys.create_key("") == keys.create_key("   ")

    def test_unparseable_string_key(self, keys):
        """Test strings that are not URLs are folded and keyed whole."""
        assert keys.base_key("  JavaScript:Void(0) ") == "javascript:void(0)"
        assert keys.create_key("javascript:void(0)") == keys.create_key("JAVASCRIPT:VOID(0)")

    @pytest.mark.parametrize("value", [None, 123, b"https://example.com", ["x"]])
    def test_non_string_rejected(self, keys, value):
        """Test non-string input raises InvalidKeyInputError."""
        with pytest.raises(InvalidKeyInputError) as exc_info:
            keys.create_key(value)

        assert exc_info.value.value == value

    def test_invalid_input_is_type_error(self, keys):
        """Test InvalidKeyInputError can be caught as TypeError."""
        with pytest.raises(TypeError):
            keys.create_key(None)

    def test_hash_base_key(self):
        """Test hashing is a pure function of the canonical string."""
        assert URLKeyGenerator.hash_base_key("example.com/") == URLKeyGenerator.hash_base_key(
            "example.com/"
        )
        assert URLKeyGenerator.hash_base_key("a") != URLKeyGenerator.hash_base_key("b")


class TestGlobalKeyGenerator:
    """Test the process-wide key generator helpers."""

    def test_get_key_generator_singleton(self):
        """Test get_key_generator returns the same instance until reset."""
        reset_key_generator()
        first = get_key_generator()

        assert get_key_generator() is first

        reset_key_generator()
        assert get_key_generator() is not first

    def test_create_url_key(self):
        """Test the module-level convenience function."""
        assert create_url_key("https://example.com/") == URLKeyGenerator().create_key(
            "https://example.com/"
        )

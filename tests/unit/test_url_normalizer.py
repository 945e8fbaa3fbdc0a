"""Unit tests for URL normalization."""

from dataclasses import FrozenInstanceError

import pytest

from product_ids.errors import InvalidUrlError
from product_ids.normalization import (
    URLNormalizer,
    UrlComponents,
    get_normalizer,
    normalize_url,
    reset_normalizer,
)


class TestURLNormalizer:
    """Test suite for URLNormalizer."""

    @pytest.fixture
    def normalizer(self):
        """Create a URLNormalizer instance."""
        return URLNormalizer()

    def test_basic_normalization(self, normalizer):
        """Test basic URL normalization."""
        result = normalizer.normalize("https://example.com/path")

        assert isinstance(result, UrlComponents)
        assert result.protocol == "https"
        assert result.hostname == "example.com"
        assert result.domain == "example.com"
        assert result.subdomain is None
        assert result.port is None
        assert result.pathname == "/path"
        assert dict(result.query) == {}
        assert result.search == ""
        assert result.href == "https://example.com/path"
        assert result.original == "https://example.com/path"

    def test_full_canonicalization(self, normalizer):
        """Test every rule applied to one messy URL."""
        result = normalizer.normalize(
            "http://WWW.Example.co.uk:80/Path//To/?utm_source=x&b=2&a=1#top"
        )

        assert result.href == "https://example.co.uk/Path/To?a=1&b=2"
        assert result.domain == "example.co.uk"

    def test_https_forced(self, normalizer):
        """Test http and scheme-less URLs become https."""
        assert normalizer.normalize("http://example.com/a").protocol == "https"
        assert normalizer.normalize("example.com/a").href == "https://example.com/a"
        assert normalizer.normalize("//example.com/a").href == "https://example.com/a"

    def test_www_stripped(self, normalizer):
        """Test www. prefix is removed from the host."""
        result = normalizer.normalize("https://www.target.com/p/x")
        assert result.hostname == "target.com"
        assert result.domain == "target.com"

    def test_host_lowercased(self, normalizer):
        """Test host is lowercased."""
        result = normalizer.normalize("https://Example.COM/path")
        assert result.hostname == "example.com"

    def test_default_port_removal(self, normalizer):
        """Test default ports are removed."""
        assert normalizer.normalize("https://example.com:443/path").port is None
        assert normalizer.normalize("http://example.com:80/path").port is None

    def test_non_default_port(self, normalizer):
        """Test non-default ports are preserved."""
        result = normalizer.normalize("https://example.com:8443/path")
        assert result.port == 8443
        assert result.href == "https://example.com:8443/path"

    def test_path_normalization(self, normalizer):
        """Test path normalization."""
        # Resolve ..
        assert normalizer.normalize("https://example.com/a/b/../c").pathname == "/a/c"

        # Remove .
        assert normalizer.normalize("https://example.com/a/./b").pathname == "/a/b"

        # Collapse multiple slashes
        assert normalizer.normalize("https://example.com/a//b").pathname == "/a/b"

        # Don't go above root
        assert normalizer.normalize("https://example.com/../a").pathname == "/a"

    def test_trailing_slash_removed(self, normalizer):
        """Test a trailing slash is dropped except for the root path."""
        assert normalizer.normalize("https://example.com/path/").pathname == "/path"
        assert normalizer.normalize("https://example.com/").pathname == "/"
        assert normalizer.normalize("https://example.com").pathname == "/"

    def test_path_casing_preserved(self, normalizer):
        """Test path and query values keep their source casing."""
        result = normalizer.normalize("https://www.nike.com/t/Shoe/ABC123-DEF?Color=Red")

        assert result.pathname == "/t/Shoe/ABC123-DEF"
        assert result.query["Color"] == ("Red",)

    def test_fragment_removed(self, normalizer):
        """Test fragments are discarded."""
        result = normalizer.normalize("https://example.com/path#section")
        assert "#" not in result.href
        assert result.href == "https://example.com/path"

    def test_query_sorted(self, normalizer):
        """Test query parameters are sorted by key."""
        result = normalizer.normalize("https://example.com/path?z=1&a=2&m=3")

        assert list(result.query) == ["a", "m", "z"]
        assert result.search == "?a=2&m=3&z=1"

    def test_repeated_query_values_kept_in_order(self, normalizer):
        """Test repeated keys keep all values in source order."""
        result = normalizer.normalize("https://example.com/?b=2&a=1&a=0")

        assert result.query["a"] == ("1", "0")
        assert result.search == "?a=1&a=0&b=2"

    def test_blank_query_values_kept(self, normalizer):
        """Test parameters without a value survive."""
        result = normalizer.normalize("https://example.com/?flag=&x=1")
        assert result.query["flag"] == ("",)

    def test_tracking_params_stripped(self, normalizer):
        """Test tracking parameters are removed."""
        result = normalizer.normalize(
            "https://example.com/p?utm_source=a&utm_medium=b&gclid=c&fbclid=d"
            "&fb_action_ids=e&hsa_cam=f&ref=g&id=42"
        )

        assert dict(result.query) == {"id": ("42",)}
        assert result.search == "?id=42"

    def test_only_tracking_params(self, normalizer):
        """Test a query made only of tracking params disappears."""
        result = normalizer.normalize("https://example.com/p?utm_source=a")

        assert result.search == ""
        assert result.href == "https://example.com/p"

    def test_extra_tracking_params(self):
        """Test additional tracking parameters can be configured."""
        normalizer = URLNormalizer(extra_tracking_params={"sessionid"})
        result = normalizer.normalize("https://example.com/?sessionid=1&id=2")

        assert dict(result.query) == {"id": ("2",)}

    def test_etld_plus_one(self, normalizer):
        """Test eTLD+1 extraction via the Public Suffix List."""
        assert normalizer.normalize("https://shop.example.co.uk/").domain == "example.co.uk"
        assert normalizer.normalize("https://a.b.example.com/").domain == "example.com"
        assert normalizer.normalize("https://example.com.au/").domain == "example.com.au"

    def test_preserved_subdomains(self, normalizer):
        """Test brand storefront subdomains are kept in the domain."""
        result = normalizer.normalize("https://oldnavy.gap.com/browse/product.do?pid=123456")
        assert result.domain == "oldnavy.gap.com"
        assert result.subdomain == "oldnavy"

        result = normalizer.normalize("https://www.athleta.gap.com/")
        assert result.domain == "athleta.gap.com"

        result = normalizer.normalize("https://bananarepublicfactory.gapfactory.com/")
        assert result.domain == "bananarepublicfactory.gapfactory.com"

    def test_other_subdomains_dropped(self, normalizer):
        """Test ordinary subdomains collapse to the registrable domain."""
        result = normalizer.normalize("https://shop.gap.com/")

        assert result.domain == "gap.com"
        assert result.subdomain is None

    def test_preserved_subdomains_configurable(self):
        """Test the preserved subdomain set can be overridden."""
        normalizer = URLNormalizer(preserved_subdomains={"shop"})

        assert normalizer.normalize("https://shop.example.com/").domain == "shop.example.com"
        assert normalizer.normalize("https://oldnavy.gap.com/").domain == "gap.com"

    def test_ip_host(self, normalizer):
        """Test IP hosts are used as the domain."""
        result = normalizer.normalize("http://192.168.1.1/x")

        assert result.domain == "192.168.1.1"
        assert result.href == "https://192.168.1.1/x"

    def test_ipv6_host(self, normalizer):
        """Test IPv6 hosts are bracketed in the href."""
        result = normalizer.normalize("http://[::1]:8080/x")

        assert result.hostname == "::1"
        assert result.href == "https://[::1]:8080/x"

    def test_localhost(self, normalizer):
        """Test single-label hosts fall back to the host itself."""
        result = normalizer.normalize("http://localhost:3000/p")

        assert result.domain == "localhost"
        assert result.port == 3000

    def test_idn_punycode(self, normalizer):
        """Test IDN hosts are converted to punycode."""
        result = normalizer.normalize("https://bücher.de/")
        assert result.hostname == "xn--bcher-kva.de"

    def test_empty_string(self, normalizer):
        """Test empty input yields empty components."""
        for value in ("", "   "):
            result = normalizer.normalize(value)

            assert result.href == ""
            assert result.pathname == ""
            assert result.domain == ""
            assert dict(result.query) == {}

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "mailto:someone@example.com",
            "data:text/html,hi",
            "http://",
            "https://example.com:99999/",
            "https://exa mple.com/",
            "file:///etc/passwd",
        ],
    )
    def test_invalid_urls(self, normalizer, url):
        """Test unparseable URLs raise InvalidUrlError."""
        with pytest.raises(InvalidUrlError) as exc_info:
            normalizer.normalize(url)

        assert exc_info.value.url == url

    def test_non_string_rejected(self, normalizer):
        """Test non-string input raises InvalidUrlError."""
        with pytest.raises(InvalidUrlError):
            normalizer.normalize(None)

    def test_invalid_url_is_value_error(self, normalizer):
        """Test InvalidUrlError can be caught as ValueError."""
        with pytest.raises(ValueError):
            normalizer.normalize("javascript:void(0)")

    def test_components_immutable(self, normalizer):
        """Test UrlComponents cannot be modified."""
        result = normalizer.normalize("https://example.com/p?a=1")

        with pytest.raises(FrozenInstanceError):
            result.href = "https://other.com/"

        with pytest.raises(TypeError):
            result.query["b"] = ("2",)

    def test_components_hashable(self, normalizer):
        """Test equal URLs give equal, hashable components."""
        first = normalizer.normalize("https://example.com/p?a=1")
        second = normalizer.normalize("https://example.com/p?a=1")

        assert first == second
        assert hash(first) == hash(second)

    def test_get_path_query(self, normalizer):
        """Test combined path+query."""
        result = normalizer.normalize("https://example.com/path?b=2&a=1")
        assert result.get_path_query() == "/path?a=1&b=2"

    def test_encoded_href(self, normalizer):
        """Test percent-encoded href."""
        result = normalizer.normalize("https://example.com/a?b=1")
        assert result.encoded_href == "https%3A%2F%2Fexample.com%2Fa%3Fb%3D1"

    def test_key_property(self, normalizer):
        """Test components expose their deduplication key."""
        result = normalizer.normalize("https://example.com/a")

        assert len(result.key) == 16

    def test_idempotent(self, normalizer):
        """Test normalizing an href again is a no-op."""
        first = normalizer.normalize("http://WWW.Example.com/A/./b/?z=1&utm_source=x&a=2")
        second = normalizer.normalize(first.href)

        assert second.href == first.href
        assert second.domain == first.domain


class TestGlobalNormalizer:
    """Test the process-wide normalizer helpers."""

    def test_get_normalizer_singleton(self):
        """Test get_normalizer returns the same instance until reset."""
        reset_normalizer()
        first = get_normalizer()

        assert get_normalizer() is first

        reset_normalizer()
        assert get_normalizer() is not first

    def test_normalize_url(self):
        """Test the module-level convenience function."""
        assert normalize_url("http://www.example.com/").href == "https://example.com/"

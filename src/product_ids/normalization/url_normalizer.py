"""
URL normalization and canonicalization.

Normalization strategy:
- Default and force the https scheme, drop credentials and default ports
- Lowercase the host, strip ``www.``, convert IDNs to punycode
- Extract eTLD+1 via the Public Suffix List, keeping brand storefront subdomains
- Strip fragments and tracking parameters, sort the remaining query
- Keep path and query values in their source casing
"""

import ipaddress
import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional
from urllib.parse import parse_qsl, quote, urlencode, urlsplit

from publicsuffixlist import PublicSuffixList

from product_ids.config import get_config
from product_ids.errors import InvalidUrlError

logger = logging.getLogger(__name__)

# Exact-name tracking and marketing parameters
TRACKING_PARAMS = frozenset(
    {
        # UTM and click identifiers
        "_ga",
        "gclid",
        "gclsrc",
        "_gl",
        "fbclid",
        "twclid",
        "t",
        "msclkid",
        # Generic marketing parameters
        "ref",
        "referral",
        "source",
        "campaign",
        "medium",
        "content",
        "term",
        # Platform-specific parameters
        "igshid",
        "mc_cid",
        "mc_eid",
        "_hsenc",
        "_hsmi",
        "_kx",
        "zanpid",
        "affid",
        "aff_id",
        "affiliate",
        "cjevent",
    }
)

# Tracking parameter families
TRACKING_PARAM_PATTERNS = (
    re.compile(r"^utm_\w+"),
    re.compile(r"^fb_\w+"),
    re.compile(r"^hsa_\w+"),
)

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")
_OPAQUE_SCHEME_RE = re.compile(
    r"^(?:javascript|vbscript|data|mailto|tel|sms|about|blob):", re.IGNORECASE
)
_HOST_LABEL_RE = re.compile(r"^[a-z0-9_](?:[a-z0-9_-]{0,61}[a-z0-9_])?$")
_DUPLICATE_SLASHES_RE = re.compile(r"/{2,}")
# Characters left unescaped in paths; existing %XX escapes are kept as-is
_PATH_SAFE = "/%:@!$&'()*+,;=-._~"


@dataclass(frozen=True)
class UrlComponents:
    """
    Normalized URL components.

    Attributes:
        protocol: Scheme, always ``https`` for non-empty input
        domain: eTLD+1, prefixed with a preserved brand subdomain when present
        subdomain: Preserved brand subdomain, or None
        hostname: Lowercase host with ``www.`` stripped
        port: Non-default port, or None
        pathname: Path in source casing
        query: Query parameters sorted by key, values in source order and casing
        search: Serialized query (``?a=1&b=2``), empty when there is no query
        href: Full normalized URL (fragment discarded)
        original: Raw input string
    """

    protocol: str
    domain: str
    subdomain: Optional[str]
    hostname: str
    port: Optional[int]
    pathname: str
    query: Mapping[str, tuple[str, ...]] = field(hash=False)
    search: str
    href: str
    original: str

    @property
    def encoded_href(self) -> str:
        """Percent-encoded href, safe to embed in another URL or key."""
        return quote(self.href, safe="")

    @property
    def key(self) -> str:
        """16-character deduplication key for this URL."""
        from .keys import create_url_key

        return create_url_key(self)

    def get_path_query(self) -> str:
        """Get combined path+query."""
        return f"{self.pathname}{self.search}"


class URLNormalizer:
    """
    URL normalization and canonicalization engine.

    Usage:
        normalizer = URLNormalizer()
        result = normalizer.normalize("http://WWW.Example.co.uk:80/Path//To/?utm_source=x&b=2&a=1#top")
        print(result.href)    # https://example.co.uk/Path/To?a=1&b=2
        print(result.domain)  # example.co.uk
    """

    # Default ports for common schemes
    DEFAULT_PORTS = {
        "http": 80,
        "https": 443,
        "ftp": 21,
        "ftps": 990,
    }

    def __init__(
        self,
        preserved_subdomains: Optional[Iterable[str]] = None,
        extra_tracking_params: Optional[Iterable[str]] = None,
        default_scheme: Optional[str] = None,
    ):
        """
        Initialize normalizer with Public Suffix List.

        Args:
            preserved_subdomains: Brand subdomains to keep (defaults to config)
            extra_tracking_params: Extra exact-name parameters to strip
            default_scheme: Scheme to assume and force (defaults to config)
        """
        config = get_config().normalization
        self.psl = PublicSuffixList()
        self.preserved_subdomains = frozenset(
            config.preserved_subdomains
            if preserved_subdomains is None
            else preserved_subdomains
        )
        self.tracking_params = TRACKING_PARAMS | frozenset(
            config.extra_tracking_params
            if extra_tracking_params is None
            else extra_tracking_params
        )
        self.default_scheme = (default_scheme or config.default_scheme).lower()

    def normalize(self, url: str) -> UrlComponents:
        """
        Normalize a URL into its canonical components.

        An empty (or whitespace-only) string yields empty components rather
        than an error.

        Args:
            url: Raw URL string

        Returns:
            UrlComponents with all components normalized

        Raises:
            InvalidUrlError: If the input is not a string or cannot be parsed
        """
        if not isinstance(url, str):
            raise InvalidUrlError(url, f"URL must be a string, got {type(url).__name__}")

        raw = url
        url = url.strip()
        if not url:
            return self._empty(raw)

        if _OPAQUE_SCHEME_RE.match(url):
            raise InvalidUrlError(raw, f"Unsupported URL scheme: {url.split(':', 1)[0]}")

        if url.startswith("//"):
            url = f"{self.default_scheme}:{url}"
        elif not _SCHEME_RE.match(url):
            url = f"{self.default_scheme}://{url}"

        # Parse URL; .port raises ValueError on non-numeric or out-of-range ports
        try:
            parsed = urlsplit(url)
            port = parsed.port
        except ValueError as e:
            raise InvalidUrlError(raw, f"Failed to parse URL {raw!r}: {e}") from e

        source_scheme = parsed.scheme.lower()
        hostname = self._normalize_host(parsed.hostname, raw)
        port = self._normalize_port(port, source_scheme)
        pathname = self._normalize_path(parsed.path)
        query = self._normalize_query(parsed.query)
        search = self._serialize_query(query)

        domain, subdomain = self._extract_domain(hostname)

        netloc = f"[{hostname}]" if ":" in hostname else hostname
        if port is not None:
            netloc = f"{netloc}:{port}"

        href = f"{self.default_scheme}://{netloc}{pathname}{search}"

        logger.debug(f"Normalized URL to {href} (domain={domain})")

        return UrlComponents(
            protocol=self.default_scheme,
            domain=domain,
            subdomain=subdomain,
            hostname=hostname,
            port=port,
            pathname=pathname,
            query=query,
            search=search,
            href=href,
            original=raw,
        )

    def _empty(self, raw: str) -> UrlComponents:
        """Components for empty input."""
        return UrlComponents(
            protocol=self.default_scheme,
            domain="",
            subdomain=None,
            hostname="",
            port=None,
            pathname="",
            query=MappingProxyType({}),
            search="",
            href="",
            original=raw,
        )

    def _normalize_host(self, host: Optional[str], raw: str) -> str:
        """
        Normalize host: lowercase, strip ``www.``, convert to punycode.

        Args:
            host: Hostname from parsed URL (already lowercased by urlsplit)
            raw: Original input, for error reporting

        Returns:
            Normalized host in ASCII (punycode for IDN)
        """
        if not host:
            raise InvalidUrlError(raw, f"URL must have a host: {raw!r}")

        host = host.lower().rstrip(".")

        if self._is_ip(host):
            return host

        # Convert to punycode (idna encoding) if needed
        try:
            host = host.encode("idna").decode("ascii")
        except UnicodeError as e:
            raise InvalidUrlError(raw, f"Invalid hostname {host!r}: {e}") from e

        labels = host.split(".")
        if not all(_HOST_LABEL_RE.match(label) for label in labels):
            raise InvalidUrlError(raw, f"Invalid hostname: {host!r}")

        if labels[0] == "www" and len(labels) > 2:
            host = ".".join(labels[1:])

        return host

    def _normalize_port(self, port: Optional[int], scheme: str) -> Optional[int]:
        """
        Normalize port: return None if it's the default port for the source
        scheme or for the forced scheme.
        """
        if port is None:
            return None

        if port in (self.DEFAULT_PORTS.get(scheme), self.DEFAULT_PORTS.get(self.default_scheme)):
            return None

        return port

    def _normalize_path(self, path: str) -> str:
        """
        Normalize path: resolve ./ and ../, collapse multiple slashes and drop
        a single trailing slash. The root path stays ``/``.

        Args:
            path: Path from parsed URL

        Returns:
            Normalized path in source casing
        """
        if not path:
            return "/"

        path = _DUPLICATE_SLASHES_RE.sub("/", quote(path, safe=_PATH_SAFE))

        normalized: list[str] = []
        for segment in path.split("/"):
            if segment in ("", "."):
                continue
            if segment == "..":
                # Don't go above root
                if normalized:
                    normalized.pop()
            else:
                normalized.append(segment)

        return "/" + "/".join(normalized)

    def _normalize_query(self, query: str) -> Mapping[str, tuple[str, ...]]:
        """
        Normalize query: strip tracking parameters, sort by key.

        Duplicate keys keep their values in source order.
        """
        if not query:
            return MappingProxyType({})

        params: dict[str, list[str]] = {}
        for name, value in parse_qsl(query, keep_blank_values=True):
            if self._is_tracking_param(name):
                continue
            params.setdefault(name, []).append(value)

        return MappingProxyType(
            {name: tuple(params[name]) for name in sorted(params)}
        )

    def _is_tracking_param(self, name: str) -> bool:
        if name in self.tracking_params:
            return True
        return any(pattern.match(name) for pattern in TRACKING_PARAM_PATTERNS)

    @staticmethod
    def _serialize_query(query: Mapping[str, tuple[str, ...]]) -> str:
        if not query:
            return ""
        return "?" + urlencode(
            [(name, value) for name, values in query.items() for value in values]
        )

    def _extract_domain(self, host: str) -> tuple[str, Optional[str]]:
        """
        Extract eTLD+1 (effective top-level domain + 1 label) using the Public
        Suffix List, folding in a preserved brand subdomain.

        Args:
            host: Normalized hostname

        Returns:
            Tuple of (domain, preserved subdomain or None)
        """
        if self._is_ip(host):
            return host, None

        # Fallback to the host for 'localhost' or bare public suffixes
        domain = self.psl.privatesuffix(host) or host
        if domain == host:
            return domain, None

        subdomain_labels = host[: -len(domain) - 1].split(".")
        immediate = subdomain_labels[-1]
        if immediate not in self.preserved_subdomains or domain.startswith(f"{immediate}."):
            return domain, None

        return f"{immediate}.{domain}", immediate

    @staticmethod
    def _is_ip(host: str) -> bool:
        try:
            ipaddress.ip_address(host)
        except ValueError:
            return False
        return True


# Process-wide normalizer, created on first use
_normalizer: Optional[URLNormalizer] = None


def get_normalizer() -> URLNormalizer:
    """Get or create the global URL normalizer."""
    global _normalizer
    if _normalizer is None:
        _normalizer = URLNormalizer()
    return _normalizer


def reset_normalizer() -> None:
    """Reset the global URL normalizer (for testing)."""
    global _normalizer
    _normalizer = None


def normalize_url(url: str) -> UrlComponents:
    """Normalize ``url`` with the global normalizer."""
    return get_normalizer().normalize(url)

"""
Product ID extraction from normalized URL components.

Stages run in priority order:
1. Store-specific pathname patterns (with the store's optional ID transform)
2. Generic pathname patterns
3. Store-specific query parameters and query patterns
4. Generic query parameters

Candidates are lowercased and deduplicated in first-seen order. Extraction
stops as soon as the result cap is reached, and abandons the remaining work
once the per-call time budget is spent, returning what it already found.
"""

import logging
import time
from functools import partial
from typing import Callable, Iterable, Mapping, Optional

from product_ids.config import get_config
from product_ids.errors import ExtractionTimeoutExceeded
from product_ids.normalization import UrlComponents
from product_ids.registry import StoreConfig, StoreRegistry, get_registry

from .patterns import (
    GENERIC_PATHNAME_PATTERNS,
    GENERIC_QUERY_PARAM_NAMES,
    QUERY_VALUE_PATTERN,
    VALID_ID_PATTERN,
)

logger = logging.getLogger(__name__)

ExtractionResult = tuple[str, ...]


class _Candidates:
    """Ordered, capped, case-insensitive candidate set with a deadline."""

    def __init__(self, max_results: int, timeout_ms: float):
        self.max_results = max_results
        self.timeout_ms = timeout_ms
        self._started = time.perf_counter()
        self._deadline = self._started + timeout_ms / 1000
        self._ids: dict[str, None] = {}

    @property
    def full(self) -> bool:
        return len(self._ids) >= self.max_results

    @property
    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._started) * 1000

    def check_deadline(self) -> None:
        if time.perf_counter() >= self._deadline:
            raise ExtractionTimeoutExceeded(self.elapsed_ms, self.timeout_ms)

    def add(self, candidate: str) -> None:
        candidate = candidate.strip().lower()
        if not VALID_ID_PATTERN.fullmatch(candidate) or self.full:
            return
        self._ids.setdefault(candidate, None)

    def freeze(self) -> ExtractionResult:
        return tuple(self._ids)

    def __len__(self) -> int:
        return len(self._ids)


class IdExtractor:
    """
    Extract candidate product IDs from UrlComponents.

    Usage:
        extractor = IdExtractor()
        components = normalize_url("https://www.target.com/p/lamp/-/A-54191097")
        extractor.extract(components)          # ('54191097',)
        extractor.extract(components, "9528")  # Nike rules only, generic stages still run
    """

    def __init__(
        self,
        registry: Optional[StoreRegistry] = None,
        max_results: Optional[int] = None,
        timeout_ms: Optional[float] = None,
        max_source_length: Optional[int] = None,
    ):
        """
        Initialize extractor.

        Args:
            registry: Store registry (defaults to the global registry)
            max_results: Result cap (defaults to config)
            timeout_ms: Per-call time budget in milliseconds (defaults to config)
            max_source_length: Longest pathname/query scanned (defaults to config)
        """
        config = get_config().extraction
        self.registry = registry if registry is not None else get_registry()
        self.max_results = max_results or config.max_results
        self.timeout_ms = timeout_ms or config.timeout_ms
        self.max_source_length = max_source_length or config.max_source_length

    def extract(
        self,
        url_components: UrlComponents,
        store_id: Optional[str] = None,
        timeout_ms: Optional[float] = None,
    ) -> ExtractionResult:
        """
        Extract product IDs.

        Args:
            url_components: Normalized URL components
            store_id: Explicit store ID; when given, the URL's domain is not
                used to find store rules
            timeout_ms: Override of the per-call time budget

        Returns:
            Immutable tuple of lowercase IDs, at most ``max_results`` long,
            ordered by discovery

        Raises:
            TypeError: If url_components is not UrlComponents
        """
        if not isinstance(url_components, UrlComponents):
            raise TypeError(
                f"url_components must be UrlComponents, got {type(url_components).__name__}"
            )

        candidates = _Candidates(self.max_results, timeout_ms or self.timeout_ms)
        store = self.registry.lookup(domain=url_components.domain, store_id=store_id)
        pathname = url_components.pathname[: self.max_source_length]
        search = url_components.search[: self.max_source_length]

        stages: list[tuple[str, Callable[[], None]]] = []
        if store is not None:
            stages.append(
                (
                    "store pathname",
                    partial(
                        self._match_patterns,
                        pathname,
                        store.pathname_patterns,
                        candidates,
                        store.transform,
                    ),
                )
            )
        stages.append(
            (
                "generic pathname",
                partial(
                    self._match_patterns, pathname, GENERIC_PATHNAME_PATTERNS, candidates
                ),
            )
        )
        if store is not None:
            stages.append(
                (
                    "store query",
                    partial(
                        self._match_store_query,
                        url_components.query,
                        search,
                        store,
                        candidates,
                    ),
                )
            )
        stages.append(
            (
                "generic query",
                partial(
                    self._match_query_params,
                    url_components.query,
                    GENERIC_QUERY_PARAM_NAMES,
                    candidates,
                ),
            )
        )

        try:
            for name, stage in stages:
                if candidates.full:
                    logger.debug(
                        f"Reached maximum of {self.max_results} IDs before {name} stage"
                    )
                    break
                candidates.check_deadline()
                stage()
                logger.debug(f"After {name} stage: {len(candidates)} IDs")
        except ExtractionTimeoutExceeded as e:
            logger.warning(
                f"{e}; returning {len(candidates)} IDs "
                f"(pathname length {len(pathname)}, query length {len(search)})"
            )

        return candidates.freeze()

    @staticmethod
    def _match_patterns(
        source: str,
        patterns: Iterable,
        candidates: _Candidates,
        transform: Optional[Callable[[str], str]] = None,
    ) -> None:
        """Add group 1 and group 2 of every match of every pattern."""
        if not source:
            return

        for pattern in patterns:
            for match in pattern.finditer(source):
                candidates.check_deadline()
                for group in match.groups()[:2]:
                    if group:
                        candidates.add(transform(group) if transform else group)
                if candidates.full:
                    return

    def _match_store_query(
        self,
        query: Mapping[str, tuple[str, ...]],
        search: str,
        store: StoreConfig,
        candidates: _Candidates,
    ) -> None:
        self._match_query_params(query, store.query_param_names, candidates)
        if not candidates.full:
            self._match_patterns(search, store.query_patterns, candidates)

    @staticmethod
    def _match_query_params(
        query: Mapping[str, tuple[str, ...]],
        names: Iterable[str],
        candidates: _Candidates,
    ) -> None:
        """Add every 4-24 character value of the named parameters."""
        if not query or not names:
            return

        for name, values in query.items():
            if name.lower() not in names:
                continue
            for value in values:
                candidates.check_deadline()
                if QUERY_VALUE_PATTERN.fullmatch(value):
                    candidates.add(value)
                if candidates.full:
                    return


# Process-wide extractor, created on first use
_extractor: Optional[IdExtractor] = None


def get_extractor() -> IdExtractor:
    """Get or create the global extractor."""
    global _extractor
    if _extractor is None:
        _extractor = IdExtractor()
    return _extractor


def reset_extractor() -> None:
    """Reset the global extractor (for testing)."""
    global _extractor
    _extractor = None


def extract_ids(
    url_components: UrlComponents, store_id: Optional[str] = None
) -> ExtractionResult:
    """Extract product IDs with the global extractor."""
    return get_extractor().extract(url_components, store_id=store_id)

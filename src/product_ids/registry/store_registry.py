"""
Immutable store registry.

Maps store IDs, alias IDs, domains and store names to frozen StoreConfig
records. The registry is built once from static definitions and shared
read-only across requests: every nested collection is a tuple, frozenset or
MappingProxyType, and every record is a frozen dataclass.
"""

import logging
import re
from dataclasses import dataclass, field
from re import _constants as sre_constants
from re import _parser as sre_parse
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from pydantic import ValidationError

from product_ids.errors import RegistryConfigError

from .models import StoreDefinition

logger = logging.getLogger(__name__)

_REPEAT_OPS = (
    sre_constants.MAX_REPEAT,
    sre_constants.MIN_REPEAT,
    sre_constants.POSSESSIVE_REPEAT,
)


@dataclass(frozen=True)
class IdTransform:
    """Compiled ID rewrite: replace the first ``pattern`` match with ``replacement``."""

    pattern: re.Pattern
    replacement: str

    def __call__(self, product_id: str) -> str:
        return self.pattern.sub(self.replacement, product_id, count=1)


@dataclass(frozen=True)
class StoreConfig:
    """
    Frozen per-retailer rule bundle.

    Attributes:
        id: Store ID
        name: Display name
        domain: Primary domain
        domains: Primary and alias domains
        aliases: Alias store IDs
        pathname_patterns: Compiled pathname regexes, in priority order
        query_param_names: Lowercase query parameter names holding IDs
        query_patterns: Compiled regexes run against the serialized query
        transform: Optional rewrite for pathname-pattern IDs
    """

    id: str
    name: str
    domain: str
    domains: frozenset[str]
    aliases: frozenset[str] = frozenset()
    pathname_patterns: tuple[re.Pattern, ...] = ()
    query_param_names: frozenset[str] = frozenset()
    query_patterns: tuple[re.Pattern, ...] = ()
    transform: Optional[IdTransform] = None


@dataclass(frozen=True, eq=False)
class StoreRegistry:
    """
    Read-only lookup of StoreConfig records.

    Usage:
        registry = build_registry(STORE_DEFINITIONS)
        registry.get("target.com")                  # by domain
        registry.get("5246")                        # by store ID
        registry.lookup(domain="oldnavy.gap.com")   # alias domain -> Gap
        registry.get("unknown.example")             # None
    """

    stores: tuple[StoreConfig, ...]
    _by_id: Mapping[str, StoreConfig] = field(repr=False)
    _by_domain: Mapping[str, StoreConfig] = field(repr=False)
    _by_name: Mapping[str, StoreConfig] = field(repr=False)

    @classmethod
    def from_definitions(
        cls, definitions: Iterable[Union[StoreDefinition, Mapping[str, Any]]]
    ) -> "StoreRegistry":
        """
        Validate definitions and build a frozen registry.

        Args:
            definitions: StoreDefinition models or plain mappings

        Returns:
            StoreRegistry

        Raises:
            RegistryConfigError: On invalid definitions, duplicate IDs, a domain
                claimed by two stores, or an unsafe/uncompilable pattern
        """
        by_id: dict[str, StoreConfig] = {}
        by_domain: dict[str, StoreConfig] = {}
        by_name: dict[str, StoreConfig] = {}
        stores: list[StoreConfig] = []

        for raw in definitions:
            definition = _validate_definition(raw)
            config = _compile_definition(definition)

            for store_id in sorted({config.id, *config.aliases}):
                if store_id in by_id:
                    raise RegistryConfigError(
                        f"Duplicate store ID '{store_id}' "
                        f"(stores {by_id[store_id].id} and {config.id})"
                    )
                by_id[store_id] = config

            for domain in sorted(config.domains):
                if domain in by_domain:
                    raise RegistryConfigError(
                        f"Domain '{domain}' claimed by stores "
                        f"{by_domain[domain].id} and {config.id}"
                    )
                by_domain[domain] = config

            # Names are a convenience key; first definition wins
            by_name.setdefault(config.name.casefold(), config)
            stores.append(config)

        registry = cls(
            stores=tuple(stores),
            _by_id=MappingProxyType(by_id),
            _by_domain=MappingProxyType(by_domain),
            _by_name=MappingProxyType(by_name),
        )
        logger.info(
            f"Built store registry with {len(stores)} stores, "
            f"{len(by_id)} IDs and {len(by_domain)} domains"
        )
        return registry

    def get(self, key: Optional[str]) -> Optional[StoreConfig]:
        """
        Look up a store by ID, alias ID, domain or name.

        Args:
            key: Store ID, alias ID, domain or display name

        Returns:
            StoreConfig, or None when nothing matches
        """
        if not key:
            return None

        key = key.strip()
        return (
            self._by_id.get(key)
            or self._by_domain.get(key.lower())
            or self._by_name.get(key.casefold())
        )

    def lookup(
        self, domain: Optional[str] = None, store_id: Optional[str] = None
    ) -> Optional[StoreConfig]:
        """
        Resolve the store for an extraction call.

        An explicit store ID takes precedence and is the only key consulted;
        a miss means there are no store-specific rules. Otherwise the domain
        is used.
        """
        store_id = coerce_store_id(store_id)
        if store_id is not None:
            return self._by_id.get(store_id)

        if domain:
            return self._by_domain.get(domain.lower())

        return None

    @property
    def store_ids(self) -> frozenset[str]:
        """All store and alias IDs."""
        return frozenset(self._by_id)

    @property
    def domains(self) -> frozenset[str]:
        """All primary and alias domains."""
        return frozenset(self._by_domain)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __iter__(self) -> Iterator[StoreConfig]:
        return iter(self.stores)

    def __len__(self) -> int:
        return len(self.stores)


def _validate_definition(raw: Union[StoreDefinition, Mapping[str, Any]]) -> StoreDefinition:
    if isinstance(raw, StoreDefinition):
        return raw
    try:
        return StoreDefinition.model_validate(raw)
    except ValidationError as e:
        store_id = raw.get("id") if isinstance(raw, Mapping) else None
        raise RegistryConfigError(f"Invalid store definition {store_id!r}: {e}") from e


def _subpatterns(op, av) -> list:
    """Child subpatterns of one parsed regex node."""
    if op in _REPEAT_OPS:
        return [av[2]]
    if op is sre_constants.SUBPATTERN:
        return [av[-1]]
    if op is sre_constants.BRANCH:
        return list(av[1])
    if op in (sre_constants.ASSERT, sre_constants.ASSERT_NOT):
        return [av[1]]
    if op is sre_constants.ATOMIC_GROUP:
        return [av]
    if op is sre_constants.GROUPREF_EXISTS:
        return [branch for branch in av[1:] if branch is not None]
    return []


def _nests_unbounded_repeats(items, enclosed: bool = False) -> bool:
    """
    Check a parsed pattern for an unbounded repeat inside another.

    Any depth counts: groups, alternations, lookarounds and bounded repeats
    between the two do not make the pattern safe, e.g. ``((a+)-)+``.
    """
    for op, av in items:
        unbounded = op in _REPEAT_OPS and av[1] == sre_constants.MAXREPEAT
        if unbounded and enclosed:
            return True
        for child in _subpatterns(op, av):
            if _nests_unbounded_repeats(child, enclosed or unbounded):
                return True
    return False


def _compile_pattern(pattern: str, flags: int, store_id: str) -> re.Pattern:
    try:
        compiled = re.compile(pattern, flags)
    except re.error as e:
        raise RegistryConfigError(f"Store {store_id}: invalid pattern {pattern!r}: {e}") from e

    # An unbounded repeat inside an unbounded repeat, at any depth, can
    # backtrack exponentially
    if _nests_unbounded_repeats(sre_parse.parse(pattern, flags)):
        raise RegistryConfigError(
            f"Store {store_id}: pattern {pattern!r} nests unbounded quantifiers"
        )
    return compiled


def _compile_definition(definition: StoreDefinition) -> StoreConfig:
    """Compile one validated definition into a frozen StoreConfig."""
    flags = 0 if definition.case_sensitive else re.IGNORECASE

    def compile_(pattern: str) -> re.Pattern:
        return _compile_pattern(pattern, flags, definition.id)

    transform = None
    if definition.transform_id is not None:
        transform = IdTransform(
            pattern=compile_(definition.transform_id.pattern),
            replacement=definition.transform_id.replacement,
        )

    return StoreConfig(
        id=definition.id,
        name=definition.name or definition.domain,
        domain=definition.domain,
        domains=frozenset(
            [definition.domain, *(alias.domain for alias in definition.aliases)]
        ),
        aliases=frozenset(alias.id for alias in definition.aliases),
        pathname_patterns=tuple(compile_(p) for p in definition.pathname_patterns),
        query_param_names=frozenset(definition.query_param_names),
        query_patterns=tuple(compile_(p) for p in definition.query_patterns),
        transform=transform,
    )


def coerce_store_id(store_id: Union[str, int, None]) -> Optional[str]:
    """
    Coerce a store ID to its string form.

    Ints become strings, strings are trimmed, and None or blank values
    become None.

    Example:
        >>> coerce_store_id(8333)
        '8333'
        >>> coerce_store_id("  uk-87262 ")
        'uk-87262'
        >>> coerce_store_id("   ") is None
        True
    """
    if store_id is None or isinstance(store_id, bool):
        return None
    if isinstance(store_id, int):
        return str(store_id)
    store_id = str(store_id).strip()
    return store_id or None


def build_registry(
    definitions: Iterable[Union[StoreDefinition, Mapping[str, Any]]],
) -> StoreRegistry:
    """Build a frozen StoreRegistry from static definitions."""
    return StoreRegistry.from_definitions(definitions)


# Process-wide registry, built from the bundled store table on first use
_registry: Optional[StoreRegistry] = None


def get_registry() -> StoreRegistry:
    """Get or build the global store registry."""
    global _registry
    if _registry is None:
        from .stores import STORE_DEFINITIONS

        _registry = build_registry(STORE_DEFINITIONS)
    return _registry


def reset_registry() -> None:
    """Reset the global store registry (for testing)."""
    global _registry
    _registry = None

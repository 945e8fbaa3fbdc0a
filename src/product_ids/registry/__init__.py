"""
Store registry.

Frozen per-retailer configuration keyed by store ID, alias, domain and name.
"""

from .models import IdTransformDefinition, StoreAliasDefinition, StoreDefinition
from .store_registry import (
    IdTransform,
    StoreConfig,
    StoreRegistry,
    build_registry,
    coerce_store_id,
    get_registry,
    reset_registry,
)
from .stores import STORE_DEFINITIONS

__all__ = [
    "IdTransform",
    "IdTransformDefinition",
    "StoreAliasDefinition",
    "StoreDefinition",
    "StoreConfig",
    "StoreRegistry",
    "STORE_DEFINITIONS",
    "build_registry",
    "coerce_store_id",
    "get_registry",
    "reset_registry",
]

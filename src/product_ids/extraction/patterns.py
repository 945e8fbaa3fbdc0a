"""
Retailer-agnostic extraction patterns.

All quantifiers are bounded, so each pattern scans its source in linear time.
"""

import re

# /product/prod-123456, /p123456789: keeps both the prefixed and the bare form
PRODUCT_ID_PATTERN = re.compile(
    r"\b((?:product|prod|prd|p)[-_]?(\d{6,24}))\b", re.IGNORECASE
)

# /some-slug-12345678, /category/12345678.html
NUMERIC_TAIL_PATTERN = re.compile(r"[/-](\d{6,24})(?:\.html?)?$", re.IGNORECASE)

GENERIC_PATHNAME_PATTERNS: tuple[re.Pattern, ...] = (
    PRODUCT_ID_PATTERN,
    NUMERIC_TAIL_PATTERN,
)

# Query parameters that commonly carry a product identifier
GENERIC_QUERY_PARAM_NAMES = frozenset(
    {
        "sku",
        "pid",
        "id",
        "productid",
        "product_id",
        "skuid",
        "itemid",
        "athcpid",
        "upc_id",
        "variant",
        "prdtno",
    }
)

# A whole query value usable as an ID
QUERY_VALUE_PATTERN = re.compile(r"[A-Za-z0-9_-]{4,24}")

# Shape every returned ID must have (after lowercasing)
VALID_ID_PATTERN = re.compile(r"[a-z0-9_-]{1,24}")

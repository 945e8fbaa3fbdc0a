"""
Configuration management for the product-ids engine.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NormalizationConfig(BaseSettings):
    """Configuration for URL normalization."""

    default_scheme: str = Field(
        default="https", description="Scheme assumed (and forced) for every URL"
    )
    preserved_subdomains: frozenset[str] = Field(
        default=frozenset(
            {
                "oldnavy",
                "bananarepublic",
                "athleta",
                "bananarepublicfactory",
                "gapfactory",
                "gap",
            }
        ),
        description="Brand storefront subdomains kept distinct from their parent domain",
    )
    extra_tracking_params: frozenset[str] = Field(
        default=frozenset(),
        description="Additional exact-name query parameters to strip",
    )

    model_config = SettingsConfigDict(env_prefix="NORMALIZE_", frozen=True)


class ExtractionConfig(BaseSettings):
    """Configuration for product ID extraction."""

    max_results: int = Field(
        default=12, ge=1, description="Maximum number of IDs returned per URL"
    )
    timeout_ms: float = Field(
        default=100.0,
        gt=0,
        description="Wall-clock budget for all pattern matching in one extraction call",
    )
    max_source_length: int = Field(
        default=10_000,
        ge=1,
        description="Pathname/query strings longer than this are truncated before matching",
    )

    model_config = SettingsConfigDict(env_prefix="EXTRACT_", frozen=True)


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    normalization: NormalizationConfig = Field(default_factory=NormalizationConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)

    # Global settings
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_nested_delimiter="__"
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None

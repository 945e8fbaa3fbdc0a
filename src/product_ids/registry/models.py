"""
Store definition models.

Static store configuration is validated against these Pydantic models once,
when the registry is built.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StoreAliasDefinition(BaseModel):
    """An alternative store ID and domain that resolve to a parent store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1, description="Alias store ID")
    domain: str = Field(..., min_length=1, description="Alias domain")

    @field_validator("id")
    @classmethod
    def _strip_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Alias ID cannot be blank")
        return value

    @field_validator("domain")
    @classmethod
    def _normalize_domain(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("Alias domain cannot be blank")
        return value


class IdTransformDefinition(BaseModel):
    """Regex rewrite applied to IDs captured by a store's pathname patterns."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pattern: str = Field(..., min_length=1, description="Regex matched against the ID")
    replacement: str = Field(default="", description="Replacement for the first match")


class StoreDefinition(BaseModel):
    """Static definition of one retailer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1, description="Store ID")
    domain: str = Field(..., min_length=1, description="Primary store domain")
    name: str | None = Field(
        None, description="Display name (defaults to the primary domain)"
    )
    aliases: list[StoreAliasDefinition] = Field(
        default_factory=list, description="Alternative IDs and domains"
    )
    pathname_patterns: list[str] = Field(
        default_factory=list,
        description="Regexes run against the pathname, in order; group 1 (and 2) are IDs",
    )
    query_param_names: list[str] = Field(
        default_factory=list, description="Query parameters holding product IDs"
    )
    query_patterns: list[str] = Field(
        default_factory=list,
        description="Regexes run against the serialized query string",
    )
    transform_id: IdTransformDefinition | None = Field(
        None, description="Rewrite applied to pathname-pattern IDs"
    )
    case_sensitive: bool = Field(
        False, description="Compile patterns without re.IGNORECASE"
    )
    pattern_formats: list[str] = Field(
        default_factory=list, description="Example ID shapes, for documentation only"
    )

    @field_validator("id")
    @classmethod
    def _strip_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Store ID cannot be blank")
        return value

    @field_validator("domain")
    @classmethod
    def _normalize_domain(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("Store domain cannot be blank")
        return value

    @field_validator("query_param_names")
    @classmethod
    def _lowercase_params(cls, value: list[str]) -> list[str]:
        return [name.strip().lower() for name in value if name.strip()]

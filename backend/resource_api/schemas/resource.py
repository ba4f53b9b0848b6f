"""Resource Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - ResourceCreate.name: 1-255 chars after stripping, required
    - ResourceUpdate: every field optional, but name may not be set to null
    - Unknown body fields are rejected (id and timestamps are store-owned)
    - ResourceRead / ResourcePage serialize with camelCase aliases

Design Decisions:
    - field_validator for side-effect-free transforms (strip): keeps models pure
    - model_dump(exclude_unset=True) on updates: only supplied fields are merged
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _strip_name(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty or whitespace")
    return v


class ResourceCreate(BaseModel):
    """Resource creation payload."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10_000)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_name(v)


class ResourceUpdate(BaseModel):
    """Partial update payload: only fields present in the body are applied."""
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10_000)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str:
        # Validators only run on supplied values, so None here is an explicit null
        if v is None:
            raise ValueError("name cannot be null")
        return _strip_name(v)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ResourceRead(_CamelModel):
    """Resource as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime


class Pagination(_CamelModel):
    """Window metadata for a list response."""
    total: int
    page: int
    limit: int
    total_pages: int


class ResourcePage(_CamelModel):
    """One page of resources plus pagination metadata."""
    data: list[ResourceRead]
    pagination: Pagination

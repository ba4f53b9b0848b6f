"""Resource schema validation: create/update payload rules and camelCase output.

Invariants:
    - name is required on create, optional on update, never null
    - unknown fields are rejected
    - ResourceRead dumps createdAt/updatedAt by alias
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from resource_api.schemas.resource import (
    Pagination, ResourceCreate, ResourceRead, ResourceUpdate,
)


# --- ResourceCreate -----------------------------------------------------------

def test_create_strips_name():
    body = ResourceCreate(name="  widget  ")
    assert body.name == "widget"
    assert body.description is None


def test_create_requires_name():
    with pytest.raises(ValidationError):
        ResourceCreate(description="no name")


def test_create_rejects_whitespace_name():
    with pytest.raises(ValidationError):
        ResourceCreate(name="   ")


def test_create_rejects_overlong_name():
    with pytest.raises(ValidationError):
        ResourceCreate(name="x" * 256)


def test_create_rejects_store_owned_fields():
    with pytest.raises(ValidationError):
        ResourceCreate(name="widget", id=7)


# --- ResourceUpdate -----------------------------------------------------------

def test_update_changes_only_include_supplied_fields():
    body = ResourceUpdate(description="new text")
    assert body.changes() == {"description": "new text"}


def test_update_allows_clearing_description():
    body = ResourceUpdate.model_validate({"description": None})
    assert body.changes() == {"description": None}


def test_update_rejects_null_name():
    with pytest.raises(ValidationError):
        ResourceUpdate.model_validate({"name": None})


def test_empty_update_has_no_changes():
    assert ResourceUpdate().changes() == {}


# --- Output models ------------------------------------------------------------

def test_resource_read_dumps_camel_case():
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    read = ResourceRead(
        id=1, name="widget", description=None, created_at=now, updated_at=now,
    )
    dumped = read.model_dump(by_alias=True)
    assert set(dumped) == {"id", "name", "description", "createdAt", "updatedAt"}


def test_pagination_dumps_total_pages_alias():
    p = Pagination(total=21, page=1, limit=10, total_pages=3)
    assert p.model_dump(by_alias=True)["totalPages"] == 3

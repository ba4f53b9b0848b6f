"""ResourceService: CRUD against a real (SQLite) session, no HTTP.

Invariants:
    - create assigns id and both timestamps
    - list orders newest first and filters by exact name
    - update merges only supplied fields and advances updated_at
    - update/delete on a missing id raise ResourceNotFoundError
"""

import pytest

from resource_api.core.errors import ResourceNotFoundError
from resource_api.schemas.resource import ResourceCreate, ResourceUpdate


async def test_create_assigns_id_and_timestamps(service):
    resource = await service.create_resource(
        ResourceCreate(name="widget", description="blue"),
    )
    assert resource.id is not None
    assert resource.name == "widget"
    assert resource.description == "blue"
    assert resource.created_at is not None
    assert resource.updated_at is not None


async def test_get_returns_none_for_missing_id(service):
    assert await service.get_resource(9999) is None


async def test_get_returns_created_resource(service):
    created = await service.create_resource(ResourceCreate(name="widget"))
    fetched = await service.get_resource(created.id)
    assert fetched is not None
    assert fetched.id == created.id
    assert fetched.name == "widget"


async def test_list_second_page_is_items_eleven_to_twenty(service, seed_resources):
    page = await service.list_resources(filter_name=None, page=2, limit=10)
    names = [r.name for r in page.data]
    assert names == [f"item-{i:02d}" for i in range(15, 5, -1)]
    assert page.pagination.total == 25
    assert page.pagination.total_pages == 3


async def test_list_past_last_page_is_empty(service, seed_resources):
    page = await service.list_resources(filter_name=None, page=4, limit=10)
    assert page.data == []
    assert page.pagination.total == 25


async def test_list_empty_table(service):
    page = await service.list_resources(filter_name=None, page=1, limit=10)
    assert page.data == []
    assert page.pagination.total == 0
    assert page.pagination.total_pages == 0


async def test_list_filters_by_exact_name(service):
    await service.create_resource(ResourceCreate(name="X"))
    await service.create_resource(ResourceCreate(name="XY"))
    await service.create_resource(ResourceCreate(name="x"))
    await service.create_resource(ResourceCreate(name="X"))

    page = await service.list_resources(filter_name="X", page=1, limit=10)

    assert [r.name for r in page.data] == ["X", "X"]
    assert page.pagination.total == 2


async def test_list_empty_filter_matches_all(service, seed_resources):
    page = await service.list_resources(filter_name="", page=1, limit=10)
    assert page.pagination.total == 25


async def test_update_merges_supplied_fields_only(service, later_clock):
    created = await service.create_resource(
        ResourceCreate(name="widget", description="blue"),
    )
    created_at = created.created_at
    previous_updated_at = created.updated_at

    updated = await service.update_resource(
        created.id, ResourceUpdate(description="red"),
    )

    assert updated.name == "widget"
    assert updated.description == "red"
    assert updated.created_at == created_at
    assert updated.updated_at > previous_updated_at
    assert updated.updated_at.replace(tzinfo=None) == later_clock.replace(tzinfo=None)


async def test_update_missing_raises_not_found(service):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await service.update_resource(9999, ResourceUpdate(name="missing"))
    assert exc_info.value.http_status == 404
    assert exc_info.value.to_response() == {"error": "Not found"}


async def test_delete_removes_resource(service):
    created = await service.create_resource(ResourceCreate(name="widget"))
    await service.delete_resource(created.id)
    assert await service.get_resource(created.id) is None


async def test_delete_missing_raises_not_found(service):
    with pytest.raises(ResourceNotFoundError):
        await service.delete_resource(9999)


@pytest.mark.parametrize("resource_id", [0, -1, 2**31, 10**20])
async def test_out_of_range_id_is_absent(service, resource_id):
    assert await service.get_resource(resource_id) is None
    with pytest.raises(ResourceNotFoundError):
        await service.update_resource(resource_id, ResourceUpdate(name="missing"))
    with pytest.raises(ResourceNotFoundError):
        await service.delete_resource(resource_id)

"""Resource Routes: CRUD endpoints over the single Resource entity.

Invariants:
    - Request bodies validated by Pydantic before reaching the service
    - page/limit never reject a request: the leading integer is used ("2.5" -> 2,
      "20abc" -> 20); absent, non-numeric or < 1 falls back to the default
    - limit capped at settings.pagination_max_limit, a hardening choice on top of
      the plain echo of the requested limit (?limit=1000 reports limit 100)
    - Missing ids surface as ResourceNotFoundError → 404 {"error": "Not found"}

Design Decisions:
    - page/limit read as raw strings and parsed here: a typed Query would turn
      "?page=abc" into a 400 instead of the default
    - Errors raised, not returned: global handlers in api/error_handlers.py own the envelope
"""

import logging
import re

from fastapi import APIRouter, Depends, Query, Response, status

from resource_api.api.dependencies import get_resource_service
from resource_api.config import get_settings
from resource_api.core.errors import ResourceNotFoundError
from resource_api.schemas.resource import (
    ResourceCreate, ResourcePage, ResourceRead, ResourceUpdate,
)
from resource_api.services.resource_service import ResourceService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/resources", tags=["resources"])

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_positive_int(raw: str | None, default: int) -> int:
    """Parse a query value as a positive int, falling back to default."""
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    value = int(match.group(1))
    return value if value >= 1 else default


@router.post(
    "", response_model=ResourceRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_resource(
    body: ResourceCreate,
    service: ResourceService = Depends(get_resource_service),
):
    """Create a new resource."""
    return await service.create_resource(body)


@router.get("", response_model=ResourcePage)
async def list_resources(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    name: str | None = Query(None),
    service: ResourceService = Depends(get_resource_service),
):
    """List resources, newest first, optionally filtered by exact name."""
    settings = get_settings()
    page_number = parse_positive_int(page, 1)
    page_size = min(
        parse_positive_int(limit, settings.pagination_default_limit),
        settings.pagination_max_limit,
    )
    return await service.list_resources(
        filter_name=name, page=page_number, limit=page_size,
    )


@router.get("/{resource_id}", response_model=ResourceRead)
async def get_resource(
    resource_id: int,
    service: ResourceService = Depends(get_resource_service),
):
    """Get a single resource by id."""
    resource = await service.get_resource(resource_id)
    if resource is None:
        raise ResourceNotFoundError(resource_id)
    return resource


@router.put("/{resource_id}", response_model=ResourceRead)
async def update_resource(
    resource_id: int,
    body: ResourceUpdate,
    service: ResourceService = Depends(get_resource_service),
):
    """Apply a partial update to a resource."""
    return await service.update_resource(resource_id, body)


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resource(
    resource_id: int,
    service: ResourceService = Depends(get_resource_service),
):
    """Hard-delete a resource."""
    await service.delete_resource(resource_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

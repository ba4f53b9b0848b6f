"""Resource Service: data-access translation between typed parameters and the ORM.

Invariants:
    - Every public method maps to exactly one logical store operation
    - list_resources filters on name only when a non-empty filter is given
    - list pages are ordered by created_at desc, then id desc
    - update/delete raise ResourceNotFoundError for a missing id (never a silent no-op)
    - ids outside 1..MAX_RESOURCE_ID are treated as absent without querying
    - No state survives between calls beyond the injected AsyncSession

Design Decisions:
    - Session injected by the caller (FastAPI dependency in production, test session in tests)
    - Count and page read through the same session so both see one transaction
    - IntegrityError on commit mapped here as well as in the session manager:
      tests and scripts may hand in a bare AsyncSession
"""

import logging
import math

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.core.errors import ConstraintViolationError, ResourceNotFoundError
from resource_api.models.resource import MAX_RESOURCE_ID, Resource, utcnow
from resource_api.schemas.resource import (
    Pagination, ResourceCreate, ResourcePage, ResourceRead, ResourceUpdate,
)

logger = logging.getLogger(__name__)


class ResourceService:
    """CRUD operations over the resources table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_resource(self, data: ResourceCreate) -> Resource:
        """Insert a resource; id and timestamps are assigned on flush."""
        resource = Resource(**data.model_dump())
        self.db.add(resource)
        await self._commit()
        await self.db.refresh(resource)
        logger.info("Resource created", extra={"resource_id": resource.id})
        return resource

    async def list_resources(
        self, filter_name: str | None, page: int, limit: int,
    ) -> ResourcePage:
        """Return one page of resources plus total count under the same filter."""
        conditions = []
        if filter_name:
            conditions.append(Resource.name == filter_name)

        query = (
            select(Resource)
            .where(*conditions)
            .order_by(Resource.created_at.desc(), Resource.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        count_query = select(func.count()).select_from(Resource).where(*conditions)

        items = (await self.db.execute(query)).scalars().all()
        total = (await self.db.execute(count_query)).scalar_one()

        return ResourcePage(
            data=[ResourceRead.model_validate(r) for r in items],
            pagination=Pagination(
                total=total,
                page=page,
                limit=limit,
                total_pages=math.ceil(total / limit),
            ),
        )

    async def get_resource(self, resource_id: int) -> Resource | None:
        # Ids outside the column range cannot exist; the driver would reject them
        if not 1 <= resource_id <= MAX_RESOURCE_ID:
            return None
        return await self.db.get(Resource, resource_id)

    async def update_resource(
        self, resource_id: int, data: ResourceUpdate,
    ) -> Resource:
        """Merge the supplied fields into an existing resource."""
        resource = await self._get_or_raise(resource_id)
        for field_name, value in data.changes().items():
            setattr(resource, field_name, value)
        # Explicit so an empty body still advances updated_at
        resource.updated_at = utcnow()
        await self._commit()
        await self.db.refresh(resource)
        logger.info("Resource updated", extra={"resource_id": resource_id})
        return resource

    async def delete_resource(self, resource_id: int) -> None:
        resource = await self._get_or_raise(resource_id)
        await self.db.delete(resource)
        await self._commit()
        logger.info("Resource deleted", extra={"resource_id": resource_id})

    async def _get_or_raise(self, resource_id: int) -> Resource:
        resource = await self.get_resource(resource_id)
        if resource is None:
            raise ResourceNotFoundError(resource_id)
        return resource

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Resource write rejected by store: {e.orig}")
            raise ConstraintViolationError("Integrity constraint violated")

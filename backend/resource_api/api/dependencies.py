"""Route Dependencies: wires the per-request DB session into services.

Invariants:
    - One ResourceService per request, bound to that request's AsyncSession
    - Overriding get_db in tests swaps the store for every route
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.infrastructure.database import get_db
from resource_api.services.resource_service import ResourceService


async def get_resource_service(
    db: AsyncSession = Depends(get_db),
) -> ResourceService:
    return ResourceService(db)

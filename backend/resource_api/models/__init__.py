"""ORM Models: SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from resource_api.models.resource import Resource  # noqa: F401

"""Resource ORM: the single persisted entity managed by the API.

Invariants:
    - id is an autoincrement integer primary key assigned by the store
    - created_at is set once on insert and never written again
    - updated_at is set on insert and refreshed on every ORM update

Design Decisions:
    - Timestamps generated in Python (UTC): identical behavior on PostgreSQL and SQLite
    - name indexed: it is the only filter column
    - created_at indexed: list pages are ordered by it
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resource_api.db.base import Base


# Integer primary key is 32-bit signed on PostgreSQL
MAX_RESOURCE_ID = 2**31 - 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Resource(Base):
    """A named resource with an optional free-text description."""
    __tablename__ = "resources"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"<Resource id={self.id} name={self.name!r}>"

"""PostgreSQL implementation of Tag repository."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.model import Tag
from conduit.domain.repository import TagRepository
from conduit.domain.value import TagId, TagName
from conduit.persistence.mappers import row_to_tag, tag_to_dict
from conduit.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find a tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def get_or_create(self, name: TagName) -> Tag:
        """Return the tag with this name, creating it when missing."""
        with logfire.span("tag_repository.get_or_create", tag_name=name.root):
            tag = Tag(id=TagId(uuid4()), name=name, created_at=datetime.now())

            # The unique name turns a racing insert into a no-op
            stmt = (
                pg_insert(tags_table)
                .values(**tag_to_dict(tag))
                .on_conflict_do_nothing(index_elements=["name"])
            )
            await self.session.execute(stmt)
            await self.session.flush()

            existing = await self.find_by_name(name)
            if existing is None:
                raise RuntimeError(f"Tag {name.root} vanished after insert")
            return existing

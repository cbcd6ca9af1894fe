"""In-memory tag repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from conduit.domain.model.tag import Tag
from conduit.domain.repository.tag import TagRepository
from conduit.domain.value import TagId, TagName

from .database import InMemoryDatabase


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find a tag by name."""
        for tag in self._db.tags.values():
            if tag.name == name:
                return tag
        return None

    async def get_or_create(self, name: TagName) -> Tag:
        """Return the tag with this name, creating it when missing."""
        existing = await self.find_by_name(name)
        if existing:
            return existing
        tag = Tag(id=TagId(uuid4()), name=name, created_at=datetime.now())
        self._db.tags[tag.id] = tag
        return tag

    @property
    def count(self) -> int:
        """Number of stored tags."""
        return len(self._db.tags)

"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from conduit.domain.model.tag import Tag
from conduit.domain.value import TagName


class TagRepository(ABC):
    """Repository for Tag entity."""

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find a tag by its normalized name."""
        pass

    @abstractmethod
    async def get_or_create(self, name: TagName) -> Tag:
        """Return the tag with this name, creating it when missing.

        Concurrent callers racing on the same name all end up with the
        single stored tag.

        Args:
            name: Normalized tag name

        Returns:
            The existing or newly created tag
        """
        pass

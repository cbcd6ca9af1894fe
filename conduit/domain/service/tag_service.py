"""Tag domain service."""

from typing import Iterable

from conduit.domain.value import TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations.

    Tags are stored by the article repository as part of saving the
    article that names them, so a failed save leaves no tags behind.
    """

    @staticmethod
    def normalize(names: Iterable[str]) -> list[TagName]:
        """Normalize raw tag names.

        Names are trimmed and lower-cased, blank names are dropped and
        duplicates collapse onto their first occurrence.

        Args:
            names: Raw names as submitted

        Returns:
            Normalized names in submission order
        """
        seen: dict[str, TagName] = {}
        for raw in names:
            if not raw or not raw.strip():
                continue
            name = TagName(raw)
            seen.setdefault(name.root, name)
        return list(seen.values())

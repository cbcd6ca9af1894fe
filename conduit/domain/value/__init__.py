"""Domain value objects for Conduit."""

from conduit.domain.value.identifiers import ArticleId, CommentId, TagId, UserId
from conduit.domain.value.types import Slug, TagName

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    "TagId",
    # Types
    "Slug",
    "TagName",
]

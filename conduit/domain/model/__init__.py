"""Domain model entities for Conduit."""

from conduit.domain.model.article import Article
from conduit.domain.model.comment import Comment
from conduit.domain.model.favorite import Favorite
from conduit.domain.model.follow import Follow
from conduit.domain.model.tag import Tag
from conduit.domain.model.user import User

__all__ = [
    "User",
    "Article",
    "Comment",
    "Tag",
    "Favorite",
    "Follow",
]

"""Repository interfaces for Conduit domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from conduit.domain.repository.article import ArticleFilter, ArticleRepository
from conduit.domain.repository.comment import CommentRepository
from conduit.domain.repository.favorite import FavoriteRepository
from conduit.domain.repository.follow import FollowRepository
from conduit.domain.repository.tag import TagRepository
from conduit.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ArticleFilter",
    "ArticleRepository",
    "CommentRepository",
    "TagRepository",
    "FavoriteRepository",
    "FollowRepository",
]

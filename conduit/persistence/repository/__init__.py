"""PostgreSQL repository implementations."""

from conduit.persistence.repository.article import PostgresArticleRepository
from conduit.persistence.repository.comment import PostgresCommentRepository
from conduit.persistence.repository.favorite import PostgresFavoriteRepository
from conduit.persistence.repository.follow import PostgresFollowRepository
from conduit.persistence.repository.tag import PostgresTagRepository
from conduit.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresArticleRepository",
    "PostgresCommentRepository",
    "PostgresTagRepository",
    "PostgresFavoriteRepository",
    "PostgresFollowRepository",
]

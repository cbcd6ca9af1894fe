"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .favorite import InMemoryFavoriteRepository
from .follow import InMemoryFollowRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryFavoriteRepository",
    "InMemoryFollowRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]

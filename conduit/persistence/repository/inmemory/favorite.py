"""In-memory favorite repository for testing."""

from typing import Sequence

from sqlalchemy.exc import IntegrityError

from conduit.domain.model.favorite import Favorite
from conduit.domain.repository.favorite import FavoriteRepository
from conduit.domain.value import ArticleId, UserId

from .database import InMemoryDatabase


class InMemoryFavoriteRepository(FavoriteRepository):
    """In-memory implementation of FavoriteRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def save(self, favorite: Favorite) -> Favorite:
        """Save a favorite, rejecting duplicates like the composite key."""
        key = (favorite.article_id, favorite.user_id)
        if key in self._db.favorites:
            raise IntegrityError("Duplicate favorite", None, Exception())
        self._db.favorites[key] = favorite
        return favorite

    async def delete(self, article_id: ArticleId, user_id: UserId) -> bool:
        """Delete a user's favorite of an article."""
        return self._db.favorites.pop((article_id, user_id), None) is not None

    async def find_favorited_among(
        self, user_id: UserId, article_ids: Sequence[ArticleId]
    ) -> set[ArticleId]:
        """Find which of the given articles the user favorited."""
        return {aid for aid in article_ids if (aid, user_id) in self._db.favorites}

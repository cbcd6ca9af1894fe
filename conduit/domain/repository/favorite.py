"""Favorite repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence, Set

from conduit.domain.model.favorite import Favorite
from conduit.domain.value import ArticleId, UserId


class FavoriteRepository(ABC):
    """Repository for Favorite entity.

    Defines the contract for favorite persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save(self, favorite: Favorite) -> Favorite:
        """Save a favorite (create).

        This raises if the user already favorited the article
        (unique constraint violation).

        Args:
            favorite: The favorite to save

        Returns:
            The saved favorite

        Raises:
            IntegrityError: If the favorite already exists (duplicate)
        """
        pass

    @abstractmethod
    async def delete(self, article_id: ArticleId, user_id: UserId) -> bool:
        """Delete a user's favorite of an article.

        Args:
            article_id: The article's ID
            user_id: The user's ID

        Returns:
            True if a favorite was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_favorited_among(
        self, user_id: UserId, article_ids: Sequence[ArticleId]
    ) -> Set[ArticleId]:
        """Find which of the given articles the user favorited (batch query).

        Args:
            user_id: The user's ID
            article_ids: Articles to check

        Returns:
            Subset of article_ids the user favorited
        """
        pass

"""Article repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from conduit.domain.model.article import Article
from conduit.domain.value import ArticleId, Slug, TagName, UserId


@dataclass(frozen=True)
class ArticleFilter:
    """AND-combined article listing filters.

    Unset fields do not constrain the result.
    """

    tag: Optional[TagName] = None
    author_id: Optional[UserId] = None
    favorited_by: Optional[UserId] = None


class ArticleRepository(ABC):
    """Repository for Article aggregate.

    Defines the contract for article persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug.

        Args:
            slug: The article's slug

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filters: ArticleFilter = ArticleFilter(),
        limit: int = 20,
        offset: int = 0,
    ) -> List[Article]:
        """Find articles, newest first.

        Args:
            filters: Listing filters
            limit: Maximum number of articles to return
            offset: Number of articles to skip

        Returns:
            Matching articles ordered by creation time, newest first
        """
        pass

    @abstractmethod
    async def count(self, filters: ArticleFilter = ArticleFilter()) -> int:
        """Count articles matching the filters, ignoring pagination.

        Args:
            filters: Listing filters

        Returns:
            Total number of matching articles
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article and its tag links (create or update).

        Tags named in ``article.tag_list`` that don't exist yet are created
        together with the article: if the save fails, none are kept.

        Args:
            article: The article to save

        Returns:
            The saved article

        Raises:
            IntegrityError: If the slug belongs to another article
        """
        pass

    @abstractmethod
    async def delete(self, article_id: ArticleId) -> None:
        """Delete an article with its comments, favorites and tag links.

        Args:
            article_id: The article ID to delete
        """
        pass

    @abstractmethod
    async def increment_favorites(self, article_id: ArticleId) -> Optional[Article]:
        """Atomically increment favorites_count by 1.

        Args:
            article_id: The article ID

        Returns:
            The updated article, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def decrement_favorites(self, article_id: ArticleId) -> Optional[Article]:
        """Atomically decrement favorites_count by 1 (minimum 0).

        Args:
            article_id: The article ID

        Returns:
            The updated article, None if it doesn't exist
        """
        pass

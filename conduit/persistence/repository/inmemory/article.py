"""In-memory article repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from conduit.domain.model.article import Article
from conduit.domain.repository.article import ArticleFilter, ArticleRepository
from conduit.domain.repository.tag import TagRepository
from conduit.domain.value import ArticleId, Slug, TagName

from .database import InMemoryDatabase
from .tag import InMemoryTagRepository


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(
        self,
        db: InMemoryDatabase | None = None,
        tag_repository: TagRepository | None = None,
    ) -> None:
        self._db = db or InMemoryDatabase()
        self._tag_repository = tag_repository or InMemoryTagRepository(self._db)

    def _matching(self, filters: ArticleFilter) -> list[Article]:
        # Newest first; ties keep the most recently saved article first
        articles = list(reversed(list(self._db.articles.values())))
        articles.sort(key=lambda a: a.created_at, reverse=True)

        if filters.tag is not None:
            articles = [a for a in articles if filters.tag.root in a.tag_list]
        if filters.author_id is not None:
            articles = [a for a in articles if a.author_id == filters.author_id]
        if filters.favorited_by is not None:
            articles = [
                a
                for a in articles
                if (a.id, filters.favorited_by) in self._db.favorites
            ]
        return articles

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._db.articles.get(article_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug."""
        for article in self._db.articles.values():
            if article.slug == slug:
                return article
        return None

    async def find_all(
        self,
        filters: ArticleFilter = ArticleFilter(),
        limit: int = 20,
        offset: int = 0,
    ) -> list[Article]:
        """Find articles, newest first."""
        return self._matching(filters)[offset : offset + limit]

    async def count(self, filters: ArticleFilter = ArticleFilter()) -> int:
        """Count articles matching the filters."""
        return len(self._matching(filters))

    async def save(self, article: Article) -> Article:
        """Save an article, enforcing a unique slug and creating missing tags."""
        for other in self._db.articles.values():
            if other.id != article.id and other.slug == article.slug:
                raise IntegrityError("Duplicate slug", None, Exception())

        for name in article.tag_list:
            await self._tag_repository.get_or_create(TagName(name))

        existing = self._db.articles.get(article.id)
        if existing:
            # favorites_count is owned by increment/decrement
            article = article.model_copy(
                update={"favorites_count": existing.favorites_count}
            )
        self._db.articles[article.id] = article
        return article

    async def delete(self, article_id: ArticleId) -> None:
        """Delete an article with its comments and favorites."""
        self._db.delete_article(article_id)

    async def increment_favorites(self, article_id: ArticleId) -> Optional[Article]:
        """Increment favorites_count by 1."""
        article = self._db.articles.get(article_id)
        if not article:
            return None
        updated = article.model_copy(
            update={"favorites_count": article.favorites_count + 1}
        )
        self._db.articles[article_id] = updated
        return updated

    async def decrement_favorites(self, article_id: ArticleId) -> Optional[Article]:
        """Decrement favorites_count by 1 (minimum 0)."""
        article = self._db.articles.get(article_id)
        if not article:
            return None
        updated = article.model_copy(
            update={"favorites_count": max(article.favorites_count - 1, 0)}
        )
        self._db.articles[article_id] = updated
        return updated

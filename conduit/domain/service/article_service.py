"""Article domain service."""

from datetime import datetime
from typing import Iterable
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from conduit.domain.error import TAKEN_MSG, ValidationError
from conduit.domain.model.article import Article
from conduit.domain.model.user import User
from conduit.domain.repository import ArticleFilter, ArticleRepository
from conduit.domain.value import ArticleId, Slug

from .base import Service
from .tag_service import TagService


class ArticleService(Service):
    """Domain service for article operations."""

    def __init__(
        self, article_repository: ArticleRepository, tag_service: TagService
    ) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
            tag_service: Tag domain service
        """
        self.article_repository = article_repository
        self.tag_service = tag_service

    async def get_by_slug(self, slug: str) -> Article | None:
        """Get an article by slug.

        A string that can't be a slug finds nothing.

        Args:
            slug: Slug from the request path

        Returns:
            Article if found, None otherwise
        """
        with logfire.span("article_service.get_by_slug", slug=slug):
            try:
                value = Slug(slug)
            except PydanticValidationError:
                logfire.info("Malformed slug", slug=slug)
                return None

            article = await self.article_repository.find_by_slug(value)
            if not article:
                logfire.info("Article not found", slug=slug)
            return article

    async def list_articles(
        self, filters: ArticleFilter, limit: int, offset: int
    ) -> tuple[list[Article], int]:
        """List articles newest first.

        Args:
            filters: AND-combined filters
            limit: Page size
            offset: Number of articles to skip

        Returns:
            The requested page and the total number of matching articles
        """
        with logfire.span(
            "article_service.list_articles",
            tag=filters.tag.root if filters.tag else None,
            limit=limit,
            offset=offset,
        ):
            articles = await self.article_repository.find_all(
                filters, limit=limit, offset=offset
            )
            total = await self.article_repository.count(filters)
            logfire.info("Articles listed", count=len(articles), total=total)
            return articles, total

    async def create_article(
        self,
        author: User,
        title: str,
        description: str,
        body: str,
        tag_names: Iterable[str] = (),
    ) -> Article:
        """Create an article.

        Args:
            author: Authoring user
            title: Article title, also the slug source
            description: Short description
            body: Article body
            tag_names: Raw tag names, normalized and deduplicated here

        Returns:
            Created article

        Raises:
            ValidationError: If fields are blank or the slug is taken
        """
        with logfire.span(
            "article_service.create_article", author=author.username, title=title
        ):
            article_id = ArticleId(uuid4())
            now = datetime.now()
            article = Article(
                id=article_id,
                slug=Slug.from_title(title or "", article_id),
                title=title or "",
                description=description or "",
                body=body or "",
                author_id=author.id,
                author_username=author.username,
                created_at=now,
                updated_at=now,
            )
            article.validate_content()
            await self._ensure_slug_available(article)

            tags = self.tag_service.normalize(tag_names)
            article = article.model_copy(
                update={"tag_list": [tag.root for tag in tags]}
            )

            saved = await self._save(article)
            logfire.info(
                "Article created", article_id=str(saved.id), slug=saved.slug.root
            )
            return saved

    async def update_article(
        self,
        article: Article,
        title: str | None = None,
        description: str | None = None,
        body: str | None = None,
    ) -> Article:
        """Apply a partial update to an article.

        Only the given fields change. A new title re-derives the slug; keeping
        the current slug is never a collision.

        Args:
            article: Article to update
            title: New title, if changing
            description: New description, if changing
            body: New body, if changing

        Returns:
            Updated article

        Raises:
            ValidationError: If a resulting field is blank or the new slug is taken
        """
        with logfire.span("article_service.update_article", slug=article.slug.root):
            changes: dict = {}
            if title is not None:
                changes["title"] = title
            if description is not None:
                changes["description"] = description
            if body is not None:
                changes["body"] = body

            updated = article.model_copy(update=changes)
            updated.validate_content()

            if updated.title != article.title:
                updated = updated.model_copy(
                    update={"slug": Slug.from_title(updated.title, article.id)}
                )
                await self._ensure_slug_available(updated)

            updated = updated.model_copy(update={"updated_at": datetime.now()})
            saved = await self._save(updated)
            logfire.info(
                "Article updated", article_id=str(saved.id), slug=saved.slug.root
            )
            return saved

    async def delete_article(self, article: Article) -> None:
        """Delete an article and everything hanging off it.

        Args:
            article: Article to delete
        """
        with logfire.span("article_service.delete_article", slug=article.slug.root):
            await self.article_repository.delete(article.id)
            logfire.info("Article deleted", article_id=str(article.id))

    async def _ensure_slug_available(self, article: Article) -> None:
        existing = await self.article_repository.find_by_slug(article.slug)
        if existing and existing.id != article.id:
            logfire.warn("Slug taken", slug=article.slug.root)
            raise ValidationError.single("slug", TAKEN_MSG)

    async def _save(self, article: Article) -> Article:
        try:
            return await self.article_repository.save(article)
        except IntegrityError:
            # A concurrent writer claimed the slug after our check
            logfire.warn("Slug taken on save", slug=article.slug.root)
            raise ValidationError.single("slug", TAKEN_MSG)

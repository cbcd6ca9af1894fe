"""PostgreSQL implementation of Article repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import Select, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.model import Article
from conduit.domain.repository import ArticleFilter, ArticleRepository, TagRepository
from conduit.domain.value import ArticleId, Slug, TagName
from conduit.persistence.mappers import article_to_dict, row_to_article
from conduit.persistence.tables import (
    article_tags_table,
    articles_table,
    favorites_table,
    tags_table,
)


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession, tag_repository: TagRepository) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            tag_repository: Tag repository sharing the same session
        """
        self.session = session
        self.tag_repository = tag_repository

    async def _fetch_tags_for_articles(
        self, article_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple articles in a single query.

        Args:
            article_ids: List of article IDs

        Returns:
            Dict mapping article_id -> tag names in position order
        """
        if not article_ids:
            return {}

        stmt = (
            select(article_tags_table.c.article_id, tags_table.c.name)
            .select_from(article_tags_table)
            .join(tags_table, article_tags_table.c.tag_id == tags_table.c.id)
            .where(article_tags_table.c.article_id.in_(article_ids))
            .order_by(article_tags_table.c.position)
        )
        result = await self.session.execute(stmt)

        article_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            article_tag_map[row.article_id].append(row.name)

        return article_tag_map

    async def _to_articles(self, rows) -> List[Article]:
        tag_map = await self._fetch_tags_for_articles([row.id for row in rows])
        return [
            row_to_article(row._asdict(), tag_names=tag_map.get(row.id, []))
            for row in rows
        ]

    @staticmethod
    def _apply_filters(stmt: Select, filters: ArticleFilter) -> Select:
        """Narrow a statement over articles_table by the listing filters."""
        if filters.tag:
            stmt = (
                stmt.join(
                    article_tags_table,
                    articles_table.c.id == article_tags_table.c.article_id,
                )
                .join(tags_table, article_tags_table.c.tag_id == tags_table.c.id)
                .where(tags_table.c.name == filters.tag.root)
            )
        if filters.author_id:
            stmt = stmt.where(articles_table.c.author_id == filters.author_id)
        if filters.favorited_by:
            stmt = stmt.join(
                favorites_table, articles_table.c.id == favorites_table.c.article_id
            ).where(favorites_table.c.user_id == filters.favorited_by)
        return stmt

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        return (await self._to_articles([row]))[0]

    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug."""
        with logfire.span("article_repository.find_by_slug", slug=slug.root):
            stmt = select(articles_table).where(articles_table.c.slug == slug.root)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if not row:
                return None
            return (await self._to_articles([row]))[0]

    async def find_all(
        self,
        filters: ArticleFilter = ArticleFilter(),
        limit: int = 20,
        offset: int = 0,
    ) -> List[Article]:
        """Find articles, newest first."""
        with logfire.span(
            "article_repository.find_all",
            tag=filters.tag.root if filters.tag else None,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filters(select(articles_table), filters)
            stmt = (
                stmt.order_by(articles_table.c.created_at.desc(), articles_table.c.id)
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return await self._to_articles(result.fetchall())

    async def count(self, filters: ArticleFilter = ArticleFilter()) -> int:
        """Count articles matching the filters."""
        stmt = self._apply_filters(
            select(func.count()).select_from(articles_table), filters
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, article: Article) -> Article:
        """Save an article and its tag links (create or update)."""
        with logfire.span(
            "article_repository.save",
            article_id=str(article.id),
            slug=article.slug.root,
            tags=article.tag_list,
        ):
            existing = await self.find_by_id(article.id)
            article_dict = article_to_dict(article)

            # Savepoint so a slug collision leaves the transaction usable
            async with self.session.begin_nested():
                if existing:
                    # favorites_count is owned by increment/decrement
                    article_dict.pop("favorites_count")
                    stmt = (
                        update(articles_table)
                        .where(articles_table.c.id == article.id)
                        .values(**article_dict)
                    )
                    await self.session.execute(stmt)
                    await self.session.execute(
                        delete(article_tags_table).where(
                            article_tags_table.c.article_id == article.id
                        )
                    )
                else:
                    await self.session.execute(
                        insert(articles_table).values(**article_dict)
                    )

                if article.tag_list:
                    # Inside the savepoint so tags vanish with a failed save
                    tags = [
                        await self.tag_repository.get_or_create(TagName(name))
                        for name in article.tag_list
                    ]
                    links = [
                        {
                            "article_id": article.id,
                            "tag_id": tag.id,
                            "position": position,
                        }
                        for position, tag in enumerate(tags)
                    ]
                    await self.session.execute(insert(article_tags_table), links)

            await self.session.flush()
            logfire.info("Article saved", article_id=str(article.id))
            return article

    async def delete(self, article_id: ArticleId) -> None:
        """Delete an article; foreign keys cascade to dependents."""
        stmt = delete(articles_table).where(articles_table.c.id == article_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_favorites(self, article_id: ArticleId) -> Optional[Article]:
        """Atomically increment favorites_count by 1."""
        stmt = (
            update(articles_table)
            .where(articles_table.c.id == article_id)
            .values(favorites_count=articles_table.c.favorites_count + 1)
            .returning(articles_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        if not row:
            return None
        return (await self._to_articles([row]))[0]

    async def decrement_favorites(self, article_id: ArticleId) -> Optional[Article]:
        """Atomically decrement favorites_count by 1 (minimum 0)."""
        stmt = (
            update(articles_table)
            .where(articles_table.c.id == article_id)
            .values(
                favorites_count=func.greatest(articles_table.c.favorites_count - 1, 0)
            )
            .returning(articles_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        if not row:
            return None
        return (await self._to_articles([row]))[0]

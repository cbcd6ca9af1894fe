"""PostgreSQL implementation of Favorite repository."""

from typing import Sequence, Set

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.model import Favorite
from conduit.domain.repository import FavoriteRepository
from conduit.domain.value import ArticleId, UserId
from conduit.persistence.mappers import favorite_to_dict
from conduit.persistence.tables import favorites_table


class PostgresFavoriteRepository(FavoriteRepository):
    """PostgreSQL implementation of FavoriteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, favorite: Favorite) -> Favorite:
        """Save a favorite (create)."""
        stmt = insert(favorites_table).values(**favorite_to_dict(favorite))
        # Savepoint so a duplicate leaves the transaction usable
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        await self.session.flush()
        return favorite

    async def delete(self, article_id: ArticleId, user_id: UserId) -> bool:
        """Delete a user's favorite of an article."""
        stmt = delete(favorites_table).where(
            and_(
                favorites_table.c.article_id == article_id,
                favorites_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_favorited_among(
        self, user_id: UserId, article_ids: Sequence[ArticleId]
    ) -> Set[ArticleId]:
        """Find which of the given articles the user favorited (batch query)."""
        if not article_ids:
            return set()

        stmt = select(favorites_table.c.article_id).where(
            and_(
                favorites_table.c.user_id == user_id,
                favorites_table.c.article_id.in_(article_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {ArticleId(row.article_id) for row in result.fetchall()}

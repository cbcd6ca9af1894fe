"""PostgreSQL implementation of Follow repository."""

from typing import Sequence, Set

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from conduit.domain.model import Follow
from conduit.domain.repository import FollowRepository
from conduit.domain.value import UserId
from conduit.persistence.mappers import follow_to_dict
from conduit.persistence.tables import follows_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, follow: Follow) -> Follow:
        """Save a follow (create)."""
        async with self.session.begin_nested():
            await self.session.execute(
                insert(follows_table).values(**follow_to_dict(follow))
            )
        await self.session.flush()
        return follow

    async def find_followed_among(
        self, follower_id: UserId, user_ids: Sequence[UserId]
    ) -> Set[UserId]:
        """Find which of the given users the follower follows (batch query)."""
        if not user_ids:
            return set()

        stmt = select(follows_table.c.followee_id).where(
            and_(
                follows_table.c.follower_id == follower_id,
                follows_table.c.followee_id.in_(user_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {UserId(row.followee_id) for row in result.fetchall()}

"""In-memory follow repository for testing."""

from typing import Sequence

from sqlalchemy.exc import IntegrityError

from conduit.domain.model.follow import Follow
from conduit.domain.repository.follow import FollowRepository
from conduit.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def save(self, follow: Follow) -> Follow:
        """Save a follow, rejecting duplicates and self-follows."""
        key = (follow.follower_id, follow.followee_id)
        if follow.follower_id == follow.followee_id or key in self._db.follows:
            raise IntegrityError("Invalid follow", None, Exception())
        self._db.follows[key] = follow
        return follow

    async def find_followed_among(
        self, follower_id: UserId, user_ids: Sequence[UserId]
    ) -> set[UserId]:
        """Find which of the given users the follower follows."""
        return {uid for uid in user_ids if (follower_id, uid) in self._db.follows}

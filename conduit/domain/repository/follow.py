"""Follow repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence, Set

from conduit.domain.model.follow import Follow
from conduit.domain.value import UserId


class FollowRepository(ABC):
    """Repository for Follow entity."""

    @abstractmethod
    async def save(self, follow: Follow) -> Follow:
        """Save a follow (create).

        Raises:
            IntegrityError: If the follow already exists (duplicate)
        """
        pass

    @abstractmethod
    async def find_followed_among(
        self, follower_id: UserId, user_ids: Sequence[UserId]
    ) -> Set[UserId]:
        """Find which of the given users the follower follows (batch query).

        Args:
            follower_id: The following user's ID
            user_ids: Candidate followees

        Returns:
            Subset of user_ids that follower_id follows
        """
        pass

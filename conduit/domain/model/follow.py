"""Follow entity."""

from datetime import datetime

from pydantic import Field

from conduit.domain.model.common import DomainModel
from conduit.domain.value import UserId


class Follow(DomainModel):
    """One user following another."""

    follower_id: UserId
    followee_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

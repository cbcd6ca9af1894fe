"""Favorite entity."""

from datetime import datetime

from pydantic import Field

from conduit.domain.model.common import DomainModel
from conduit.domain.value import ArticleId, UserId


class Favorite(DomainModel):
    """A user's favorite of an article.

    At most one favorite exists per (article, user), enforced by the
    datastore's composite key.
    """

    article_id: ArticleId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)

"""Comment entity."""

from datetime import datetime

from pydantic import Field

from conduit.domain.model.common import DomainModel
from conduit.domain.value import ArticleId, CommentId, UserId


class Comment(DomainModel):
    """Comment on an article.

    Comments are flat and only removable by their author.
    """

    id: CommentId
    article_id: ArticleId
    author_id: UserId
    author_username: str
    body: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

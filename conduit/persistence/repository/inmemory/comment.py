"""In-memory comment repository for testing."""

from typing import Optional

from conduit.domain.model.comment import Comment
from conduit.domain.repository.comment import CommentRepository
from conduit.domain.value import ArticleId, CommentId

from .database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self._db = db or InMemoryDatabase()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._db.comments.get(comment_id)

    async def find_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find all comments on an article, oldest first."""
        comments = [c for c in self._db.comments.values() if c.article_id == article_id]
        # sort() is stable, so equal timestamps keep insertion order
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._db.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._db.comments.pop(comment_id, None)

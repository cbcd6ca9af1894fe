"""Comment domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from conduit.domain.error import NotFoundError
from conduit.domain.model.article import Article
from conduit.domain.model.comment import Comment
from conduit.domain.model.common import ensure_not_blank
from conduit.domain.model.user import User
from conduit.domain.repository import CommentRepository
from conduit.domain.value import CommentId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(self, article: Article, author: User, body: str) -> Comment:
        """Create a comment on an article.

        Args:
            article: Article being commented on
            author: Commenting user
            body: Comment text

        Returns:
            Created comment

        Raises:
            ValidationError: If the body is blank
        """
        with logfire.span(
            "comment_service.create_comment",
            slug=article.slug.root,
            author=author.username,
        ):
            ensure_not_blank(body=body)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                article_id=article.id,
                author_id=author.id,
                author_username=author.username,
                body=body,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def get_comments(self, article: Article) -> list[Comment]:
        """Get all comments on an article, oldest first."""
        with logfire.span("comment_service.get_comments", slug=article.slug.root):
            comments = await self.comment_repository.find_by_article(article.id)
            logfire.info("Comments retrieved", count=len(comments))
            return comments

    async def get_comment(self, article: Article, comment_id: str) -> Comment:
        """Get one comment of an article.

        Args:
            article: Article the comment must belong to
            comment_id: Comment ID from the request path

        Returns:
            The comment

        Raises:
            NotFoundError: If the ID is malformed, unknown or belongs to
                another article
        """
        with logfire.span(
            "comment_service.get_comment",
            slug=article.slug.root,
            comment_id=comment_id,
        ):
            try:
                parsed = CommentId(UUID(comment_id))
            except ValueError:
                raise NotFoundError("Comment", comment_id)

            comment = await self.comment_repository.find_by_id(parsed)
            if not comment or comment.article_id != article.id:
                logfire.info("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)
            return comment

    async def delete_comment(self, comment: Comment) -> None:
        """Delete a comment."""
        with logfire.span("comment_service.delete_comment", comment_id=str(comment.id)):
            await self.comment_repository.delete(comment.id)
            logfire.info("Comment deleted", comment_id=str(comment.id))

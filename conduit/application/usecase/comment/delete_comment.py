"""Delete comment use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.domain.model import Comment, User
from conduit.domain.service import Action, AuthorizationPolicy, CommentService


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    actor: User
    comment: Comment


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        authorization_policy: AuthorizationPolicy,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            authorization_policy: Ownership checks
        """
        self.comment_service = comment_service
        self.authorization_policy = authorization_policy

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Delete the comment.

        Raises:
            NotAuthorizedError: If the actor did not write the comment
        """
        self.authorization_policy.ensure_authorized(
            request.actor, request.comment, Action.DELETE
        )
        await self.comment_service.delete_comment(request.comment)

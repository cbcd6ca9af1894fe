"""Create comment use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import CamelModel, CommentView, ViewAssembler
from conduit.domain.model import Article, User
from conduit.domain.service import CommentService


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    author: User
    article: Article
    body: str | None = None


class CreateCommentResponse(CamelModel):
    """Create comment response."""

    comment: CommentView


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article."""

    def __init__(
        self, comment_service: CommentService, view_assembler: ViewAssembler
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            view_assembler: Builds the response view
        """
        self.comment_service = comment_service
        self.view_assembler = view_assembler

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute comment creation flow.

        Raises:
            ValidationError: If the body is blank
        """
        comment = await self.comment_service.create_comment(
            article=request.article, author=request.author, body=request.body or ""
        )
        view = await self.view_assembler.comment(comment, request.author)
        return CreateCommentResponse(comment=view)

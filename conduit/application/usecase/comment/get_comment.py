"""Get comment use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import CamelModel, CommentView, ViewAssembler
from conduit.domain.model import Comment, User


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment: Comment
    viewer: User | None = None


class GetCommentResponse(CamelModel):
    """Get comment response."""

    comment: CommentView


class GetCommentUseCase(BaseUseCase):
    """Use case for reading a single comment."""

    def __init__(self, view_assembler: ViewAssembler) -> None:
        self.view_assembler = view_assembler

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        view = await self.view_assembler.comment(request.comment, request.viewer)
        return GetCommentResponse(comment=view)

"""Get comments use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import CamelModel, CommentView, ViewAssembler
from conduit.domain.model import Article, User
from conduit.domain.service import CommentService


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    article: Article
    viewer: User | None = None


class GetCommentsResponse(CamelModel):
    """Get comments response."""

    comments: list[CommentView]


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading an article's comments, oldest first."""

    def __init__(
        self, comment_service: CommentService, view_assembler: ViewAssembler
    ) -> None:
        self.comment_service = comment_service
        self.view_assembler = view_assembler

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        comments = await self.comment_service.get_comments(request.article)
        views = await self.view_assembler.comments(comments, request.viewer)
        return GetCommentsResponse(comments=views)

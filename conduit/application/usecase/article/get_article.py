"""Get article use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import ArticleView, CamelModel, ViewAssembler
from conduit.domain.model import Article, User


class GetArticleRequest(BaseModel):
    """Get article request."""

    article: Article
    viewer: User | None = None


class GetArticleResponse(CamelModel):
    """Get article response."""

    article: ArticleView


class GetArticleUseCase(BaseUseCase):
    """Use case for reading one article."""

    def __init__(self, view_assembler: ViewAssembler) -> None:
        self.view_assembler = view_assembler

    async def execute(self, request: GetArticleRequest) -> GetArticleResponse:
        """Render the article for the viewer."""
        view = await self.view_assembler.article(request.article, request.viewer)
        return GetArticleResponse(article=view)

"""Create article use case."""

from pydantic import BaseModel, Field

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import ArticleView, CamelModel, ViewAssembler
from conduit.domain.model import User
from conduit.domain.service import ArticleService


class CreateArticleRequest(BaseModel):
    """Create article request."""

    author: User
    title: str | None = None
    description: str | None = None
    body: str | None = None
    tag_list: list[str] = Field(default_factory=list)


class CreateArticleResponse(CamelModel):
    """Create article response."""

    article: ArticleView


class CreateArticleUseCase(BaseUseCase):
    """Use case for publishing an article."""

    def __init__(
        self, article_service: ArticleService, view_assembler: ViewAssembler
    ) -> None:
        """Initialize create article use case.

        Args:
            article_service: Article domain service
            view_assembler: Builds the response view
        """
        self.article_service = article_service
        self.view_assembler = view_assembler

    async def execute(self, request: CreateArticleRequest) -> CreateArticleResponse:
        """Execute article creation flow.

        Args:
            request: Article content and its author

        Returns:
            The created article as seen by its author

        Raises:
            ValidationError: If fields are blank or the slug is taken
        """
        article = await self.article_service.create_article(
            author=request.author,
            title=request.title or "",
            description=request.description or "",
            body=request.body or "",
            tag_names=request.tag_list,
        )
        view = await self.view_assembler.article(article, request.author)
        return CreateArticleResponse(article=view)

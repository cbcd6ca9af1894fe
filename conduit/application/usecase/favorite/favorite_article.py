"""Favorite article use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import ArticleView, CamelModel, ViewAssembler
from conduit.domain.error import ValidationError
from conduit.domain.model import Article, User
from conduit.domain.service import FavoriteService


class FavoriteArticleRequest(BaseModel):
    """Favorite article request."""

    user: User
    article: Article


class FavoriteArticleResponse(CamelModel):
    """Favorite article response.

    ``errors`` is set when the favorite was rejected; ``article`` then shows
    the unchanged state.
    """

    article: ArticleView
    errors: dict[str, list[str]] | None = None


class FavoriteArticleUseCase(BaseUseCase):
    """Use case for favoriting an article."""

    def __init__(
        self, favorite_service: FavoriteService, view_assembler: ViewAssembler
    ) -> None:
        """Initialize favorite article use case.

        Args:
            favorite_service: Favorite domain service
            view_assembler: Builds the response view
        """
        self.favorite_service = favorite_service
        self.view_assembler = view_assembler

    async def execute(self, request: FavoriteArticleRequest) -> FavoriteArticleResponse:
        """Execute favorite flow.

        A repeated favorite is not an error for the caller to handle: the
        response carries both the article and the validation errors.
        """
        try:
            article = await self.favorite_service.favorite(request.article, request.user)
        except ValidationError as e:
            view = await self.view_assembler.article(request.article, request.user)
            return FavoriteArticleResponse(article=view, errors=e.errors)

        view = await self.view_assembler.article(article, request.user)
        return FavoriteArticleResponse(article=view)

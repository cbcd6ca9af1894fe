"""Unfavorite article use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import ArticleView, CamelModel, ViewAssembler
from conduit.domain.error import ValidationError
from conduit.domain.model import Article, User
from conduit.domain.service import FavoriteService


class UnfavoriteArticleRequest(BaseModel):
    """Unfavorite article request."""

    user: User
    article: Article


class UnfavoriteArticleResponse(CamelModel):
    """Unfavorite article response.

    ``errors`` is set when there was no favorite to remove.
    """

    article: ArticleView
    errors: dict[str, list[str]] | None = None


class UnfavoriteArticleUseCase(BaseUseCase):
    """Use case for removing a favorite."""

    def __init__(
        self, favorite_service: FavoriteService, view_assembler: ViewAssembler
    ) -> None:
        self.favorite_service = favorite_service
        self.view_assembler = view_assembler

    async def execute(
        self, request: UnfavoriteArticleRequest
    ) -> UnfavoriteArticleResponse:
        try:
            article = await self.favorite_service.unfavorite(
                request.article, request.user
            )
        except ValidationError as e:
            view = await self.view_assembler.article(request.article, request.user)
            return UnfavoriteArticleResponse(article=view, errors=e.errors)

        view = await self.view_assembler.article(article, request.user)
        return UnfavoriteArticleResponse(article=view)

"""Favorite routes.

A rejected favorite or unfavorite still answers with the article, with
status 422 and the validation errors next to it.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from conduit.application.usecase.favorite import (
    FavoriteArticleRequest,
    FavoriteArticleResponse,
    FavoriteArticleUseCase,
    UnfavoriteArticleRequest,
    UnfavoriteArticleResponse,
    UnfavoriteArticleUseCase,
)
from conduit.interface.api.dependencies import CurrentUser, LoadedArticle

router = APIRouter(
    prefix="/articles/{slug}/favorite", tags=["favorites"], route_class=DishkaRoute
)


def _render(result: FavoriteArticleResponse | UnfavoriteArticleResponse) -> JSONResponse:
    content = result.model_dump(mode="json", by_alias=True)
    if result.errors is None:
        content.pop("errors")
        return JSONResponse(status_code=status.HTTP_200_OK, content=content)
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=content)


@router.post("", response_model=FavoriteArticleResponse)
async def favorite_article(
    current: CurrentUser,
    article: LoadedArticle,
    favorite_article_use_case: FromDishka[FavoriteArticleUseCase],
) -> JSONResponse:
    """Favorite an article.

    Args:
        current: Authenticated user
        article: Article from the path
        favorite_article_use_case: Favorite article use case from DI

    Returns:
        The article; 422 with errors if it was already favorited
    """
    result = await favorite_article_use_case.execute(
        FavoriteArticleRequest(user=current.user, article=article)
    )
    return _render(result)


@router.delete("", response_model=UnfavoriteArticleResponse)
async def unfavorite_article(
    current: CurrentUser,
    article: LoadedArticle,
    unfavorite_article_use_case: FromDishka[UnfavoriteArticleUseCase],
) -> JSONResponse:
    """Remove the current user's favorite.

    Returns:
        The article; 422 with errors if it was not favorited
    """
    result = await unfavorite_article_use_case.execute(
        UnfavoriteArticleRequest(user=current.user, article=article)
    )
    return _render(result)

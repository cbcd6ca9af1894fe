"""Article routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import Field

from conduit.application.usecase.article import (
    CreateArticleRequest,
    CreateArticleResponse,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleUseCase,
    GetArticleRequest,
    GetArticleResponse,
    GetArticleUseCase,
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
    UpdateArticleRequest,
    UpdateArticleResponse,
    UpdateArticleUseCase,
)
from conduit.application.view import CamelModel
from conduit.config import APISettings
from conduit.domain.error import ValidationError
from conduit.interface.api.dependencies import Context, CurrentUser, LoadedArticle

router = APIRouter(prefix="/articles", tags=["articles"], route_class=DishkaRoute)


class NewArticle(CamelModel):
    """Article fields accepted on creation."""

    title: str | None = None
    description: str | None = None
    body: str | None = None
    tag_list: list[str] = Field(default_factory=list)


class NewArticleBody(CamelModel):
    """API request for creating an article."""

    article: NewArticle


class ArticleChanges(CamelModel):
    """Article fields accepted on update; omitted fields are kept."""

    title: str | None = None
    description: str | None = None
    body: str | None = None


class ArticleChangesBody(CamelModel):
    """API request for updating an article."""

    article: ArticleChanges


@router.get("", response_model=ListArticlesResponse)
async def list_articles(
    context: Context,
    list_articles_use_case: FromDishka[ListArticlesUseCase],
    api_settings: FromDishka[APISettings],
    tag: str | None = None,
    author: str | None = None,
    favorited: str | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> ListArticlesResponse:
    """List articles, newest first.

    Args:
        context: Request context (viewer optional)
        list_articles_use_case: List articles use case from DI
        api_settings: Pagination bounds
        tag: Only articles with this tag
        author: Only articles by this username
        favorited: Only articles favorited by this username
        limit: Page size (default from settings)
        offset: Number of articles to skip

    Returns:
        One page of articles and the total number of matches

    Raises:
        ValidationError: If pagination is out of range
    """
    if limit is None:
        limit = api_settings.page_size_default
    if limit < 1 or limit > api_settings.page_size_max:
        raise ValidationError.single(
            "limit", f"must be between 1 and {api_settings.page_size_max}"
        )
    if offset < 0:
        raise ValidationError.single("offset", "must be non-negative")

    return await list_articles_use_case.execute(
        ListArticlesRequest(
            viewer=context.viewer,
            tag=tag,
            author=author,
            favorited=favorited,
            limit=limit,
            offset=offset,
        )
    )


@router.post(
    "", response_model=CreateArticleResponse, status_code=status.HTTP_201_CREATED
)
async def create_article(
    body: NewArticleBody,
    current: CurrentUser,
    create_article_use_case: FromDishka[CreateArticleUseCase],
) -> CreateArticleResponse:
    """Create an article authored by the current user.

    Raises:
        ValidationError: If fields are blank or the slug is taken
    """
    return await create_article_use_case.execute(
        CreateArticleRequest(
            author=current.user,
            title=body.article.title,
            description=body.article.description,
            body=body.article.body,
            tag_list=body.article.tag_list,
        )
    )


@router.get("/{slug}", response_model=GetArticleResponse)
async def get_article(
    context: Context,
    article: LoadedArticle,
    get_article_use_case: FromDishka[GetArticleUseCase],
) -> GetArticleResponse:
    """Get an article by slug."""
    return await get_article_use_case.execute(
        GetArticleRequest(article=article, viewer=context.viewer)
    )


@router.put("/{slug}", response_model=UpdateArticleResponse)
async def update_article(
    body: ArticleChangesBody,
    current: CurrentUser,
    article: LoadedArticle,
    update_article_use_case: FromDishka[UpdateArticleUseCase],
) -> UpdateArticleResponse:
    """Update an article. Only its author may do this.

    Raises:
        NotAuthorizedError: If the current user is not the author
        ValidationError: If a field becomes blank or the new slug is taken
    """
    return await update_article_use_case.execute(
        UpdateArticleRequest(
            actor=current.user,
            article=article,
            title=body.article.title,
            description=body.article.description,
            body=body.article.body,
        )
    )


@router.delete("/{slug}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    current: CurrentUser,
    article: LoadedArticle,
    delete_article_use_case: FromDishka[DeleteArticleUseCase],
) -> Response:
    """Delete an article. Only its author may do this."""
    await delete_article_use_case.execute(
        DeleteArticleRequest(actor=current.user, article=article)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

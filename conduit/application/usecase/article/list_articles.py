"""List articles use case."""

import logfire
from pydantic import BaseModel, Field

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import ArticleView, CamelModel, ViewAssembler
from conduit.domain.model import User
from conduit.domain.repository import ArticleFilter
from conduit.domain.service import ArticleService, UserService
from conduit.domain.value import TagName


class ListArticlesRequest(BaseModel):
    """List articles request.

    ``author`` and ``favorited`` are usernames. Filters combine with AND.
    """

    viewer: User | None = None
    tag: str | None = None
    author: str | None = None
    favorited: str | None = None
    limit: int = Field(default=20, ge=1)
    offset: int = Field(default=0, ge=0)


class ListArticlesResponse(CamelModel):
    """List articles response.

    ``articles_count`` is the total number of matches, not the page size.
    """

    articles: list[ArticleView]
    articles_count: int


class ListArticlesUseCase(BaseUseCase):
    """Use case for browsing articles."""

    def __init__(
        self,
        article_service: ArticleService,
        user_service: UserService,
        view_assembler: ViewAssembler,
    ) -> None:
        """Initialize list articles use case.

        Args:
            article_service: Article domain service
            user_service: User domain service, resolves username filters
            view_assembler: Builds the response views
        """
        self.article_service = article_service
        self.user_service = user_service
        self.view_assembler = view_assembler

    async def execute(self, request: ListArticlesRequest) -> ListArticlesResponse:
        """Execute listing flow.

        Args:
            request: Filters, pagination and the optional viewer

        Returns:
            One page of articles, newest first, with the total count
        """
        filters = ArticleFilter()

        if request.tag and request.tag.strip():
            filters = ArticleFilter(tag=TagName(request.tag))

        if request.author:
            author = await self.user_service.get_by_username(request.author)
            if not author:
                logfire.info("Unknown author filter", author=request.author)
                return ListArticlesResponse(articles=[], articles_count=0)
            filters = ArticleFilter(tag=filters.tag, author_id=author.id)

        if request.favorited:
            fan = await self.user_service.get_by_username(request.favorited)
            if not fan:
                logfire.info("Unknown favorited filter", favorited=request.favorited)
                return ListArticlesResponse(articles=[], articles_count=0)
            filters = ArticleFilter(
                tag=filters.tag, author_id=filters.author_id, favorited_by=fan.id
            )

        articles, total = await self.article_service.list_articles(
            filters, limit=request.limit, offset=request.offset
        )
        views = await self.view_assembler.articles(articles, request.viewer)
        return ListArticlesResponse(articles=views, articles_count=total)

"""Update article use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import ArticleView, CamelModel, ViewAssembler
from conduit.domain.model import Article, User
from conduit.domain.service import Action, ArticleService, AuthorizationPolicy


class UpdateArticleRequest(BaseModel):
    """Update article request.

    Fields left as None keep their current value.
    """

    actor: User
    article: Article
    title: str | None = None
    description: str | None = None
    body: str | None = None


class UpdateArticleResponse(CamelModel):
    """Update article response."""

    article: ArticleView


class UpdateArticleUseCase(BaseUseCase):
    """Use case for editing an article."""

    def __init__(
        self,
        article_service: ArticleService,
        authorization_policy: AuthorizationPolicy,
        view_assembler: ViewAssembler,
    ) -> None:
        """Initialize update article use case.

        Args:
            article_service: Article domain service
            authorization_policy: Ownership checks
            view_assembler: Builds the response view
        """
        self.article_service = article_service
        self.authorization_policy = authorization_policy
        self.view_assembler = view_assembler

    async def execute(self, request: UpdateArticleRequest) -> UpdateArticleResponse:
        """Execute article update flow.

        Raises:
            NotAuthorizedError: If the actor is not the author
            ValidationError: If a field becomes blank or the new slug is taken
        """
        self.authorization_policy.ensure_authorized(
            request.actor, request.article, Action.UPDATE
        )

        article = await self.article_service.update_article(
            request.article,
            title=request.title,
            description=request.description,
            body=request.body,
        )
        view = await self.view_assembler.article(article, request.actor)
        return UpdateArticleResponse(article=view)

"""Delete article use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.domain.model import Article, User
from conduit.domain.service import Action, ArticleService, AuthorizationPolicy


class DeleteArticleRequest(BaseModel):
    """Delete article request."""

    actor: User
    article: Article


class DeleteArticleUseCase(BaseUseCase):
    """Use case for deleting an article."""

    def __init__(
        self,
        article_service: ArticleService,
        authorization_policy: AuthorizationPolicy,
    ) -> None:
        self.article_service = article_service
        self.authorization_policy = authorization_policy

    async def execute(self, request: DeleteArticleRequest) -> None:
        """Delete the article with its comments, favorites and tag links.

        Raises:
            NotAuthorizedError: If the actor is not the author
        """
        self.authorization_policy.ensure_authorized(
            request.actor, request.article, Action.DELETE
        )
        await self.article_service.delete_article(request.article)

"""Domain layer DI providers."""

from dishka import Scope, provide

from conduit.config import AuthSettings
from conduit.domain.repository import (
    ArticleRepository,
    CommentRepository,
    FavoriteRepository,
    UserRepository,
)
from conduit.domain.service import (
    ArticleService,
    AuthorizationPolicy,
    CommentService,
    FavoriteService,
    TagService,
    TokenService,
    UserService,
)
from conduit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_token_service(self, auth_settings: AuthSettings) -> TokenService:
        """Provide token domain service."""
        return TokenService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_authorization_policy(self) -> AuthorizationPolicy:
        """Provide the ownership policy."""
        return AuthorizationPolicy()

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide(scope=Scope.APP)
    def get_tag_service(self) -> TagService:
        """Provide tag domain service."""
        return TagService()

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository, tag_service: TagService
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(
            article_repository=article_repository, tag_service=tag_service
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_favorite_service(
        self,
        favorite_repository: FavoriteRepository,
        article_repository: ArticleRepository,
    ) -> FavoriteService:
        """Provide favorite domain service."""
        return FavoriteService(
            favorite_repository=favorite_repository,
            article_repository=article_repository,
        )

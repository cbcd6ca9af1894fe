"""Application layer DI providers."""

from dishka import Scope, provide

from conduit.application.usecase.article import (
    CreateArticleUseCase,
    DeleteArticleUseCase,
    GetArticleUseCase,
    ListArticlesUseCase,
    UpdateArticleUseCase,
)
from conduit.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
)
from conduit.application.usecase.favorite import (
    FavoriteArticleUseCase,
    UnfavoriteArticleUseCase,
)
from conduit.application.usecase.user import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from conduit.application.view import ViewAssembler
from conduit.domain.repository import FavoriteRepository, FollowRepository
from conduit.domain.service import (
    ArticleService,
    AuthorizationPolicy,
    CommentService,
    FavoriteService,
    TokenService,
    UserService,
)
from conduit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_view_assembler(
        self,
        user_service: UserService,
        favorite_repository: FavoriteRepository,
        follow_repository: FollowRepository,
    ) -> ViewAssembler:
        """Provide view assembler."""
        return ViewAssembler(
            user_service=user_service,
            favorite_repository=favorite_repository,
            follow_repository=follow_repository,
        )

    # User use cases
    @provide
    def get_register_user_use_case(
        self, user_service: UserService, token_service: TokenService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(
            user_service=user_service, token_service=token_service
        )

    @provide
    def get_login_user_use_case(
        self, user_service: UserService, token_service: TokenService
    ) -> LoginUserUseCase:
        """Provide login use case."""
        return LoginUserUseCase(user_service=user_service, token_service=token_service)

    @provide
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase()

    # Article use cases
    @provide
    def get_create_article_use_case(
        self, article_service: ArticleService, view_assembler: ViewAssembler
    ) -> CreateArticleUseCase:
        """Provide create article use case."""
        return CreateArticleUseCase(
            article_service=article_service, view_assembler=view_assembler
        )

    @provide
    def get_update_article_use_case(
        self,
        article_service: ArticleService,
        authorization_policy: AuthorizationPolicy,
        view_assembler: ViewAssembler,
    ) -> UpdateArticleUseCase:
        """Provide update article use case."""
        return UpdateArticleUseCase(
            article_service=article_service,
            authorization_policy=authorization_policy,
            view_assembler=view_assembler,
        )

    @provide
    def get_delete_article_use_case(
        self,
        article_service: ArticleService,
        authorization_policy: AuthorizationPolicy,
    ) -> DeleteArticleUseCase:
        """Provide delete article use case."""
        return DeleteArticleUseCase(
            article_service=article_service,
            authorization_policy=authorization_policy,
        )

    @provide
    def get_get_article_use_case(
        self, view_assembler: ViewAssembler
    ) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(view_assembler=view_assembler)

    @provide
    def get_list_articles_use_case(
        self,
        article_service: ArticleService,
        user_service: UserService,
        view_assembler: ViewAssembler,
    ) -> ListArticlesUseCase:
        """Provide list articles use case."""
        return ListArticlesUseCase(
            article_service=article_service,
            user_service=user_service,
            view_assembler=view_assembler,
        )

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, view_assembler: ViewAssembler
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, view_assembler=view_assembler
        )

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService, view_assembler: ViewAssembler
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, view_assembler=view_assembler
        )

    @provide
    def get_get_comment_use_case(
        self, view_assembler: ViewAssembler
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(view_assembler=view_assembler)

    @provide
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        authorization_policy: AuthorizationPolicy,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            authorization_policy=authorization_policy,
        )

    # Favorite use cases
    @provide
    def get_favorite_article_use_case(
        self, favorite_service: FavoriteService, view_assembler: ViewAssembler
    ) -> FavoriteArticleUseCase:
        """Provide favorite article use case."""
        return FavoriteArticleUseCase(
            favorite_service=favorite_service, view_assembler=view_assembler
        )

    @provide
    def get_unfavorite_article_use_case(
        self, favorite_service: FavoriteService, view_assembler: ViewAssembler
    ) -> UnfavoriteArticleUseCase:
        """Provide unfavorite article use case."""
        return UnfavoriteArticleUseCase(
            favorite_service=favorite_service, view_assembler=view_assembler
        )

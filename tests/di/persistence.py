"""Mock persistence providers for testing."""

from dishka import Scope, provide

from conduit.domain.repository import (
    ArticleRepository,
    CommentRepository,
    FavoriteRepository,
    FollowRepository,
    TagRepository,
    UserRepository,
)
from conduit.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryFavoriteRepository,
    InMemoryFollowRepository,
    InMemoryTagRepository,
    InMemoryUserRepository,
)
from conduit.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The database lives for the whole container so that state carries
    across HTTP requests; every test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory tables."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, db: InMemoryDatabase) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_article_repository(
        self, db: InMemoryDatabase, tag_repository: TagRepository
    ) -> ArticleRepository:
        """Provide in-memory article repository."""
        return InMemoryArticleRepository(db, tag_repository)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, db: InMemoryDatabase) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, db: InMemoryDatabase) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_favorite_repository(self, db: InMemoryDatabase) -> FavoriteRepository:
        """Provide in-memory favorite repository."""
        return InMemoryFavoriteRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, db: InMemoryDatabase) -> FollowRepository:
        """Provide in-memory follow repository."""
        return InMemoryFollowRepository(db)

"""Integration tests for the PostgreSQL repositories.

Run against a migrated database at DATABASE__URL:

    pytest -m integration
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from conduit.domain.model import Favorite
from conduit.domain.repository import (
    ArticleFilter,
    ArticleRepository,
    FavoriteRepository,
    TagRepository,
    UserRepository,
)
from conduit.domain.value import TagName
from tests.conftest import make_article, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _unique(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:8]}"


class TestArticleRepositoryIntegration:
    """PostgresArticleRepository against a real schema."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_slug_with_ordered_tags(self, integration_env):
        """Tags come back in the order they were attached."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        tag_repo = await integration_env.get(TagRepository)
        article_repo = await integration_env.get(ArticleRepository)

        author = await user_repo.save(make_user(_unique("author")))
        names = [_unique("zeta"), _unique("alpha")]
        existing = await tag_repo.get_or_create(TagName(names[0]))

        # Act
        saved = await article_repo.save(
            make_article(author, _unique("Ordered tags"), tag_list=names)
        )
        found = await article_repo.find_by_slug(saved.slug)

        # Assert
        assert found is not None
        assert found.id == saved.id
        assert found.tag_list == names
        assert found.author_username == author.username
        assert (await tag_repo.find_by_name(TagName(names[0]))).id == existing.id
        assert await tag_repo.find_by_name(TagName(names[1])) is not None

    @pytest.mark.asyncio
    async def test_duplicate_slug_raises_integrity_error(self, integration_env):
        """The unique slug constraint surfaces as IntegrityError."""
        user_repo = await integration_env.get(UserRepository)
        article_repo = await integration_env.get(ArticleRepository)
        author = await user_repo.save(make_user(_unique("author")))
        title = _unique("Duplicate")
        await article_repo.save(make_article(author, title))

        with pytest.raises(IntegrityError):
            await article_repo.save(make_article(author, title))

    @pytest.mark.asyncio
    async def test_failed_save_rolls_back_new_tags(self, integration_env):
        """Tags created for an article whose slug is taken are not kept."""
        user_repo = await integration_env.get(UserRepository)
        tag_repo = await integration_env.get(TagRepository)
        article_repo = await integration_env.get(ArticleRepository)
        author = await user_repo.save(make_user(_unique("author")))
        title = _unique("Raced")
        orphan = _unique("orphan")
        await article_repo.save(make_article(author, title))

        with pytest.raises(IntegrityError):
            await article_repo.save(make_article(author, title, tag_list=[orphan]))

        assert await tag_repo.find_by_name(TagName(orphan)) is None

    @pytest.mark.asyncio
    async def test_favorites_counter_and_filter(self, integration_env):
        """Counter moves with favorites and the favorited filter sees them."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        article_repo = await integration_env.get(ArticleRepository)
        favorite_repo = await integration_env.get(FavoriteRepository)
        author = await user_repo.save(make_user(_unique("author")))
        fan = await user_repo.save(make_user(_unique("fan")))
        article = await article_repo.save(make_article(author, _unique("Loved")))

        # Act
        await favorite_repo.save(Favorite(article_id=article.id, user_id=fan.id))
        incremented = await article_repo.increment_favorites(article.id)

        # Assert
        assert incremented.favorites_count == 1
        assert await article_repo.count(ArticleFilter(favorited_by=fan.id)) == 1
        with pytest.raises(IntegrityError):
            await favorite_repo.save(Favorite(article_id=article.id, user_id=fan.id))

        assert await favorite_repo.delete(article.id, fan.id)
        decremented = await article_repo.decrement_favorites(article.id)
        assert decremented.favorites_count == 0
        floor = await article_repo.decrement_favorites(article.id)
        assert floor.favorites_count == 0

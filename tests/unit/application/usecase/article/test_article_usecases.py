"""Unit tests for the article use cases."""

import pytest

from conduit.application.usecase.article import (
    CreateArticleRequest,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleUseCase,
    ListArticlesRequest,
    ListArticlesUseCase,
    UpdateArticleRequest,
    UpdateArticleUseCase,
)
from conduit.domain.error import NotAuthorizedError
from conduit.domain.model import Favorite, Follow
from conduit.domain.repository import (
    ArticleRepository,
    FavoriteRepository,
    FollowRepository,
    UserRepository,
)
from conduit.domain.value import Slug
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_users(unit_env, *usernames):
    user_repo = await unit_env.get(UserRepository)
    return [await user_repo.save(make_user(name)) for name in usernames]


async def _create(unit_env, author, title, tags=()):
    create = await unit_env.get(CreateArticleUseCase)
    response = await create.execute(
        CreateArticleRequest(
            author=author,
            title=title,
            description="description",
            body="body",
            tag_list=list(tags),
        )
    )
    return response.article


class TestCreateArticle:
    """Tests for CreateArticleUseCase."""

    @pytest.mark.asyncio
    async def test_author_sees_fresh_article(self, unit_env):
        """The new article is unfavorited, with the author's profile."""
        (jake,) = await _seed_users(unit_env, "jake")

        view = await _create(unit_env, jake, "How to train your dragon", ["dragons"])

        assert view.slug == "how-to-train-your-dragon"
        assert view.tag_list == ["dragons"]
        assert view.favorited is False
        assert view.favorites_count == 0
        assert view.author.username == "jake"
        assert view.author.following is False


class TestUpdateAndDelete:
    """Tests for ownership on UpdateArticleUseCase and DeleteArticleUseCase."""

    @pytest.mark.asyncio
    async def test_non_author_cannot_update(self, unit_env):
        """Only the author may edit."""
        jake, celeb = await _seed_users(unit_env, "jake", "celeb")
        await _create(unit_env, jake, "Mine")
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.find_by_slug(Slug("mine"))
        update = await unit_env.get(UpdateArticleUseCase)

        with pytest.raises(NotAuthorizedError):
            await update.execute(
                UpdateArticleRequest(actor=celeb, article=article, title="Yours")
            )

    @pytest.mark.asyncio
    async def test_author_deletes_article(self, unit_env):
        """Deleting removes the article."""
        (jake,) = await _seed_users(unit_env, "jake")
        await _create(unit_env, jake, "Short lived")
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.find_by_slug(Slug("short-lived"))
        delete = await unit_env.get(DeleteArticleUseCase)

        await delete.execute(DeleteArticleRequest(actor=jake, article=article))

        assert await article_repo.find_by_id(article.id) is None


class TestListArticles:
    """Tests for ListArticlesUseCase."""

    @pytest.mark.asyncio
    async def test_unknown_author_lists_nothing(self, unit_env):
        """Filtering by a username nobody has gives an empty page."""
        (jake,) = await _seed_users(unit_env, "jake")
        await _create(unit_env, jake, "Something")
        list_articles = await unit_env.get(ListArticlesUseCase)

        response = await list_articles.execute(ListArticlesRequest(author="ghost"))

        assert response.articles == []
        assert response.articles_count == 0

    @pytest.mark.asyncio
    async def test_filters_combine(self, unit_env):
        """Author and tag filters must both match."""
        jake, celeb = await _seed_users(unit_env, "jake", "celeb")
        await _create(unit_env, jake, "Jake dragons", ["dragons"])
        await _create(unit_env, jake, "Jake cats", ["cats"])
        await _create(unit_env, celeb, "Celeb dragons", ["dragons"])
        list_articles = await unit_env.get(ListArticlesUseCase)

        response = await list_articles.execute(
            ListArticlesRequest(author="jake", tag="Dragons")
        )

        assert [a.title for a in response.articles] == ["Jake dragons"]
        assert response.articles_count == 1

    @pytest.mark.asyncio
    async def test_favorited_filter_and_viewer_flags(self, unit_env):
        """Lists what a user favorited, flagged for the viewer."""
        # Arrange
        jake, celeb = await _seed_users(unit_env, "jake", "celeb")
        await _create(unit_env, celeb, "Loved")
        await _create(unit_env, celeb, "Ignored")
        article_repo = await unit_env.get(ArticleRepository)
        loved = await article_repo.find_by_slug(Slug("loved"))
        await (await unit_env.get(FavoriteRepository)).save(
            Favorite(article_id=loved.id, user_id=jake.id)
        )
        await (await unit_env.get(FollowRepository)).save(
            Follow(follower_id=jake.id, followee_id=celeb.id)
        )
        list_articles = await unit_env.get(ListArticlesUseCase)

        # Act
        response = await list_articles.execute(
            ListArticlesRequest(viewer=jake, favorited="jake")
        )

        # Assert
        assert response.articles_count == 1
        (view,) = response.articles
        assert view.slug == "loved"
        assert view.favorited is True
        assert view.author.following is True

    @pytest.mark.asyncio
    async def test_anonymous_viewer_sees_no_flags(self, unit_env):
        """Favorited and following are false without a viewer."""
        (jake,) = await _seed_users(unit_env, "jake")
        await _create(unit_env, jake, "Public")
        list_articles = await unit_env.get(ListArticlesUseCase)

        response = await list_articles.execute(ListArticlesRequest())

        assert response.articles[0].favorited is False
        assert response.articles[0].author.following is False

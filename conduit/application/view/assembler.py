"""Projection of domain entities into viewer-relative views."""

from typing import Sequence

import logfire

from conduit.domain.model import Article, Comment, User
from conduit.domain.repository import FavoriteRepository, FollowRepository
from conduit.domain.service import UserService
from conduit.domain.value import UserId

from .model import ArticleView, CommentView, ProfileView, UserView


class ViewAssembler:
    """Builds response views for an optional viewer.

    ``following`` and ``favorited`` are always false for an anonymous
    viewer. List variants fetch authors, follows and favorites in one
    batch each instead of per item.
    """

    def __init__(
        self,
        user_service: UserService,
        favorite_repository: FavoriteRepository,
        follow_repository: FollowRepository,
    ) -> None:
        """Initialize view assembler.

        Args:
            user_service: User domain service, for author profiles
            favorite_repository: Favorite repository
            follow_repository: Follow repository
        """
        self.user_service = user_service
        self.favorite_repository = favorite_repository
        self.follow_repository = follow_repository

    async def _profiles(
        self, author_ids: Sequence[UserId], viewer: User | None
    ) -> dict[UserId, ProfileView]:
        authors = await self.user_service.get_by_ids(author_ids)
        followed: set[UserId] = set()
        if viewer is not None and authors:
            followed = await self.follow_repository.find_followed_among(
                viewer.id, list(authors)
            )
        return {
            author_id: ProfileView(
                username=author.username,
                bio=author.bio,
                image=author.image,
                following=author_id in followed,
            )
            for author_id, author in authors.items()
        }

    @staticmethod
    def _fallback_profile(username: str) -> ProfileView:
        return ProfileView(username=username)

    async def articles(
        self, articles: Sequence[Article], viewer: User | None
    ) -> list[ArticleView]:
        """Build views for a list of articles."""
        if not articles:
            return []

        with logfire.span("view_assembler.articles", count=len(articles)):
            profiles = await self._profiles([a.author_id for a in articles], viewer)
            favorited = set()
            if viewer is not None:
                favorited = await self.favorite_repository.find_favorited_among(
                    viewer.id, [a.id for a in articles]
                )

            return [
                ArticleView(
                    slug=article.slug.root,
                    title=article.title,
                    description=article.description,
                    body=article.body,
                    tag_list=list(article.tag_list),
                    created_at=article.created_at,
                    updated_at=article.updated_at,
                    favorited=article.id in favorited,
                    favorites_count=article.favorites_count,
                    author=profiles.get(article.author_id)
                    or self._fallback_profile(article.author_username),
                )
                for article in articles
            ]

    async def article(self, article: Article, viewer: User | None) -> ArticleView:
        """Build the view of one article."""
        return (await self.articles([article], viewer))[0]

    async def comments(
        self, comments: Sequence[Comment], viewer: User | None
    ) -> list[CommentView]:
        """Build views for a list of comments."""
        if not comments:
            return []

        with logfire.span("view_assembler.comments", count=len(comments)):
            profiles = await self._profiles([c.author_id for c in comments], viewer)
            return [
                CommentView(
                    id=str(comment.id),
                    body=comment.body,
                    created_at=comment.created_at,
                    updated_at=comment.updated_at,
                    author=profiles.get(comment.author_id)
                    or self._fallback_profile(comment.author_username),
                )
                for comment in comments
            ]

    async def comment(self, comment: Comment, viewer: User | None) -> CommentView:
        """Build the view of one comment."""
        return (await self.comments([comment], viewer))[0]

    @staticmethod
    def user(user: User, token: str) -> UserView:
        """Build the view of an authenticated user."""
        return UserView(
            username=user.username,
            email=user.email,
            token=token,
            bio=user.bio,
            image=user.image,
        )

"""Favorite domain service."""

from datetime import datetime

import logfire
from sqlalchemy.exc import IntegrityError

from conduit.domain.error import NotFoundError, ValidationError
from conduit.domain.model.article import Article
from conduit.domain.model.favorite import Favorite
from conduit.domain.model.user import User
from conduit.domain.repository import ArticleRepository, FavoriteRepository

from .base import Service

ALREADY_FAVORITED = "is already favorited"
NOT_FAVORITED = "is not favorited"


class FavoriteService(Service):
    """Domain service for favorite operations.

    Keeps ``Article.favorites_count`` equal to the number of favorite rows:
    every created or removed favorite moves the counter by exactly one in
    the same transaction.
    """

    def __init__(
        self,
        favorite_repository: FavoriteRepository,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize favorite service.

        Args:
            favorite_repository: Favorite repository
            article_repository: Article repository
        """
        self.favorite_repository = favorite_repository
        self.article_repository = article_repository

    async def favorite(self, article: Article, user: User) -> Article:
        """Favorite an article.

        Args:
            article: Article to favorite
            user: Favoriting user

        Returns:
            Article with the incremented count

        Raises:
            ValidationError: If the user already favorited the article
        """
        with logfire.span(
            "favorite_service.favorite", slug=article.slug.root, username=user.username
        ):
            favorite = Favorite(
                article_id=article.id, user_id=user.id, created_at=datetime.now()
            )

            # The (article, user) key rejects duplicates, including racing ones
            try:
                await self.favorite_repository.save(favorite)
            except IntegrityError:
                logfire.warn(
                    "Duplicate favorite attempt",
                    slug=article.slug.root,
                    username=user.username,
                )
                raise ValidationError.single("article", ALREADY_FAVORITED)

            updated = await self.article_repository.increment_favorites(article.id)
            if not updated:
                raise NotFoundError("Article", article.slug.root)

            logfire.info(
                "Article favorited",
                slug=article.slug.root,
                favorites_count=updated.favorites_count,
            )
            return updated

    async def unfavorite(self, article: Article, user: User) -> Article:
        """Remove a user's favorite from an article.

        Args:
            article: Article to unfavorite
            user: Unfavoriting user

        Returns:
            Article with the decremented count

        Raises:
            ValidationError: If the user had not favorited the article
        """
        with logfire.span(
            "favorite_service.unfavorite",
            slug=article.slug.root,
            username=user.username,
        ):
            deleted = await self.favorite_repository.delete(article.id, user.id)
            if not deleted:
                logfire.warn(
                    "Unfavorite without favorite",
                    slug=article.slug.root,
                    username=user.username,
                )
                raise ValidationError.single("article", NOT_FAVORITED)

            updated = await self.article_repository.decrement_favorites(article.id)
            if not updated:
                raise NotFoundError("Article", article.slug.root)

            logfire.info(
                "Article unfavorited",
                slug=article.slug.root,
                favorites_count=updated.favorites_count,
            )
            return updated
